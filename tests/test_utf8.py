import pytest
from hypothesis import given
from hypothesis import strategies as st

from sqlproc.conversion import ConversionFlags, ConversionResult
from sqlproc.utf8 import (
    is_legal_utf8_sequence,
    utf8_to_utf16,
    utf8_to_utf32,
    utf32_to_utf8,
)

LENIENT = ConversionFlags.LENIENT
STRICT = ConversionFlags.STRICT
ILLEGAL = ConversionResult.SOURCE_ILLEGAL
FULL = ConversionResult.TARGET_EXHAUSTED
SHORT = ConversionResult.SOURCE_EXHAUSTED
OK = ConversionResult.OK

FORMS = {
    "bytes": lambda text: tuple(text.encode("utf-8")),
    "points": lambda text: tuple(map(ord, text)),
    "halves": lambda text: tuple(
        int.from_bytes(pair, "big")
        for pair in zip(*[iter(text.encode("utf-16-be"))] * 2)
    ),
}


@pytest.mark.parametrize(
    "convert, given_form, wanted_form",
    [
        (utf8_to_utf32, "bytes", "points"),
        (utf8_to_utf16, "bytes", "halves"),
        (utf32_to_utf8, "points", "bytes"),
    ],
)
@given(text=st.text())
def test_agrees_with_python_codecs(convert, given_form, wanted_form, text):
    data = FORMS[given_form](text)
    conv = convert(data)
    assert conv.ok
    assert conv.units == FORMS[wanted_form](text)
    assert conv.consumed == len(data)


@given(st.text(min_size=1))
def test_first_sequence_of_valid_text_is_legal(text):
    assert is_legal_utf8_sequence(text.encode("utf-8")) is True


@given(st.text())
def test_round_trip_through_utf32(text):
    encoded = text.encode("utf-8")
    assert bytes(utf32_to_utf8(utf8_to_utf32(encoded).units).units) == encoded


@pytest.mark.parametrize(
    "data",
    [b"\xf4\x90\x80\x80", b"\xc0\x80", b"\xa0", b"\xed\xa0\x80", b"\xf5\x80\x80\x80", b"\xe2\x82"],
)
def test_not_legal(data):
    assert is_legal_utf8_sequence(data) is False


@pytest.mark.parametrize(
    "call",
    [lambda: is_legal_utf8_sequence(b""), lambda: utf8_to_utf32([0x41, 256])],
)
def test_bad_input_raises(call):
    with pytest.raises(ValueError):
        call()