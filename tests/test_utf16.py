import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sqlproc.conversion import ConversionFlags, ConversionResult
from sqlproc.utf16 import utf16_to_utf8, utf16_to_utf32, utf32_to_utf16

STRICT = ConversionFlags.STRICT
LENIENT = ConversionFlags.LENIENT
OK = ConversionResult.OK
ILLEGAL = ConversionResult.SOURCE_ILLEGAL
SRC_EX = ConversionResult.SOURCE_EXHAUSTED
TGT_EX = ConversionResult.TARGET_EXHAUSTED


def _as_utf16(text):
    data = text.encode("utf-16-le")
    return list(struct.unpack(f"<{len(data) // 2}H", data))


ENCODINGS = {
    "utf32": lambda text: [ord(c) for c in text],
    "utf16": _as_utf16,
    "utf8": lambda text: list(text.encode("utf-8")),
}


@pytest.mark.parametrize(
    "convert, source_form, target_form",
    [
        (utf32_to_utf16, "utf32", "utf16"),
        (utf16_to_utf32, "utf16", "utf32"),
        (utf16_to_utf8, "utf16", "utf8"),
    ],
)
@given(text=st.text())
def test_matches_codec(convert, source_form, target_form, text):
    source = ENCODINGS[source_form](text)
    conv = convert(source)
    assert conv.result is OK
    assert list(conv.units) == ENCODINGS[target_form](text)
    assert conv.consumed == len(source)


@given(st.text())
def test_round_trip_through_utf16(text):
    points = ENCODINGS["utf32"](text)
    assert list(utf16_to_utf32(utf32_to_utf16(points).units).units) == points


@pytest.mark.parametrize(
    "convert, source, flags, capacity, result, units, consumed",
    [
        (utf32_to_utf16, [0x1F600], STRICT, None, OK, (0xD83D, 0xDE00), 1),
        (utf32_to_utf16, [0x41, 0xD800, 0x42], STRICT, None, ILLEGAL, (0x41,), 1),
        (utf32_to_utf16, [0xDC00], LENIENT, None, OK, (0xFFFD,), 1),
        (utf32_to_utf16, [0x110000, 0x41], STRICT, None, ILLEGAL, (0x41,), 2),
        (utf32_to_utf16, [0x110000], LENIENT, None, OK, (0xFFFD,), 1),
        (utf32_to_utf16, [0x1F600], STRICT, 1, TGT_EX, (), 0),
        (utf32_to_utf16, [0x61, 0x62], STRICT, 1, TGT_EX, (0x61,), 1),
        (utf16_to_utf32, [0x41, 0xD800], STRICT, None, SRC_EX, (0x41,), 1),
        (utf16_to_utf32, [0xD800, 0x41], STRICT, None, ILLEGAL, (), 0),
        (utf16_to_utf32, [0xD800, 0x41], LENIENT, None, OK, (0xD800, 0x41), 2),
        (utf16_to_utf32, [0xDC00], STRICT, None, ILLEGAL, (), 0),
        (utf16_to_utf32, [0xDC00], LENIENT, None, OK, (0xDC00,), 1),
        (utf16_to_utf32, [0x61, 0x62], STRICT, 1, TGT_EX, (0x61,), 1),
        (utf16_to_utf8, [0x61, 0xE9], STRICT, 2, TGT_EX, (0x61,), 1),
        (utf16_to_utf8, [0xD83D, 0xDE00], STRICT, None, OK, (0xF0, 0x9F, 0x98, 0x80), 2),
        (utf16_to_utf8, [0xDC00], LENIENT, None, OK, (0xED, 0xB0, 0x80), 1),
        (utf16_to_utf8, [0xD83D], STRICT, None, SRC_EX, (), 0),
        (utf16_to_utf8, [], STRICT, None, OK, (), 0),
    ],
)
def test_cases(convert, source, flags, capacity, result, units, consumed):
    conv = convert(source, flags, capacity)
    assert (conv.result, conv.units, conv.consumed) == (result, units, consumed)


@pytest.mark.parametrize(
    "convert, source", [(utf16_to_utf32, [0x10000]), (utf32_to_utf16, [-1])]
)
def test_out_of_range_units_rejected(convert, source):
    with pytest.raises(ValueError):
        convert(source)