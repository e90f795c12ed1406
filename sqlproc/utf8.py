"""Conversions from UTF-8 to UTF-16 or UTF-32, and from UTF-32 to UTF-8."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .conversion import (
    MAX_LEGAL_UTF32,
    REPLACEMENT_CHAR,
    Conversion,
    ConversionFlags,
    ConversionResult,
)
from .utf16 import (
    MAX_UTF8_UNIT,
    MAX_UTF32_UNIT,
    Step,
    _decode_utf32,
    _encode_utf8,
    _encode_utf16,
    _is_surrogate,
    _room,
    _transcode,
    _units,
)

_OFFSETS_FROM_UTF8 = (
    0x00000000,
    0x00003080,
    0x000E2080,
    0x03C82080,
    0xFA082080,
    0x82082080,
)

_SECOND_BYTE_BOUNDS = {
    0xE0: (0xA0, 0xBF),
    0xED: (0x00, 0x9F),
    0xF0: (0x90, 0xBF),
    0xF4: (0x00, 0x8F),
}


def _trailing_bytes(lead: int) -> int:
    """Number of continuation bytes announced by a lead byte."""
    for count, bound in enumerate((0xC0, 0xE0, 0xF0, 0xF8, 0xFC)):
        if lead < bound:
            return count
    return 5


def _is_legal(seq: Sequence[int]) -> bool:
    """Check one sequence whose length was taken from its lead byte."""
    if not 1 <= len(seq) <= 4:
        return False
    lead = seq[0]
    if len(seq) >= 2:
        if any(not 0x80 <= byte <= 0xBF for byte in seq[2:]):
            return False
        low, high = _SECOND_BYTE_BOUNDS.get(lead, (0x80, 0xBF))
        if not low <= seq[1] <= high:
            return False
    if 0x80 <= lead < 0xC2:
        return False
    return lead <= 0xF4


def _decode_utf8(
    values: list[int], index: int, flags: ConversionFlags
) -> tuple[ConversionResult, int, int]:
    """Decode the sequence at ``index``; return (status, code point, next index)."""
    extra = _trailing_bytes(values[index])
    if index + extra >= len(values):
        return ConversionResult.SOURCE_EXHAUSTED, 0, index
    seq = values[index : index + extra + 1]
    if not _is_legal(seq):
        return ConversionResult.SOURCE_ILLEGAL, 0, index
    ch = 0
    for byte in seq:
        ch = (ch << 6) + byte
    ch = (ch - _OFFSETS_FROM_UTF8[extra]) & 0xFFFFFFFF
    return ConversionResult.OK, ch, index + extra + 1


def _encode_utf32_checked(
    ch: int, target: list[int], flags: ConversionFlags, capacity: int | None
) -> Step:
    if not _room(capacity, len(target), 1):
        return ConversionResult.TARGET_EXHAUSTED, True
    if ch > MAX_LEGAL_UTF32:
        target.append(REPLACEMENT_CHAR)
        return ConversionResult.SOURCE_ILLEGAL, False
    if _is_surrogate(ch):
        if flags == ConversionFlags.STRICT:
            return ConversionResult.SOURCE_ILLEGAL, True
        ch = REPLACEMENT_CHAR
    target.append(ch)
    return ConversionResult.OK, False


def _encode_utf8_checked(
    ch: int, target: list[int], flags: ConversionFlags, capacity: int | None
) -> Step:
    if flags == ConversionFlags.STRICT and _is_surrogate(ch):
        return ConversionResult.SOURCE_ILLEGAL, True
    status, stop = _encode_utf8(ch, target, flags, capacity)
    if status is ConversionResult.OK and ch > MAX_LEGAL_UTF32:
        return ConversionResult.SOURCE_ILLEGAL, False
    return status, stop


def is_legal_utf8_sequence(source: Iterable[int]) -> bool:
    """Whether the sequence starting at the first byte of ``source`` is legal UTF-8."""
    values = _units(source, MAX_UTF8_UNIT, "UTF-8")
    if not values:
        raise ValueError("empty UTF-8 source")
    length = _trailing_bytes(values[0]) + 1
    return length <= len(values) and _is_legal(values[:length])


def utf8_to_utf16(
    source: Iterable[int],
    flags: ConversionFlags = ConversionFlags.STRICT,
    capacity: int | None = None,
) -> Conversion:
    """Convert UTF-8 bytes to UTF-16 code units, splitting into surrogate pairs."""
    return _transcode(source, MAX_UTF8_UNIT, "UTF-8", _decode_utf8, _encode_utf16, flags, capacity)


def utf32_to_utf8(
    source: Iterable[int],
    flags: ConversionFlags = ConversionFlags.STRICT,
    capacity: int | None = None,
) -> Conversion:
    """Convert UTF-32 code points to UTF-8 bytes.

    Code points above U+10FFFF become the replacement character and mark the
    result as illegal, but conversion carries on.
    """
    return _transcode(
        source, MAX_UTF32_UNIT, "UTF-32", _decode_utf32, _encode_utf8_checked, flags, capacity
    )


def utf8_to_utf32(
    source: Iterable[int],
    flags: ConversionFlags = ConversionFlags.STRICT,
    capacity: int | None = None,
) -> Conversion:
    """Convert UTF-8 bytes to UTF-32 code points."""
    return _transcode(
        source, MAX_UTF8_UNIT, "UTF-8", _decode_utf8, _encode_utf32_checked, flags, capacity
    )