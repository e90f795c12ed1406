"""Conversions from UTF-32 to UTF-16 and from UTF-16 to UTF-32 or UTF-8.

Also holds the conversion driver that the UTF-8 conversions share.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import partial
from typing import Optional, Tuple

from .conversion import (
    HALF_BASE,
    HALF_MASK,
    HALF_SHIFT,
    MAX_BMP,
    MAX_LEGAL_UTF32,
    REPLACEMENT_CHAR,
    SUR_HIGH_END,
    SUR_HIGH_START,
    SUR_LOW_END,
    SUR_LOW_START,
    Conversion,
    ConversionFlags,
    ConversionResult,
)

MAX_UTF8_UNIT = 0xFF
MAX_UTF16_UNIT = 0xFFFF
MAX_UTF32_UNIT = 0xFFFFFFFF

_FIRST_BYTE_MARK = (0x00, 0x00, 0xC0, 0xE0, 0xF0, 0xF8, 0xFC)
_BYTE_MASK = 0xBF
_BYTE_MARK = 0x80

Step = Tuple[ConversionResult, bool]
Decoder = Callable[[list, int, ConversionFlags], Tuple[ConversionResult, int, int]]
Encoder = Callable[[int, list, ConversionFlags, Optional[int]], Step]


def _units(source: Iterable[int], limit: int, name: str) -> list[int]:
    values = list(source)
    for value in values:
        if not 0 <= value <= limit:
            raise ValueError(f"{name} code unit out of range: {value:#x}")
    return values


def _room(capacity: int | None, used: int, needed: int) -> bool:
    return capacity is None or used + needed <= capacity


def _is_surrogate(ch: int) -> bool:
    return SUR_HIGH_START <= ch <= SUR_LOW_END


def _transcode(
    source: Iterable[int],
    limit: int,
    name: str,
    decode: Decoder,
    encode: Encoder,
    flags: ConversionFlags,
    capacity: int | None,
) -> Conversion:
    """Decode ``source`` one character at a time and feed each to ``encode``.

    An encoder answers with a status and whether to stop; on a stop the
    character is not counted as consumed.
    """
    flags = ConversionFlags(flags)
    values = _units(source, limit, name)
    result = ConversionResult.OK
    target: list[int] = []
    index = 0
    while index < len(values):
        status, ch, after = decode(values, index, flags)
        if status is not ConversionResult.OK:
            result = status
            break
        status, stop = encode(ch, target, flags, capacity)
        if status is not ConversionResult.OK:
            result = status
        if stop:
            break
        index = after
    return Conversion(result, tuple(target), index)


def _decode_utf32(
    values: list[int], index: int, flags: ConversionFlags
) -> tuple[ConversionResult, int, int]:
    return ConversionResult.OK, values[index], index + 1


def _decode_utf16(
    values: list[int], index: int, flags: ConversionFlags
) -> tuple[ConversionResult, int, int]:
    """Read one code point at ``index``, joining a surrogate pair."""
    ch = values[index]
    pos = index + 1
    strict = flags == ConversionFlags.STRICT
    if SUR_HIGH_START <= ch <= SUR_HIGH_END:
        if pos >= len(values):
            return ConversionResult.SOURCE_EXHAUSTED, ch, index
        ch2 = values[pos]
        if SUR_LOW_START <= ch2 <= SUR_LOW_END:
            ch = ((ch - SUR_HIGH_START) << HALF_SHIFT) + (ch2 - SUR_LOW_START) + HALF_BASE
            pos += 1
        elif strict:
            return ConversionResult.SOURCE_ILLEGAL, ch, index
    elif strict and SUR_LOW_START <= ch <= SUR_LOW_END:
        return ConversionResult.SOURCE_ILLEGAL, ch, index
    return ConversionResult.OK, ch, pos


def _encode_utf16(
    ch: int,
    target: list[int],
    flags: ConversionFlags,
    capacity: int | None,
    *,
    halt_on_too_large: bool = True,
) -> Step:
    """Append ``ch`` as one UTF-16 unit or a surrogate pair."""
    if not _room(capacity, len(target), 1):
        return ConversionResult.TARGET_EXHAUSTED, True
    strict = flags == ConversionFlags.STRICT
    if ch <= MAX_BMP:
        if _is_surrogate(ch):
            if strict:
                return ConversionResult.SOURCE_ILLEGAL, True
            ch = REPLACEMENT_CHAR
        target.append(ch)
    elif ch > MAX_LEGAL_UTF32:
        if strict:
            return ConversionResult.SOURCE_ILLEGAL, halt_on_too_large
        target.append(REPLACEMENT_CHAR)
    else:
        if not _room(capacity, len(target), 2):
            return ConversionResult.TARGET_EXHAUSTED, True
        ch -= HALF_BASE
        target.append((ch >> HALF_SHIFT) + SUR_HIGH_START)
        target.append((ch & HALF_MASK) + SUR_LOW_START)
    return ConversionResult.OK, False


def _encode_utf32(
    ch: int, target: list[int], flags: ConversionFlags, capacity: int | None
) -> Step:
    if not _room(capacity, len(target), 1):
        return ConversionResult.TARGET_EXHAUSTED, True
    target.append(ch)
    return ConversionResult.OK, False


def _utf8_bytes(ch: int, count: int) -> list[int]:
    """Encode ``ch`` into exactly ``count`` bytes using the classic bit layout."""
    trailing: list[int] = []
    for _ in range(count - 1):
        trailing.append((ch | _BYTE_MARK) & _BYTE_MASK)
        ch >>= 6
    return [(ch | _FIRST_BYTE_MARK[count]) & 0xFF, *reversed(trailing)]


def _encode_utf8(
    ch: int, target: list[int], flags: ConversionFlags, capacity: int | None
) -> Step:
    """Append ``ch`` as UTF-8; values above U+10FFFF become the replacement character."""
    if ch > MAX_LEGAL_UTF32:
        ch, count = REPLACEMENT_CHAR, 3
    else:
        count = next(n for n, bound in enumerate((0x80, 0x800, 0x10000), 1) if ch < bound) if ch < 0x10000 else 4
    if not _room(capacity, len(target), count):
        return ConversionResult.TARGET_EXHAUSTED, True
    target.extend(_utf8_bytes(ch, count))
    return ConversionResult.OK, False


def utf32_to_utf16(
    source: Iterable[int],
    flags: ConversionFlags = ConversionFlags.STRICT,
    capacity: int | None = None,
) -> Conversion:
    """Convert UTF-32 code points to UTF-16 code units.

    ``capacity`` limits the number of units produced; ``None`` means no limit.
    """
    encode = partial(_encode_utf16, halt_on_too_large=False)
    return _transcode(source, MAX_UTF32_UNIT, "UTF-32", _decode_utf32, encode, flags, capacity)


def utf16_to_utf32(
    source: Iterable[int],
    flags: ConversionFlags = ConversionFlags.STRICT,
    capacity: int | None = None,
) -> Conversion:
    """Convert UTF-16 code units to UTF-32 code points, joining surrogate pairs."""
    return _transcode(source, MAX_UTF16_UNIT, "UTF-16", _decode_utf16, _encode_utf32, flags, capacity)


def utf16_to_utf8(
    source: Iterable[int],
    flags: ConversionFlags = ConversionFlags.STRICT,
    capacity: int | None = None,
) -> Conversion:
    """Convert UTF-16 code units to UTF-8 bytes."""
    return _transcode(source, MAX_UTF16_UNIT, "UTF-16", _decode_utf16, _encode_utf8, flags, capacity)