"""Shared types and constants for Unicode encoding conversions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

REPLACEMENT_CHAR = 0x0000FFFD
MAX_BMP = 0x0000FFFF
MAX_UTF16 = 0x0010FFFF
MAX_UTF32 = 0x7FFFFFFF
MAX_LEGAL_UTF32 = 0x0010FFFF

SUR_HIGH_START = 0xD800
SUR_HIGH_END = 0xDBFF
SUR_LOW_START = 0xDC00
SUR_LOW_END = 0xDFFF

HALF_SHIFT = 10
HALF_BASE = 0x0010000
HALF_MASK = 0x3FF


class ConversionResult(IntEnum):
    """Outcome of a conversion; only the first problem met is reported."""

    OK = 0
    SOURCE_EXHAUSTED = 1
    TARGET_EXHAUSTED = 2
    SOURCE_ILLEGAL = 3


class ConversionFlags(IntEnum):
    """Strict conversion rejects lone surrogates; lenient replaces them."""

    STRICT = 0
    LENIENT = 1


@dataclass(frozen=True)
class Conversion:
    """Code units produced and how many source units were consumed."""

    result: ConversionResult
    units: tuple[int, ...] = field(default_factory=tuple)
    consumed: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "result", ConversionResult(self.result))
        object.__setattr__(self, "units", tuple(self.units))
        if self.consumed < 0:
            raise ValueError("consumed count cannot be negative")

    @property
    def ok(self) -> bool:
        """Whether the whole source was converted without problems."""
        return self.result is ConversionResult.OK