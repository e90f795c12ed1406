"""Small string helpers working on ASCII case and C whitespace."""

from __future__ import annotations

import re
import string
from collections.abc import Iterable

_WHITESPACE = " \t\n\v\f\r"
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def trim(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip(_WHITESPACE)


def trim_left(text: str) -> str:
    """Remove leading whitespace."""
    return text.lstrip(_WHITESPACE)


def trim_right(text: str) -> str:
    """Remove trailing whitespace."""
    return text.rstrip(_WHITESPACE)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters, leaving other characters alone."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Upper-case ASCII letters, leaving other characters alone."""
    return text.translate(_TO_UPPER)


def iequals(a: str, b: str) -> bool:
    """Compare two strings ignoring ASCII case."""
    return len(a) == len(b) and to_lower(a) == to_lower(b)


def split(text: str, delimiters: str = " ", keep_empty: bool = False) -> list[str]:
    """Split on any character of ``delimiters``; drop empty pieces unless asked."""
    if delimiters:
        pieces = re.split("[" + re.escape(delimiters) + "]", text)
    else:
        pieces = [text]
    if keep_empty:
        return pieces
    return [piece for piece in pieces if piece]


def join(parts: Iterable[str], delimiter: str = ", ") -> str:
    """Join strings with a delimiter."""
    return delimiter.join(parts)


def starts_with(text: str, prefix: str) -> bool:
    """Whether ``text`` begins with ``prefix``."""
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    """Whether ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every non-overlapping ``old`` with ``new``, scanning left to right."""
    if not old:
        return text
    return text.replace(old, new)