"""ASCII-only character class tests, case conversion and case-insensitive comparison."""

from __future__ import annotations

import string

_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_LETTERS = _LOWER | _UPPER
_DIGITS = frozenset(string.digits)
_ALNUM = _LETTERS | _DIGITS

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_SWAP = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_uppercase + string.ascii_lowercase,
)


def _all_in(text: str, allowed: frozenset[str]) -> bool:
    return bool(text) and all(ch in allowed for ch in text)


def is_alnum(text: str) -> bool:
    """True if ``text`` is non-empty and holds only ASCII letters and digits."""
    return _all_in(text, _ALNUM)


def is_alpha(text: str) -> bool:
    """True if ``text`` is non-empty and holds only ASCII letters."""
    return _all_in(text, _LETTERS)


def is_numeric(text: str) -> bool:
    """True if ``text`` is non-empty and holds only decimal digits."""
    return _all_in(text, _DIGITS)


def is_lower(text: str) -> bool:
    """True if ``text`` is non-empty and holds only lowercase ASCII letters."""
    return _all_in(text, _LOWER)


def is_upper(text: str) -> bool:
    """True if ``text`` is non-empty and holds only uppercase ASCII letters."""
    return _all_in(text, _UPPER)


def swapcase(text: str) -> str:
    """Swap the case of every ASCII letter; other characters pass through."""
    return text.translate(_SWAP)


def to_lower(text: str) -> str:
    """Lowercase every ASCII letter; other characters pass through."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Uppercase every ASCII letter; other characters pass through."""
    return text.translate(_TO_UPPER)


def compare_nocase(a: str, b: str) -> int:
    """Compare ignoring ASCII case: negative, zero or positive like ``strcasecmp``."""
    left = to_lower(a)
    right = to_lower(b)
    if left < right:
        return -1
    if left > right:
        return 1
    return 0