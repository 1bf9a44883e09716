"""ASCII character classification and small number/string formatting helpers."""

from __future__ import annotations

_HEX_UPPER = "0123456789ABCDEF"
_HEX_LOWER = "0123456789abcdef"
_UINT64_MAX = (1 << 64) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_SPACES = frozenset(" \f\n\r\t\v")


def hexdigit(x: int, lower_case: bool = False) -> str:
    """Return the hexadecimal character for ``x``, which must be below 16."""
    if not 0 <= x < 16:
        raise ValueError(f"hex digit value out of range: {x}")
    return (_HEX_LOWER if lower_case else _HEX_UPPER)[x]


def hex_digit_value(c: str) -> int | None:
    """Return the value of hex digit ``c``, or None if it is not one."""
    if len(c) == 1 and c in "0123456789abcdefABCDEF":
        return int(c, 16)
    return None


def is_digit(c: str) -> bool:
    """True if ``c`` is one of the ten decimal digits."""
    return "0" <= c <= "9" and len(c) == 1


def is_hex_digit(c: str) -> bool:
    """True if ``c`` is a hexadecimal digit."""
    return hex_digit_value(c) is not None


def is_alpha(c: str) -> bool:
    """True if ``c`` is an ASCII letter."""
    return len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z")


def is_alnum(c: str) -> bool:
    """True if ``c`` is an ASCII letter or decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str) -> bool:
    """True if every character of ``c`` is 7-bit ASCII."""
    return all(ord(ch) <= 127 for ch in c)


def is_print(c: str) -> bool:
    """True if ``c`` is a printable ASCII character."""
    return len(c) == 1 and 0x20 <= ord(c) <= 0x7E


def is_space(c: str) -> bool:
    """True if ``c`` is whitespace in the C locale."""
    return c in _SPACES


def to_lower(c: str) -> str:
    """Lowercase an ASCII uppercase letter; other characters pass through."""
    if "A" <= c <= "Z" and len(c) == 1:
        return chr(ord(c) + 32)
    return c


def to_upper(c: str) -> str:
    """Uppercase an ASCII lowercase letter; other characters pass through."""
    if "a" <= c <= "z" and len(c) == 1:
        return chr(ord(c) - 32)
    return c


def utohexstr(x: int, lower_case: bool = False) -> str:
    """Format an unsigned 64-bit integer in hexadecimal without prefix."""
    if not 0 <= x <= _UINT64_MAX:
        raise ValueError(f"value does not fit in 64 unsigned bits: {x}")
    return format(x, "x" if lower_case else "X")


def to_hex(data: bytes | str, lower_case: bool = False) -> str:
    """Return the hexadecimal representation of ``data``, two digits per byte."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    text = bytes(data).hex()
    return text if lower_case else text.upper()


def from_hex(text: str) -> bytes:
    """Decode a hexadecimal string; an odd length is padded with a leading zero."""
    if not all(is_hex_digit(c) for c in text):
        raise ValueError("input contains non hex digits")
    if len(text) % 2:
        text = "0" + text
    return bytes.fromhex(text)


def utostr(x: int, is_neg: bool = False) -> str:
    """Format an unsigned integer in decimal, optionally with a minus sign."""
    if not 0 <= x <= _UINT64_MAX:
        raise ValueError(f"value does not fit in 64 unsigned bits: {x}")
    return f"-{x}" if is_neg else str(x)


def itostr(x: int) -> str:
    """Format a signed 64-bit integer in decimal."""
    if not _INT64_MIN <= x <= _INT64_MAX:
        raise ValueError(f"value does not fit in 64 signed bits: {x}")
    return utostr(-x, True) if x < 0 else utostr(x)


def ordinal_suffix(value: int) -> str:
    """Return the English ordinal suffix for ``value``: st, nd, rd or th."""
    if value % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(value % 10, "th")


def join_items(separator: object, *args: object) -> str:
    """Join the string forms of ``args`` with ``separator`` between them."""
    return str(separator).join(str(a) for a in args)


class ListSeparator:
    """Yields an empty string the first time it is formatted, the separator after."""

    def __init__(self, separator: str = ", ") -> None:
        self.separator = separator
        self._first = True

    def __str__(self) -> str:
        if self._first:
            self._first = False
            return ""
        return self.separator