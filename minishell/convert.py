"""Conversions between decimal text and integers."""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_LONG_MAX = 2**63 - 1


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. A value too large for a 64-bit signed integer gives
    -1, or 0 when negative. Otherwise the result wraps to 32 bits like a C int.
    """
    text = s.lstrip(_WHITESPACE)
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, text))
    value = int(digits) if digits else 0
    if value > _LONG_MAX:
        return 0 if negative else -1
    return _wrap_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)