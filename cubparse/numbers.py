"""Lenient integer parsing and decimal formatting."""

from __future__ import annotations

import operator

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, a single ``+`` or ``-`` is honoured, and
    parsing stops at the first non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        result = result * 10 + _DIGITS.index(ch)
    return sign * result


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading ``-`` when negative."""
    return str(operator.index(n))