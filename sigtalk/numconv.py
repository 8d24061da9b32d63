"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    """Reduce *value* into the signed 32-bit range by two's-complement wrap."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >> (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading ASCII whitespace is skipped, then one optional ``+`` or ``-``,
    then as many ASCII digits as follow. Anything after the digits is
    ignored; text with no digits yields 0. The result wraps like a 32-bit
    signed integer when it does not fit.
    """
    if not isinstance(text, str):
        raise TypeError("atoi expects a str")
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for ch in text[pos:]:
        if ch not in _DIGITS:
            break
        value = value * 10 + _DIGITS.index(ch)
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of the integer *n*, with a leading ``-`` if negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("itoa expects an int")
    return str(n)