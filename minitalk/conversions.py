"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to the 32-bit two's-complement range."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text without digits gives 0. The result
    wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    digits = str(abs(n))
    return f"-{digits}" if n < 0 else digits