"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``, which is an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def is_alpha(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True if ``c`` lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True if ``c`` is a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, lo: str, hi: str, shift: int) -> CharLike:
    code = _code(c)
    if ord(lo) <= code <= ord(hi):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital letter; anything else is returned unchanged.

    The result has the same type as the argument.
    """
    return _convert(c, "A", "Z", 32)


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else is returned unchanged.

    The result has the same type as the argument.
    """
    return _convert(c, "a", "z", -32)