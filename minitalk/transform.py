"""String building: splitting, joining, trimming, slicing and mapping.

Strings follow NUL-terminated semantics: a ``"\\0"`` inside a string ends it.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Union

from .search import strdup

CharLike = Union[int, str]


def _as_char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; ints are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _is_terminator(item: object) -> bool:
    return item == "\0" or item == 0


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    return [word for word in strdup(s).split(_as_char(sep)) if word]


def striteri(s: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Replace each element of ``s`` in place with ``f(index, element)``.

    Iteration stops at the first terminator (``"\\0"`` or 0).
    """
    for index, item in enumerate(s):
        if _is_terminator(item):
            break
        s[index] = f(index, item)


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of two strings."""
    return strdup(s1) + strdup(s2)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string whose characters are ``f(index, char)`` for each character of ``s``."""
    mapped = "".join(f(index, ch) for index, ch in enumerate(strdup(s)))
    return strdup(mapped)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return strdup(s).strip(strdup(charset))


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or beyond the end of ``s`` gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = strdup(s)
    if start >= len(text):
        return ""
    return text[start:start + length]