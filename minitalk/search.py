"""String length, search, comparison and bounded copy/concatenation.

Strings follow NUL-terminated semantics: a ``"\\0"`` inside a string ends it.
Positions are returned as indices into the string rather than as references.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[int, str]


def _terminated(s: str) -> str:
    """Return ``s`` cut at its first NUL character, if any."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _as_char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; ints are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL (or the whole length)."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``s``, or None.

    Searching for NUL yields the index of the terminator, i.e. ``strlen(s)``.
    """
    text = _terminated(s)
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``s``, or None.

    Searching for NUL yields the index of the terminator, i.e. ``strlen(s)``.
    """
    text = _terminated(s)
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    return "".join(_terminated(s))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of differing character codes,
    or 0 if the compared parts are equal. A string that ends early compares
    as if followed by NUL.
    """
    _check_size(n)
    pairs = zip_longest(_terminated(s1), _terminated(s2), fillvalue="\0")
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return the index of the first ``needle`` lying wholly within the first
    ``n`` characters of ``haystack``, or None. An empty needle matches at 0."""
    _check_size(n)
    target = _terminated(needle)
    if not target:
        return 0
    index = _terminated(haystack)[:n].find(target)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters (terminator included).

    Returns ``(copied, length_of_src)``; ``copied`` holds at most ``size - 1``
    characters, and is empty when ``size`` is 0.
    """
    _check_size(size)
    text = _terminated(src)
    copied = text[: size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns ``(result, wanted_length)``. If ``size`` does not exceed the length
    of ``dst``, ``dst`` is left unchanged and ``size + len(src)`` is returned
    as the length; otherwise the length is ``len(dst) + len(src)``.
    """
    _check_size(size)
    head = _terminated(dst)
    tail = _terminated(src)
    if size <= len(head):
        return head, size + len(tail)
    room = size - len(head) - 1
    return head + tail[:room], len(head) + len(tail)