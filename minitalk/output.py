"""Writing characters, strings and numbers to text streams, and printf-style formatting.

The formatter understands the conversions ``%c``, ``%s``, ``%p``, ``%d``,
``%i``, ``%u``, ``%x``, ``%X`` and ``%%``. Integer conversions behave like
their 32-bit C counterparts: ``%d``/``%i`` wrap to a signed 32-bit value,
``%u``/``%x``/``%X`` to an unsigned one. An unknown conversion character is
consumed and produces nothing.
"""

from __future__ import annotations

import operator
import sys
from typing import Iterator, List, Optional, TextIO, Union

from .conversions import itoa
from .search import strdup

CharLike = Union[int, str]

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_NO_ARGUMENT = object()


def _as_char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; ints are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _as_int(value: object) -> int:
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(f"expected an integer, got {type(value).__name__}") from None


def _to_int32(value: object) -> int:
    wrapped = _as_int(value) & _UINT32_MASK
    return wrapped - 2**32 if wrapped >= 2**31 else wrapped


def _to_uint32(value: object) -> int:
    return _as_int(value) & _UINT32_MASK


def _format_pointer(value: object) -> str:
    if value is None:
        return "0x0"
    address = _as_int(value) & _POINTER_MASK
    return f"0x{address:x}"


def _format_string(value: object) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return strdup(value)


def _convert(spec: str, arguments: Iterator[object]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cdipsuxX":
        return ""
    value = next(arguments, _NO_ARGUMENT)
    if value is _NO_ARGUMENT:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    if spec == "c":
        return _as_char(value)  # type: ignore[arg-type]
    if spec in "di":
        return itoa(_to_int32(value))
    if spec == "p":
        return _format_pointer(value)
    if spec == "s":
        return _format_string(value)
    if spec == "u":
        return str(_to_uint32(value))
    text = format(_to_uint32(value), "x")
    return text.upper() if spec == "X" else text


def format_printf(fmt: str, *args: object) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Extra arguments are ignored; too few raise TypeError. A lone ``%`` at the
    end of the format produces nothing.
    """
    arguments = iter(args)
    characters = iter(strdup(fmt))
    parts: List[str] = []
    for ch in characters:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(characters, None)
        if spec is None:
            break
        parts.append(_convert(spec, arguments))
    return "".join(parts)


def printf(fmt: str, *args: object, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)


def putchar_fd(c: CharLike, stream: TextIO) -> None:
    """Write a single character to ``stream``."""
    stream.write(_as_char(c))


def putstr_fd(s: Optional[str], stream: TextIO) -> None:
    """Write ``s`` up to its terminator to ``stream``; None writes nothing."""
    if s is not None:
        stream.write(strdup(s))


def putendl_fd(s: Optional[str], stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``; None writes nothing."""
    if s is not None:
        putstr_fd(s, stream)
        putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of the 32-bit signed integer ``n`` to ``stream``."""
    stream.write(itoa(n))