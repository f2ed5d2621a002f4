"""Byte-buffer operations: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise IndexError(f"byte count {n} exceeds buffer length {length}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256); return ``buf``."""
    _check_count(n, len(buf))
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` (modulo 256) within the
    first ``n`` bytes of ``data``, or None if there is none."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_count(n, len(a), len(b))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``; return ``dest``."""
    _check_count(n, len(dest), len(src))
    if dest is not src:
        dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly. Returns ``buf``.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dst, len(buf) - src)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf