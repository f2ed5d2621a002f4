"""Bit-level wire protocol carried over the two user signals.

Each byte of a message is sent as eight signals, least significant bit
first: SIGUSR1 stands for a 0 bit and SIGUSR2 for a 1 bit. A NUL byte ends
the message.
"""

from __future__ import annotations

import signal
from typing import Iterator, Optional, Union

from .conversions import atoi

SIGNAL_ZERO = signal.SIGUSR1
SIGNAL_ONE = signal.SIGUSR2
BITS_PER_BYTE = 8

Message = Union[str, bytes, bytearray]


def parse_pid(text: str) -> int:
    """Read a process id the way the client does; raise ValueError unless it is positive."""
    pid = atoi(text)
    if pid <= 0:
        raise ValueError(f"invalid PID: {text!r}")
    return pid


def _payload(message: Message) -> bytes:
    if isinstance(message, str):
        data = message.encode("utf-8", "surrogateescape")
    else:
        data = bytes(message)
    end = data.find(0)
    return data if end < 0 else data[:end]


def encode_bits(message: Message) -> Iterator[int]:
    """Yield the bits of ``message`` and its terminating NUL, low bit of each byte first."""
    for byte in _payload(message) + b"\0":
        for position in range(BITS_PER_BYTE):
            yield (byte >> position) & 1


def signal_for_bit(bit: int) -> signal.Signals:
    """Return the signal that carries ``bit``."""
    if bit == 0:
        return SIGNAL_ZERO
    if bit == 1:
        return SIGNAL_ONE
    raise ValueError(f"a bit must be 0 or 1, got {bit!r}")


def bit_for_signal(signum: int) -> int:
    """Return the bit carried by the signal ``signum``."""
    if signum == SIGNAL_ONE:
        return 1
    if signum == SIGNAL_ZERO:
        return 0
    raise ValueError(f"signal {signum!r} carries no bit")


class MessageDecoder:
    """Reassembles messages from a stream of bits."""

    def __init__(self) -> None:
        self._position = 0
        self._byte = 0
        self._buffer = bytearray()

    def feed(self, bit: int) -> Optional[bytes]:
        """Take one bit; return the finished message when its terminator completes, else None."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._byte |= bit << self._position
        self._position += 1
        if self._position < BITS_PER_BYTE:
            return None
        byte = self._byte
        self._position = 0
        self._byte = 0
        if byte != 0:
            self._buffer.append(byte)
            return None
        message = bytes(self._buffer)
        self._buffer.clear()
        return message