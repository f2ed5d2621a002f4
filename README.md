# minitalk

A small library for a signal-based messaging protocol. A message is
carried by only two signals, `SIGUSR1` and `SIGUSR2`. The library also
has a set of small string, memory and formatting helpers.

POSIX only: `minitalk.protocol` uses `signal.SIGUSR1` and
`signal.SIGUSR2`, which Windows lacks.

## Installation

```
pip install .
```

## The protocol

Each byte of a message is sent as eight bits, least significant bit
first. `SIGUSR2` carries a 1 and `SIGUSR1` carries a 0. A zero byte
follows the message and marks its end. Text messages are encoded as
UTF-8.

`minitalk.protocol` provides:

- `parse_pid(text)` reads a process id from text. It skips leading
  whitespace, takes an optional sign and stops at the first non-digit.
  It raises `ValueError` unless the result is positive.
- `encode_bits(message)` yields the bits of a `str`, `bytes` or
  `bytearray` message, followed by the eight zero bits of its
  terminator. Anything after a NUL in the message is not sent.
- `signal_for_bit(bit)` and `bit_for_signal(signum)` map between bits
  and the two signals. Any other value raises `ValueError`.
- `MessageDecoder` collects bits back into messages. Its `feed(bit)`
  method returns the finished message as `bytes` when the terminator is
  complete, and `None` otherwise.

```python
from minitalk.protocol import MessageDecoder, encode_bits

decoder = MessageDecoder()
for bit in encode_bits("Hello"):
    message = decoder.feed(bit)
print(message)  # b'Hello'
```

## What the package does not do

The package has no client or server command. It does not send signals
to other processes, and it does not install signal handlers or wait for
incoming signals. To deliver a message, a program must do the following:

- Send `signal_for_bit(bit)` for each bit from `encode_bits` itself, for
  example with `os.kill`.
- On the receiving side, pass `bit_for_signal(signum)` to a
  `MessageDecoder` from its own handler.

## Helpers

- `minitalk.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower` and `to_upper`. These are ASCII-only. They take
  an int or a one-character string.
- `minitalk.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy` and `memmove`. They work on `bytes` and `bytearray`.
- `minitalk.search`: `strlen`, `strchr`, `strrchr`, `strdup`, `strncmp`,
  `strnstr`, `strlcpy` and `strlcat`. A NUL inside a string ends it.
  Positions are returned as indices.
- `minitalk.conversions`: `atoi` and `itoa`, for 32-bit signed integers.
- `minitalk.transform`: `split`, `striteri`, `strjoin`, `strmapi`,
  `strtrim` and `substr`.
- `minitalk.output`: `format_printf` and `printf`. These handle the
  conversions `%c %s %p %d %i %u %x %X %%`. `printf` returns the number
  of characters written. The stream writers `putchar_fd`, `putstr_fd`,
  `putendl_fd` and `putnbr_fd` are also here.
- `minitalk.linkedlist`: `Node` and `LinkedList`. `LinkedList` supports
  `push_front`, `push_back`, `last`, `clear`, `iterate`, `map`, `len()`
  and iteration.

## Tests

```
pip install ".[test]"
pytest
```