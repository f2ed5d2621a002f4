"""Bit-level message encoding over SIGUSR1 and SIGUSR2, with string, memory and formatting helpers."""

__version__ = "1.0.0"

__all__ = [
    "chars",
    "conversions",
    "linkedlist",
    "memory",
    "output",
    "protocol",
    "search",
    "transform",
]