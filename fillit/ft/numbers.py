"""Conversions between decimal text and integers."""

from __future__ import annotations

from itertools import dropwhile, takewhile

from .chars import is_digit, is_space

_INT_BITS = 32


def _wrap(value: int) -> int:
    """Reduce a value to the range of a 32-bit signed integer."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed value.

    Leading whitespace is skipped, one sign is accepted, and parsing stops
    at the first non-digit. Text without digits gives 0.
    """
    rest = "".join(dropwhile(is_space, text))
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest))
    value = int(digits) if digits else 0
    return _wrap(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return f"{n:d}"