"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .numbers import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character; standard output is the default stream."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def putstr(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def putendl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def putnbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(itoa(n))