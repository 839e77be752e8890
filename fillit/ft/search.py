"""Searching and comparing NUL-terminated strings.

Every string is read as a C string: it ends at its first NUL character,
or at its end when it holds none. Positions are returned as offsets into
the string, and None stands for "not found".
"""

from __future__ import annotations

import operator
from typing import Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _cstr(text: str) -> str:
    """Return text up to, not including, its first NUL."""
    end = text.find(_NUL)
    return text if end < 0 else text[:end]


def _char(c: Char) -> str:
    """Turn a one-character string or a character code into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c))


def _count(n: int) -> int:
    if n < 0:
        raise ValueError("character count cannot be negative")
    return n


def strlen(text: str) -> int:
    """Return the number of characters before the terminating NUL."""
    return len(_cstr(text))


def strchr(text: str, c: Char) -> Optional[int]:
    """Return the offset of the first c, or None.

    Searching for NUL gives the offset of the terminator.
    """
    text = _cstr(text)
    char = _char(c)
    if char == _NUL:
        return len(text)
    found = text.find(char)
    return None if found < 0 else found


def strchri(text: str, c: Char) -> int:
    """Return the offset of the first c, or the length when c is absent."""
    found = strchr(text, c)
    return strlen(text) if found is None else found


def strrchr(text: str, c: Char) -> Optional[int]:
    """Return the offset of the last c, or None.

    Searching for NUL gives the offset of the terminator.
    """
    text = _cstr(text)
    char = _char(c)
    if char == _NUL:
        return len(text)
    found = text.rfind(char)
    return None if found < 0 else found


def strstr(text: str, needle: str) -> Optional[int]:
    """Return the offset of the first occurrence of needle, or None.

    An empty needle is found at offset 0.
    """
    text = _cstr(text)
    needle = _cstr(needle)
    if not needle:
        return 0
    found = text.find(needle)
    return None if found < 0 else found


def strnstr(text: str, needle: str, n: int) -> Optional[int]:
    """Find needle wholly inside the first n characters of text, or None.

    An empty needle is found at offset 0.
    """
    _count(n)
    text = _cstr(text)
    needle = _cstr(needle)
    if not needle:
        return 0
    found = text[:n].find(needle)
    return None if found < 0 else found


def strcmp(a: str, b: str) -> int:
    """Compare two strings; return the difference of the first unequal codes.

    The terminator counts as code 0, so a proper prefix compares lower.
    """
    a = _cstr(a)
    b = _cstr(b)
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    tail_a = ord(a[len(b)]) if len(a) > len(b) else 0
    tail_b = ord(b[len(a)]) if len(b) > len(a) else 0
    return tail_a - tail_b


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most the first n characters of two strings."""
    _count(n)
    if n == 0:
        return 0
    return strcmp(_cstr(a)[:n], _cstr(b)[:n])


def strequ(a: Optional[str], b: Optional[str]) -> bool:
    """Tell whether two strings are equal; None never equals anything."""
    if a is None or b is None:
        return False
    return strcmp(a, b) == 0


def strnequ(a: Optional[str], b: Optional[str], n: int) -> bool:
    """Tell whether the first n characters are equal; None never is."""
    if a is None or b is None:
        return False
    return strncmp(a, b, n) == 0


def strchrsub(text: Optional[str], c: Char) -> Optional[str]:
    """Return the part of text before the first c, or all of it.

    None and the empty string give None.
    """
    if text is None:
        return None
    text = _cstr(text)
    if not text:
        return None
    char = _char(c)
    end = text.find(char)
    return text if end < 0 else text[:end]