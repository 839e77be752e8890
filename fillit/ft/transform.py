"""Building new strings: copying, joining, mapping, splitting and trimming.

Strings are read as C strings: each ends at its first NUL character, or at
its end when it holds none. Python strings are immutable, so every function
returns the string it builds instead of writing into a destination.
"""

from __future__ import annotations

import operator
from typing import Callable, Optional, Union

from .search import strlen

Char = Union[str, int]

_NUL = "\0"
_TRIMMED = " \t\n"


def _cstr(text: str) -> str:
    return text[:strlen(text)]


def _count(n: int, what: str = "character count") -> int:
    if n < 0:
        raise ValueError(f"{what} cannot be negative")
    return n


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c))


def strcat(dst: str, src: str) -> str:
    """Return src appended to dst."""
    return _cstr(dst) + _cstr(src)


def strncat(dst: str, src: str, n: int) -> str:
    """Return at most the first n characters of src appended to dst."""
    _count(n)
    return _cstr(dst) + _cstr(src)[:n]


def strcpy(src: Optional[str]) -> Optional[str]:
    """Return a copy of src; None gives None."""
    if src is None:
        return None
    return _cstr(src)


def strncpy(src: str, n: int) -> str:
    """Return exactly n characters: src cut to n, padded with NULs.

    When src has n characters or more, no terminator is included.
    """
    _count(n)
    return _cstr(src)[:n].ljust(n, _NUL)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, NUL included.

    Return the resulting string and the length it tried to create. When
    size does not exceed the length of dst, dst is left as it is and the
    length reported is size plus the length of src.
    """
    _count(size, "size")
    dst = _cstr(dst)
    src = _cstr(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strlcpy(src: Optional[str], size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, NUL included.

    Return the copy and the length of src. None copies nothing and
    reports a length of 0.
    """
    _count(size, "size")
    if src is None:
        return "", 0
    src = _cstr(src)
    return src[:max(size - 1, 0)], len(src)


def strdup(text: str) -> str:
    """Return a fresh copy of text."""
    return _cstr(text)


def strjoin(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Return a followed by b; a None side is left out, two give None."""
    if a is None and b is None:
        return None
    if a is None:
        return strdup(b)
    if b is None:
        return strdup(a)
    return _cstr(a) + _cstr(b)


def striter(text: Optional[str], func: Optional[Callable[[str], object]]) -> None:
    """Call func on every character of text."""
    if text is None or func is None:
        return
    for char in _cstr(text):
        func(char)


def striteri(
    text: Optional[str], func: Optional[Callable[[int, str], object]]
) -> None:
    """Call func with the index and the character, for every character."""
    if text is None or func is None:
        return
    for index, char in enumerate(_cstr(text)):
        func(index, char)


def strmap(
    text: Optional[str], func: Optional[Callable[[str], str]]
) -> Optional[str]:
    """Return the string of func applied to every character of text."""
    if text is None or func is None:
        return None
    return "".join(map(func, _cstr(text)))


def strmapi(
    text: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Return the string of func applied to each index and character."""
    if text is None or func is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(_cstr(text)))


def strsplit(text: Optional[str], c: Char) -> Optional[list[str]]:
    """Split text on the character c, dropping empty fields."""
    if text is None:
        return None
    text = _cstr(text)
    separator = _char(c)
    if separator == _NUL:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strsub(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return up to length characters of text from start.

    None and the empty string give None.
    """
    _count(start, "start")
    _count(length, "length")
    if text is None:
        return None
    text = _cstr(text)
    if not text:
        return None
    return text[start:start + length]


def strtrim(text: Optional[str]) -> Optional[str]:
    """Strip spaces, tabs and newlines from both ends of text."""
    if text is None:
        return None
    return _cstr(text).strip(_TRIMMED)