"""Character classification and ASCII case conversion."""

from __future__ import annotations

import operator
import string
from typing import Union

Char = Union[str, int]

_SPACES = frozenset(map(ord, " \n\v\t\f\r"))
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _code(c: Char) -> int:
    """Return the code of a one-character string or an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: Char) -> bool:
    """Tell whether c is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """Tell whether c is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """Tell whether c is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """Tell whether c lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """Tell whether c is a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def is_space(c: Char) -> bool:
    """Tell whether the low byte of c is an ASCII whitespace character."""
    return (_code(c) & 0xFF) in _SPACES


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code = code - ord("a") + ord("A")
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code = code - ord("A") + ord("a")
    return chr(code) if isinstance(c, str) else code


def str_upcase(text: str) -> str:
    """Return text with its ASCII letters upper-cased."""
    return text.translate(_UPPER)


def str_lowcase(text: str) -> str:
    """Return text with its ASCII letters lower-cased."""
    return text.translate(_LOWER)