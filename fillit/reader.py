"""Reading and validating the pieces of an input file."""

from __future__ import annotations

import os

from .pieces import InvalidPieceError, Piece, parse_piece

BLOCK_SIZE = 21
LAST_BLOCK_SIZE = 20
MAX_PIECES = 26

_LAST_NEWLINES = frozenset({4, 9, 14, 19})
_INNER_NEWLINES = _LAST_NEWLINES | {20}
_ALLOWED = frozenset("#.\n")


class InputError(ValueError):
    """Raised when the input does not describe a valid list of pieces."""


def check_block(block: str, last: bool) -> None:
    """Validate one block of text; raise InputError when it is malformed."""
    newlines = _LAST_NEWLINES if last else _INNER_NEWLINES
    hashes = 0
    for index, char in enumerate(block):
        if char not in _ALLOWED:
            raise InputError(f"unexpected character {char!r}")
        if char == "#":
            hashes += 1
        elif char == "\n" and index not in newlines:
            raise InputError(f"unexpected newline at offset {index}")
    if last and len(block) != LAST_BLOCK_SIZE:
        raise InputError("the last piece has the wrong length")
    if hashes != 4:
        raise InputError("a piece must have exactly four '#'")


def _to_piece(block: str, letter: str) -> Piece:
    try:
        return parse_piece(block, letter)
    except InvalidPieceError as error:
        raise InputError(str(error)) from error


def parse_pieces(text: str) -> list[Piece]:
    """Parse the text of an input file into lettered pieces."""
    full_blocks = len(text) // BLOCK_SIZE
    pieces = []
    for index in range(full_blocks):
        block = text[index * BLOCK_SIZE:(index + 1) * BLOCK_SIZE]
        check_block(block, last=False)
        pieces.append(_to_piece(block, chr(ord("A") + index)))
    tail = text[full_blocks * BLOCK_SIZE:]
    check_block(tail, last=True)
    if full_blocks >= MAX_PIECES:
        raise InputError(f"more than {MAX_PIECES} pieces")
    pieces.append(_to_piece(tail, chr(ord("A") + full_blocks)))
    return pieces


def read_file(path: str | os.PathLike[str]) -> list[Piece]:
    """Read and parse the pieces stored in a file."""
    with open(path, "rb") as handle:
        data = handle.read()
    return parse_pieces(data.decode("latin-1"))