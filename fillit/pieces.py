"""Tetromino pieces: parsing, normalisation and shape validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

Cell = tuple[int, int]

# Every valid tetromino, as (x, y) offsets listed in reading order.
SHAPES: tuple[tuple[Cell, ...], ...] = (
    ((0, 0), (0, 1), (0, 2), (0, 3)),  # I, vertical
    ((0, 0), (1, 0), (2, 0), (3, 0)),  # I, horizontal
    ((0, 0), (1, 0), (0, 1), (1, 1)),  # O
    ((0, 0), (1, 0), (2, 0), (0, 1)),  # L, right
    ((0, 0), (0, 1), (0, 2), (1, 2)),  # L
    ((0, 0), (1, 0), (1, 1), (1, 2)),  # L, down
    ((2, 0), (0, 1), (1, 1), (2, 1)),  # L, left
    ((1, 0), (1, 1), (0, 2), (1, 2)),  # J
    ((0, 0), (0, 1), (1, 1), (2, 1)),  # J, right
    ((0, 0), (1, 0), (0, 1), (0, 2)),  # J, down
    ((0, 0), (1, 0), (2, 0), (2, 1)),  # J, left
    ((1, 0), (0, 1), (1, 1), (2, 1)),  # T
    ((0, 0), (0, 1), (1, 1), (0, 2)),  # T, right
    ((0, 0), (1, 0), (2, 0), (1, 1)),  # T, down
    ((1, 0), (0, 1), (1, 1), (1, 2)),  # T, left
    ((1, 0), (2, 0), (0, 1), (1, 1)),  # S
    ((0, 0), (0, 1), (1, 1), (1, 2)),  # S, rotated
    ((0, 0), (1, 0), (1, 1), (2, 1)),  # Z
    ((1, 0), (0, 1), (1, 1), (0, 2)),  # Z, rotated
)

_SHAPE_SET = frozenset(frozenset(shape) for shape in SHAPES)

_ROW_WIDTH = 5  # four cells plus the newline
_MAX_SHIFT = 3


class InvalidPieceError(ValueError):
    """Raised when a block does not hold a valid tetromino."""


@dataclass(frozen=True)
class Piece:
    """A normalised tetromino and the letter it is drawn with."""

    cells: tuple[Cell, ...]
    letter: str


def normalize(cells: Iterable[Cell]) -> tuple[Cell, ...]:
    """Shift the cells so that the topmost and leftmost ones touch zero."""
    cells = tuple(cells)
    # A shift never exceeds the widest offset inside a 4x4 block.
    min_x = min([_MAX_SHIFT, *(x for x, _ in cells)])
    min_y = min([_MAX_SHIFT, *(y for _, y in cells)])
    return tuple((x - min_x, y - min_y) for x, y in cells)


def is_tetromino(cells: Iterable[Cell]) -> bool:
    """Tell whether normalised cells form one of the known tetrominoes."""
    return frozenset(cells) in _SHAPE_SET


def parse_piece(block: str, letter: str) -> Piece:
    """Build a piece from the first four '#' of a block of text."""
    cells = [
        (index % _ROW_WIDTH, index // _ROW_WIDTH)
        for index, char in enumerate(block)
        if char == "#"
    ][:4]
    if len(cells) < 4:
        raise InvalidPieceError("a piece needs four '#' cells")
    normalized = normalize(cells)
    if not is_tetromino(normalized):
        raise InvalidPieceError("cells do not form a tetromino")
    return Piece(normalized, letter)