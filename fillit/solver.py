"""Fitting pieces into the smallest square and the command that runs it."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .grid import Grid, start_size
from .pieces import Piece
from .reader import InputError, read_file

USAGE = "usage:\tfillit source_file\n"
ERROR = "error\n"


def _fill(grid: Grid, pieces: Sequence[Piece], index: int) -> bool:
    if index == len(pieces):
        return True
    piece = pieces[index]
    for position in range(grid.size * grid.size):
        if grid.fits(piece, position):
            grid.place(piece, position)
            if _fill(grid, pieces, index + 1):
                return True
            grid.remove(piece, position)
    return False


def backtrack(grid: Grid, pieces: Sequence[Piece]) -> bool:
    """Place all pieces in order on the grid; tell whether it worked."""
    return _fill(grid, pieces, 0)


def solve(pieces: Iterable[Piece]) -> Grid:
    """Return the smallest square grid holding every piece."""
    pieces = list(pieces)
    size = start_size(len(pieces))
    while True:
        grid = Grid(size)
        if backtrack(grid, pieces):
            return grid
        size += 1


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the file named on the command line and print the grid."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stdout.write(USAGE)
        return 0
    try:
        pieces = read_file(args[0])
    except (OSError, InputError):
        sys.stdout.write(ERROR)
        return 0
    sys.stdout.write(solve(pieces).render())
    return 0


if __name__ == "__main__":
    sys.exit(main())