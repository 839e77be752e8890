"""The square board on which pieces are placed."""

from __future__ import annotations

from .pieces import Piece

EMPTY = "."


class Grid:
    """A square board of cells, each empty or holding a piece letter."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("grid size cannot be negative")
        self.size = size
        self.rows = [[EMPTY] * size for _ in range(size)]

    def _origin(self, position: int) -> tuple[int, int]:
        if not 0 <= position < self.size * self.size:
            raise ValueError(f"position {position} is outside the grid")
        y, x = divmod(position, self.size)
        return x, y

    def fits(self, piece: Piece, position: int) -> bool:
        """Tell whether the piece fits with its origin at the position."""
        x, y = self._origin(position)
        return all(
            x + dx < self.size
            and y + dy < self.size
            and self.rows[y + dy][x + dx] == EMPTY
            for dx, dy in piece.cells
        )

    def place(self, piece: Piece, position: int) -> None:
        """Draw the piece's letter on its cells."""
        x, y = self._origin(position)
        for dx, dy in piece.cells:
            self.rows[y + dy][x + dx] = piece.letter

    def remove(self, piece: Piece, position: int) -> None:
        """Clear the cells the piece covers."""
        x, y = self._origin(position)
        for dx, dy in piece.cells:
            self.rows[y + dy][x + dx] = EMPTY

    def render(self) -> str:
        """Return the grid as text, one newline-terminated line per row."""
        return "".join("".join(row) + "\n" for row in self.rows)


def start_size(piece_count: int) -> int:
    """Smallest side, at least 2, whose square can hold all the cells."""
    size = 2
    while piece_count * 4 > size * size:
        size += 1
    return size