# fillit

Fits a set of tetrominoes into the smallest square that can hold them all,
and prints the result with each piece labelled by a letter.

## Installation

```
pip install .
```

## Usage

```
fillit pieces.txt
```

The input file holds between 1 and 26 pieces. Each piece is four lines of
four characters, where `#` marks a block and `.` marks an empty cell. Every
line ends with a newline, and a single blank line separates one piece from
the next; there is no blank line after the last piece. Each piece must be
one of the 19 fixed tetromino shapes.

Example input:

```
#...
#...
#...
#...

....
.##.
.##.
....
```

Output:

```
ABB.
ABB.
A...
A...
```

The pieces are labelled `A`, `B`, `C` and so on, in the order they appear
in the file. Pieces are placed in that order, each at the first free
position in reading order, and the square grows by one until every piece
fits. Empty cells are printed as `.`.

When the file cannot be read or its contents are malformed, the program
prints `error`. When it is run without exactly one argument it prints a
usage line. In every case it exits with status 0.

## Library use

```python
from fillit.reader import parse_pieces
from fillit.solver import solve

with open("pieces.txt") as handle:
    pieces = parse_pieces(handle.read())
grid = solve(pieces)
print(grid.render(), end="")
```

- `fillit.reader.parse_pieces(text)` and `fillit.reader.read_file(path)`
  return a list of `fillit.pieces.Piece` objects, and raise
  `fillit.reader.InputError` when the input is not valid.
  `fillit.reader.check_block(block, last)` validates a single block.
- `fillit.pieces.parse_piece(block, letter)` builds one piece and raises
  `fillit.pieces.InvalidPieceError` for a shape that is not a tetromino;
  `normalize` and `is_tetromino` are the steps it uses.
- `fillit.grid.Grid(size)` is a square board with `fits`, `place`,
  `remove` and `render`; `fillit.grid.start_size(piece_count)` gives the
  smallest side worth trying.
- `fillit.solver.solve(pieces)` returns the filled `Grid`;
  `fillit.solver.backtrack(grid, pieces)` tries to fill a given grid and
  reports whether it succeeded.

## Helpers

The `fillit.ft` sub-package holds small, independent helpers:

- `fillit.ft.chars`: ASCII character classification and case conversion.
- `fillit.ft.numbers`: `atoi` (32-bit, C-style parsing) and `itoa`.
- `fillit.ft.output`: `putchar`, `putstr`, `putendl` and `putnbr`, writing
  to standard output or to a given stream.
- `fillit.ft.search`: length, search and comparison of NUL-terminated
  strings, returning offsets or `None`.
- `fillit.ft.transform`: copying, joining, mapping, splitting, slicing and
  trimming strings, each returning a new string.
- `fillit.ft.linkedlist`: `LinkedList`, a singly linked list of `Node`
  objects with front and back insertion, positional access, merging and
  in-place reversal.

## Tests

```
pip install .[test]
pytest
```