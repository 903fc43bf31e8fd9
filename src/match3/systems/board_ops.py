from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from match3.components.tile import COLORS, Cell
from match3.systems.match import Grid, Position, find_matches


@dataclass(slots=True)
class GravityMove:
    source: Position
    target: Position
    cell: Cell

    @property
    def distance(self) -> int:
        """Rows fallen; presentation uses it to size the fall animation."""
        return self.target[0] - self.source[0]


def grid_dimensions(cells: Sequence[Sequence[Cell]]) -> Tuple[int, int]:
    rows = len(cells)
    return rows, (len(cells[0]) if rows else 0)


def copy_cells(cells: Sequence[Sequence[Cell]]) -> Grid:
    return [list(row) for row in cells]


def in_bounds(cells: Sequence[Sequence[Cell]], pos: Position) -> bool:
    rows, cols = grid_dimensions(cells)
    row, col = pos
    return 0 <= row < rows and 0 <= col < cols


def is_adjacent(a: Position, b: Position) -> bool:
    ar, ac = a
    br, bc = b
    return (abs(ar - br) == 1 and ac == bc) or (abs(ac - bc) == 1 and ar == br)


def swap_cells(cells: Grid, a: Position, b: Position) -> None:
    (ar, ac), (br, bc) = a, b
    cells[ar][ac], cells[br][bc] = cells[br][bc], cells[ar][ac]


def collapse(cells: Grid) -> List[GravityMove]:
    """Drop tiles to the bottom of each column in place and report every tile that moved.

    A write pointer walks up from the bottom row; each non-empty tile found above
    it is written there, so relative order within the column is preserved.
    """
    rows, cols = grid_dimensions(cells)
    moves: List[GravityMove] = []
    for col in range(cols):
        write_row = rows - 1
        for read_row in range(rows - 1, -1, -1):
            cell = cells[read_row][col]
            if cell.is_empty:
                continue
            if read_row != write_row:
                cells[write_row][col] = cell
                cells[read_row][col] = Cell.EMPTY
                moves.append(GravityMove(source=(read_row, col), target=(write_row, col), cell=cell))
            if write_row > 0:
                write_row -= 1
    return moves


def fill_empty(cells: Grid, rng: random.Random) -> List[Position]:
    """Replace every empty cell with a uniformly random color; new runs are allowed."""
    spawned: List[Position] = []
    for r, row in enumerate(cells):
        for c, cell in enumerate(row):
            if cell.is_empty:
                row[c] = rng.choice(COLORS)
                spawned.append((r, c))
    return spawned


def random_cells(rows: int, cols: int, rng: random.Random) -> Grid:
    return [[rng.choice(COLORS) for _ in range(cols)] for _ in range(rows)]


def generate_match_free(rows: int, cols: int, rng: random.Random) -> Grid:
    """Regenerate the whole grid until it contains no run."""
    cells = random_cells(rows, cols, rng)
    while find_matches(cells):
        cells = random_cells(rows, cols, rng)
    return cells


def swap_creates_match(cells: Sequence[Sequence[Cell]], a: Position, b: Position) -> bool:
    scratch = copy_cells(cells)
    swap_cells(scratch, a, b)
    return bool(find_matches(scratch))


def iter_valid_swaps(cells: Sequence[Sequence[Cell]]) -> Iterator[Tuple[Position, Position]]:
    """Yield adjacent swaps that produce a match; each pair is tried once (right and down)."""
    rows, cols = grid_dimensions(cells)
    for row in range(rows):
        for col in range(cols):
            pos = (row, col)
            if col + 1 < cols and swap_creates_match(cells, pos, (row, col + 1)):
                yield pos, (row, col + 1)
            if row + 1 < rows and swap_creates_match(cells, pos, (row + 1, col)):
                yield pos, (row + 1, col)


def find_valid_swaps(cells: Sequence[Sequence[Cell]]) -> List[Tuple[Position, Position]]:
    return list(iter_valid_swaps(cells))


def has_legal_move(cells: Sequence[Sequence[Cell]]) -> bool:
    return next(iter_valid_swaps(cells), None) is not None
