"""Match detection over a grid value.

Both functions are pure: they read the cells they are given and never touch
world state, so they are safe on scratch copies and on half-resolved boards.
"""
from __future__ import annotations

from typing import List, Sequence, Set, Tuple

from match3.components.tile import Cell

Position = Tuple[int, int]
Grid = List[List[Cell]]


def _line_runs(line: Sequence[Tuple[Position, Cell]]) -> List[List[Position]]:
    runs: List[List[Position]] = []
    run: List[Position] = []
    last_cell = None
    for pos, cell in line:
        if not cell.is_empty and cell == last_cell:
            run.append(pos)
            continue
        if len(run) >= 3:
            runs.append(run)
        # Empty cells break runs and never start one.
        run = [] if cell.is_empty else [pos]
        last_cell = None if cell.is_empty else cell
    if len(run) >= 3:
        runs.append(run)
    return runs


def find_runs(cells: Sequence[Sequence[Cell]]) -> List[List[Position]]:
    """Return every maximal horizontal or vertical run of three or more equal colors."""
    rows = len(cells)
    cols = len(cells[0]) if rows else 0
    runs: List[List[Position]] = []
    for r in range(rows):
        runs.extend(_line_runs([((r, c), cells[r][c]) for c in range(cols)]))
    for c in range(cols):
        runs.extend(_line_runs([((r, c), cells[r][c]) for r in range(rows)]))
    return runs


def find_matches(cells: Sequence[Sequence[Cell]]) -> Set[Position]:
    """Return the set of cells that belong to any run; crossing runs share cells once."""
    return {pos for run in find_runs(cells) for pos in run}
