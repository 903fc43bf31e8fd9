from __future__ import annotations

import random
from typing import Iterable, List, Sequence

from esper import World

from match3.components.board import Board
from match3.components.tile import COLORS, Cell

LETTER_TO_CELL = {
    '.': Cell.EMPTY,
    'R': Cell.RED,
    'G': Cell.GREEN,
    'B': Cell.BLUE,
    'Y': Cell.YELLOW,
    'P': Cell.PURPLE,
}


class ScriptedRandom:
    """Random source whose choice() returns scripted picks first, then seeded values."""

    def __init__(self, picks: Iterable[Cell] = (), seed: int = 0):
        self._picks = list(picks)
        self._fallback = random.Random(seed)

    def choice(self, seq):
        if self._picks:
            return self._picks.pop(0)
        return self._fallback.choice(seq)


def cells_from_rows(rows: Sequence[str]) -> List[List[Cell]]:
    """Build a grid from strings such as "RRGBY"; '.' is an empty cell."""
    return [[LETTER_TO_CELL[ch] for ch in row] for row in rows]


def stable_filler(rows: int = 8, cols: int = 8) -> List[List[Cell]]:
    """Match-free grid whose rows and columns never repeat a color twice in a row."""
    return [[COLORS[(c + 2 * r) % len(COLORS)] for c in range(cols)] for r in range(rows)]


def deadlock_cells(rows: int = 8, cols: int = 8) -> List[List[Cell]]:
    """Diagonal stripes of three colors: no runs and no swap that creates one."""
    pattern = [Cell.RED, Cell.GREEN, Cell.BLUE]
    return [[pattern[(r + c) % 3] for c in range(cols)] for r in range(rows)]


def set_board_cells(world: World, cells: List[List[Cell]]) -> None:
    for _, board in world.get_component(Board):
        board.cells = [list(row) for row in cells]
        return
    raise AssertionError('Board component missing')


def board_cells(world: World) -> List[List[Cell]]:
    for _, board in world.get_component(Board):
        return board.cells
    raise AssertionError('Board component missing')
