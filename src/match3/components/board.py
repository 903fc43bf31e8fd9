from dataclasses import dataclass, field
from typing import List

from match3.components.tile import Cell

@dataclass(slots=True)
class Board:
    """Grid of cells; row 0 is the top row and gravity pulls toward the last row."""
    rows: int
    cols: int
    cells: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self):
        if not self.cells:
            self.cells = [[Cell.EMPTY for _ in range(self.cols)] for _ in range(self.rows)]
