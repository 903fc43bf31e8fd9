from dataclasses import dataclass
from typing import Tuple

from match3.components.tile import Cell

@dataclass(slots=True)
class FadeAnimation:
    """Matched tile dimming out; keeps the cleared color so it can still be drawn."""
    pos: Tuple[int, int]
    cell: Cell
    alpha: float = 1.0
