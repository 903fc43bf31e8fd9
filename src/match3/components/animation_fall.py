from dataclasses import dataclass
from typing import Tuple

from match3.components.tile import Cell

@dataclass(slots=True)
class FallAnimation:
    src: Tuple[int,int]
    dst: Tuple[int,int]
    cell: Cell
    linear: float = 0.0  # 0..1
