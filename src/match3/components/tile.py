from enum import Enum


class Cell(Enum):
    """Contents of one board cell: empty, or one of five tile colors."""
    EMPTY = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    YELLOW = 4
    PURPLE = 5

    @property
    def is_empty(self) -> bool:
        return self is Cell.EMPTY


COLORS = tuple(cell for cell in Cell if cell is not Cell.EMPTY)
