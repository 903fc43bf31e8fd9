from typing import Dict, Tuple

from match3.components.tile import Cell

RGB = Tuple[int, int, int]

CELL_COLORS: Dict[Cell, RGB] = {
    Cell.RED:    (255, 80, 80),
    Cell.GREEN:  (80, 255, 80),
    Cell.BLUE:   (80, 80, 255),
    Cell.YELLOW: (255, 255, 80),
    Cell.PURPLE: (255, 80, 255),
    Cell.EMPTY:  (200, 200, 200),
}
BORDER_COLOR: RGB = (150, 150, 150)
SELECTED_BORDER_COLOR: RGB = (255, 255, 255)


def scale_color(color: RGB, factor: float) -> RGB:
    """Brighten (factor > 1) or dim (factor < 1) a color, clamped to 0..255."""
    return tuple(max(0, min(255, int(channel * factor))) for channel in color)
