from typing import Optional, Tuple

from match3.constants import BOARD_MARGIN, GRID_COLS, GRID_ROWS, TILE_SIZE, TOP_MARGIN

def compute_board_geometry(window_width: int, window_height: int):
    """Return (tile_size, start_x, board_top) shared by rendering and input mapping.

    Row 0 is drawn at the top of the board, so rows grow downward from board_top
    while arcade's y axis grows upward.
    """
    tile_by_w = (window_width - 2 * BOARD_MARGIN) / GRID_COLS
    tile_by_h = (window_height - TOP_MARGIN - BOARD_MARGIN) / GRID_ROWS
    tile_size = int(min(tile_by_w, tile_by_h, TILE_SIZE * 2))
    if tile_size < 20:
        tile_size = 20
    total_width = GRID_COLS * tile_size
    start_x = (window_width - total_width) / 2
    board_top = window_height - TOP_MARGIN
    return tile_size, start_x, board_top


def cell_at_point(x: float, y: float, window_width: int, window_height: int) -> Optional[Tuple[int, int]]:
    tile_size, start_x, board_top = compute_board_geometry(window_width, window_height)
    if x < start_x or x >= start_x + GRID_COLS * tile_size:
        return None
    if y > board_top or y <= board_top - GRID_ROWS * tile_size:
        return None
    col = int((x - start_x) // tile_size)
    row = int((board_top - y) // tile_size)
    if 0 <= row < GRID_ROWS and 0 <= col < GRID_COLS:
        return row, col
    return None


def cell_center(row: int, col: int, window_width: int, window_height: int) -> Tuple[float, float]:
    tile_size, start_x, board_top = compute_board_geometry(window_width, window_height)
    return start_x + (col + 0.5) * tile_size, board_top - (row + 0.5) * tile_size
