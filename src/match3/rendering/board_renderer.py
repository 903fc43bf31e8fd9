from __future__ import annotations

from typing import TYPE_CHECKING

from match3.components.animation_fade import FadeAnimation
from match3.components.animation_fall import FallAnimation
from match3.constants import TILE_GAP
from match3.rendering.palette import (
    BORDER_COLOR,
    CELL_COLORS,
    SELECTED_BORDER_COLOR,
    scale_color,
)
from match3.systems.state_utils import (
    get_board,
    get_or_create_pending_removal,
    get_or_create_selection,
)

if TYPE_CHECKING:
    from match3.systems.render import RenderSystem


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, gap: int = TILE_GAP):
        self._rs = render_system
        self._gap = gap

    def tile_rects(self, tile_size: int, start_x: float, board_top: float):
        """Yield (row, col, cell, left, right, bottom, top) for every cell, fall offsets applied."""
        world = self._rs.world
        board = get_board(world)
        falls = {fall.dst: fall for _, fall in world.get_component(FallAnimation)}
        for row in range(board.rows):
            for col in range(board.cols):
                cell = board.cells[row][col]
                draw_row = float(row)
                fall = falls.get((row, col))
                if fall is not None:
                    p = fall.linear
                    if self._rs.use_easing:
                        p = 2 * p * p if p < 0.5 else -2 * p * p + 4 * p - 1
                    draw_row = fall.src[0] + (fall.dst[0] - fall.src[0]) * p
                left = start_x + col * tile_size
                top = board_top - draw_row * tile_size
                yield (row, col, cell, left, left + tile_size - self._gap, top - tile_size + self._gap, top)

    def render(self, arcade, tile_size: int, start_x: float, board_top: float) -> None:
        world = self._rs.world
        selected = get_or_create_selection(world).cell
        pending = get_or_create_pending_removal(world).positions
        outline = None
        for row, col, cell, left, right, bottom, top in self.tile_rects(tile_size, start_x, board_top):
            color = CELL_COLORS[cell]
            if (row, col) == selected:
                color = scale_color(color, 1.5)
                outline = (left, right, bottom, top)
            if (row, col) in pending:
                color = scale_color(color, 0.3)
            arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, color)
            arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, BORDER_COLOR, 1)
        # Fading tiles are drawn over the refilled cells they vacated.
        for _, fade in world.get_component(FadeAnimation):
            row, col = fade.pos
            left = start_x + col * tile_size
            top = board_top - row * tile_size
            r, g, b = CELL_COLORS[fade.cell]
            arcade.draw_lrbt_rectangle_filled(
                left, left + tile_size - self._gap, top - tile_size + self._gap, top,
                (r, g, b, int(255 * fade.alpha)),
            )
        if outline is not None:
            arcade.draw_lrbt_rectangle_outline(*outline, SELECTED_BORDER_COLOR, 2)
