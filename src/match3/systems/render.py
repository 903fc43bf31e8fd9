from esper import World

from match3.rendering.board_renderer import BoardRenderer
from match3.rendering.status import status_lines
from match3.ui.layout import compute_board_geometry

TITLE = "Match 3"
HELP_LINE = "Click two adjacent tiles to swap them"

class RenderSystem:
    def __init__(self, world: World, window):
        self.world = world
        self.window = window
        self.use_easing = True
        self._board_renderer = BoardRenderer(self)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        try:
            arcade.get_window()
        except Exception:
            return
        width, height = self.window.width, self.window.height
        tile_size, start_x, board_top = compute_board_geometry(width, height)
        self._board_renderer.render(arcade, tile_size, start_x, board_top)

        arcade.draw_text(TITLE, width / 2, height - 30, arcade.color.WHITE, 20, anchor_x="center")
        text_y = height - 55
        for line in status_lines(self.world):
            arcade.draw_text(line, width / 2, text_y, arcade.color.WHITE, 12, anchor_x="center")
            text_y -= 16
        arcade.draw_text(HELP_LINE, width / 2, 12, arcade.color.LIGHT_GRAY, 10, anchor_x="center")
