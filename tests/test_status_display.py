from match3 import new_session
from match3.components.game_state import GameOutcome
from match3.components.tile import COLORS, Cell
from match3.rendering.palette import CELL_COLORS, scale_color
from match3.rendering.status import status_lines


def test_status_shows_score_and_goal():
    session = new_session(seed=1, target_score=500)
    assert status_lines(session.world) == ["Score: 0 / 500", "Goal: reach 500 points"]


def test_status_distinguishes_win_from_loss():
    session = new_session(seed=1)
    session.board_system.end_game(GameOutcome.WON)
    assert status_lines(session.world)[1:] == ["Level cleared!", "Press R to restart"]

    session.restart()
    session.board_system.end_game(GameOutcome.LOST)
    assert status_lines(session.world)[1:] == ["Game over", "Press R to restart"]


def test_every_cell_has_a_distinct_color():
    assert set(CELL_COLORS) == set(Cell)
    assert len({CELL_COLORS[c] for c in COLORS}) == len(COLORS)


def test_scale_color_clamps():
    assert scale_color((200, 80, 0), 1.5) == (255, 120, 0)
    assert scale_color((255, 80, 80), 0.5) == (127, 40, 40)
