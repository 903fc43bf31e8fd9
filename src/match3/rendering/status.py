from typing import List

from esper import World

from match3.components.game_state import GameOutcome
from match3.systems.state_utils import get_or_create_game_state, get_or_create_score


def status_lines(world: World) -> List[str]:
    """Score line plus goal or end banner; shared by the window and the terminal driver."""
    score = get_or_create_score(world)
    lines = [f"Score: {score.value} / {score.target}"]
    state = get_or_create_game_state(world)
    if state.game_over:
        lines.append("Level cleared!" if state.outcome is GameOutcome.WON else "Game over")
        lines.append("Press R to restart")
    else:
        lines.append(f"Goal: reach {score.target} points")
    return lines
