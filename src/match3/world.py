import random

from esper import World

from match3.components.game_state import GameState
from match3.components.pending_removal import PendingRemoval
from match3.components.score import Score
from match3.components.selection import Selection
from match3.components.turn_state import TurnState
from match3.constants import TARGET_SCORE


def create_world(
    *,
    target_score: int = TARGET_SCORE,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding the session singletons; the board entity is added by BoardSystem."""
    world = World()
    setattr(world, "random", rng or random.Random())

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState())
    world.add_component(state_entity, Score(value=0, target=target_score))
    world.add_component(state_entity, Selection())
    world.add_component(state_entity, PendingRemoval())
    world.add_component(state_entity, TurnState())
    return world
