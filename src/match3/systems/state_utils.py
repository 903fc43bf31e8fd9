from typing import Type, TypeVar

from esper import World

from match3.components.board import Board
from match3.components.game_state import GameState
from match3.components.pending_removal import PendingRemoval
from match3.components.score import Score
from match3.components.selection import Selection
from match3.components.turn_state import TurnState

T = TypeVar("T")


def _get_or_create(world: World, component_type: Type[T]) -> T:
    for _, component in world.get_component(component_type):
        return component
    component = component_type()
    world.create_entity(component)
    return component


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def get_or_create_game_state(world: World) -> GameState:
    """Return the shared GameState component, creating it if absent."""
    return _get_or_create(world, GameState)


def get_or_create_score(world: World) -> Score:
    return _get_or_create(world, Score)


def get_or_create_selection(world: World) -> Selection:
    return _get_or_create(world, Selection)


def get_or_create_pending_removal(world: World) -> PendingRemoval:
    return _get_or_create(world, PendingRemoval)


def get_or_create_turn_state(world: World) -> TurnState:
    return _get_or_create(world, TurnState)
