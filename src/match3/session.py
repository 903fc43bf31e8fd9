"""Headless session facade.

Wires an event bus, a world and the core systems together and exposes the
small surface that drivers (arcade window, terminal loop, tests) talk to.
"""
from __future__ import annotations

import random
from typing import FrozenSet, Optional, Tuple

from match3.components.game_state import GameOutcome
from match3.components.tile import Cell
from match3.constants import TARGET_SCORE
from match3.events.bus import EventBus
from match3.systems.board import BoardSystem
from match3.systems.match import Position
from match3.systems.session_system import SessionSystem
from match3.systems.state_utils import (
    get_or_create_game_state,
    get_or_create_pending_removal,
    get_or_create_score,
    get_or_create_selection,
)
from match3.world import create_world


class Session:
    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        target_score: int = TARGET_SCORE,
        event_bus: EventBus | None = None,
    ):
        self.event_bus = event_bus or EventBus()
        self.world = create_world(target_score=target_score, rng=rng)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.session_system = SessionSystem(self.world, self.event_bus, self.board_system)

    # Commands

    def click(self, row: int, col: int) -> None:
        self.session_system.click(row, col)

    def tick(self, elapsed_seconds: float) -> None:
        self.session_system.tick(elapsed_seconds)

    def restart(self) -> None:
        self.session_system.restart()

    # Queries

    def grid_snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return self.board_system.grid_snapshot()

    def current_score(self) -> int:
        return get_or_create_score(self.world).value

    def target_score(self) -> int:
        return get_or_create_score(self.world).target

    def selected_cell(self) -> Optional[Position]:
        return get_or_create_selection(self.world).cell

    def is_game_over(self) -> bool:
        return get_or_create_game_state(self.world).game_over

    def outcome(self) -> Optional[GameOutcome]:
        return get_or_create_game_state(self.world).outcome

    def pending_removal_cells(self) -> FrozenSet[Position]:
        return frozenset(get_or_create_pending_removal(self.world).positions)

    def hint(self) -> Optional[Tuple[Position, Position]]:
        """First swap that would score, or None on a deadlocked board."""
        swaps = self.board_system.find_valid_swaps()
        return swaps[0] if swaps else None


def new_session(
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
    target_score: int = TARGET_SCORE,
    event_bus: EventBus | None = None,
) -> Session:
    """Start a session with a match-free board and zero score.

    Pass ``seed`` (or a ready ``rng``) to make every board generation and refill reproducible.
    """
    if rng is None and seed is not None:
        rng = random.Random(seed)
    return Session(rng=rng, target_score=target_score, event_bus=event_bus)
