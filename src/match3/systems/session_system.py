from __future__ import annotations

import logging

from esper import World

from match3.components.game_state import GameOutcome
from match3.constants import (
    PENDING_REMOVAL_SECONDS,
    RESHUFFLE_ATTEMPTS,
    SETTLE_GRACE_SECONDS,
)
from match3.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_RESTART_REQUEST,
    EVENT_SESSION_RESTARTED,
    EVENT_TICK,
    EVENT_TILE_CLICK,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_SELECTED,
)
from match3.systems.board import BoardSystem, SwapOutcome
from match3.systems.board_ops import is_adjacent
from match3.systems.state_utils import (
    get_or_create_game_state,
    get_or_create_pending_removal,
    get_or_create_score,
    get_or_create_selection,
    get_or_create_turn_state,
)

logger = logging.getLogger(__name__)

# Arcade reports the right mouse button as 4.
RIGHT_MOUSE_BUTTON = 4


class SessionSystem:
    """Player-facing turn flow: selection, swap attempts, periodic settling, win/loss."""

    def __init__(self, world: World, event_bus: EventBus, board_system: BoardSystem):
        self.world = world
        self.event_bus = event_bus
        self.board_system = board_system
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_RESTART_REQUEST, self.on_restart_request)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        self.click(row, col)

    def on_tick(self, sender, **kwargs):
        self.tick(kwargs.get('dt', 0.0))

    def on_restart_request(self, sender, **kwargs):
        self.restart()

    def on_mouse_press(self, sender, **kwargs):
        if kwargs.get('button') != RIGHT_MOUSE_BUTTON:
            return
        self._clear_selection(reason='right_click')

    def click(self, row: int, col: int) -> None:
        """Handle one tile click; out-of-bounds clicks and clicks after game over are ignored."""
        if get_or_create_game_state(self.world).game_over:
            return
        board = self.board_system
        if not board.contains((row, col)):
            return
        selection = get_or_create_selection(self.world)
        pos = (row, col)
        if selection.cell is None:
            self._select(pos)
        elif selection.cell == pos:
            self._clear_selection(reason='toggle')
        elif is_adjacent(selection.cell, pos):
            src = selection.cell
            self._clear_selection(reason='swap')
            outcome = board.attempt_swap(src, pos)
            if outcome is SwapOutcome.ACCEPTED:
                self._settle()
        else:
            self._select(pos)

    def tick(self, dt: float) -> None:
        """Advance timers; hide the last match after its display interval and re-settle after the grace period."""
        turn = get_or_create_turn_state(self.world)
        pending = get_or_create_pending_removal(self.world)
        turn.settle_elapsed += max(dt, 0.0)
        if pending.positions and turn.settle_elapsed > PENDING_REMOVAL_SECONDS:
            pending.positions.clear()
            turn.settle_elapsed = 0.0
        if get_or_create_game_state(self.world).game_over:
            return
        if not pending.positions and turn.settle_elapsed > SETTLE_GRACE_SECONDS:
            turn.settle_elapsed = 0.0
            self._settle()

    def restart(self) -> None:
        state = get_or_create_game_state(self.world)
        state.game_over = False
        state.outcome = None
        get_or_create_selection(self.world).cell = None
        get_or_create_turn_state(self.world).settle_elapsed = 0.0
        self.board_system.initialize()
        logger.info("Session restarted")
        self.event_bus.emit(EVENT_SESSION_RESTARTED)

    def _settle(self) -> None:
        if self.board_system.settle():
            get_or_create_turn_state(self.world).settle_elapsed = 0.0
        self._after_settle()

    def _after_settle(self) -> None:
        score = get_or_create_score(self.world)
        if score.value >= score.target:
            self.board_system.end_game(GameOutcome.WON)
            return
        if not self.board_system.has_legal_move():
            self.board_system.reshuffle_or_end(RESHUFFLE_ATTEMPTS)

    def _select(self, pos) -> None:
        get_or_create_selection(self.world).cell = pos
        self.event_bus.emit(EVENT_TILE_SELECTED, row=pos[0], col=pos[1])

    def _clear_selection(self, *, reason: str) -> None:
        selection = get_or_create_selection(self.world)
        prev = selection.cell
        if prev is None:
            return
        selection.cell = None
        self.event_bus.emit(EVENT_TILE_DESELECTED, reason=reason, prev_row=prev[0], prev_col=prev[1])
