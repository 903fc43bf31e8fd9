from __future__ import annotations

import logging
import random
from enum import Enum, auto
from typing import List, Set, Tuple

from esper import World

from match3.components.board import Board
from match3.components.game_state import GameOutcome
from match3.components.tile import Cell
from match3.constants import (
    GRID_COLS,
    GRID_ROWS,
    MAX_SETTLE_PASSES,
    RESHUFFLE_ATTEMPTS,
    SCORE_FIVE_PLUS,
    SCORE_FOUR,
    SCORE_THREE,
)
from match3.events.bus import (
    EventBus,
    EVENT_BOARD_RESET,
    EVENT_BOARD_RESHUFFLED,
    EVENT_CASCADE_COMPLETE,
    EVENT_CASCADE_STEP,
    EVENT_GAME_OVER,
    EVENT_GRAVITY_APPLIED,
    EVENT_MATCH_CLEARED,
    EVENT_MATCH_FOUND,
    EVENT_REFILL_COMPLETED,
    EVENT_SCORE_CHANGED,
    EVENT_TILE_SWAP_INVALID,
    EVENT_TILE_SWAP_VALID,
)
from match3.systems.board_ops import (
    collapse,
    fill_empty,
    find_valid_swaps,
    generate_match_free,
    has_legal_move,
    in_bounds,
    is_adjacent,
    swap_cells,
)
from match3.systems.match import Position, find_matches, find_runs
from match3.systems.state_utils import (
    get_or_create_game_state,
    get_or_create_pending_removal,
    get_or_create_score,
)

logger = logging.getLogger(__name__)


class SwapOutcome(Enum):
    ACCEPTED = auto()
    REVERTED = auto()
    REJECTED_NOT_ADJACENT = auto()
    REJECTED_GAME_OVER = auto()


class ReshuffleResult(Enum):
    RESHUFFLED = auto()
    ENDED = auto()


class SettleLimitExceeded(RuntimeError):
    """A cascade kept producing matches past the configured pass limit."""


def score_for_match(match_count: int) -> int:
    """Points for one settle pass, based on every cell cleared in that pass combined."""
    if match_count >= 5:
        return SCORE_FIVE_PLUS
    if match_count == 4:
        return SCORE_FOUR
    if match_count >= 3:
        return SCORE_THREE
    return 0


class BoardSystem:
    """Owns the grid and the score; swaps, cascades, deadlock handling."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        rows: int = GRID_ROWS,
        cols: int = GRID_COLS,
        *,
        rng: random.Random | None = None,
        max_settle_passes: int = MAX_SETTLE_PASSES,
    ):
        self.world = world
        self.event_bus = event_bus
        candidate_rng = rng or getattr(world, "random", None)
        self.rng = candidate_rng if candidate_rng is not None else random.Random()
        self.max_settle_passes = max_settle_passes
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, Board(rows=rows, cols=cols))
        self.initialize()

    def _board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def initialize(self) -> None:
        """Fresh match-free grid and zero score."""
        board = self._board()
        board.cells = generate_match_free(board.rows, board.cols, self.rng)
        get_or_create_score(self.world).value = 0
        get_or_create_pending_removal(self.world).positions.clear()
        logger.debug("Board initialized (%dx%d)", board.rows, board.cols)
        self.event_bus.emit(EVENT_BOARD_RESET, reason="initialize")

    def grid_snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self._board().cells)

    def contains(self, pos: Position) -> bool:
        return in_bounds(self._board().cells, pos)

    @property
    def score(self) -> int:
        return get_or_create_score(self.world).value

    def attempt_swap(self, a: Position, b: Position) -> SwapOutcome:
        """Swap two adjacent tiles, keeping the swap only if it forms a match.

        The cascade is not resolved here; callers follow an ACCEPTED swap with settle().
        """
        if get_or_create_game_state(self.world).game_over:
            return SwapOutcome.REJECTED_GAME_OVER
        cells = self._board().cells
        if not (in_bounds(cells, a) and in_bounds(cells, b)) or not is_adjacent(a, b):
            return SwapOutcome.REJECTED_NOT_ADJACENT
        swap_cells(cells, a, b)
        if not find_matches(cells):
            swap_cells(cells, a, b)
            logger.debug("Swap %s <-> %s made no match; reverted", a, b)
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=a, dst=b)
            return SwapOutcome.REVERTED
        self.event_bus.emit(EVENT_TILE_SWAP_VALID, src=a, dst=b)
        return SwapOutcome.ACCEPTED

    def settle(self) -> int:
        """Run elimination passes until the board is stable; return the number of passes."""
        board = self._board()
        passes = 0
        while True:
            matches = find_matches(board.cells)
            if not matches:
                break
            if passes >= self.max_settle_passes:
                raise SettleLimitExceeded(
                    f"Board still matching after {passes} settle passes"
                )
            passes += 1
            self._eliminate(board, matches, depth=passes)
        if passes:
            logger.debug("Settled after %d pass(es); score=%d", passes, self.score)
            self.event_bus.emit(EVENT_CASCADE_COMPLETE, depth=passes)
        return passes

    def _eliminate(self, board: Board, matches: Set[Position], *, depth: int) -> None:
        positions = sorted(matches)
        self.event_bus.emit(
            EVENT_MATCH_FOUND,
            positions=positions,
            size=len(positions),
            runs=find_runs(board.cells),
        )
        self.event_bus.emit(EVENT_CASCADE_STEP, depth=depth, positions=positions)
        self._award(len(positions))
        get_or_create_pending_removal(self.world).positions = set(positions)

        cleared: List[Tuple[Position, Cell]] = []
        for row, col in positions:
            cleared.append(((row, col), board.cells[row][col]))
            board.cells[row][col] = Cell.EMPTY
        self.event_bus.emit(EVENT_MATCH_CLEARED, positions=positions, cells=cleared)

        moves = collapse(board.cells)
        self.event_bus.emit(EVENT_GRAVITY_APPLIED, moves=moves)

        new_tiles = fill_empty(board.cells, self.rng)
        self.event_bus.emit(EVENT_REFILL_COMPLETED, new_tiles=new_tiles)

    def _award(self, match_count: int) -> None:
        score = get_or_create_score(self.world)
        delta = score_for_match(match_count)
        if not delta:
            return
        score.value += delta
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=score.value, delta=delta, target=score.target)

    def has_legal_move(self) -> bool:
        return has_legal_move(self._board().cells)

    def find_valid_swaps(self) -> List[Tuple[Position, Position]]:
        return find_valid_swaps(self._board().cells)

    def reshuffle_or_end(self, max_attempts: int = RESHUFFLE_ATTEMPTS) -> ReshuffleResult:
        """Regenerate a deadlocked board; end the game if no attempt yields a legal move."""
        board = self._board()
        for attempt in range(1, max_attempts + 1):
            board.cells = generate_match_free(board.rows, board.cols, self.rng)
            get_or_create_pending_removal(self.world).positions.clear()
            if has_legal_move(board.cells):
                logger.info("No legal moves; board reshuffled (attempt %d)", attempt)
                self.event_bus.emit(EVENT_BOARD_RESHUFFLED, attempts=attempt)
                return ReshuffleResult.RESHUFFLED
        logger.info("No legal moves after %d reshuffle attempt(s)", max_attempts)
        self.end_game(GameOutcome.LOST)
        return ReshuffleResult.ENDED

    def end_game(self, outcome: GameOutcome) -> None:
        state = get_or_create_game_state(self.world)
        if state.game_over:
            return
        state.game_over = True
        state.outcome = outcome
        logger.info("Game over: %s (score=%d)", outcome.name, self.score)
        self.event_bus.emit(EVENT_GAME_OVER, outcome=outcome, score=self.score)
