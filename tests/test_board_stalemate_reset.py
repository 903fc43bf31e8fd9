import random

from match3.components.game_state import GameOutcome
from match3.events.bus import EventBus, EVENT_BOARD_RESHUFFLED, EVENT_GAME_OVER
from match3.systems import board as board_module
from match3.systems.board import BoardSystem, ReshuffleResult
from match3.systems.board_ops import (
    copy_cells,
    find_valid_swaps,
    generate_match_free,
    has_legal_move,
    is_adjacent,
    swap_cells,
)
from match3.systems.match import find_matches
from match3.systems.state_utils import get_or_create_game_state, get_or_create_pending_removal
from match3.world import create_world

from tests.helpers import board_cells, deadlock_cells, set_board_cells, stable_filler


def brute_force_has_move(cells) -> bool:
    rows, cols = len(cells), len(cells[0])
    positions = [(r, c) for r in range(rows) for c in range(cols)]
    for a in positions:
        for b in positions:
            if a < b and is_adjacent(a, b):
                scratch = copy_cells(cells)
                swap_cells(scratch, a, b)
                if find_matches(scratch):
                    return True
    return False


def test_stripe_pattern_has_no_legal_move():
    cells = deadlock_cells()
    assert not find_matches(cells), "Setup should not contain initial matches"
    assert not has_legal_move(cells)
    assert find_valid_swaps(cells) == []


def test_legal_move_search_agrees_with_brute_force():
    rng = random.Random(99)
    for _ in range(10):
        cells = generate_match_free(5, 5, rng)
        assert has_legal_move(cells) == brute_force_has_move(cells)
    assert has_legal_move(stable_filler()) == brute_force_has_move(stable_filler())


def test_legal_move_search_leaves_grid_untouched():
    cells = stable_filler()
    before = copy_cells(cells)
    find_valid_swaps(cells)
    assert cells == before


def test_deadlocked_board_is_reshuffled():
    bus = EventBus(); world = create_world(rng=random.Random(1234))
    board = BoardSystem(world, bus)
    set_board_cells(world, deadlock_cells())
    reshuffled = []
    bus.subscribe(EVENT_BOARD_RESHUFFLED, lambda sender, **payload: reshuffled.append(payload))

    assert board.reshuffle_or_end(5) is ReshuffleResult.RESHUFFLED
    assert reshuffled and 1 <= reshuffled[-1]["attempts"] <= 5
    cells = board_cells(world)
    assert not find_matches(cells), "New board should start without matches"
    assert has_legal_move(cells), "New board should provide at least one valid move"
    assert not get_or_create_game_state(world).game_over


def test_reshuffle_gives_up_after_attempts(monkeypatch):
    bus = EventBus(); world = create_world(rng=random.Random(5))
    board = BoardSystem(world, bus)
    set_board_cells(world, deadlock_cells())
    calls = []

    def always_deadlocked(rows, cols, rng):
        calls.append((rows, cols))
        return deadlock_cells(rows, cols)

    monkeypatch.setattr(board_module, "generate_match_free", always_deadlocked)
    ended = []
    bus.subscribe(EVENT_GAME_OVER, lambda sender, **payload: ended.append(payload))

    assert board.reshuffle_or_end(5) is ReshuffleResult.ENDED
    assert len(calls) == 5
    state = get_or_create_game_state(world)
    assert state.game_over
    assert state.outcome is GameOutcome.LOST
    assert ended == [{"outcome": GameOutcome.LOST, "score": 0}]


def test_zero_attempts_ends_immediately():
    bus = EventBus(); world = create_world(rng=random.Random(5))
    board = BoardSystem(world, bus)
    set_board_cells(world, deadlock_cells())
    before = board.grid_snapshot()
    assert board.reshuffle_or_end(0) is ReshuffleResult.ENDED
    assert board.grid_snapshot() == before
    assert get_or_create_game_state(world).outcome is GameOutcome.LOST


def test_end_game_only_fires_once():
    bus = EventBus(); world = create_world(rng=random.Random(5))
    board = BoardSystem(world, bus)
    ended = []
    bus.subscribe(EVENT_GAME_OVER, lambda sender, **payload: ended.append(payload))
    board.end_game(GameOutcome.WON)
    board.end_game(GameOutcome.LOST)
    assert len(ended) == 1
    assert get_or_create_game_state(world).outcome is GameOutcome.WON


def test_reshuffle_drops_highlight_from_previous_board():
    bus = EventBus(); world = create_world(rng=random.Random(1234))
    board = BoardSystem(world, bus)
    set_board_cells(world, deadlock_cells())
    pending = get_or_create_pending_removal(world)
    pending.positions = {(0, 0), (0, 1), (0, 2)}

    assert board.reshuffle_or_end(5) is ReshuffleResult.RESHUFFLED
    assert pending.positions == set()
