import random

from match3.components.game_state import GameOutcome
from match3.events.bus import EventBus, EVENT_TILE_SWAP_INVALID, EVENT_TILE_SWAP_VALID
from match3.systems.board import BoardSystem, SwapOutcome
from match3.world import create_world

from tests.helpers import cells_from_rows, set_board_cells, stable_filler


def make_board(seed=1):
    bus = EventBus(); world = create_world(rng=random.Random(seed))
    board = BoardSystem(world, bus)
    cells = stable_filler()
    cells[0] = cells_from_rows(["RRGRBYPR"])[0]
    set_board_cells(world, cells)
    return bus, world, board


def test_non_adjacent_pairs_are_rejected_without_mutation():
    bus, world, board = make_board()
    before = board.grid_snapshot()
    for a, b in [
        ((0, 0), (0, 0)),   # same cell
        ((0, 0), (1, 1)),   # diagonal
        ((0, 0), (0, 2)),   # two apart
        ((3, 3), (5, 3)),
        ((0, 0), (-1, 0)),  # out of bounds
        ((7, 7), (7, 8)),
    ]:
        assert board.attempt_swap(a, b) is SwapOutcome.REJECTED_NOT_ADJACENT, (a, b)
    assert board.grid_snapshot() == before


def test_swap_without_match_is_reverted_exactly():
    bus, world, board = make_board()
    invalid = []
    bus.subscribe(EVENT_TILE_SWAP_INVALID, lambda s, **k: invalid.append((k['src'], k['dst'])))
    before = board.grid_snapshot()
    assert board.attempt_swap((4, 4), (4, 5)) is SwapOutcome.REVERTED
    assert board.grid_snapshot() == before
    assert board.attempt_swap((4, 4), (4, 5)) is SwapOutcome.REVERTED
    assert board.grid_snapshot() == before
    assert invalid == [((4, 4), (4, 5)), ((4, 4), (4, 5))]
    assert board.score == 0


def test_swap_with_match_is_kept_and_not_yet_scored():
    bus, world, board = make_board()
    valid = []
    bus.subscribe(EVENT_TILE_SWAP_VALID, lambda s, **k: valid.append((k['src'], k['dst'])))
    assert board.attempt_swap((0, 2), (0, 3)) is SwapOutcome.ACCEPTED
    grid = board.grid_snapshot()
    assert grid[0][:4] == tuple(cells_from_rows(["RRRG"])[0])
    assert valid == [((0, 2), (0, 3))]
    assert board.score == 0


def test_vertical_neighbours_are_adjacent():
    bus, world, board = make_board()
    before = board.grid_snapshot()
    assert board.attempt_swap((2, 2), (3, 2)) is SwapOutcome.REVERTED
    assert board.grid_snapshot() == before


def test_swaps_rejected_after_game_over():
    bus, world, board = make_board()
    board.end_game(GameOutcome.WON)
    before = board.grid_snapshot()
    assert board.attempt_swap((0, 2), (0, 3)) is SwapOutcome.REJECTED_GAME_OVER
    assert board.grid_snapshot() == before
