"""Terminal driver: prints the board and reads clicks as ``row col`` lines."""
from __future__ import annotations

import argparse
import logging
from typing import Iterable, Optional, Sequence, Tuple

from match3.components.tile import Cell
from match3.constants import PENDING_REMOVAL_SECONDS, TARGET_SCORE
from match3.rendering.status import status_lines
from match3.session import Session, new_session

CELL_LETTERS = {
    Cell.EMPTY: '.',
    Cell.RED: 'R',
    Cell.GREEN: 'G',
    Cell.BLUE: 'B',
    Cell.YELLOW: 'Y',
    Cell.PURPLE: 'P',
}

HELP_TEXT = "Commands: 'row col' selects a tile (two adjacent picks swap), 'r1 c1 r2 c2' swaps directly, h = hint, r = restart, q = quit"

# Simulated seconds that pass between two prompts.
SECONDS_PER_COMMAND = PENDING_REMOVAL_SECONDS + 0.05


def format_grid(
    grid: Sequence[Sequence[Cell]],
    selected: Optional[Tuple[int, int]] = None,
    pending: Iterable[Tuple[int, int]] = (),
) -> str:
    """Render the grid as text; the selected tile is bracketed and pending removals lowercased."""
    pending = set(pending)
    cols = len(grid[0]) if grid else 0
    lines = ['    ' + ' '.join(f' {c} ' for c in range(cols))]
    for r, row in enumerate(grid):
        cells = []
        for c, cell in enumerate(row):
            letter = CELL_LETTERS[cell]
            if (r, c) in pending:
                letter = letter.lower()
            cells.append(f'[{letter}]' if (r, c) == selected else f' {letter} ')
        lines.append(f'{r:>2}  ' + ' '.join(cells))
    return '\n'.join(lines)


def parse_command(text: str):
    """Return ('quit',), ('restart',), ('hint',), ('click', [(r, c), ...]) or None when unrecognised."""
    text = text.strip().lower()
    if text in ('q', 'quit', 'exit'):
        return ('quit',)
    if text in ('r', 'restart'):
        return ('restart',)
    if text in ('h', 'hint'):
        return ('hint',)
    parts = text.replace(',', ' ').split()
    if len(parts) not in (2, 4):
        return None
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        return None
    return ('click', [(numbers[i], numbers[i + 1]) for i in range(0, len(numbers), 2)])


def run_command(session: Session, command) -> Optional[str]:
    """Apply one parsed command to the session; returns a message to show, if any."""
    kind = command[0]
    if kind == 'restart':
        session.restart()
        return 'New board.'
    if kind == 'hint':
        hint = session.hint()
        if hint is None:
            return 'No moves available.'
        (r1, c1), (r2, c2) = hint
        return f'Try swapping {r1} {c1} with {r2} {c2}.'
    positions = command[1]
    selected = session.selected_cell()
    if len(positions) == 2 and selected is not None:
        # A direct swap starts from a clean selection.
        session.click(*selected)
    for row, col in positions:
        session.click(row, col)
    return None


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description='Play match-three in the terminal')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for board generation and refills')
    parser.add_argument('--target-score', type=int, default=TARGET_SCORE, help='Score needed to clear the level')
    parser.add_argument('--log-level', default='WARNING', help='Logging level (DEBUG, INFO, ...)')
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format='%(levelname)s %(name)s: %(message)s')

    session = new_session(seed=args.seed, target_score=args.target_score)
    print(HELP_TEXT)
    while True:
        print()
        print(format_grid(session.grid_snapshot(), session.selected_cell(), session.pending_removal_cells()))
        for line in status_lines(session.world):
            print(line)
        try:
            text = input('> ')
        except EOFError:
            break
        command = parse_command(text)
        if command is None:
            print(HELP_TEXT)
            continue
        if command[0] == 'quit':
            break
        # Time passes while the player types; the highlight from the previous move expires here.
        session.tick(SECONDS_PER_COMMAND)
        message = run_command(session, command)
        if message:
            print(message)


if __name__ == '__main__':
    main()
