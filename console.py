#!/usr/bin/env python
"""Console front end: read the starting square, run the tour, print the board."""

import argparse
import logging
import os
import sys

from tour import BOARD_SIZE, TourSolver, find_order_index

logger = logging.getLogger(__name__)

LOG_LEVEL = 'WARNING'

TITLE = """
╔═══════════════════════════════════╗
║         Springer Problem          ║
║     (Warnsdorff's Algorithm)      ║
╚═══════════════════════════════════╝"""

INVALID_INPUT = f'Invalid input. Please enter a number between 1 and {BOARD_SIZE}.'
NO_SOLUTION = 'No solution exists from the given starting position.'


class TColor:
    """ANSI escape codes used by the board renderer."""
    LIGHT_SQUARE = '\033[47m'  # white background
    DARK_SQUARE = '\033[100m'  # dark gray background
    NUMBER = '\033[30m'        # black text
    BORDER = '\033[33m'        # dark yellow text
    RESET = '\033[0m'
    CLEAR = '\033[2J\033[H'  # clear screen, cursor home


def parse_coordinate(text, n=BOARD_SIZE):
    """Parse a 1-based coordinate, returning None if it is not in [1, n]."""
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if 1 <= value <= n else None


def read_start(input_fn=None, output_fn=print, n=BOARD_SIZE):
    """Prompt until both coordinates are valid; returns a 0-based (row, col)."""
    input_fn = input_fn or input
    while True:
        row = parse_coordinate(input_fn(f'Enter starting row (1-{n}): '), n)
        if row is None:
            output_fn(INVALID_INPUT)
            continue

        col = parse_coordinate(input_fn(f'Enter starting column (1-{n}): '), n)
        if col is None:
            output_fn(INVALID_INPUT)
            continue

        return row - 1, col - 1


def render_board(board):
    n = len(board)
    rule = '───' * (n + 2)
    letters = '   '.join(chr(ord('A') + j) for j in range(n))

    lines = [f'{TColor.BORDER}      {letters}',
             f'   ┌──{rule}──┐']
    for i, row in enumerate(board):
        cells = []
        for j, value in enumerate(row):
            background = TColor.LIGHT_SQUARE if (i + j) % 2 == 0 else TColor.DARK_SQUARE
            cells.append(f'{background}{TColor.NUMBER} {value:>2} ')
        lines.append(f'{TColor.BORDER} {i + 1} │ ' + ''.join(cells)
                     + f'{TColor.RESET}{TColor.BORDER} │')
    lines.append(f'   └──{rule}──┘{TColor.RESET}')
    return '\n'.join(lines)


def format_position(pos):
    if pos is None:
        return 'not found'
    return f'({pos[0] + 1}, {pos[1] + 1})'


def render_legend(start, board):
    last = len(board) * len(board) - 1
    return '\n'.join([
        '\nLegend:',
        f'• Starting position: {format_position(start)}',
        "• Numbers indicate the order of knight's moves",
        '• Move 0 is the starting position',
        f'• Final position: {format_position(find_order_index(board, last))}',
    ])


def build_parser():
    parser = argparse.ArgumentParser(description="Knight's tour solver (Warnsdorff's rule)")
    parser.add_argument('--row', type=int, help=f'starting row, 1-{BOARD_SIZE}')
    parser.add_argument('--col', type=int, help=f'starting column, 1-{BOARD_SIZE}')
    parser.add_argument('--no-wait', action='store_true',
                        help='exit without waiting for Enter')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=os.environ.get('KNIGHT_TOUR_LOG_LEVEL', LOG_LEVEL),
                        format='%(levelname)s:%(name)s:%(message)s')

    print(TITLE)
    if (args.row is None) != (args.col is None):
        parser.error('--row and --col must be given together')
    if args.row is not None:
        if not (1 <= args.row <= BOARD_SIZE and 1 <= args.col <= BOARD_SIZE):
            parser.error(INVALID_INPUT)
        start = (args.row - 1, args.col - 1)
    else:
        print(f'\nPlease enter the starting position (1-{BOARD_SIZE} for both row and column):')
        start = read_start()
        print(TColor.CLEAR + TITLE)

    success, board, last_move = TourSolver().solve(start)
    logger.debug('tour from %s finished: success=%s last=%s', start, success, last_move)

    if success:
        print("\nSolution found! Here's the knight's tour:\n")
        print(render_board(board))
        print(render_legend(start, board))
    else:
        print(f'\n{NO_SOLUTION}')

    if not args.no_wait:
        input('\nPress Enter to exit...')
    return 0


if __name__ == '__main__':
    sys.exit(main())
