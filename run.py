#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four game
"""

import argparse
import sys
from typing import List, Optional

from connectfour.debug import debug, DebugLevel
from connectfour.interfaces.cli import SimpleCLI, parse_moves
from connectfour.utils import (DEFAULT_HEIGHT, DEFAULT_PLAYER_ONE_COLOR, DEFAULT_PLAYER_TWO_COLOR,
                               DEFAULT_WIDTH)


def positive_int(value: str) -> int:
    """argparse type for board dimensions."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer")
    if number < 1:
        raise argparse.ArgumentTypeError(f"{number} must be at least 1")
    return number


def configure_debug(args):
    """Configure debug level and log file based on args."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.configure(level=DebugLevel[args.debug_level.upper()])
    if args.log_file:
        debug.configure(log_file=args.log_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Connect Four for two players at one terminal',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py play
  python run.py play --height 8 --width 9 --p1-color red --p2-color blue
  python run.py replay --moves 0,6,1,6,2,6,3
"""
    )
    parser.add_argument('command',
        choices=['play', 'replay'],
        help='play (interactive game) or replay (play a fixed list of moves)')
    parser.add_argument('--moves',
        type=str,
        help='Comma-separated columns for the replay command')

    board_group = parser.add_argument_group('Board options')
    board_group.add_argument('--height',
        type=positive_int,
        default=DEFAULT_HEIGHT,
        help=f'Number of rows (default: {DEFAULT_HEIGHT})')
    board_group.add_argument('--width',
        type=positive_int,
        default=DEFAULT_WIDTH,
        help=f'Number of columns (default: {DEFAULT_WIDTH})')
    board_group.add_argument('--p1-color',
        default=DEFAULT_PLAYER_ONE_COLOR,
        help=f'Colour of the first player (default: {DEFAULT_PLAYER_ONE_COLOR})')
    board_group.add_argument('--p2-color',
        default=DEFAULT_PLAYER_TWO_COLOR,
        help=f'Colour of the second player (default: {DEFAULT_PLAYER_TWO_COLOR})')

    log_group = parser.add_argument_group('Logging options')
    log_group.add_argument('--debug',
        action='store_true',
        help='Enable debug mode (equivalent to --debug_level debug)')
    log_group.add_argument('--debug_level',
        choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
        default='warning',
        help='Set debug level: none (silent), error, warning, info, debug, trace (most verbose)')
    log_group.add_argument('--log_file',
        type=str,
        help='Also write log messages to this file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_debug(args)

    cli = SimpleCLI(height=args.height, width=args.width,
                    p1_color=args.p1_color, p2_color=args.p2_color)

    if args.command == 'play':
        cli.play_game()
        return 0

    if not args.moves:
        parser.error("replay needs --moves")
    try:
        moves = parse_moves(args.moves)
    except ValueError as e:
        parser.error(f"Could not parse --moves: {e}")
    cli.replay(moves)
    return 0


if __name__ == "__main__":
    sys.exit(main())
