"""
Command line entry point: parse options, run the game under curses, report the score.
"""

import argparse
import curses
import logging
import sys

from tui_snake.terminal import GRID_HEIGHT, GRID_WIDTH, TICK_MS, main

logger = logging.getLogger(__name__)

MIN_GRID, MAX_GRID = 5, 120
MIN_TICK_MS, MAX_TICK_MS = 20, 1000

EXIT_OK = 0
EXIT_TERMINAL_ERROR = 1
EXIT_TOO_SMALL = 3


def bounded_int(low, high):
    """argparse type accepting ints in [low, high]."""
    def parse(text):
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"{text!r} is not a whole number")
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(
                f"{value} is out of range ({low}-{high})")
        return value
    return parse


def build_parser():
    parser = argparse.ArgumentParser(
        prog="tui-snake",
        description="Terminal Snake. Arrow keys / WASD / hjkl to steer, Q to quit.",
    )
    parser.add_argument("--width", type=bounded_int(MIN_GRID, MAX_GRID),
                        default=GRID_WIDTH,
                        help=f"Board width in cells (default: {GRID_WIDTH})")
    parser.add_argument("--height", type=bounded_int(MIN_GRID, MAX_GRID),
                        default=GRID_HEIGHT,
                        help=f"Board height in cells (default: {GRID_HEIGHT})")
    parser.add_argument("--tick-ms", type=bounded_int(MIN_TICK_MS, MAX_TICK_MS),
                        default=TICK_MS,
                        help=f"Milliseconds per tick (default: {TICK_MS})")
    parser.add_argument("--log-file",
                        help="Write debug logs to this file (the screen belongs to curses)")
    return parser


def setup_logging(log_file):
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def cli(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file)

    try:
        score = curses.wrapper(main, args.width, args.height, args.tick_ms)
    except curses.error as e:
        logger.exception("terminal failure")
        print(f"Terminal error: {e}", file=sys.stderr)
        return EXIT_TERMINAL_ERROR

    if score is None:
        print("Terminal too small for the board, try a smaller --width/--height.",
              file=sys.stderr)
        return EXIT_TOO_SMALL

    print(f"You scored {score} points!")
    return EXIT_OK
