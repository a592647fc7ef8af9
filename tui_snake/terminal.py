"""
curses front end: the grid the snake is drawn on, the key poller and the
boxed frame around the board.
"""

import curses
import logging

from tui_snake.game import run
from tui_snake.render import Cell
from tui_snake.snake import DOWN, LEFT, QUIT, RIGHT, UP

logger = logging.getLogger(__name__)

# Board size in grid slots and tick length
GRID_WIDTH = 30
GRID_HEIGHT = 30
TICK_MS = 80

# Each grid slot is two terminal columns wide
SLOT_WIDTH = 2

# Color pair IDs
COLOR_SNAKE = 1
COLOR_APPLE = 2
COLOR_FRAME = 3
COLOR_HUD = 4

CELL_COLORS = {
    "green": COLOR_SNAKE,
    "red": COLOR_APPLE,
}

# Key mappings: arrows, WASD and vi keys
KEY_MAP = {
    curses.KEY_UP: UP, ord('w'): UP, ord('W'): UP, ord('k'): UP, ord('K'): UP,
    curses.KEY_DOWN: DOWN, ord('s'): DOWN, ord('S'): DOWN, ord('j'): DOWN, ord('J'): DOWN,
    curses.KEY_LEFT: LEFT, ord('a'): LEFT, ord('A'): LEFT, ord('h'): LEFT, ord('H'): LEFT,
    curses.KEY_RIGHT: RIGHT, ord('d'): RIGHT, ord('D'): RIGHT, ord('l'): RIGHT, ord('L'): RIGHT,
}

QUIT_KEYS = {ord('q'), ord('Q'), 27}


class GridError(ValueError):
    """Bad write to the grid (off the board or not a Cell)."""


def init_colors():
    """Initialize the game's color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_SNAKE, curses.COLOR_BLACK, curses.COLOR_GREEN)  # Snake
    curses.init_pair(COLOR_APPLE, curses.COLOR_BLACK, curses.COLOR_RED)    # Apple
    curses.init_pair(COLOR_FRAME, curses.COLOR_YELLOW, -1)                 # Border/Text
    curses.init_pair(COLOR_HUD, curses.COLOR_WHITE, -1)                    # Score


class CursesGrid:
    """A width x height board of two-column slots on a curses window.

    set_cell only records the change; draw() writes everything pending and
    refreshes the window once.
    """

    def __init__(self, window, width, height):
        self.window = window
        self.width = width
        self.height = height
        self.pending = {}

    def set_cell(self, x, y, cell):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise GridError(
                f"cell ({x}, {y}) is outside the {self.width}x{self.height} grid")
        if cell is not None and not isinstance(cell, Cell):
            raise GridError(f"expected a Cell or None, got {cell!r}")
        self.pending[(x, y)] = cell

    def draw(self):
        for (x, y), cell in self.pending.items():
            if cell is None:
                self.window.addstr(y, x * SLOT_WIDTH, " " * SLOT_WIDTH)
            else:
                attr = curses.color_pair(CELL_COLORS.get(cell.color, COLOR_HUD))
                self.window.addstr(y, x * SLOT_WIDTH, cell.text, attr)
        self.pending.clear()
        self.window.refresh()


def make_input_poller(window, timeout_ms):
    """Return a poller that waits up to `timeout_ms` for one key.

    It yields a direction, QUIT, or None when nothing useful was pressed.
    """
    window.keypad(True)
    window.timeout(timeout_ms)

    def poll():
        ch = window.getch()
        if ch == -1:
            return None
        if ch in QUIT_KEYS:
            return QUIT
        return KEY_MAP.get(ch)

    return poll


def frame_size(width, height):
    """(rows, cols) of the boxed frame around a width x height grid."""
    # One spare column so writing the bottom-right slot never scrolls
    return height + 2, width * SLOT_WIDTH + 3


def draw_frame(frame, score):
    """Box, title, score readout and key help on the frame border."""
    rows, cols = frame.getmaxyx()
    frame.erase()
    frame.box()
    title = " S N A K E "
    frame.addstr(0, max(1, (cols - len(title)) // 2), title,
                 curses.color_pair(COLOR_FRAME) | curses.A_BOLD)
    help_text = " Arrows/WASD/hjkl  Q quit "
    if len(help_text) < cols - 2:
        frame.addstr(rows - 1, (cols - len(help_text)) // 2, help_text,
                     curses.color_pair(COLOR_FRAME))
    draw_score(frame, score)


def draw_score(frame, score):
    score_str = f" Score: {score} "
    frame.addstr(0, 2, score_str, curses.color_pair(COLOR_HUD) | curses.A_BOLD)
    frame.refresh()


def main(stdscr, width=GRID_WIDTH, height=GRID_HEIGHT, tick_ms=TICK_MS):
    """Run one game under curses.wrapper() and return the score.

    Returns None if the terminal is too small to hold the board.
    """
    stdscr.clear()
    init_colors()
    curses.curs_set(0)

    max_y, max_x = stdscr.getmaxyx()
    frame_h, frame_w = frame_size(width, height)

    # Check if terminal is large enough
    if max_y < frame_h or max_x < frame_w:
        logger.warning("terminal %dx%d too small, need %dx%d",
                       max_y, max_x, frame_h, frame_w)
        stdscr.addstr(0, 0, "Terminal too small!", curses.color_pair(COLOR_FRAME))
        stdscr.addstr(1, 0, f"Need at least {frame_h}x{frame_w}, got {max_y}x{max_x}",
                      curses.color_pair(COLOR_FRAME))
        stdscr.addstr(2, 0, "Press 'q' to quit", curses.color_pair(COLOR_FRAME))
        stdscr.refresh()
        while True:
            ch = stdscr.getch()
            if ch in QUIT_KEYS:
                return None

    stdscr.refresh()

    # Center the frame; the grid window sits just inside its border
    start_y = (max_y - frame_h) // 2
    start_x = (max_x - frame_w) // 2
    frame = curses.newwin(frame_h, frame_w, start_y, start_x)
    draw_frame(frame, 0)

    board = curses.newwin(height, width * SLOT_WIDTH + 1, start_y + 1, start_x + 1)
    grid = CursesGrid(board, width, height)
    poll = make_input_poller(board, tick_ms)

    return run(grid, poll, on_score=lambda score: draw_score(frame, score))
