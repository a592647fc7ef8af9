"""
Apple placement: one apple on the board at a time, never on the snake.
"""

import logging
import random

from tui_snake.render import APPLE_CELL

logger = logging.getLogger(__name__)

# Random tries before falling back to scanning for free cells
MAX_PLACEMENT_ATTEMPTS = 1000


class BoardFullError(Exception):
    """No interior cell is left for an apple."""


def _interior(grid):
    """Inclusive (x_max, y_max) of the area strictly inside the border."""
    x_max, y_max = grid.width - 2, grid.height - 2
    if x_max < 1 or y_max < 1:
        raise ValueError(
            f"grid {grid.width}x{grid.height} has no interior for an apple")
    return x_max, y_max


def _random_cell(rng, x_max, y_max):
    return (rng.randint(1, x_max), rng.randint(1, y_max))


def _free_cells(snake, x_max, y_max):
    return [(x, y)
            for y in range(1, y_max + 1)
            for x in range(1, x_max + 1)
            if not snake.occupies((x, y))]


class Apple:
    __slots__ = ("_pos",)

    def __init__(self, pos):
        self._pos = tuple(pos)

    @classmethod
    def place(cls, grid, snake, rng=random):
        """Drop a new apple on a random free interior cell and paint it.

        Retries random spots while they land on the snake. If that keeps
        failing (a nearly full board) it picks from the remaining free cells
        instead, and raises BoardFullError when there are none.
        """
        x_max, y_max = _interior(grid)

        pos = None
        for _ in range(MAX_PLACEMENT_ATTEMPTS):
            candidate = _random_cell(rng, x_max, y_max)
            if not snake.occupies(candidate):
                pos = candidate
                break

        if pos is None:
            free = _free_cells(snake, x_max, y_max)
            logger.debug("apple placement fell back to a scan, %d free cells",
                         len(free))
            if not free:
                raise BoardFullError("no free cell left for an apple")
            pos = rng.choice(free)

        grid.set_cell(pos[0], pos[1], APPLE_CELL)
        return cls(pos)

    def is_eaten(self, snake):
        return snake.head() == self._pos

    def pos(self):
        return self._pos

    def __eq__(self, other):
        if not isinstance(other, Apple):
            return NotImplemented
        return self._pos == other._pos

    def __hash__(self):
        return hash(self._pos)

    def __repr__(self):
        return f"Apple({self._pos!r})"
