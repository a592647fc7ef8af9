"""
Incremental snake rendering.

Each tick the snake only moves by one cell, so instead of redrawing the
whole board we work out which cells changed and touch just those.
"""

import collections

# A painted grid slot. `color` is a color name the grid knows how to map,
# `text` is what gets written (two columns wide so slots look square).
Cell = collections.namedtuple("Cell", ["color", "text"])

SNAKE_CELL = Cell("green", "  ")
APPLE_CELL = Cell("red", "  ")


def diff(old, new):
    """Return (removed, added) cells between two snakes.

    `removed` are segments of `old` that `new` no longer covers, `added` are
    segments of `new` that `old` did not cover. Membership is by coordinate,
    not by index, and both lists keep snake order.
    """
    old_cells = set(old.segments)
    new_cells = set(new.segments)
    removed = [seg for seg in old.segments if seg not in new_cells]
    added = [seg for seg in new.segments if seg not in old_cells]
    return removed, added


def render_snake(grid, old, new, cell=SNAKE_CELL):
    """Bring the grid from showing `old` to showing `new`.

    NOTE: doesn't call grid.draw()
    """
    removed, added = diff(old, new)
    for x, y in removed:
        grid.set_cell(x, y, None)
    for x, y in added:
        grid.set_cell(x, y, cell)
    return removed, added


def paint_snake(grid, snake, cell=SNAKE_CELL):
    """Paint every segment, for the first frame."""
    for x, y in snake.segments:
        grid.set_cell(x, y, cell)
