#!/usr/bin/env python3
"""
Test suite for tui_snake/render.py -- the minimal-repaint snake diff.
These tests run WITHOUT a terminal (no curses rendering).
"""

import unittest

from tui_snake.render import (
    APPLE_CELL, SNAKE_CELL, Cell, diff, paint_snake, render_snake,
)
from tui_snake.snake import DOWN, RIGHT, UP, Snake

L_SNAKE = Snake([(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (3, 2), (3, 3), (3, 4)])


class RecordingGrid:
    """Records set_cell calls in order."""

    width = 10
    height = 10

    def __init__(self):
        self.calls = []

    def set_cell(self, x, y, cell):
        self.calls.append((x, y, cell))

    def draw(self):
        raise AssertionError("render helpers must not draw")


# =============================================================================
# 1. DIFF TESTS
# =============================================================================

class TestDiff(unittest.TestCase):

    def test_diff(self):
        """A shift frees the old tail and covers the new head."""
        old_cells, new_cells = diff(L_SNAKE, L_SNAKE.shift(RIGHT))
        self.assertEqual(old_cells, [(3, 4)])
        self.assertEqual(new_cells, [(1, 0)])

    def test_diff_is_symmetric(self):
        pairs = [
            (L_SNAKE, L_SNAKE.shift(RIGHT)),
            (Snake.default(), Snake.default().add_segment((0, 1))),
            (Snake([(4, 4), (4, 5)]), Snake([(7, 7)])),
        ]
        for a, b in pairs:
            removed, added = diff(a, b)
            self.assertEqual(diff(b, a), (added, removed))

    def test_identical_snakes_have_no_diff(self):
        self.assertEqual(diff(L_SNAKE, L_SNAKE), ([], []))

    def test_growth_only_adds(self):
        grown = L_SNAKE.add_segment((1, 0))
        self.assertEqual(diff(L_SNAKE, grown), ([], [(1, 0)]))

    def test_membership_not_index(self):
        """Reordered segments are not repainted."""
        a = Snake([(1, 1), (1, 2), (1, 3)])
        b = Snake([(1, 3), (1, 2), (1, 1)])
        self.assertEqual(diff(a, b), ([], []))

    def test_removed_and_added_are_disjoint(self):
        a = Snake([(2, 2), (2, 3), (2, 4)])
        b = a.shift(UP).shift(UP)
        removed, added = diff(a, b)
        self.assertEqual(removed, [(2, 3), (2, 4)])
        self.assertEqual(added, [(2, 0), (2, 1)])
        self.assertFalse(set(removed) & set(added))

    def test_folding_back_onto_own_cells(self):
        """A snake doubling back over the cells it covered needs no repaint."""
        a = Snake([(2, 2), (2, 3), (2, 4)])
        b = a.shift(DOWN).shift(DOWN)
        self.assertEqual(list(b.segments), [(2, 4), (2, 3), (2, 2)])
        self.assertEqual(diff(a, b), ([], []))


# =============================================================================
# 2. RENDER TESTS
# =============================================================================

class TestRenderSnake(unittest.TestCase):

    def test_clears_before_painting(self):
        grid = RecordingGrid()
        render_snake(grid, L_SNAKE, L_SNAKE.shift(RIGHT))
        self.assertEqual(grid.calls, [(3, 4, None), (1, 0, SNAKE_CELL)])

    def test_custom_cell(self):
        grid = RecordingGrid()
        cell = Cell("blue", "[]")
        render_snake(grid, Snake.default(), Snake.default().add_segment((1, 0)), cell)
        self.assertEqual(grid.calls, [(1, 0, cell)])

    def test_paint_snake_paints_every_segment(self):
        grid = RecordingGrid()
        paint_snake(grid, L_SNAKE)
        self.assertEqual([(x, y) for x, y, _ in grid.calls], list(L_SNAKE.segments))
        self.assertTrue(all(cell == SNAKE_CELL for _, _, cell in grid.calls))

    def test_cells_have_distinct_colors(self):
        self.assertNotEqual(SNAKE_CELL.color, APPLE_CELL.color)
        self.assertEqual(len(SNAKE_CELL.text), len(APPLE_CELL.text))


if __name__ == "__main__":
    unittest.main()
