"""
Terminal Snake -- grow the snake by eating apples, don't hit the walls or yourself.
"""

from tui_snake.snake import (
    DOWN,
    LEFT,
    OPPOSITE,
    QUIT,
    RIGHT,
    UP,
    Snake,
    SnakeError,
)
from tui_snake.apple import Apple, BoardFullError
from tui_snake.render import APPLE_CELL, SNAKE_CELL, Cell, diff, render_snake
from tui_snake.game import run

__all__ = [
    "UP", "DOWN", "LEFT", "RIGHT", "OPPOSITE", "QUIT",
    "Snake", "SnakeError", "Apple", "BoardFullError",
    "Cell", "SNAKE_CELL", "APPLE_CELL", "diff", "render_snake", "run",
]
