"""
The tick loop: input -> move -> collision check -> eat check -> render -> draw.

Works against any grid with width/height/set_cell/draw and any zero-argument
input poller returning a direction, QUIT or None, so it runs the same under
curses and in tests.
"""

import logging
import random

from tui_snake.apple import Apple, BoardFullError
from tui_snake.render import paint_snake, render_snake
from tui_snake.snake import DOWN, OPPOSITE, QUIT, Snake

logger = logging.getLogger(__name__)


def starting_snake():
    """Three segments running down the left edge, head at (0, 2)."""
    return Snake.default().add_segment((0, 1)).add_segment((0, 2))


def steer(direction, event):
    """Apply a key event to the current direction.

    Reversing straight into the body is ignored, as is anything that
    isn't a direction.
    """
    if event in OPPOSITE and event != OPPOSITE[direction]:
        return event
    return direction


def out_of_bounds(old_snake, new_snake, grid):
    """True if the move went nowhere (clamped at 0) or off the far edges."""
    x, y = new_snake.head()
    return (new_snake.head() == old_snake.head()
            or x >= grid.width
            or y >= grid.height)


def game_over_reason(old_snake, new_snake, grid):
    """Why `new_snake` ends the game ("wall" or "self"), or None if it doesn't."""
    if out_of_bounds(old_snake, new_snake, grid):
        return "wall"
    if new_snake.colliding_with_self():
        return "self"
    return None


def run(grid, poll_input, snake=None, direction=DOWN, rng=random,
        on_score=None):
    """Play one game and return the final score.

    A fatal move is never committed, so the score is the length of the
    snake before it.
    """
    if snake is None:
        snake = starting_snake()

    apple = Apple.place(grid, snake, rng)
    paint_snake(grid, snake)
    grid.draw()
    if on_score is not None:
        on_score(snake.score())
    logger.info("game started: %dx%d grid, snake %r, apple at %s",
                grid.width, grid.height, snake, apple.pos())

    while True:
        # Input
        event = poll_input()
        if event == QUIT:
            logger.info("player quit with score %d", snake.score())
            return snake.score()
        direction = steer(direction, event)

        # Move
        new_snake = snake.shift(direction)
        reason = game_over_reason(snake, new_snake, grid)
        if reason is not None:
            logger.info("game over (%s) at %s, score %d",
                        reason, new_snake.head(), snake.score())
            return snake.score()

        # Eat
        board_full = False
        if apple.is_eaten(new_snake):
            new_snake = snake.add_segment(apple.pos())
            logger.debug("ate apple at %s, length now %d",
                         apple.pos(), new_snake.score())
            try:
                apple = Apple.place(grid, new_snake, rng)
            except BoardFullError:
                logger.info("board is full, score %d", new_snake.score())
                board_full = True

        # Render
        render_snake(grid, snake, new_snake)
        grid.draw()

        snake = new_snake
        if on_score is not None:
            on_score(snake.score())
        if board_full:
            return snake.score()
