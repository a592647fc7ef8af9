#!/usr/bin/env python3
"""
Snake Game -- Terminal snake with curses.
Features:
- Arrow keys / WASD / hjkl movement, Q or Esc to quit
- Apples spawn at random free spots inside the border
- The snake grows by one segment per apple
- Game over on hitting a wall or your own body
- Only changed cells are redrawn each tick
- Board size and speed configurable from the command line
"""

import sys

from tui_snake.cli import cli

if __name__ == "__main__":
    sys.exit(cli())
