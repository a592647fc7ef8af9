import sys

from tui_snake.cli import cli

sys.exit(cli())
