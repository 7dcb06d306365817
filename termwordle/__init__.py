"""Play the daily Wordle puzzle, and past ones, in a curses terminal."""

__version__ = "0.1.0"