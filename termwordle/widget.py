"""Curses drawing of the board, the on-screen keyboard and the statistics popup."""

from __future__ import annotations

import curses
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from termwordle.game import Color, Game, Letter, Row
from termwordle.stats import Stats

DARK_GRAY = 8
KEYBOARD_LAYOUT = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")
RESULT_MESSAGES = {
    1: "Genius",
    2: "Magnificent",
    3: "Impressive",
    4: "Splendid",
    5: "Great",
    6: "Phew",
}

TITLE_HEIGHT = 2
MESSAGE_HEIGHT = 2
KEYBOARD_HEIGHT = 3
BOARD_WIDTH = 29
CELL_WIDTH = 5
CELL_HEIGHT = 3
CELL_GAP = 1
ROW_GAP = 1
KEYBOARD_WIDTH = 40
POPUP_WIDTH = 50
POPUP_HEIGHT = 18

_BACKGROUND_PAIRS = {Color.GREEN: 1, Color.YELLOW: 2, Color.GRAY: 3}


def curses_color(color: Color) -> int:
    """Curses colour number used as the background of a letter of ``color``."""
    return {
        Color.GRAY: DARK_GRAY,
        Color.YELLOW: curses.COLOR_YELLOW,
        Color.GREEN: curses.COLOR_GREEN,
    }[color]


class _Palette:
    """Colour pairs, set up on first use; plain text where colours are unavailable."""

    def __init__(self) -> None:
        self._ready: bool | None = None

    def background(self, color: Color) -> int:
        if self._ready is None:
            self._ready = self._setup()
        if not self._ready:
            return 0
        try:
            return curses.color_pair(_BACKGROUND_PAIRS[color])
        except curses.error:
            return 0

    @staticmethod
    def _setup() -> bool:
        try:
            curses.start_color()
            for color, pair in _BACKGROUND_PAIRS.items():
                background = curses_color(color)
                if background >= curses.COLORS:
                    background = curses.COLOR_BLACK
                curses.init_pair(pair, curses.COLOR_WHITE, background)
        except (curses.error, AttributeError):
            return False
        return True


_palette = _Palette()


def _color_rank(color: Color | None) -> int:
    return -1 if color is None else int(color)


@dataclass
class KeyboardRow:
    """One row of keys, each coloured with the best hint seen for it."""

    letters: list[Letter] = field(default_factory=list)

    @classmethod
    def from_chars(cls, chars: Iterable[str]) -> KeyboardRow:
        return cls([Letter(char, None) for char in chars])

    def set_color(self, char: str, color: Color | None) -> None:
        """Upgrade the key for ``char`` to ``color`` if that is a stronger hint."""
        letter = next((l for l in self.letters if l.char == char), None)
        if letter is not None and _color_rank(color) > _color_rank(letter.color):
            letter.color = color


@dataclass
class Keyboard:
    """The three keyboard rows."""

    rows: tuple[KeyboardRow, ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Row]) -> Keyboard:
        keyboard = cls(tuple(KeyboardRow.from_chars(chars) for chars in KEYBOARD_LAYOUT))
        for row in rows:
            for letter in row.letters:
                for key_row in keyboard.rows:
                    key_row.set_color(letter.char, letter.color)
        return keyboard


def result_message(game: Game) -> str:
    """Text shown under the board: praise, the solution, or nothing mid-game."""
    if not game.has_finished():
        return ""
    guesses = game.won_in()
    if guesses is None:
        return game.info.word.upper()
    return RESULT_MESSAGES[guesses]


def title_text(game: Game) -> str:
    return f"Wordle #{game.info.number} - {game.info.date_string}"


def _put(window: Any, y: int, x: int, text: str, attr: int = 0) -> None:
    height, width = window.getmaxyx()
    if y < 0 or y >= height or x >= width:
        return
    if x < 0:
        text = text[-x:]
        x = 0
    text = text[: width - x]
    if not text:
        return
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        # Writing the bottom-right cell moves the cursor off screen.
        pass


def _put_centered(window: Any, y: int, left: int, width: int, text: str, attr: int = 0) -> None:
    _put(window, y, left + (width - len(text)) // 2, text, attr)


def _draw_letter(window: Any, top: int, left: int, width: int, height: int, letter: Letter) -> None:
    attr = curses.A_BOLD
    if letter.color is not None:
        attr |= _palette.background(letter.color)
    text_row = height // 2
    for offset in range(height):
        line = letter.char.center(width) if offset == text_row else " " * width
        _put(window, top + offset, left, line, attr)


def _draw_keyboard(window: Any, top: int, left: int, keyboard: Keyboard) -> None:
    for row_offset, key_row in enumerate(keyboard.rows):
        key_width = KEYBOARD_WIDTH // len(key_row.letters)
        for position, letter in enumerate(key_row.letters):
            _draw_letter(window, top + row_offset, left + position * key_width, key_width, 1, letter)


def render_game(window: Any, game: Game) -> None:
    """Draw the title, board, result message and keyboard into ``window``."""
    height, width = window.getmaxyx()
    board_top = TITLE_HEIGHT
    message_top = max(board_top, height - MESSAGE_HEIGHT - KEYBOARD_HEIGHT)
    keyboard_top = message_top + MESSAGE_HEIGHT

    _put_centered(window, 0, 0, width, title_text(game), curses.A_BOLD)

    board_left = (width - BOARD_WIDTH) // 2
    for row_number, row in enumerate(game.grid):
        top = board_top + row_number * (CELL_HEIGHT + ROW_GAP)
        if top + CELL_HEIGHT > message_top:
            break
        for position, letter in enumerate(row.letters):
            left = board_left + position * (CELL_WIDTH + CELL_GAP)
            _draw_letter(window, top, left, CELL_WIDTH, CELL_HEIGHT, letter)

    _put_centered(window, message_top, 0, width, result_message(game), curses.A_BOLD)
    _draw_keyboard(window, keyboard_top, (width - KEYBOARD_WIDTH) // 2, Keyboard.from_rows(game.grid))


def _format_percentage(value: float) -> str:
    return "NaN" if math.isnan(value) else str(int(value))


def _draw_border(window: Any, top: int, left: int, width: int, height: int) -> None:
    _put(window, top, left, "┌" + "─" * (width - 2) + "┐")
    for y in range(top + 1, top + height - 1):
        _put(window, y, left, "│" + " " * (width - 2) + "│")
    _put(window, top + height - 1, left, "└" + "─" * (width - 2) + "┘")


def _draw_chart(window: Any, top: int, left: int, width: int, height: int, won: Sequence[int]) -> None:
    _put_centered(window, top, left, width, "Guess Distribution", curses.A_BOLD)
    largest = max(won)
    bar_space = max(width - 2, 0)
    bars_top = top + 2
    for guesses, count in enumerate(won, start=1):
        y = bars_top + guesses - 1
        if y >= top + height:
            break
        color = Color.GREEN if count == largest else Color.GRAY
        value = str(count)
        length = count * bar_space // largest if largest else 0
        bar = value.rjust(max(length, len(value)))
        _put(window, y, left, str(guesses))
        _put(window, y, left + 2, bar, curses.A_BOLD | _palette.background(color))


def render_stats(window: Any, stats: Stats) -> None:
    """Draw the statistics popup centred over ``window``."""
    height, width = window.getmaxyx()
    popup_width = min(POPUP_WIDTH, width)
    popup_height = min(POPUP_HEIGHT, height)
    top = (height - popup_height) // 2
    left = (width - popup_width) // 2
    if popup_width < 2 or popup_height < 2:
        return
    _draw_border(window, top, left, popup_width, popup_height)
    _put_centered(window, top, left, popup_width, " Statistics ", curses.A_BOLD)

    inner_top = top + 2
    inner_left = left + 2
    inner_width = popup_width - 4
    inner_height = popup_height - 4
    if inner_width <= 0 or inner_height <= 0:
        return

    half = inner_width // 2
    _put_centered(window, inner_top, inner_left, half, str(stats.attempted), curses.A_BOLD)
    _put_centered(
        window, inner_top, inner_left + half, inner_width - half,
        _format_percentage(stats.win_percentage()), curses.A_BOLD,
    )
    if inner_height > 2:
        _put_centered(window, inner_top + 2, inner_left, half, "Played")
        _put_centered(window, inner_top + 2, inner_left + half, inner_width - half, "Win %")

    chart_top = inner_top + 5
    chart_height = inner_top + inner_height - chart_top
    if chart_height > 0:
        _draw_chart(window, chart_top, inner_left, inner_width, chart_height, stats.won)