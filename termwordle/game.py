"""Wordle board state: letters, rows, the game grid and daily puzzle info."""

from __future__ import annotations

import datetime as dt
import enum
from collections.abc import Collection
from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import requests

ROWS = 6
WORD_LENGTH = 5
PUZZLE_URL = "https://www.nytimes.com/svc/wordle/v2/{date}.json"
REQUEST_TIMEOUT = 10


class Color(enum.IntEnum):
    """Feedback colour of a letter, ordered from weakest to strongest hint."""

    GRAY = 0
    YELLOW = 1
    GREEN = 2


def _ascii_lower(char: str) -> str:
    return char.lower() if char.isascii() else char


@dataclass
class Letter:
    """One cell of the board."""

    char: str = " "
    color: Color | None = None


def _letter_to_json(letter: Letter) -> dict[str, Any]:
    color = None if letter.color is None else letter.color.name.lower()
    return {"char": letter.char, "color": color}


def _letter_from_json(data: Any) -> Letter:
    if not isinstance(data, dict):
        raise ValueError("letter must be an object")
    char = data.get("char")
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"invalid letter character: {char!r}")
    color_name = data.get("color")
    if color_name is None:
        return Letter(char, None)
    if not isinstance(color_name, str):
        raise ValueError(f"invalid letter colour: {color_name!r}")
    try:
        color = Color[color_name.upper()]
    except KeyError:
        raise ValueError(f"invalid letter colour: {color_name!r}") from None
    return Letter(char, color)


@dataclass
class Row:
    """One guess: five letters."""

    letters: list[Letter] = field(
        default_factory=lambda: [Letter() for _ in range(WORD_LENGTH)]
    )

    def set_colors(self, word: str) -> None:
        """Colour every letter of this row against the solution ``word``."""
        target = [_ascii_lower(c) for c in word[:WORD_LENGTH]]
        unused = [True] * len(target)
        guess = [_ascii_lower(letter.char) for letter in self.letters]

        for position, (letter, char) in enumerate(zip(self.letters, guess)):
            if position < len(target) and target[position] == char:
                unused[position] = False
                letter.color = Color.GREEN

        for letter, char in zip(self.letters, guess):
            if letter.color is not None:
                continue
            match = next(
                (i for i, c in enumerate(target) if unused[i] and c == char), None
            )
            if match is None:
                letter.color = Color.GRAY
            else:
                unused[match] = False
                letter.color = Color.YELLOW


@dataclass
class GameInfo:
    """Puzzle number, solution and date of one daily puzzle."""

    number: int
    word: str
    date_string: str

    @classmethod
    def from_json(cls, data: Any) -> GameInfo:
        """Build from the puzzle service's JSON object."""
        if not isinstance(data, dict):
            raise ValueError("puzzle info must be an object")
        try:
            word = data["solution"]
            date_string = data["print_date"]
        except KeyError as exc:
            raise ValueError(f"puzzle info is missing {exc.args[0]!r}") from None
        number = data.get("days_since_launch", 0)
        if not isinstance(word, str) or not isinstance(date_string, str):
            raise ValueError("puzzle solution and date must be strings")
        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise ValueError(f"invalid puzzle number: {number!r}")
        return cls(number=number, word=word, date_string=date_string)

    def to_json(self) -> dict[str, Any]:
        return {
            "days_since_launch": self.number,
            "solution": self.word,
            "print_date": self.date_string,
        }


def fetch_game_info(date: dt.date) -> GameInfo:
    """Download the puzzle for ``date``."""
    url = PUZZLE_URL.format(date=date.strftime("%Y-%m-%d"))
    response = requests.get(url, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return GameInfo.from_json(response.json())


def load_word_list(path: str | Path) -> frozenset[str]:
    """Read the accepted guesses, one word per line."""
    return frozenset(Path(path).read_text(encoding="utf-8").splitlines())


@dataclass
class Game:
    """A board of six rows being played against one puzzle."""

    info: GameInfo
    grid: list[Row] = field(default_factory=lambda: [Row() for _ in range(ROWS)])
    index: tuple[int, int] = (0, 0)

    @classmethod
    def from_info(cls, info: GameInfo) -> Game:
        return cls(info=info)

    def has_finished(self) -> bool:
        if self.won_in() is not None:
            return True
        return not any(
            all(letter.color is None for letter in row.letters) for row in self.grid
        )

    def won_in(self) -> int | None:
        """Number of guesses the game was won in, or None."""
        return next(
            (
                number
                for number, row in enumerate(self.grid, start=1)
                if all(letter.color is Color.GREEN for letter in row.letters)
            ),
            None,
        )

    def add_char(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if self.has_finished():
            return
        row, column = self.index
        if column >= WORD_LENGTH:
            return
        self.grid[row].letters[column].char = char
        self.index = (row, column + 1)

    def backspace(self) -> None:
        if self.has_finished():
            return
        row, column = self.index
        if column == 0:
            return
        column -= 1
        self.grid[row].letters[column].char = " "
        self.index = (row, column)

    def submit(self, words: Collection[str]) -> None:
        """Score the current row if it is full and a word from ``words``."""
        if self.has_finished():
            return
        row, column = self.index
        if column < WORD_LENGTH:
            return
        word = "".join(letter.char for letter in self.grid[row].letters).lower()
        if word in words:
            self.grid[row].set_colors(self.info.word)
            self.index = (row + 1, 0)

    def copy(self) -> Game:
        return deepcopy(self)

    def to_json(self) -> dict[str, Any]:
        return {
            "grid": [[_letter_to_json(l) for l in row.letters] for row in self.grid],
            "index": list(self.index),
            "info": self.info.to_json(),
        }

    @classmethod
    def from_json(cls, data: Any) -> Game:
        if not isinstance(data, dict):
            raise ValueError("game must be an object")
        try:
            raw_grid = data["grid"]
            raw_index = data["index"]
            raw_info = data["info"]
        except KeyError as exc:
            raise ValueError(f"game is missing {exc.args[0]!r}") from None
        if not isinstance(raw_grid, list) or len(raw_grid) != ROWS:
            raise ValueError(f"grid must hold {ROWS} rows")
        grid = []
        for raw_row in raw_grid:
            if not isinstance(raw_row, list) or len(raw_row) != WORD_LENGTH:
                raise ValueError(f"each row must hold {WORD_LENGTH} letters")
            grid.append(Row([_letter_from_json(item) for item in raw_row]))
        if (
            not isinstance(raw_index, list)
            or len(raw_index) != 2
            or not all(isinstance(i, int) and i >= 0 for i in raw_index)
        ):
            raise ValueError(f"invalid index: {raw_index!r}")
        return cls(
            info=GameInfo.from_json(raw_info),
            grid=grid,
            index=(raw_index[0], raw_index[1]),
        )