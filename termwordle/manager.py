"""Navigation between daily puzzles, backed by saved games."""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable
from typing import Any

import requests

from termwordle.game import Game, GameInfo, fetch_game_info
from termwordle.save import SaveData
from termwordle.stats import Stats

FIRST_WORDLE_DATE = dt.date(2021, 6, 19)

Fetcher = Callable[[dt.date], GameInfo]
Clock = Callable[[], dt.date]


def _utc_today() -> dt.date:
    return dt.datetime.now(dt.timezone.utc).date()


def date_to_wordle_number(date: dt.date) -> int:
    days = (date - FIRST_WORDLE_DATE).days
    if days < 0:
        raise ValueError(f"{date} is before the first puzzle")
    return days


class GameManager:
    """Holds the game on screen; attribute access falls through to it."""

    def __init__(
        self,
        game: Game,
        date: dt.date,
        save_data: SaveData,
        fetch: Fetcher | None = None,
        today: Clock | None = None,
    ) -> None:
        self.game = game
        self.date = date
        self.save_data = save_data
        self._fetch = fetch or fetch_game_info
        self._today = today or _utc_today

    @classmethod
    def create(
        cls,
        save_data: SaveData | None = None,
        fetch: Fetcher | None = None,
        today: Clock | None = None,
    ) -> GameManager:
        """Start on today's puzzle, resuming a saved game if there is one."""
        fetch = fetch or fetch_game_info
        today = today or _utc_today
        current = today()
        game = Game.from_info(fetch(current))
        if save_data is None:
            try:
                save_data = SaveData.from_file()
            except (OSError, ValueError):
                save_data = SaveData()
        saved = save_data.load(game.info.number)
        if saved is not None:
            game = saved.copy()
        return cls(game, current, save_data, fetch, today)

    def __getattr__(self, name: str) -> Any:
        game = self.__dict__.get("game")
        if game is None:
            raise AttributeError(name)
        return getattr(game, name)

    def stats(self) -> Stats:
        return self.save_data.stats()

    def save(self) -> None:
        self.save_data.save(self.game)

    def goto(self, date: dt.date) -> None:
        """Show the puzzle for ``date``; keeps the current game if it cannot be fetched."""
        self.date = date
        saved = self.save_data.load(date_to_wordle_number(date))
        if saved is not None:
            self.game = saved.copy()
            return
        try:
            info = self._fetch(date)
        except (requests.RequestException, ValueError):
            return
        self.game = Game.from_info(info)

    def offset_by(self, offset: int) -> None:
        new_date = self.date + dt.timedelta(days=offset)
        if new_date < FIRST_WORDLE_DATE or new_date > self._today():
            return
        self.goto(new_date)

    def next(self) -> None:
        self.offset_by(1)

    def previous(self) -> None:
        self.offset_by(-1)

    def first(self) -> None:
        self.goto(FIRST_WORDLE_DATE)

    def last(self) -> None:
        self.goto(self._today())