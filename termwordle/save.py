"""Persisted games, keyed by puzzle number."""

from __future__ import annotations

import contextlib
import json
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import TracebackType

import platformdirs

from termwordle.game import Game
from termwordle.stats import Stats, compute_stats

APP_NAME = "termwordle"
SAVE_FILE_NAME = "save.dat"


def default_save_path() -> Path:
    """Location of the save file in the user's data directory."""
    return platformdirs.user_data_path(APP_NAME, appauthor=False) / SAVE_FILE_NAME


class SaveData:
    """All games played so far; saves itself when used as a context manager."""

    def __init__(self, games: Mapping[int, Game] | None = None) -> None:
        self._games: dict[int, Game] = dict(games or {})
        self.path: Path | None = None

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> SaveData:
        """Load saved games; raises OSError or ValueError on failure."""
        source = Path(path) if path is not None else default_save_path()
        text = source.read_text(encoding="utf-8")
        try:
            data = json.loads(text)
            games = {int(number): Game.from_json(raw) for number, raw in data["games"].items()}
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"failed to decode save file {source}") from exc
        save_data = cls(games)
        save_data.path = source
        return save_data

    def save_to_file(self, path: str | Path | None = None) -> None:
        if path is not None:
            target = Path(path)
        else:
            target = self.path if self.path is not None else default_save_path()
        target.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "games": {str(number): game.to_json() for number, game in self._games.items()}
        }
        target.write_text(json.dumps(payload), encoding="utf-8")

    def games(self) -> Iterator[Game]:
        return iter(self._games.values())

    def save(self, game: Game) -> None:
        self._games[game.info.number] = game.copy()

    def load(self, number: int) -> Game | None:
        return self._games.get(number)

    def stats(self) -> Stats:
        return compute_stats(self.games())

    def __enter__(self) -> SaveData:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        with contextlib.suppress(OSError):
            self.save_to_file()