"""Play statistics over a collection of games."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from termwordle.game import ROWS, Game


@dataclass
class Stats:
    """Games finished and how many guesses each win took."""

    attempted: int = 0
    won: list[int] = field(default_factory=lambda: [0] * ROWS)

    def win_percentage(self) -> float:
        """Whole-number win rate; NaN when nothing has been played."""
        if self.attempted == 0:
            return math.nan
        return float(math.floor(sum(self.won) / self.attempted * 100 + 0.5))


def compute_stats(games: Iterable[Game]) -> Stats:
    stats = Stats()
    for game in games:
        if not game.has_finished():
            continue
        stats.attempted += 1
        guesses = game.won_in()
        if guesses is not None:
            stats.won[guesses - 1] += 1
    return stats