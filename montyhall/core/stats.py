"""Cumulative win/loss statistics for the stay and switch strategies."""
import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


class Strategy(Enum):
    """Strategies a player can commit to after the host's reveal."""
    STAY = "stay"
    SWITCH = "switch"

    def __str__(self) -> str:
        return self.value


@dataclass
class Stats:
    """Win and loss counts per strategy."""
    stay_wins: int = 0
    stay_losses: int = 0
    switch_wins: int = 0
    switch_losses: int = 0

    @property
    def stay_total(self) -> int:
        return self.stay_wins + self.stay_losses

    @property
    def switch_total(self) -> int:
        return self.switch_wins + self.switch_losses

    @property
    def overall(self) -> int:
        """Total rounds recorded for both strategies."""
        return self.stay_total + self.switch_total

    @property
    def stay_win_rate(self) -> str:
        return win_rate(self.stay_wins, self.stay_losses)

    @property
    def switch_win_rate(self) -> str:
        return win_rate(self.switch_wins, self.switch_losses)


def win_rate(wins: int, losses: int) -> str:
    """Format a win percentage, rounded half up to a whole number.

    Returns "0%" when nothing has been recorded.
    """
    total = wins + losses
    if not total:
        return "0%"
    return f"{math.floor(wins / total * 100 + 0.5)}%"


class StatsAggregator:
    """Owns the cumulative Stats for the lifetime of the process.

    Interactive rounds and batch simulations share one aggregator and both
    go through record().
    """

    def __init__(self):
        self._stats = Stats()

    def record(self, strategy: Union[Strategy, str], won: bool, count: int = 1):
        """Add `count` wins or losses for a strategy."""
        strategy = Strategy(strategy)
        if count < 0:
            raise ValueError(f"Cannot record a negative count ({count})")
        if strategy == Strategy.STAY:
            if won:
                self._stats.stay_wins += count
            else:
                self._stats.stay_losses += count
        else:
            if won:
                self._stats.switch_wins += count
            else:
                self._stats.switch_losses += count
        logger.debug("Recorded %d %s for %s", count, "win(s)" if won else "loss(es)", strategy)

    def snapshot(self) -> Stats:
        """Return a copy of the current Stats."""
        return replace(self._stats)

    @staticmethod
    def win_rate(wins: int, losses: int) -> str:
        return win_rate(wins, losses)
