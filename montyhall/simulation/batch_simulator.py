"""Headless batch simulation of Monty Hall rounds."""
import logging
import math
import random
import numpy as np
from typing import Iterator, Optional, Tuple, Union
from dataclasses import dataclass
from ..core.doors import (
    DEFAULT_DOOR_COUNT, generate_doors, choose_host_door, resolve_switch, resolve_outcome,
)
from ..core.stats import Strategy, StatsAggregator, win_rate
from .strategy import BatchStrategy, get_strategy

logger = logging.getLogger(__name__)

MIN_RUNS = 1
MAX_RUNS = 50000


def clamp_runs(runs, min_runs: int = MIN_RUNS, max_runs: int = MAX_RUNS) -> int:
    """Coerce a requested run count into [min_runs, max_runs].

    Anything that does not parse as a number (or parses as NaN) becomes
    min_runs. Fractions are truncated.
    """
    # Integers are compared directly; huge ones overflow float().
    if isinstance(runs, int):
        return max(min_runs, min(max_runs, int(runs)))
    try:
        value = float(runs)
    except (TypeError, ValueError):
        return min_runs
    if math.isnan(value):
        return min_runs
    return int(max(min_runs, min(max_runs, value)))


@dataclass
class SimulationSnapshot:
    """Counts from the most recent batch only."""
    runs: int
    strategy: BatchStrategy
    stay_wins: int = 0
    stay_losses: int = 0
    switch_wins: int = 0
    switch_losses: int = 0

    @classmethod
    def from_outcomes(cls, strategy: BatchStrategy, won: np.ndarray,
                      switched: np.ndarray) -> "SimulationSnapshot":
        """Tally per-run outcomes by the strategy each run actually used."""
        stayed = ~switched
        return cls(
            runs=len(won),
            strategy=strategy,
            stay_wins=int(np.count_nonzero(won & stayed)),
            stay_losses=int(np.count_nonzero(~won & stayed)),
            switch_wins=int(np.count_nonzero(won & switched)),
            switch_losses=int(np.count_nonzero(~won & switched)),
        )

    @property
    def stay_win_rate(self) -> str:
        return win_rate(self.stay_wins, self.stay_losses)

    @property
    def switch_win_rate(self) -> str:
        return win_rate(self.switch_wins, self.switch_losses)

    def __str__(self) -> str:
        return (
            f"Simulation Results ({self.runs:,} runs, strategy: {self.strategy}):\n"
            f"  Stay:   {self.stay_wins} wins, {self.stay_losses} losses ({self.stay_win_rate})\n"
            f"  Switch: {self.switch_wins} wins, {self.switch_losses} losses ({self.switch_win_rate})"
        )


class BatchSimulator:
    """Plays many rounds directly, without the interactive state machine.

    Results go into a per-batch SimulationSnapshot and, once the whole batch
    has finished, into the shared StatsAggregator.
    """

    def __init__(
        self,
        stats: Optional[StatsAggregator] = None,
        rng: Optional[random.Random] = None,
        door_count: int = DEFAULT_DOOR_COUNT,
        chunk_size: int = 1000,
        min_runs: int = MIN_RUNS,
        max_runs: int = MAX_RUNS,
    ):
        if door_count < 3:
            raise ValueError(f"A round needs at least 3 doors, got {door_count}")
        if chunk_size < 1:
            raise ValueError(f"Chunk size must be positive, got {chunk_size}")
        self.stats = stats if stats is not None else StatsAggregator()
        self.rng = rng or random.Random()
        self.door_count = door_count
        self.chunk_size = chunk_size
        self.min_runs = min_runs
        self.max_runs = max_runs
        self.last_snapshot: Optional[SimulationSnapshot] = None

    def simulate(self, runs, strategy: Union[BatchStrategy, str] = BatchStrategy.SWITCH) -> SimulationSnapshot:
        """Run a batch to completion and return its snapshot."""
        for _ in self.iter_simulation(runs, strategy):
            pass
        return self.last_snapshot

    def iter_simulation(self, runs, strategy: Union[BatchStrategy, str] = BatchStrategy.SWITCH) -> Iterator[int]:
        """Run a batch in chunks, yielding the number of completed runs after each.

        Nothing is recorded until the iterator is exhausted; abandoning it
        part way leaves the cumulative stats and last_snapshot untouched.
        """
        runs = clamp_runs(runs, self.min_runs, self.max_runs)
        strategy = get_strategy(strategy)

        won = np.zeros(runs, dtype=bool)
        switched = np.zeros(runs, dtype=bool)

        for start in range(0, runs, self.chunk_size):
            stop = min(start + self.chunk_size, runs)
            for i in range(start, stop):
                switched[i], won[i] = self._play_once(strategy)
            yield stop

        snapshot = SimulationSnapshot.from_outcomes(strategy, won, switched)
        self._fold(snapshot)
        self.last_snapshot = snapshot
        logger.info(
            "Simulated %d runs (%s): stay %s, switch %s",
            runs, strategy, snapshot.stay_win_rate, snapshot.switch_win_rate,
        )

    def _play_once(self, strategy: BatchStrategy) -> Tuple[bool, bool]:
        """Play one round. Returns (switched, won)."""
        doors = generate_doors(self.door_count, self.rng)
        initial_pick = self.rng.randrange(self.door_count)
        host_pick = choose_host_door(doors, initial_pick, self.rng)
        effective = strategy.resolve(self.rng)

        if effective == Strategy.SWITCH:
            final_pick = resolve_switch(doors, initial_pick, host_pick)
        else:
            final_pick = initial_pick

        return effective == Strategy.SWITCH, resolve_outcome(doors, final_pick)

    def _fold(self, snapshot: SimulationSnapshot):
        self.stats.record(Strategy.STAY, True, snapshot.stay_wins)
        self.stats.record(Strategy.STAY, False, snapshot.stay_losses)
        self.stats.record(Strategy.SWITCH, True, snapshot.switch_wins)
        self.stats.record(Strategy.SWITCH, False, snapshot.switch_losses)
