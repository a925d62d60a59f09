import random
from typing import Optional, Union
from .config import LabConfig
from .doors import DoorSet, generate_doors
from .round import Round, RoundOutcome, RoundPhase
from .scheduler import ImmediateScheduler, ManualScheduler
from .stats import Stats, StatsAggregator, Strategy, win_rate
from ..simulation.batch_simulator import BatchSimulator, SimulationSnapshot
from ..simulation.strategy import BatchStrategy


class Game:
    """Manages a Monty Hall session: the live round, batch runs and shared stats."""

    def __init__(
        self,
        config: Optional[LabConfig] = None,
        rng: Optional[random.Random] = None,
        scheduler=None,
    ):
        self.config = config or LabConfig()
        self.rng = rng or self.config.make_rng()
        self.scheduler = scheduler or ImmediateScheduler()
        self.stats = StatsAggregator()
        self.round = Round(
            stats=self.stats,
            door_count=self.config.door_count,
            rng=self.rng,
            scheduler=self.scheduler,
            reveal_delay=self.config.reveal_delay,
        )
        self.simulator = BatchSimulator(
            stats=self.stats,
            rng=self.rng,
            door_count=self.config.door_count,
            chunk_size=self.config.chunk_size,
            min_runs=self.config.min_runs,
            max_runs=self.config.max_runs,
        )

    @property
    def phase(self) -> RoundPhase:
        return self.round.phase

    @property
    def last_simulation(self) -> Optional[SimulationSnapshot]:
        return self.simulator.last_snapshot

    def generate_doors(self, count: Optional[int] = None) -> DoorSet:
        """Generate a standalone door set; the live round is unaffected."""
        if count is None:
            count = self.config.door_count
        return generate_doors(count, self.rng)

    def select_door(self, door_id: int):
        self.round.select_door(door_id)

    def advance(self, seconds: float) -> int:
        """Let the driver's clock run so a paced host reveal can happen."""
        if isinstance(self.scheduler, ManualScheduler):
            return self.scheduler.advance(seconds)
        return 0

    def commit_strategy(self, strategy: Union[Strategy, str]) -> Optional[RoundOutcome]:
        return self.round.commit(strategy)

    def reset_round(self):
        self.round.reset()

    def run_simulation(self, runs=None,
                       strategy: Union[BatchStrategy, str] = BatchStrategy.SWITCH) -> SimulationSnapshot:
        if runs is None:
            runs = self.config.default_runs
        return self.simulator.simulate(runs, strategy)

    def current_stats(self) -> Stats:
        return self.stats.snapshot()

    @staticmethod
    def win_rate(wins: int, losses: int) -> str:
        return win_rate(wins, losses)

    def close(self):
        self.round.close()
