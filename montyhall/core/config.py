"""Configuration for the Monty Hall lab."""
import random
from dataclasses import dataclass
from typing import Optional


@dataclass
class LabConfig:
    """Settings shared by interactive play and batch simulation."""
    door_count: int = 3
    reveal_delay: float = 0.9  # Seconds between a pick and the host's reveal
    default_runs: int = 500
    min_runs: int = 1
    max_runs: int = 50000
    chunk_size: int = 1000
    seed: Optional[int] = None

    def __post_init__(self):
        if self.door_count < 3:
            raise ValueError(f"A round needs at least 3 doors, got {self.door_count}")
        if self.reveal_delay < 0:
            raise ValueError("Reveal delay cannot be negative")
        if not 1 <= self.min_runs <= self.max_runs:
            raise ValueError(f"Invalid run bounds [{self.min_runs}, {self.max_runs}]")
        if self.chunk_size < 1:
            raise ValueError("Chunk size must be positive")

    def make_rng(self) -> random.Random:
        """Create the random source for a session, seeded if configured."""
        return random.Random(self.seed)
