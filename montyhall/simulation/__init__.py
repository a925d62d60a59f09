"""Batch simulation for the Monty Hall lab."""
from .batch_simulator import BatchSimulator, SimulationSnapshot, clamp_runs
from .strategy import BatchStrategy, get_strategy, list_strategies

__all__ = [
    "BatchSimulator",
    "SimulationSnapshot",
    "clamp_runs",
    "BatchStrategy",
    "get_strategy",
    "list_strategies",
]
