"""
Strategies available to batch simulations.
"""
import random
from enum import Enum
from typing import List, Union
from ..core.stats import Strategy


class BatchStrategy(Enum):
    """Nominal strategy for a whole batch of simulated rounds."""
    STAY = "stay"
    SWITCH = "switch"
    RANDOM = "random"

    @property
    def description(self) -> str:
        descriptions = {
            BatchStrategy.STAY: "Always stay",
            BatchStrategy.SWITCH: "Always switch",
            BatchStrategy.RANDOM: "Random choice",
        }
        return descriptions[self]

    def resolve(self, rng: random.Random) -> Strategy:
        """Effective strategy for one run. RANDOM flips a fair coin every call."""
        if self == BatchStrategy.STAY:
            return Strategy.STAY
        if self == BatchStrategy.SWITCH:
            return Strategy.SWITCH
        return Strategy.SWITCH if rng.random() < 0.5 else Strategy.STAY

    def __str__(self) -> str:
        return self.value


def get_strategy(name: Union[str, BatchStrategy, Strategy]) -> BatchStrategy:
    """Look up a batch strategy by name."""
    if isinstance(name, BatchStrategy):
        return name
    if isinstance(name, Strategy):
        return BatchStrategy(name.value)
    try:
        return BatchStrategy(str(name).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown strategy: {name}") from None


def list_strategies() -> List[str]:
    """List all available strategy names."""
    return [strategy.value for strategy in BatchStrategy]
