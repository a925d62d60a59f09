import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from .doors import (
    DEFAULT_DOOR_COUNT, DoorSet, generate_doors, choose_host_door,
    resolve_switch, resolve_outcome,
)
from .scheduler import ImmediateScheduler, ScheduledCall
from .stats import Strategy, StatsAggregator

logger = logging.getLogger(__name__)


class RoundPhase(Enum):
    PICK = "pick"
    REVEAL = "reveal"
    DECIDE = "decide"
    RESULT = "result"


@dataclass(frozen=True)
class RoundOutcome:
    """How a committed round ended."""
    strategy: Strategy
    won: bool
    final_door_id: int

    def __str__(self) -> str:
        if self.won:
            return f"You {self.strategy} and won the car!"
        return f"You {self.strategy} and met a goat."


@dataclass
class RoundState:
    """Represents the current state of a round."""
    doors: DoorSet
    selected_door_id: Optional[int] = None
    host_door_id: Optional[int] = None
    final_door_id: Optional[int] = None
    phase: RoundPhase = RoundPhase.PICK
    outcome: Optional[RoundOutcome] = None

    @property
    def prize_door_id(self) -> int:
        return next(door.id for door in self.doors if door.has_prize)


class Round:
    """Runs the pick, reveal, decide and result lifecycle of one round at a time.

    The host's reveal is handed to a scheduler so a driver can pace it. Reset
    cancels that pending reveal, and a reveal that still fires for an old
    round is ignored.
    """

    def __init__(
        self,
        stats: Optional[StatsAggregator] = None,
        door_count: int = DEFAULT_DOOR_COUNT,
        rng: Optional[random.Random] = None,
        scheduler=None,
        reveal_delay: float = 0.0,
    ):
        if door_count < 3:
            raise ValueError(f"A round needs at least 3 doors, got {door_count}")
        self.stats = stats if stats is not None else StatsAggregator()
        self.door_count = door_count
        self.rng = rng or random.Random()
        self.scheduler = scheduler or ImmediateScheduler()
        self.reveal_delay = reveal_delay
        self._pending_reveal: Optional[ScheduledCall] = None
        self.state = RoundState(doors=generate_doors(door_count, self.rng))

    @property
    def phase(self) -> RoundPhase:
        return self.state.phase

    @property
    def doors(self) -> DoorSet:
        return self.state.doors

    @property
    def status_message(self) -> str:
        """Prompt text for the current phase."""
        if self.phase == RoundPhase.PICK:
            return "Choose a door. The host hides a car behind one door."
        if self.phase == RoundPhase.REVEAL:
            return "The host is revealing a goat door..."
        if self.phase == RoundPhase.DECIDE:
            return "One goat is revealed. Do you stay or switch?"
        if self.state.outcome:
            return str(self.state.outcome)
        return ""

    def select_door(self, door_id: int):
        """Pick a door. Ignored outside the pick phase."""
        if self.phase != RoundPhase.PICK:
            logger.debug("Ignoring door selection during %s", self.phase.value)
            return
        if (not isinstance(door_id, int) or isinstance(door_id, bool)
                or not any(door.id == door_id for door in self.state.doors)):
            raise ValueError(f"No door with id {door_id!r}")

        self.state.selected_door_id = door_id
        self.state.phase = RoundPhase.REVEAL
        logger.debug("Door %d selected, host reveal scheduled in %.2fs", door_id, self.reveal_delay)

        state = self.state
        call = self.scheduler.schedule(self.reveal_delay, lambda: self._reveal_host_door(state))
        if call.pending:
            self._pending_reveal = call

    def _reveal_host_door(self, state: RoundState):
        # A reveal scheduled for a round that has since been reset must not
        # touch the new one.
        if state is not self.state or state.phase != RoundPhase.REVEAL:
            logger.debug("Dropping stale host reveal")
            return
        state.host_door_id = choose_host_door(state.doors, state.selected_door_id, self.rng)
        state.phase = RoundPhase.DECIDE
        self._pending_reveal = None
        logger.debug("Host opened door %d", state.host_door_id)

    def commit(self, strategy: Union[Strategy, str]) -> Optional[RoundOutcome]:
        """Stay or switch. Ignored (returns None) outside the decide phase."""
        strategy = Strategy(strategy)
        if self.phase != RoundPhase.DECIDE:
            logger.debug("Ignoring %s commit during %s", strategy, self.phase.value)
            return None

        state = self.state
        if strategy == Strategy.STAY:
            final_door_id = state.selected_door_id
        else:
            final_door_id = resolve_switch(state.doors, state.selected_door_id, state.host_door_id)

        won = resolve_outcome(state.doors, final_door_id)
        state.final_door_id = final_door_id
        state.outcome = RoundOutcome(strategy, won, final_door_id)
        state.phase = RoundPhase.RESULT
        self.stats.record(strategy, won)
        logger.debug("Round finished: %s", state.outcome)
        return state.outcome

    def reset(self):
        """Start a brand-new round from any phase."""
        self._cancel_pending_reveal()
        self.state = RoundState(doors=generate_doors(self.door_count, self.rng))
        logger.debug("Round reset")

    def close(self):
        """Tear down: no scheduled reveal may run after this."""
        self._cancel_pending_reveal()

    def _cancel_pending_reveal(self):
        if self._pending_reveal is not None:
            self._pending_reveal.cancel()
            self._pending_reveal = None
