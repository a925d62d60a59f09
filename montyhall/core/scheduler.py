"""Schedule-and-cancel primitives for the presentation delay.

A round never sleeps. It hands a callback to a scheduler and keeps the
returned ScheduledCall so it can cancel it on reset.
"""
import heapq
import itertools
from dataclasses import dataclass
from typing import Callable, List, Tuple


@dataclass
class ScheduledCall:
    """Handle for a callback waiting on a scheduler."""
    due: float
    callback: Callable[[], None]
    cancelled: bool = False
    fired: bool = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self):
        """Prevent the callback from running. Safe to call more than once."""
        if not self.fired:
            self.cancelled = True

    def fire(self):
        if not self.pending:
            return
        self.fired = True
        self.callback()


class ImmediateScheduler:
    """Runs every callback as soon as it is scheduled."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(due=0.0, callback=callback)
        call.fire()
        return call


class ManualScheduler:
    """Virtual clock. Callbacks run only when the driver advances time."""

    def __init__(self):
        self.now = 0.0
        self._queue: List[Tuple[float, int, ScheduledCall]] = []
        self._counter = itertools.count()

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        if delay < 0:
            raise ValueError("Delay cannot be negative")
        call = ScheduledCall(due=self.now + delay, callback=callback)
        heapq.heappush(self._queue, (call.due, next(self._counter), call))
        return call

    @property
    def pending(self) -> List[ScheduledCall]:
        return [call for _, _, call in sorted(self._queue) if call.pending]

    def advance(self, seconds: float) -> int:
        """Move the clock forward and run everything that came due."""
        if seconds < 0:
            raise ValueError("Cannot move the clock backwards")
        self.now += seconds
        return self._run_until(self.now)

    def run_pending(self) -> int:
        """Jump straight to the last due time and run everything."""
        if not self._queue:
            return 0
        self.now = max(self.now, max(due for due, _, _ in self._queue))
        return self._run_until(self.now)

    def _run_until(self, limit: float) -> int:
        fired = 0
        while self._queue and self._queue[0][0] <= limit:
            _, _, call = heapq.heappop(self._queue)
            if call.pending:
                call.fire()
                fired += 1
        return fired
