"""
Tick sources decide when the game loop runs its next tick.

The loop calls ``wait()`` between ticks; a False return means stop.
"""

import threading
from typing import Optional


class TickSource:
    """Base class/interface for loop cadence."""

    def wait(self) -> bool:
        """
        Suspend until the next tick is due.

        Returns:
            True to run another tick, False to stop the loop.
        """
        raise NotImplementedError

    def cancel(self) -> None:
        raise NotImplementedError


class FixedIntervalTickSource(TickSource):
    """Sleeps a fixed interval between ticks; ``cancel()`` wakes it at once."""

    def __init__(self, interval: float):
        if interval < 0:
            raise ValueError(f"Tick interval must be non-negative, got {interval}")
        self.interval = interval
        self._cancelled = threading.Event()

    def wait(self) -> bool:
        # Event.wait returns True only when the event was set, i.e. cancelled
        return not self._cancelled.wait(self.interval)

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()


class ManualTickSource(TickSource):
    """
    Never blocks. Stops after ``limit`` waits when a limit is given.

    Used for headless runs and tests, where the simulation should go as fast
    as possible and deterministically.
    """

    def __init__(self, limit: Optional[int] = None):
        self.limit = limit
        self.waits = 0
        self._cancelled = False

    def wait(self) -> bool:
        if self._cancelled:
            return False
        self.waits += 1
        if self.limit is not None and self.waits > self.limit:
            return False
        return True

    def cancel(self) -> None:
        self._cancelled = True
