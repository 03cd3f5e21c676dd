"""
Shared steering input.

Input handlers may write the heading from any thread; the game loop reads
it exactly once per tick.
"""

import threading


class HeadingCell:
    """A lock-protected single float holding the current heading delta."""

    def __init__(self, value: float = 0.0):
        self._lock = threading.Lock()
        self._value = float(value)

    def get(self) -> float:
        with self._lock:
            return self._value

    def set(self, value: float) -> None:
        with self._lock:
            self._value = float(value)

    def reset(self) -> None:
        self.set(0.0)

    def __repr__(self):
        return f"<HeadingCell value={self.get():.4f}>"
