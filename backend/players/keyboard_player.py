"""
Keyboard steering: left/A turns left, right/D turns right, release goes straight.
"""

from typing import Optional

from domain.constants import TURN_RATE
from domain.game_state import GameState
from domain.heading import HeadingCell
from .base import Player

LEFT_KEYS = {"left", "a"}
RIGHT_KEYS = {"right", "d"}


class KeyboardPlayer(Player):
    """
    Maps key presses to headings and writes them straight into the shared
    heading cell, so key events can arrive from another thread.
    """

    def __init__(self, heading: Optional[HeadingCell] = None, turn_rate: float = TURN_RATE):
        super().__init__(turn_rate)
        self.heading = heading or HeadingCell()

    def press(self, key: str) -> bool:
        """Returns True if ``key`` is a steering key."""
        key = key.lower()
        if key in LEFT_KEYS:
            self.heading.set(self.turn_rate)
            return True
        if key in RIGHT_KEYS:
            self.heading.set(-self.turn_rate)
            return True
        return False

    def release(self, key: str) -> bool:
        key = key.lower()
        if key in LEFT_KEYS or key in RIGHT_KEYS:
            self.heading.reset()
            return True
        return False

    def get_heading(self, game_state: GameState) -> float:
        return self.heading.get()
