"""
Scripted player - replays a fixed heading sequence.
"""

from typing import Iterable

from domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):
    """Returns the scripted headings in order, then ``default`` forever."""

    def __init__(self, headings: Iterable[float] = (), default: float = 0.0):
        super().__init__()
        self.headings = list(headings)
        self.default = default
        self.position = 0

    def get_heading(self, game_state: GameState) -> float:
        if self.position < len(self.headings):
            heading = self.headings[self.position]
            self.position += 1
            return heading
        return self.default
