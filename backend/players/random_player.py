"""
Random player implementation - wiggles about while avoiding the walls.
"""

import random
from typing import List, Optional

from domain.collision import is_out_of_bounds
from domain.constants import TURN_RATE
from domain.game_state import GameState
from domain.motion import advance
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a steering choice that keeps the head
    inside the canvas for the next ``lookahead`` ticks.
    """

    def __init__(
        self,
        turn_rate: float = TURN_RATE,
        lookahead: int = 30,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(turn_rate)
        self.lookahead = lookahead
        self.rng = rng or random.Random()

    def _is_safe(self, game_state: GameState, heading: float) -> bool:
        segment = game_state.head
        for _ in range(self.lookahead):
            segment = advance(segment, heading)
            if is_out_of_bounds(segment.end, game_state.bounds):
                return False
        return True

    def get_heading(self, game_state: GameState) -> float:
        choices = [self.turn_rate, 0.0, -self.turn_rate]
        if game_state.head is None:
            return self.rng.choice(choices)

        # Filter out headings that would run into a wall if held
        safe: List[float] = [h for h in choices if self._is_safe(game_state, h)]

        # If nothing is safe, just pick anything (we'll hit the wall anyway)
        if not safe:
            return self.rng.choice(choices)

        return self.rng.choice(safe)
