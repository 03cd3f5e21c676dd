"""
Device tilt steering.
"""

import math
from typing import Optional

from domain.game_state import GameState
from domain.heading import HeadingCell
from domain.snake import Segment
from .base import Player


class TiltPlayer(Player):
    """
    Converts device orientation readings into a heading.

    ``gamma`` (left/right tilt) and ``beta`` (front/back tilt) form a tilt
    vector; the heading is the angle of its difference with the current
    head segment's vector.
    """

    def __init__(self, heading: Optional[HeadingCell] = None):
        super().__init__()
        self.heading = heading or HeadingCell()

    def orientation(self, gamma: float, beta: float, head: Segment) -> float:
        snake_x = head.end[0] - head.start[0]
        snake_y = head.end[1] - head.start[1]
        value = math.atan2(beta - snake_y, gamma - snake_x)
        self.heading.set(value)
        return value

    def get_heading(self, game_state: GameState) -> float:
        return self.heading.get()
