"""
Pointer steering - turns the head towards the mouse/touch position.
"""

from typing import Optional

from domain.constants import TURN_RATE
from domain.game_state import GameState
from domain.geometry import Point, signed_angle, sub
from .base import Player


class PointerPlayer(Player):
    """
    Steers towards the last reported pointer position, at most
    ``turn_rate`` per tick. Without a pointer position it goes straight.
    """

    def __init__(self, turn_rate: float = TURN_RATE):
        super().__init__(turn_rate)
        self.target: Optional[Point] = None

    def point_at(self, x: float, y: float) -> None:
        self.target = (x, y)

    def get_heading(self, game_state: GameState) -> float:
        head = game_state.head
        if self.target is None or head is None:
            return 0.0
        to_target = sub(self.target, head.end)
        if to_target == (0.0, 0.0):
            return 0.0
        # The motion model turns by -heading, so negate the needed rotation
        wanted = -signed_angle(head.direction, to_target)
        return max(-self.turn_rate, min(self.turn_rate, wanted))
