"""
Base player interface for the game engine.
"""

from domain.constants import TURN_RATE
from domain.game_state import GameState


class Player:
    """
    Base class/interface for steering logic.

    Each player is responsible for returning a heading delta given the
    current game state. The game loop writes it to the shared heading cell
    before the tick runs.
    """

    def __init__(self, turn_rate: float = TURN_RATE):
        self.turn_rate = turn_rate

    def get_heading(self, game_state: GameState) -> float:
        """
        Return the heading to apply on the next tick.

        Args:
            game_state: Current state of the game

        Returns:
            Heading delta in radians; positive turns left on screen.
        """
        raise NotImplementedError
