"""
Listener interface through which the game loop hands state changes to
collaborators (renderers, HUDs, recorders).
"""

from .game_state import GameState, TickResult


class GameListener:
    """Base class with no-op callbacks; override the ones you need."""

    def on_started(self, state: GameState) -> None:
        pass

    def on_tick(self, state: GameState, result: TickResult) -> None:
        pass

    def on_game_over(self, state: GameState, result: TickResult) -> None:
        pass
