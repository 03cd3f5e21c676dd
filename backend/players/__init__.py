"""
Player implementations for CurveSnake.

This module contains the steering abstractions and implementations that
feed the heading used by the motion model.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .keyboard_player import KeyboardPlayer
from .tilt_player import TiltPlayer
from .pointer_player import PointerPlayer
from .variant_registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'KeyboardPlayer',
    'TiltPlayer',
    'PointerPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
