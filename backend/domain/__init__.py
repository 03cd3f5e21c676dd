"""
Domain entities for the CurveSnake game engine.

This module contains the core simulation pieces that are independent of
rendering and input concerns (canvas, windowing, devices).
"""

from .constants import TURN_RATE, PICKUP_RADIUS, APPLE_SIZE, BASE_VISIBLE_LENGTH, GROWTH_PER_POINT
from .collision import Apple, Bounds
from .snake import Segment, Journey
from .game_state import GameState, GameEvent, Phase, TickResult, InvalidTransitionError, transition
from .heading import HeadingCell
from .listener import GameListener
from .tick_source import TickSource, FixedIntervalTickSource, ManualTickSource

__all__ = [
    'TURN_RATE', 'PICKUP_RADIUS', 'APPLE_SIZE', 'BASE_VISIBLE_LENGTH', 'GROWTH_PER_POINT',
    'Apple', 'Bounds',
    'Segment', 'Journey',
    'GameState', 'GameEvent', 'Phase', 'TickResult', 'InvalidTransitionError', 'transition',
    'HeadingCell',
    'GameListener',
    'TickSource', 'FixedIntervalTickSource', 'ManualTickSource',
]
