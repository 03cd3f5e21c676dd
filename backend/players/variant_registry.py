"""
Registry for steering players.

Maps player keys (e.g., 'random', 'keyboard') to player classes.
To add a new player, create <name>_player.py with its class, add a loader
here and an entry to PLAYER_LOADERS.
"""

from typing import Callable, Dict, List, Optional, Type

from .base import Player


# Lazy imports keep optional front-ends from importing each other
def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_scripted_player() -> Type[Player]:
    from .scripted_player import ScriptedPlayer
    return ScriptedPlayer


def _get_keyboard_player() -> Type[Player]:
    from .keyboard_player import KeyboardPlayer
    return KeyboardPlayer


def _get_tilt_player() -> Type[Player]:
    from .tilt_player import TiltPlayer
    return TiltPlayer


def _get_pointer_player() -> Type[Player]:
    from .pointer_player import PointerPlayer
    return PointerPlayer


# Registry: maps player key -> callable that returns the player class
PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "random": _get_random_player,
    "scripted": _get_scripted_player,
    "keyboard": _get_keyboard_player,
    "tilt": _get_tilt_player,
    "pointer": _get_pointer_player,
}

AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())

DEFAULT_PLAYER = "random"


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of AVAILABLE_PLAYERS. If None or empty, returns the default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = DEFAULT_PLAYER

    player_key = player_key.strip().lower()

    if player_key not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_LOADERS[player_key]()


def list_players() -> List[dict]:
    """
    Return metadata about all available players.

    Returns:
        List of dicts with 'key' and 'description' for each player.
    """
    return [
        {"key": "random", "description": "Autopilot that wiggles randomly and avoids walls"},
        {"key": "scripted", "description": "Replays a fixed heading sequence"},
        {"key": "keyboard", "description": "Left/A and Right/D steering"},
        {"key": "tilt", "description": "Device orientation steering"},
        {"key": "pointer", "description": "Turns towards the mouse or touch position"},
    ]
