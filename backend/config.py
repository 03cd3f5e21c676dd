"""
Runtime configuration for CurveSnake.

Values come from the environment (optionally via a .env file) with the
SNAKE_ prefix, e.g. SNAKE_WIDTH=960 or SNAKE_GROWTH_PER_POINT=10.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain import constants

load_dotenv()

ENV_PREFIX = "SNAKE_"


def _env(name: str, default, cast):
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {ENV_PREFIX}{name}: {raw!r}") from None


@dataclass
class GameConfig:
    """
    Tunable game settings.

    width/height are canvas pixels (already device-scaled). The remaining
    sizes are in unscaled units and go through ``scale()``.
    """

    width: float = 960.0
    height: float = 540.0
    pixel_ratio: float = 1.0
    turn_rate: float = constants.TURN_RATE
    pickup_radius: float = constants.PICKUP_RADIUS
    apple_size: float = constants.APPLE_SIZE
    base_visible_length: float = constants.BASE_VISIBLE_LENGTH
    growth_per_point: float = constants.GROWTH_PER_POINT
    tick_interval: float = constants.TICK_INTERVAL
    seed: Optional[int] = None

    @classmethod
    def from_env(cls) -> "GameConfig":
        config = cls(
            width=_env("WIDTH", cls.width, float),
            height=_env("HEIGHT", cls.height, float),
            pixel_ratio=_env("PIXEL_RATIO", cls.pixel_ratio, float),
            turn_rate=_env("TURN_RATE", cls.turn_rate, float),
            pickup_radius=_env("PICKUP_RADIUS", cls.pickup_radius, float),
            apple_size=_env("APPLE_SIZE", cls.apple_size, float),
            base_visible_length=_env("BASE_VISIBLE_LENGTH", cls.base_visible_length, float),
            growth_per_point=_env("GROWTH_PER_POINT", cls.growth_per_point, float),
            tick_interval=_env("TICK_INTERVAL", cls.tick_interval, float),
            seed=_env("SEED", None, int),
        )
        config.validate()
        return config

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")
        if self.pixel_ratio <= 0:
            raise ValueError(f"pixel_ratio must be positive, got {self.pixel_ratio}")
        for name in ("pickup_radius", "apple_size", "base_visible_length",
                     "growth_per_point", "tick_interval"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

    def scale(self, n: float) -> float:
        """Convert unscaled units to device pixels."""
        return n * self.pixel_ratio

    @property
    def scaled_pickup_radius(self) -> float:
        return self.scale(self.pickup_radius)

    @property
    def scaled_apple_size(self) -> float:
        return self.scale(self.apple_size)

    @property
    def scaled_base_visible_length(self) -> float:
        return self.scale(self.base_visible_length)

    @property
    def scaled_apple_radius(self) -> float:
        return self.scaled_apple_size / 2
