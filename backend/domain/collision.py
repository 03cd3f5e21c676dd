"""
Boundary and feeding checks run against the freshly computed head tip.
"""

import random
from dataclasses import dataclass
from typing import Callable, Optional

from .geometry import Point, distance


@dataclass(frozen=True)
class Bounds:
    """Drawable canvas area, ``[0, width] x [0, height]``."""

    width: float
    height: float

    @property
    def center(self) -> Point:
        return (self.width / 2, self.height / 2)


@dataclass(frozen=True)
class Apple:
    """
    A single food target.

    Attributes:
        position: where the apple sits
        radius: visual size, used by the renderer to draw and erase it
    """

    position: Point
    radius: float


RandomPoint = Callable[[Bounds], Point]

# Draws allowed before a point source that only repeats itself is rejected
MAX_SPAWN_ATTEMPTS = 100


def uniform_random_point(rng: Optional[random.Random] = None) -> RandomPoint:
    """Return a point generator drawing uniformly from the whole canvas."""
    rng = rng or random.Random()

    def _random_point(bounds: Bounds) -> Point:
        return (rng.random() * bounds.width, rng.random() * bounds.height)

    return _random_point


def is_out_of_bounds(point: Point, bounds: Bounds) -> bool:
    """Points on the edge still count as inside."""
    x, y = point
    return x < 0 or x > bounds.width or y < 0 or y > bounds.height


def is_eating(point: Point, apple: Optional[Apple], pickup_radius: float) -> bool:
    if apple is None:
        return False
    return distance(point, apple.position) <= pickup_radius


def spawn_apple(
    bounds: Bounds,
    random_point: RandomPoint,
    radius: float,
    previous: Optional[Apple] = None,
) -> Apple:
    """
    Place a new apple at a random in-bounds point.

    When replacing ``previous`` the new position is guaranteed to differ,
    so the same apple can never be eaten twice.

    Raises:
        ValueError: if ``random_point`` keeps returning the previous position.
    """
    for _ in range(MAX_SPAWN_ATTEMPTS):
        position = random_point(bounds)
        if previous is None or position != previous.position:
            return Apple(position=position, radius=radius)
    raise ValueError(
        f"random_point returned {previous.position} {MAX_SPAWN_ATTEMPTS} times in a row"
    )
