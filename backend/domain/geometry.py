"""
Plane geometry used by the motion model and the renderer.

Points and vectors are plain (x, y) float tuples in canvas coordinates,
with y growing downwards.
"""

import math
from typing import List, Tuple

Point = Tuple[float, float]


def add(p: Point, q: Point) -> Point:
    return (p[0] + q[0], p[1] + q[1])


def sub(p: Point, q: Point) -> Point:
    return (p[0] - q[0], p[1] - q[1])


def scale(p: Point, factor: float) -> Point:
    return (p[0] * factor, p[1] * factor)


def reflect(point: Point, about: Point) -> Point:
    """Mirror ``point`` through ``about`` (i.e. ``about * 2 - point``)."""
    return (about[0] * 2 - point[0], about[1] * 2 - point[1])


def rotate(vector: Point, angle: float) -> Point:
    """
    Rotate ``vector`` by ``angle`` radians.

    Uses the standard rotation matrix. On a y-down canvas a positive angle
    therefore reads as a clockwise turn on screen.
    """
    x, y = vector
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return (x * cos_a - y * sin_a, x * sin_a + y * cos_a)


def distance(p: Point, q: Point) -> float:
    return math.hypot(p[0] - q[0], p[1] - q[1])


def length(vector: Point) -> float:
    return math.hypot(vector[0], vector[1])


def direction_angle(vector: Point) -> float:
    """Angle of ``vector`` measured from the +x axis, in (-pi, pi]."""
    return math.atan2(vector[1], vector[0])


def signed_angle(a: Point, b: Point) -> float:
    """
    Signed angle that rotates ``a`` onto ``b``, in (-pi, pi].

    The sign follows ``rotate``: ``rotate(a, signed_angle(a, b))`` points
    along ``b``.
    """
    cross = a[0] * b[1] - a[1] * b[0]
    dot = a[0] * b[0] + a[1] * b[1]
    return math.atan2(cross, dot)


def quadratic_point(start: Point, control: Point, end: Point, t: float) -> Point:
    """Point at parameter ``t`` on the quadratic Bezier curve."""
    u = 1.0 - t
    x = u * u * start[0] + 2 * u * t * control[0] + t * t * end[0]
    y = u * u * start[1] + 2 * u * t * control[1] + t * t * end[1]
    return (x, y)


def sample_quadratic(start: Point, control: Point, end: Point, steps: int = 8) -> List[Point]:
    """Return ``steps + 1`` evenly parameterised points from start to end."""
    steps = max(1, steps)
    return [quadratic_point(start, control, end, i / steps) for i in range(steps + 1)]
