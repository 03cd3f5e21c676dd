"""
Tests for domain/collision.py and domain/trail.py.
"""

import random
import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.collision import (
    MAX_SPAWN_ATTEMPTS,
    Apple,
    Bounds,
    is_eating,
    is_out_of_bounds,
    spawn_apple,
    uniform_random_point,
)
from domain.motion import advance, seed_segment
from domain.snake import Journey
from domain.trail import trail_limit, truncate


BOUNDS = Bounds(300, 300)


class TestBoundary:
    """Tests for is_out_of_bounds()."""

    def test_inside(self):
        assert is_out_of_bounds((150, 150), BOUNDS) is False

    def test_edges_are_inside(self):
        for point in [(0, 0), (300, 300), (0, 300), (300, 0)]:
            assert is_out_of_bounds(point, BOUNDS) is False

    def test_each_side_outside(self):
        assert is_out_of_bounds((-5, 150), BOUNDS)
        assert is_out_of_bounds((300.01, 150), BOUNDS)
        assert is_out_of_bounds((150, -0.1), BOUNDS)
        assert is_out_of_bounds((150, 301), BOUNDS)


class TestFeeding:
    """Tests for is_eating() and spawn_apple()."""

    def test_within_radius(self):
        apple = Apple((100, 100), 5)
        assert is_eating((103, 100), apple, 4)
        assert is_eating((104, 100), apple, 4)

    def test_outside_radius(self):
        apple = Apple((100, 100), 5)
        assert is_eating((104.5, 100), apple, 4) is False

    def test_no_apple(self):
        assert is_eating((0, 0), None, 4) is False

    def test_spawn_in_bounds(self):
        random_point = uniform_random_point(random.Random(1))
        for _ in range(100):
            apple = spawn_apple(BOUNDS, random_point, 5)
            x, y = apple.position
            assert 0 <= x <= 300 and 0 <= y <= 300
            assert apple.radius == 5

    def test_respawn_always_moves(self):
        """A generator repeating the old position is asked again."""
        draws = iter([(10, 10), (10, 10), (20, 30)])
        previous = Apple((10, 10), 5)
        apple = spawn_apple(BOUNDS, lambda bounds: next(draws), 5, previous=previous)
        assert apple.position == (20, 30)

    def test_respawn_gives_up_on_stuck_source(self):
        calls = []

        def stuck(bounds):
            calls.append(bounds)
            return (10, 10)

        with pytest.raises(ValueError):
            spawn_apple(BOUNDS, stuck, 5, previous=Apple((10, 10), 5))
        assert len(calls) == MAX_SPAWN_ATTEMPTS

    def test_uniform_random_point_is_seeded(self):
        a = uniform_random_point(random.Random(9))
        b = uniform_random_point(random.Random(9))
        assert [a(BOUNDS) for _ in range(5)] == [b(BOUNDS) for _ in range(5)]


class TestTrail:
    """Tests for truncate()."""

    def _journey(self, length):
        journey = Journey([seed_segment((150, 150))])
        while len(journey) < length:
            journey.push_head(advance(journey.head, 0.0))
        return journey

    def test_limit(self):
        assert trail_limit(0, 40, 1) == 40
        assert trail_limit(3, 40, 10) == 70

    def test_under_limit_untouched(self):
        journey = self._journey(40)
        assert truncate(journey, 0, 40, 1) == []
        assert len(journey) == 40

    def test_removes_from_tail(self):
        journey = self._journey(42)
        oldest = list(journey)[-2:]
        removed = truncate(journey, 0, 40, 1)
        assert removed == [oldest[1], oldest[0]]
        assert len(journey) == 40

    def test_score_raises_limit(self):
        journey = self._journey(45)
        assert truncate(journey, 5, 40, 1) == []
        assert len(truncate(journey, 2, 40, 1)) == 3

    def test_never_empties(self):
        journey = self._journey(3)
        truncate(journey, 0, 0, 1)
        assert len(journey) == 1
