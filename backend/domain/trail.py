"""
Trail manager: keeps the visible snake length proportional to the score.
"""

from typing import List

from .snake import Journey, Segment


def trail_limit(score: int, base_visible_length: float, growth_per_point: float) -> float:
    return base_visible_length + growth_per_point * score


def truncate(
    journey: Journey,
    score: int,
    base_visible_length: float,
    growth_per_point: float,
) -> List[Segment]:
    """
    Drop tail segments beyond the score-dependent limit.

    Returns the removed segments, oldest first, so the renderer can erase
    them. The head is never removed.
    """
    limit = trail_limit(score, base_visible_length, growth_per_point)
    removed: List[Segment] = []
    while len(journey) > 1 and len(journey) > limit:
        removed.append(journey.pop_tail())
    return removed
