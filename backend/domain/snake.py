"""
Path entities: the snake is a chain of quadratic curve segments.
"""

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from .geometry import Point, sample_quadratic, sub


@dataclass(frozen=True)
class Segment:
    """
    One quadratic curve piece of the snake's path.

    Attributes:
        start: where the curve begins (the previous head tip)
        control_point: the quadratic control point
        end: where the curve ends (the head tip once this is the head)
    """

    start: Point
    control_point: Point
    end: Point

    @property
    def direction(self) -> Point:
        """Tangent at the end of the curve (control point towards end)."""
        return sub(self.end, self.control_point)

    def sample(self, steps: int = 8) -> List[Point]:
        return sample_quadratic(self.start, self.control_point, self.end, steps)

    def to_dict(self) -> dict:
        return {
            "start": list(self.start),
            "control_point": list(self.control_point),
            "end": list(self.end),
        }


class Journey:
    """
    Ordered chain of segments.

    Attributes:
        segments: deque from head at index 0 to tail at the end
    """

    def __init__(self, segments: Optional[Iterable[Segment]] = None):
        self.segments = deque(segments or [])

    @property
    def head(self) -> Segment:
        """Return the head segment (first element)."""
        return self.segments[0]

    @property
    def tail(self) -> Segment:
        return self.segments[-1]

    def push_head(self, segment: Segment) -> None:
        self.segments.appendleft(segment)

    def pop_tail(self) -> Segment:
        return self.segments.pop()

    def is_chained(self) -> bool:
        """True if every segment starts where the next older one ends."""
        for newer, older in zip(self.segments, list(self.segments)[1:]):
            if older.end != newer.start:
                return False
        return True

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __repr__(self):
        return f"<Journey segments={len(self.segments)}>"
