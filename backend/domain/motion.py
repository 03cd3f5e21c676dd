"""
Motion model: grows the path by one quadratic segment per tick.

Rather than rotating a velocity vector, each new segment pivots around the
previous control point mirrored through the head tip. Consecutive curves
then share a tangent at their joint and the rendered path bends smoothly.
"""

import math

from .geometry import Point, add, reflect, rotate, sub
from .snake import Segment


def seed_segment(center: Point, unit: float = 1.0) -> Segment:
    """
    Build the segment a new game starts from.

    The snake points towards -x: control point one unit left of the
    centre, tip two units left.
    """
    cx, cy = center
    return Segment(
        start=(cx, cy),
        control_point=(cx - unit, cy),
        end=(cx - unit * 2, cy),
    )


def advance(head: Segment, heading: float) -> Segment:
    """
    Return the segment that follows ``head`` when steering by ``heading``.

    A heading of 0 continues straight. The step length is preserved and the
    end tangent turns by ``-heading`` (a left turn on screen for positive
    headings).
    """
    tip = head.end
    control = reflect(head.control_point, tip)
    offset = sub(tip, control)
    new_end = add(control, rotate(offset, math.pi - heading))
    return Segment(start=tip, control_point=control, end=new_end)
