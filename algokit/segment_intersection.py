"""
algokit/segment_intersection.py

Intersection test for two closed line segments with integer endpoints.

Segments A = (p1, p2) and B = (p3, p4) intersect when each one straddles
the supporting line of the other, or when an endpoint of one lies on the
other (collinear and inside its bounding box).
"""

import logging
from enum import Enum
from typing import Union

from .geometry2d import Point, direction, on_segment


class IntersectionMode(Enum):
    """
    How the general-position straddle test is combined.

    STRICT requires both segments to straddle each other.
    LEGACY keeps the unparenthesised and/or chain of the old textbook
    code, where `and` binds tighter than `or`:
        (d1<0 and d2>0) or ((d1>0 and d2<0) and (d3<0 and d4>0)) or (d3>0 and d4<0)
    It reports some disjoint pairs as intersecting and depends on the
    order of the segment endpoints.
    """
    STRICT = "strict"
    LEGACY = "legacy"

    def __str__(self) -> str:
        return self.value


def _straddles(d1: int, d2: int, d3: int, d4: int, mode: IntersectionMode) -> bool:
    if mode is IntersectionMode.LEGACY:
        return ((d1 < 0 and d2 > 0) or (d1 > 0 and d2 < 0) and
                (d3 < 0 and d4 > 0) or (d3 > 0 and d4 < 0))

    return (((d1 < 0 and d2 > 0) or (d1 > 0 and d2 < 0)) and
            ((d3 < 0 and d4 > 0) or (d3 > 0 and d4 < 0)))


def intersects(p1: Point, p2: Point, p3: Point, p4: Point,
               mode: Union[IntersectionMode, str] = IntersectionMode.STRICT) -> bool:
    """
    Check if segment (p1, p2) intersects segment (p3, p4).

    Args:
        p1, p2: endpoints of the first segment
        p3, p4: endpoints of the second segment
        mode: IntersectionMode or its string value ("strict" / "legacy")

    Returns:
        True if the segments share at least one point (touching endpoints
        and collinear overlap included), False otherwise.
    """
    mode = IntersectionMode(mode)

    d1 = direction(p3, p4, p1)
    d2 = direction(p3, p4, p2)
    d3 = direction(p1, p2, p3)
    d4 = direction(p1, p2, p4)
    logging.debug("Segment directions d1=%d d2=%d d3=%d d4=%d (mode=%s)", d1, d2, d3, d4, mode)

    if _straddles(d1, d2, d3, d4, mode):
        return True

    # Collinear endpoint inside the other segment's bounding box
    if d1 == 0 and on_segment(p3, p4, p1):
        return True
    if d2 == 0 and on_segment(p3, p4, p2):
        return True
    if d3 == 0 and on_segment(p1, p2, p3):
        return True
    if d4 == 0 and on_segment(p1, p2, p4):
        return True

    return False


class SegmentIntersection:
    """Segment intersection checker bound to one IntersectionMode."""

    def __init__(self, mode: Union[IntersectionMode, str] = IntersectionMode.STRICT):
        self.mode = IntersectionMode(mode)

    def intersect(self, p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
        return intersects(p1, p2, p3, p4, self.mode)
