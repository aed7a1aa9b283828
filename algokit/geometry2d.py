"""
algokit/geometry2d.py

Pure 2D geometry primitives shared by the hull and segment algorithms.

Points are plain (x, y) tuples of integers. Nothing here logs, reads
configuration or keeps state; every function is a pure function of its
arguments.
"""

from enum import Enum
from typing import Any, Iterable, List, Sequence, Tuple

import numpy as np

Point = Tuple[int, int]
LineSegment = Tuple[Point, Point]


class Orientation(Enum):
    """
    Turn direction of an ordered triplet (p, q, r).

    Values follow the classic 0 / 1 / 2 encoding of the gift wrapping
    textbook version.
    """
    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2

    def __str__(self) -> str:
        return self.name


def as_point(value: Any) -> Point:
    """
    Normalise an (x, y) pair into a Point tuple.

    Accepts tuples, lists and numpy rows. Raises ValueError for anything
    that does not unpack into exactly two coordinates.
    """
    if isinstance(value, np.ndarray):
        value = value.tolist()
    try:
        x, y = value
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Point must be an (x, y) pair, got {value!r}") from exc
    return (x, y)


def as_points(points: Iterable[Any]) -> List[Point]:
    """
    Normalise a point sequence (or an (N, 2) numpy array) into a new list.

    The result never aliases the caller's container.
    """
    if isinstance(points, np.ndarray):
        if points.size == 0:
            return []
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"Expected an (N, 2) array of points, got shape {points.shape}")
        return [(x, y) for x, y in points.tolist()]
    return [as_point(p) for p in points]


def orientation_value(p: Point, q: Point, r: Point) -> int:
    """
    Signed cross product used by the orientation test.

    (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    Positive for a clockwise turn, negative for counter-clockwise.
    """
    return (q[1] - p[1]) * (r[0] - q[0]) - (q[0] - p[0]) * (r[1] - q[1])


def orientation(p: Point, q: Point, r: Point) -> Orientation:
    """Classify the ordered triplet (p, q, r)."""
    val = orientation_value(p, q, r)
    if val == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if val > 0 else Orientation.COUNTER_CLOCKWISE


def direction(p: Point, q: Point, r: Point) -> int:
    """
    Cross product of (q - p) and (r - p).

    0 when r lies on the line through p and q; the sign tells which side
    of the directed line p->q the point r is on.
    """
    return (r[1] - p[1]) * (q[0] - p[0]) - (r[0] - p[0]) * (q[1] - p[1])


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """
    Check whether r lies inside the bounding box of segment pq.

    Only meaningful when r is already known to be collinear with p and q.
    """
    return (min(p[0], q[0]) <= r[0] <= max(p[0], q[0]) and
            min(p[1], q[1]) <= r[1] <= max(p[1], q[1]))


def all_collinear(points: Sequence[Point]) -> bool:
    """
    True if every point lies on one line.

    A set whose points all coincide counts as collinear, as does an empty
    or single-point set.
    """
    if not points:
        return True

    anchor = points[0]
    other = next((p for p in points if p != anchor), None)
    if other is None:
        return True

    return all(direction(anchor, other, p) == 0 for p in points)
