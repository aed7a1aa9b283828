"""
algokit/convex_hull.py

Convex hull by gift wrapping (Jarvis march).

The walk starts at the leftmost input point and repeatedly picks the next
vertex q such that no input point lies to the right of the directed edge
p->q, which sweeps the boundary counter-clockwise. Points lying on a hull
edge are skipped in favour of the farthest one. The result is an open
cycle: the last vertex does not repeat the first.

Degenerate inputs (fewer than three points, or points that all lie on one
line) produce an empty hull rather than a 1- or 2-vertex polygon.
"""

import logging
from typing import Any, Iterable, List, Sequence

from .geometry2d import (
    Point, Orientation, orientation, direction, on_segment, as_points, all_collinear
)


def leftmost_index(points: Sequence[Point]) -> int:
    """Index of the point with minimum x. On ties the first one wins."""
    leftmost = 0
    for i in range(1, len(points)):
        if points[i][0] < points[leftmost][0]:
            leftmost = i
    return leftmost


def _distance_sq(p: Point, q: Point) -> int:
    return (p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2


def _replaces(p: Point, q: Point, r: Point) -> bool:
    """
    Whether r is a better next vertex than q when wrapping from p.

    r wins if it lies to the right of p->q, or if it lies further out
    on the same ray from p. Points coinciding with p carry no direction.
    """
    if r == p:
        return False
    if q == p:
        return True

    turn = orientation(p, q, r)
    if turn is Orientation.CLOCKWISE:
        return True
    if turn is Orientation.COLLINEAR:
        same_ray = (q[0] - p[0]) * (r[0] - p[0]) + (q[1] - p[1]) * (r[1] - p[1]) > 0
        return same_ray and _distance_sq(p, r) > _distance_sq(p, q)
    return False


def _next_vertex(points: Sequence[Point], p: int) -> int:
    """
    One gift wrapping step from vertex index p.

    Starts from the neighbour (p + 1) % n and scans for replacements.
    When p sits inside a hull edge the candidates span a half-plane and a
    single scan can settle on the wrong side, so the scan repeats until no
    point lies to the right of p->q.
    """
    n = len(points)
    q = (p + 1) % n
    while True:
        for i in range(n):
            if _replaces(points[p], points[q], points[i]):
                q = i
        if not any(orientation(points[p], points[q], r) is Orientation.CLOCKWISE for r in points):
            return q


def compute_hull(points: Iterable[Any]) -> List[Point]:
    """
    Compute the convex hull of a point set.

    Args:
        points: sequence of (x, y) pairs or an (N, 2) numpy array.
                Duplicates and collinear groups are allowed.

    Returns:
        Hull vertices in counter-clockwise order, starting at the leftmost
        point (first occurrence on ties). Empty for fewer than 3 points or
        an all-collinear input.
    """
    pts = as_points(points)
    n = len(pts)
    if n < 3:
        return []

    if all_collinear(pts):
        logging.debug("All %d points are collinear; returning empty hull", n)
        return []

    start = leftmost_index(pts)
    first = pts[start]
    logging.debug("Jarvis march over %d points, start=%s (index %d)", n, first, start)

    hull: List[Point] = []
    p = start
    while True:
        hull.append(pts[p])
        q = _next_vertex(pts, p)
        logging.debug("Wrap step %s -> %s", pts[p], pts[q])

        if pts[q] == first:
            return hull
        # A start point inside the left edge is passed over on the way back
        if p != start and direction(pts[p], pts[q], first) == 0 and on_segment(pts[p], pts[q], first):
            return hull
        p = q


class ConvexHull:
    """
    Convex hull of a fixed point set.

    Keeps its own copy of the input so later changes to the caller's list
    do not affect the result.
    """

    def __init__(self, points: Iterable[Any]):
        self.points: List[Point] = as_points(points)

    def get_hull(self) -> List[Point]:
        """Hull vertices, recomputed on every call."""
        return compute_hull(self.points)

    def __len__(self) -> int:
        return len(self.points)
