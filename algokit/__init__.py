"""Textbook geometry and physics algorithms (convex hull, segment intersection, projectile motion)."""

from .geometry2d import (
    Point,
    Orientation,
    orientation,
    direction,
    on_segment,
)
from .convex_hull import ConvexHull, compute_hull
from .segment_intersection import IntersectionMode, SegmentIntersection, intersects
from .projectile import (
    GRAVITY,
    ProjectileResult,
    degrees_to_radians,
    time_of_flight,
    horizontal_range,
    max_height,
    solve,
    trajectory,
)

__version__ = "0.1.0"

__all__ = [
    # 几何基础
    'Point',
    'Orientation',
    'orientation',
    'direction',
    'on_segment',

    # 凸包
    'ConvexHull',
    'compute_hull',

    # 线段相交
    'IntersectionMode',
    'SegmentIntersection',
    'intersects',

    # 抛体运动
    'GRAVITY',
    'ProjectileResult',
    'degrees_to_radians',
    'time_of_flight',
    'horizontal_range',
    'max_height',
    'solve',
    'trajectory',
]
