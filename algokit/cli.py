"""
algokit/cli.py

Command-line front-end.

    algokit hull 0,3 2,2 1,1 2,1 3,0 0,0 3,3
    algokit hull -- -1,0 0,2 1,0      # "--" before negative coordinates
    algokit intersect 0 0 2 2 0 2 2 0
    algokit intersect                 # prompts for coordinates on stdin
    algokit projectile --velocity 5 --angle 40
    algokit selftest
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import load_config
from .convex_hull import compute_hull
from .geometry2d import Point
from .projectile import horizontal_range, max_height, solve, time_of_flight
from .segment_intersection import IntersectionMode, intersects


def _parse_point(text: str) -> Point:
    """argparse type for 'X,Y' arguments."""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}")
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"coordinates must be integers: {text!r}") from None


def _read_segment(prompt: str) -> tuple[Point, Point]:
    values = [int(v) for v in input(prompt).split()]
    if len(values) != 4:
        raise ValueError(f"expected 4 integers, got {len(values)}")
    return (values[0], values[1]), (values[2], values[3])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit", description="Textbook geometry and physics algorithms")
    parser.add_argument("--config", default=None, help="YAML config file (default: the packaged algokit.yaml)")
    parser.add_argument("--log-level", default=None, type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="override the configured logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    hull = sub.add_parser("hull", help="convex hull of integer points (Jarvis march)")
    hull.add_argument("points", nargs="*", type=_parse_point, metavar="X,Y")

    inter = sub.add_parser("intersect", help="check whether two segments intersect")
    inter.add_argument("coords", nargs="*", type=int, metavar="N",
                       help="x1 y1 x2 y2 x3 y3 x4 y4; prompt on stdin when omitted")
    inter.add_argument("--mode", choices=[m.value for m in IntersectionMode], default=None,
                       help="straddle test combination (default from config)")

    proj = sub.add_parser("projectile", help="ground-to-ground projectile motion")
    proj.add_argument("--velocity", type=float, required=True, help="initial speed in m/s")
    proj.add_argument("--angle", type=float, required=True, help="launch angle in degrees")
    proj.add_argument("--gravity", type=float, default=None, help="gravity in m/s^2 (default from config)")

    sub.add_parser("selftest", help="run the reference scenarios")
    return parser


def _cmd_hull(args: argparse.Namespace) -> int:
    for x, y in compute_hull(args.points):
        print(f"{x} {y}")
    return 0


def _cmd_intersect(args: argparse.Namespace, default_mode: IntersectionMode) -> int:
    mode = IntersectionMode(args.mode) if args.mode else default_mode

    if args.coords:
        if len(args.coords) != 8:
            print(f"error: expected 8 coordinates, got {len(args.coords)}", file=sys.stderr)
            return 2
        c = args.coords
        p1, p2, p3, p4 = (c[0], c[1]), (c[2], c[3]), (c[4], c[5]), (c[6], c[7])
    else:
        try:
            p1, p2 = _read_segment("Enter coordinates of first segment (x1 y1 x2 y2): ")
            p3, p4 = _read_segment("Enter coordinates of second segment (x3 y3 x4 y4): ")
        except (ValueError, EOFError) as exc:
            print(f"\nerror: invalid segment input: {exc}", file=sys.stderr)
            return 2

    print("Intersect" if intersects(p1, p2, p3, p4, mode) else "Do not intersect")
    return 0


def _cmd_projectile(args: argparse.Namespace, default_gravity: float) -> int:
    gravity = args.gravity if args.gravity is not None else default_gravity
    if gravity <= 0:
        print(f"error: gravity must be positive, got {gravity}", file=sys.stderr)
        return 2

    result = solve(args.velocity, args.angle, gravity)
    print(f"Initial Velocity: {result.initial_velocity} m/s")
    print(f"Launch Angle: {result.angle} degrees")
    print(f"Time of Flight: {result.time_of_flight:.3f} s")
    print(f"Horizontal Range: {result.horizontal_range:.3f} m")
    print(f"Max Height: {result.max_height:.3f} m")
    return 0


def run_selftest() -> bool:
    """Reference scenarios; prints a report and returns overall success."""
    checks = []

    points = [(0, 3), (2, 2), (1, 1), (2, 1), (3, 0), (0, 0), (3, 3)]
    checks.append(("Convex hull", compute_hull(points), [(0, 3), (0, 0), (3, 0), (3, 3)]))

    checks.append(("Segments cross", intersects((0, 0), (2, 2), (0, 2), (2, 0)), True))
    checks.append(("Segments disjoint", intersects((0, 0), (1, 0), (0, 2), (1, 2)), False))
    checks.append(("Point on segment", intersects((0, 0), (2, 0), (1, 0), (1, 0)), True))

    flight_time = round(time_of_flight(5.0, 40.0), 3)
    checks.append(("Projectile flight time (s)", flight_time, 0.655))
    checks.append(("Projectile horizontal range (m)", round(horizontal_range(5.0, 40.0, flight_time), 2), 2.51))
    checks.append(("Projectile max height (m)", round(max_height(5.0, 40.0), 3), 0.526))

    ok = True
    for name, actual, expected in checks:
        passed = actual == expected
        ok = ok and passed
        print(f"{name}: expected {expected}, got {actual} -> {'TEST PASSED' if passed else 'TEST FAILED'}")

    print("=" * 50)
    print("All tests passed!" if ok else "Some tests FAILED")
    return ok


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        loader = load_config(args.config)
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    config = loader.config

    level = getattr(logging, args.log_level or config.logging.level)
    logging.basicConfig(level=level)
    # basicConfig is a no-op once the root logger has a handler
    logging.getLogger().setLevel(level)
    logging.debug("Using configuration from %s", loader.config_path)

    if args.command == "hull":
        return _cmd_hull(args)
    if args.command == "intersect":
        return _cmd_intersect(args, config.segment_intersection.mode)
    if args.command == "projectile":
        return _cmd_projectile(args, config.projectile.gravity)
    return 0 if run_selftest() else 1


if __name__ == "__main__":
    sys.exit(main())
