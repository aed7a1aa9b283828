"""
algokit/projectile.py

Ground-to-ground projectile motion under constant gravity.

Launch and landing are at the same height and air resistance is ignored.
Angles are in degrees, speeds in m/s, distances in m, times in s.
"""

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

GRAVITY = 9.81  # m/s^2


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def time_of_flight(initial_velocity: float, angle: float, gravity: float = GRAVITY) -> float:
    """Time the projectile spends in the air: 2 * v * sin(angle) / g."""
    viy = initial_velocity * math.sin(degrees_to_radians(angle))
    return (2.0 * viy) / gravity


def horizontal_range(initial_velocity: float, angle: float, time: float) -> float:
    """
    Horizontal distance covered in the given time: v * cos(angle) * t.

    Pass the result of time_of_flight (rounded or not) to get the range.
    """
    vix = initial_velocity * math.cos(degrees_to_radians(angle))
    return vix * time


def max_height(initial_velocity: float, angle: float, gravity: float = GRAVITY) -> float:
    """Apex height: (v * sin(angle))^2 / (2 * g)."""
    viy = initial_velocity * math.sin(degrees_to_radians(angle))
    return (viy ** 2) / (2.0 * gravity)


@dataclass
class ProjectileResult:
    """All three flight quantities for one launch."""
    initial_velocity: float
    angle: float
    gravity: float
    time_of_flight: float
    horizontal_range: float
    max_height: float

    def __str__(self) -> str:
        return (f"v={self.initial_velocity} m/s, angle={self.angle} deg: "
                f"t={self.time_of_flight:.3f} s, "
                f"range={self.horizontal_range:.3f} m, "
                f"h_max={self.max_height:.3f} m")


def solve(initial_velocity: float, angle: float, gravity: float = GRAVITY) -> ProjectileResult:
    """Compute time of flight, range and maximum height in one call."""
    flight_time = time_of_flight(initial_velocity, angle, gravity)
    return ProjectileResult(
        initial_velocity=initial_velocity,
        angle=angle,
        gravity=gravity,
        time_of_flight=flight_time,
        horizontal_range=horizontal_range(initial_velocity, angle, flight_time),
        max_height=max_height(initial_velocity, angle, gravity),
    )


def trajectory(initial_velocity: float, angle: float, samples: int = 50,
               gravity: float = GRAVITY) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample the flight path at evenly spaced times from launch to landing.

    Returns:
        (x, y) arrays of length `samples`; both start at 0 and y returns
        to 0 at landing.
    """
    if samples < 2:
        raise ValueError(f"samples must be at least 2, got {samples}")

    rad = degrees_to_radians(angle)
    vix = initial_velocity * math.cos(rad)
    viy = initial_velocity * math.sin(rad)

    t = np.linspace(0.0, time_of_flight(initial_velocity, angle, gravity), samples)
    x = vix * t
    y = viy * t - 0.5 * gravity * t ** 2
    return x, y
