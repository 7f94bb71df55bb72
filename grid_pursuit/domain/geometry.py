"""Coordinate arithmetic on the integer grid.

Coordinates are ``(x, y)`` tuples. The eight compass directions are kept in
one fixed order; every scan and every tie-break iterates them by index
0..7, so the order is part of the planner's observable behaviour.
"""

from __future__ import annotations

import math

Coordinate = tuple[int, int]

DIRECTIONS: tuple[Coordinate, ...] = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)
"""Unit vectors indexed 0..7."""

NUM_DIRECTIONS = len(DIRECTIONS)


def _sign(value: int) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def clamp_to_unit(delta: Coordinate) -> Coordinate:
    """Clamp each axis of *delta* independently to {-1, 0, 1}."""
    return (_sign(delta[0]), _sign(delta[1]))


def direction_to(target: Coordinate, origin: Coordinate) -> Coordinate:
    """Unit step from *origin* toward *target* (``(0, 0)`` when equal)."""
    return clamp_to_unit((target[0] - origin[0], target[1] - origin[1]))


def offset(origin: Coordinate, direction: Coordinate, steps: int = 1) -> Coordinate:
    """Return ``origin + direction * steps``."""
    return (origin[0] + direction[0] * steps, origin[1] + direction[1] * steps)


def euclidean(a: Coordinate, b: Coordinate) -> float:
    """Euclidean distance; symmetric in the axis deltas."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return math.sqrt(dx * dx + dy * dy)


def chebyshev(a: Coordinate, b: Coordinate) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))
