"""Target selection with a degrading lookahead radius."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from grid_pursuit.domain.geometry import DIRECTIONS, Coordinate, direction_to, euclidean, offset
from grid_pursuit.domain.ranker import RunTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    """Winning far cell and the radius it was found at."""

    cell: Coordinate
    direction_index: int
    radius: int
    distance: float


def best_at_radius(
    runs: RunTable, location: Coordinate, target: Coordinate, radius: int
) -> Selection | None:
    """Closest frontier cell among directions whose run is exactly *radius*.

    Ties keep the earliest direction index.
    """
    best: Selection | None = None
    for j, direction in enumerate(DIRECTIONS):
        if runs[j] != radius:
            continue
        cell = offset(location, direction, radius)
        d = euclidean(cell, target)
        if best is None or d < best.distance:
            best = Selection(cell=cell, direction_index=j, radius=radius, distance=d)
    return best


def select_with_degrade(
    runs: RunTable, location: Coordinate, target: Coordinate, radius: int
) -> Selection | None:
    """Try ``radius``, then ``radius - 1`` and so on down to 1.

    Returns ``None`` when no direction has an open run at any radius, which
    means the agent is enclosed and stays put this tick.
    """
    for r in range(radius, 0, -1):
        selection = best_at_radius(runs, location, target, r)
        if selection is not None:
            return selection
        logger.debug("no frontier at r=%d from %s, degrading", r, location)
    return None


def step_toward(location: Coordinate, selection: Selection) -> Coordinate:
    """Single-cell step from *location* toward the selected far cell."""
    dx, dy = direction_to(selection.cell, location)
    return (location[0] + dx, location[1] + dy)
