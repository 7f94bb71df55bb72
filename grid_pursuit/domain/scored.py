"""Scored-neighbor planner variant.

Differences from the look-around planner in ``planner.py``:

- there is no fast path, and the scan is not radius-limited unless a cap is
  passed: it keeps extending rays until none of them can grow;
- seeing the target on any ray steps straight toward it;
- every ray with a non-zero run is scored at its frontier by the Euclidean
  distance to the target, raised to ``OBSTACLE_PENALTY_EXPONENT`` once per
  blocked neighbor of the frontier, so frontiers hugging walls lose to open
  ones; a frontier next to the target wins outright.
"""

from __future__ import annotations

import logging

from grid_pursuit.config.constants import OBSTACLE_PENALTY_EXPONENT
from grid_pursuit.domain.agent import Agent
from grid_pursuit.domain.geometry import (
    DIRECTIONS,
    NUM_DIRECTIONS,
    Coordinate,
    direction_to,
    euclidean,
    offset,
)
from grid_pursuit.domain.grid import Grid
from grid_pursuit.domain.overlay import ScanOverlay
from grid_pursuit.domain.planner import TickResult, TickStage
from grid_pursuit.domain.ranker import RunTable

logger = logging.getLogger(__name__)


def scan_until_blocked(
    grid: Grid,
    location: Coordinate,
    target: Coordinate,
    radius: int | None = None,
    overlay: ScanOverlay | None = None,
) -> tuple[RunTable, bool]:
    """Extend all eight rays ring by ring until none grows.

    Returns the run table and whether an open cell on some ray is the target.
    """
    limit = radius if radius is not None else max(grid.width, grid.height)
    runs = [0] * NUM_DIRECTIONS
    for i in range(1, limit + 1):
        grown = 0
        for j, direction in enumerate(DIRECTIONS):
            if runs[j] != i - 1:
                continue
            x, y = offset(location, direction, i)
            if grid.is_blocked(x, y):
                continue
            if (x, y) == target:
                return tuple(runs), True
            runs[j] = i
            grown += 1
            if overlay is not None:
                overlay.mark((x, y), j)
        if grown == 0:
            break
    return tuple(runs), False


def score_frontier(grid: Grid, frontier: Coordinate, target: Coordinate) -> tuple[float, bool]:
    """Return ``(score, touches_target)`` for one frontier cell."""
    score = euclidean(frontier, target)
    for direction in DIRECTIONS:
        x, y = offset(frontier, direction)
        if not grid.in_bounds(x, y):
            continue
        if (x, y) == target:
            return score, True
        if grid.is_blocked(x, y):
            score = score**OBSTACLE_PENALTY_EXPONENT
    return score, False


def scored_tick(
    grid: Grid,
    agent: Agent,
    radius: int | None = None,
    overlay: ScanOverlay | None = None,
) -> TickResult:
    """Advance *agent* by at most one cell using frontier scoring."""
    location = agent.location
    if agent.arrived:
        return TickResult(stage=TickStage.ARRIVED, previous=location, location=location)

    runs, sighted = scan_until_blocked(grid, location, agent.target, radius, overlay)
    if sighted:
        step = offset(location, direction_to(agent.target, location))
        agent.move_to(step)
        return TickResult(
            stage=TickStage.TARGET_SIGHTED, previous=location, location=step, runs=runs
        )

    best: tuple[Coordinate, int] | None = None
    best_score = 0.0
    for j, direction in enumerate(DIRECTIONS):
        if runs[j] == 0:
            continue
        frontier = offset(location, direction, runs[j])
        score, touches_target = score_frontier(grid, frontier, agent.target)
        if touches_target:
            best = (frontier, runs[j])
            break
        if best is None or score < best_score:
            best = (frontier, runs[j])
            best_score = score

    if best is None:
        logger.debug("agent enclosed at %s, staying put", location)
        return TickResult(
            stage=TickStage.STATIONARY, previous=location, location=location, runs=runs
        )

    frontier, reach = best
    step = offset(location, direction_to(frontier, location))
    agent.move_to(step)
    return TickResult(
        stage=TickStage.SELECTED,
        previous=location,
        location=step,
        runs=runs,
        radius_used=reach,
    )
