"""One tick of the look-around pursuit planner.

A tick runs three stages in order, each either committing a move or
handing over to the next one:

1. ``try_fast_path`` - the straight line toward the target is open for the
   whole radius, so step along it.
2. ``rank_directions`` - measure the open run in all eight directions.
3. ``select_with_degrade`` - pick the frontier closest to the target,
   shrinking the radius until some direction reaches it, then step one
   cell toward that frontier.

An enclosed agent stays where it is. Nothing here raises for any grid or
agent position; the outcome is reported through ``TickResult.stage``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from grid_pursuit.config.constants import SEARCH_RADIUS
from grid_pursuit.config.types import PlannerStrategy
from grid_pursuit.domain.agent import Agent
from grid_pursuit.domain.geometry import Coordinate, direction_to
from grid_pursuit.domain.grid import Grid
from grid_pursuit.domain.overlay import ScanOverlay
from grid_pursuit.domain.ranker import RunTable, rank_directions, try_fast_path
from grid_pursuit.domain.selector import select_with_degrade, step_toward

logger = logging.getLogger(__name__)


class TickStage(str, Enum):
    """Which stage decided the tick."""

    ARRIVED = "arrived"
    FAST_PATH = "fast_path"
    TARGET_SIGHTED = "target_sighted"
    SELECTED = "selected"
    STATIONARY = "stationary"


@dataclass(frozen=True)
class TickResult:
    """What one tick did. ``runs`` is ``None`` when no scan was needed."""

    stage: TickStage
    previous: Coordinate
    location: Coordinate
    runs: RunTable | None = None
    radius_used: int | None = None

    @property
    def moved(self) -> bool:
        return self.previous != self.location


TickFunction = Callable[..., TickResult]


def tick(
    grid: Grid,
    agent: Agent,
    radius: int = SEARCH_RADIUS,
    overlay: ScanOverlay | None = None,
) -> TickResult:
    """Advance *agent* by at most one cell toward its target."""
    location = agent.location
    if agent.arrived:
        return TickResult(stage=TickStage.ARRIVED, previous=location, location=location)

    preferred = direction_to(agent.target, location)
    step = try_fast_path(grid, location, preferred, radius)
    if step is not None:
        agent.move_to(step)
        logger.debug("fast path %s -> %s", location, step)
        return TickResult(stage=TickStage.FAST_PATH, previous=location, location=step)

    runs = rank_directions(grid, location, radius, overlay)
    selection = select_with_degrade(runs, location, agent.target, radius)
    if selection is None:
        logger.debug("agent enclosed at %s, staying put", location)
        return TickResult(
            stage=TickStage.STATIONARY, previous=location, location=location, runs=runs
        )

    step = step_toward(location, selection)
    agent.move_to(step)
    return TickResult(
        stage=TickStage.SELECTED,
        previous=location,
        location=step,
        runs=runs,
        radius_used=selection.radius,
    )


def planner_for(strategy: PlannerStrategy) -> TickFunction:
    """Return the tick function implementing *strategy*."""
    if strategy == PlannerStrategy.SCORED:
        from grid_pursuit.domain.scored import scored_tick

        return scored_tick
    return tick
