"""Configuration dataclasses and result containers for pursuit runs.

All frozen dataclasses that parameterise single runs and seeded batch runs
live here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from grid_pursuit.config.constants import (
    DEFAULT_START,
    DEFAULT_TARGET,
    GRID_HEIGHT,
    GRID_WIDTH,
    NUM_STEPS,
    OBSTACLE_DENSITY,
    OSCILLATION_HISTORY,
    OSCILLATION_MAX_PERIOD,
    SEARCH_RADIUS,
    STALL_WINDOW,
)

__all__ = [
    "PlannerStrategy",
    "PursuitConfig",
    "RunResult",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunResult:
    """Top-level result for one pursuit run."""

    run_id: str
    termination_reason: str | None
    ticks: int
    final_location: tuple[int, int]
    arrived: bool


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


class PlannerStrategy(Enum):
    """Which local planner drives the agent each tick."""

    LOOK_AROUND = "look_around"
    SCORED = "scored"


@dataclass(frozen=True)
class PursuitConfig:
    """Runtime knobs for one pursuit run (and every run of a batch)."""

    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    radius: int = SEARCH_RADIUS
    steps: int = NUM_STEPS
    stall_window: int = STALL_WINDOW
    detect_oscillation: bool = False
    oscillation_max_period: int = OSCILLATION_MAX_PERIOD
    oscillation_history: int = OSCILLATION_HISTORY
    strategy: PlannerStrategy = PlannerStrategy.LOOK_AROUND
    stop_on_arrival: bool = True
    obstacle_density: float = OBSTACLE_DENSITY
    start: tuple[int, int] = DEFAULT_START
    target: tuple[int, int] = DEFAULT_TARGET

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid dimensions must be >= 1")
        if self.radius < 1:
            raise ValueError("radius must be >= 1")
        if self.steps < 1:
            raise ValueError("steps must be >= 1")
        if self.stall_window < 1:
            raise ValueError("stall_window must be >= 1")
        if self.oscillation_max_period < 2:
            raise ValueError("oscillation_max_period must be >= 2")
        if self.oscillation_history < 2 * self.oscillation_max_period:
            raise ValueError("oscillation_history must be >= 2 * oscillation_max_period")
        if not 0.0 <= self.obstacle_density < 1.0:
            raise ValueError("obstacle_density must be in [0, 1)")
        for label, (x, y) in (("start", self.start), ("target", self.target)):
            if not (0 <= x < self.grid_width and 0 <= y < self.grid_height):
                raise ValueError(f"{label} {(x, y)} lies outside the grid")
