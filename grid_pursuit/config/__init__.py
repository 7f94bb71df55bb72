"""Configuration layer: constants and typed config dataclasses."""

from grid_pursuit.config.constants import (
    DEFAULT_START,
    DEFAULT_TARGET,
    FLUSH_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    NUM_STEPS,
    OBSTACLE_PENALTY_EXPONENT,
    SEARCH_RADIUS,
    STALL_WINDOW,
)
from grid_pursuit.config.types import PlannerStrategy, PursuitConfig, RunResult

__all__ = [
    "DEFAULT_START",
    "DEFAULT_TARGET",
    "FLUSH_THRESHOLD",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "NUM_STEPS",
    "OBSTACLE_PENALTY_EXPONENT",
    "PlannerStrategy",
    "PursuitConfig",
    "RunResult",
    "SEARCH_RADIUS",
    "STALL_WINDOW",
]
