"""Domain layer: grid, agent, planners, and run-termination detectors."""

from grid_pursuit.domain.agent import Agent
from grid_pursuit.domain.filters import OscillationDetector, StallDetector, TerminationReason
from grid_pursuit.domain.geometry import (
    DIRECTIONS,
    Coordinate,
    chebyshev,
    clamp_to_unit,
    direction_to,
    euclidean,
)
from grid_pursuit.domain.grid import Grid
from grid_pursuit.domain.overlay import ScanOverlay
from grid_pursuit.domain.planner import TickResult, TickStage, planner_for, tick
from grid_pursuit.domain.ranker import RunTable, rank_directions, try_fast_path
from grid_pursuit.domain.scored import scored_tick
from grid_pursuit.domain.selector import Selection, select_with_degrade

__all__ = [
    "Agent",
    "Coordinate",
    "DIRECTIONS",
    "Grid",
    "OscillationDetector",
    "RunTable",
    "ScanOverlay",
    "Selection",
    "StallDetector",
    "TerminationReason",
    "TickResult",
    "TickStage",
    "chebyshev",
    "clamp_to_unit",
    "direction_to",
    "euclidean",
    "planner_for",
    "rank_directions",
    "scored_tick",
    "select_with_degrade",
    "tick",
]
