"""Simulation engine: tick driver, seeded batches, and Parquet persistence."""

from grid_pursuit.simulation.engine import generate_layout, run_batch_search, run_pursuit
from grid_pursuit.simulation.persistence import flush_trajectory_columns

__all__ = [
    "flush_trajectory_columns",
    "generate_layout",
    "run_batch_search",
    "run_pursuit",
]
