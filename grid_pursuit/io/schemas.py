"""Parquet schema definitions for pursuit run artifacts.

All Arrow schemas used for persisting trajectories and run summaries are
centralised here so that every module works against the same column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

RUN_PAYLOAD_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Trajectory & summary schemas
# ---------------------------------------------------------------------------

# One row per tick. ``scanned_cells`` holds flat ``y * width + x`` indices of
# the cells marked on the scan overlay during that tick.
TRAJECTORY_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("step", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("stage", pa.string()),
        ("radius_used", pa.int64()),
        ("scanned_cells", pa.list_(pa.int64())),
        ("distance_to_target", pa.float64()),
    ]
)

RUN_SUMMARY_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("run_id", pa.string()),
        ("seed", pa.int64()),
        ("strategy", pa.string()),
        ("grid_width", pa.int64()),
        ("grid_height", pa.int64()),
        ("obstacle_count", pa.int64()),
        ("ticks", pa.int64()),
        ("arrived", pa.bool_()),
        ("termination_reason", pa.string()),
        ("final_x", pa.int64()),
        ("final_y", pa.int64()),
        ("final_distance", pa.float64()),
    ]
)
