"""Parquet persistence helper for the trajectory stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from grid_pursuit.io.schemas import TRAJECTORY_SCHEMA


def flush_trajectory_columns(
    columns: dict[str, list],
    trajectory_log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated trajectory rows to Parquet and clear in-memory buffers."""
    if not columns["run_id"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=TRAJECTORY_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(trajectory_log_path, TRAJECTORY_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer
