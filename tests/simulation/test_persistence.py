from pathlib import Path

import pyarrow.parquet as pq

from grid_pursuit.simulation.engine import empty_trajectory_columns
from grid_pursuit.simulation.persistence import flush_trajectory_columns


def _append_row(columns: dict[str, list], step: int) -> None:
    columns["run_id"].append("r")
    columns["step"].append(step)
    columns["x"].append(step)
    columns["y"].append(0)
    columns["stage"].append("fast_path")
    columns["radius_used"].append(None)
    columns["scanned_cells"].append([])
    columns["distance_to_target"].append(1.0)


def test_flush_with_no_rows_keeps_writer_unset(tmp_path: Path) -> None:
    path = tmp_path / "trajectory_log.parquet"
    assert flush_trajectory_columns(empty_trajectory_columns(), path, None) is None
    assert not path.exists()


def test_flush_appends_and_clears_buffers(tmp_path: Path) -> None:
    path = tmp_path / "trajectory_log.parquet"
    columns = empty_trajectory_columns()
    _append_row(columns, 0)
    writer = flush_trajectory_columns(columns, path, None)
    assert writer is not None
    assert all(values == [] for values in columns.values())

    _append_row(columns, 1)
    _append_row(columns, 2)
    assert flush_trajectory_columns(columns, path, writer) is writer
    writer.close()

    table = pq.read_table(path)
    assert table.column("step").to_pylist() == [0, 1, 2]
    assert table.column("radius_used").to_pylist() == [None, None, None]
