"""Tests for grid_pursuit.io.paths."""

from __future__ import annotations

from pathlib import Path

import pytest

from grid_pursuit.io.paths import (
    resolve_within_base,
    run_payload_path,
    run_summary_path,
    trajectory_log_path,
)


def test_output_layout(tmp_path: Path) -> None:
    assert trajectory_log_path(tmp_path) == tmp_path / "logs" / "trajectory_log.parquet"
    assert run_summary_path(tmp_path) == tmp_path / "logs" / "run_summary.parquet"
    assert run_payload_path(tmp_path, "look_around_s0") == (
        tmp_path / "runs" / "look_around_s0.json"
    )


class TestResolveWithinBase:
    def test_relative_path_resolved_against_base(self, tmp_path: Path) -> None:
        assert resolve_within_base(Path("a/b.png"), tmp_path) == (tmp_path / "a" / "b.png").resolve()

    def test_base_itself_is_allowed(self, tmp_path: Path) -> None:
        assert resolve_within_base(tmp_path, tmp_path) == tmp_path.resolve()

    def test_escape_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="escapes"):
            resolve_within_base(Path("../outside.png"), tmp_path)

    def test_absolute_outside_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            resolve_within_base(tmp_path.parent / "x.png", tmp_path)
