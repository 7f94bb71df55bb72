"""Matplotlib-based rendering functions for recorded pursuit runs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
import pyarrow.parquet as pq
from matplotlib import animation
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage
from matplotlib.lines import Line2D

from grid_pursuit.domain.geometry import Coordinate
from grid_pursuit.domain.grid import Grid
from grid_pursuit.io.layout import Layout, parse_layout
from grid_pursuit.io.paths import resolve_within_base
from grid_pursuit.viz.theme import DEFAULT_THEME, Theme

OPEN_CELL = 0
BLOCKED_CELL = 1
SCANNED_CELL = 2


def _resolve_paths(paths: list[Path], base_dir: Path | None) -> list[Path]:
    """Resolve every path, confining them to *base_dir* when given."""
    if base_dir is None:
        return [Path(path).resolve() for path in paths]
    base_dir = Path(base_dir).resolve()
    return [resolve_within_base(Path(path), base_dir) for path in paths]


def _load_run(
    trajectory_log_path: Path, run_json_path: Path
) -> tuple[str, Layout, list[dict[str, Any]]]:
    """Load the run payload and its trajectory rows ordered by step."""
    payload = json.loads(run_json_path.read_text())
    run_id = payload.get("run_id")
    if not isinstance(run_id, str) or not run_id:
        raise ValueError("Run JSON must include non-empty string field 'run_id'")
    layout_text = payload.get("layout")
    if not isinstance(layout_text, str):
        raise ValueError("Run JSON must include string field 'layout'")
    layout = parse_layout(layout_text)

    rows = pq.read_table(trajectory_log_path, filters=[("run_id", "=", run_id)]).to_pylist()
    if not rows:
        raise ValueError(f"No trajectory rows found for run_id={run_id}")
    rows.sort(key=lambda row: int(row["step"]))
    return run_id, layout, rows


def _decode_scanned(flat_indices: list[int] | None, grid_width: int) -> list[Coordinate]:
    """Turn flat ``y * width + x`` indices back into cells."""
    return [(index % grid_width, index // grid_width) for index in flat_indices or []]


# ---------------------------------------------------------------------------
# Board drawing helpers
# ---------------------------------------------------------------------------


def _build_board_array(grid: Grid, scanned: list[Coordinate] | None = None) -> np.ndarray:
    """Return (H, W) int array: 0 open, 1 blocked, 2 scanned-open."""
    board = np.where(grid.cells, BLOCKED_CELL, OPEN_CELL).astype(int)
    for x, y in scanned or []:
        if grid.in_bounds(x, y) and board[y, x] == OPEN_CELL:
            board[y, x] = SCANNED_CELL
    return board


def _board_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 3-color colormap (open, blocked, scanned)."""
    cmap = ListedColormap(
        [theme.open_cell_color, theme.blocked_cell_color, theme.scanned_cell_color]
    )
    norm = BoundaryNorm([-0.5, 0.5, 1.5, 2.5], cmap.N)
    return cmap, norm


def _draw_board(ax: plt.Axes, board: np.ndarray, theme: Theme = DEFAULT_THEME) -> AxesImage:
    """Shared renderer: imshow with subtle grid lines on *ax*."""
    cmap, norm = _board_cmap(theme)
    img = ax.imshow(board, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = board.shape
    for x in range(w + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(h + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xlim(-0.5, w - 0.5)
    ax.set_ylim(h - 0.5, -0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def _draw_markers(
    ax: plt.Axes,
    path: list[Coordinate],
    target: Coordinate,
    theme: Theme = DEFAULT_THEME,
) -> tuple[Line2D, Line2D]:
    """Draw start, target, the walked path and the agent; return (path, agent) artists."""
    start = path[0]
    ax.plot([start[0]], [start[1]], marker="s", color=theme.start_color, markersize=8)
    ax.plot([target[0]], [target[1]], marker="X", color=theme.target_color, markersize=10)
    (path_line,) = ax.plot(
        [x for x, _ in path], [y for _, y in path], color=theme.path_color, linewidth=1.5
    )
    (agent_marker,) = ax.plot(
        [path[-1][0]], [path[-1][1]], marker="o", color=theme.agent_color, markersize=8
    )
    return path_line, agent_marker


def _path_through(start: Coordinate, rows: list[dict[str, Any]]) -> list[Coordinate]:
    return [start] + [(int(row["x"]), int(row["y"])) for row in rows]


# ---------------------------------------------------------------------------
# render_trajectory
# ---------------------------------------------------------------------------


def render_trajectory(
    trajectory_log_path: Path,
    run_json_path: Path,
    output_path: Path,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Render the obstacle board with the full path walked during one run."""
    trajectory_log_path, run_json_path, output_path = _resolve_paths(
        [trajectory_log_path, run_json_path, output_path], base_dir
    )
    run_id, layout, rows = _load_run(trajectory_log_path, run_json_path)
    path = _path_through(layout.start, rows)

    fig, ax = plt.subplots(figsize=(6, 6))
    _draw_board(ax, _build_board_array(layout.grid), theme=theme)
    _draw_markers(ax, path, layout.target, theme=theme)
    final_stage = str(rows[-1]["stage"])
    ax.set_title(
        f"Run: {run_id} ({len(rows)} ticks, {theme.stage_labels.get(final_stage, final_stage)})"
    )

    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=200)
    plt.close(fig)


# ---------------------------------------------------------------------------
# render_filmstrip
# ---------------------------------------------------------------------------


def render_filmstrip(
    trajectory_log_path: Path,
    run_json_path: Path,
    output_path: Path,
    n_frames: int = 6,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Render a horizontal filmstrip of evenly spaced ticks with their scanned cells."""
    if n_frames < 1:
        raise ValueError("n_frames must be >= 1")
    trajectory_log_path, run_json_path, output_path = _resolve_paths(
        [trajectory_log_path, run_json_path, output_path], base_dir
    )
    run_id, layout, rows = _load_run(trajectory_log_path, run_json_path)

    actual_n = max(1, min(n_frames, len(rows)))
    indices = [int(i * (len(rows) - 1) / max(1, actual_n - 1)) for i in range(actual_n)]

    fig, axes = plt.subplots(1, actual_n, figsize=(3 * actual_n, 3), squeeze=False)
    for col_idx, row_idx in enumerate(indices):
        ax = axes[0, col_idx]
        row = rows[row_idx]
        scanned = _decode_scanned(row.get("scanned_cells"), layout.grid.width)
        _draw_board(ax, _build_board_array(layout.grid, scanned), theme=theme)
        _draw_markers(ax, _path_through(layout.start, rows[: row_idx + 1]), layout.target, theme)
        stage = str(row["stage"])
        ax.set_title(
            f"Step {int(row['step'])}\n{theme.stage_labels.get(stage, stage)}", fontsize=9
        )

    fig.suptitle(f"Run: {run_id}", fontsize=11)
    fig.tight_layout(rect=(0, 0, 1, 0.92))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=200)
    plt.close(fig)


# ---------------------------------------------------------------------------
# render_run_animation
# ---------------------------------------------------------------------------


def render_run_animation(
    trajectory_log_path: Path,
    run_json_path: Path,
    output_path: Path,
    fps: int = 4,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Render one run tick by tick: board, scanned overlay, path and agent."""
    if fps < 1:
        raise ValueError("fps must be >= 1")
    trajectory_log_path, run_json_path, output_path = _resolve_paths(
        [trajectory_log_path, run_json_path, output_path], base_dir
    )
    run_id, layout, rows = _load_run(trajectory_log_path, run_json_path)
    grid_width = layout.grid.width

    fig, ax = plt.subplots(figsize=(6, 6))
    img = _draw_board(ax, _build_board_array(layout.grid), theme=theme)
    path_line, agent_marker = _draw_markers(ax, [layout.start], layout.target, theme=theme)
    ax.set_title(f"Run: {run_id}")
    fig.tight_layout()

    def update(frame_index: int) -> tuple[Any, ...]:
        row = rows[frame_index]
        scanned = _decode_scanned(row.get("scanned_cells"), grid_width)
        img.set_data(_build_board_array(layout.grid, scanned))
        path = _path_through(layout.start, rows[: frame_index + 1])
        path_line.set_data([x for x, _ in path], [y for _, y in path])
        agent_marker.set_data([path[-1][0]], [path[-1][1]])
        stage = str(row["stage"])
        ax.set_title(
            f"Run: {run_id} (step={int(row['step'])}, "
            f"{theme.stage_labels.get(stage, stage)})"
        )
        return (img, path_line, agent_marker)

    anim = animation.FuncAnimation(
        fig, update, frames=len(rows), interval=max(1, int(1000 / fps)), blit=False
    )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    writer: animation.PillowWriter | animation.FFMpegWriter
    if output_path.suffix.lower() == ".gif":
        writer = animation.PillowWriter(fps=fps)
    else:
        writer = animation.FFMpegWriter(fps=fps)
    anim.save(output_path, writer=writer)
    plt.close(fig)
