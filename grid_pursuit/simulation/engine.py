"""Headless tick driver: single pursuit runs and seeded batches with Parquet output."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from random import Random

import pyarrow as pa
import pyarrow.parquet as pq

from grid_pursuit.config.constants import FLUSH_THRESHOLD
from grid_pursuit.config.types import PlannerStrategy, PursuitConfig, RunResult
from grid_pursuit.domain.agent import Agent
from grid_pursuit.domain.filters import OscillationDetector, StallDetector, TerminationReason
from grid_pursuit.domain.geometry import euclidean
from grid_pursuit.domain.grid import Grid
from grid_pursuit.domain.overlay import ScanOverlay
from grid_pursuit.domain.planner import planner_for
from grid_pursuit.io.layout import Layout, dump_layout
from grid_pursuit.io.paths import (
    logs_dir,
    run_payload_path,
    run_summary_path,
    runs_dir,
    trajectory_log_path,
)
from grid_pursuit.io.schemas import (
    RUN_PAYLOAD_SCHEMA_VERSION,
    RUN_SUMMARY_SCHEMA,
    TRAJECTORY_SCHEMA,
)
from grid_pursuit.simulation.persistence import flush_trajectory_columns

logger = logging.getLogger(__name__)


def _deterministic_run_id(strategy: PlannerStrategy, seed: int) -> str:
    """Build reproducible run ID stable across runs for identical seeds."""
    return f"{strategy.value}_s{seed}"


def empty_trajectory_columns() -> dict[str, list]:
    return {name: [] for name in TRAJECTORY_SCHEMA.names}


def generate_layout(config: PursuitConfig, rng: Random) -> Grid:
    """Block a random ``obstacle_density`` share of cells, keeping start and target open."""
    free = [
        (x, y)
        for y in range(config.grid_height)
        for x in range(config.grid_width)
        if (x, y) not in (config.start, config.target)
    ]
    n_blocked = int(round(config.obstacle_density * len(free)))
    return Grid.from_blocked(config.grid_width, config.grid_height, rng.sample(free, n_blocked))


def run_pursuit(
    grid: Grid,
    agent: Agent,
    config: PursuitConfig,
    run_id: str = "run",
    columns: dict[str, list] | None = None,
) -> RunResult:
    """Tick *agent* on *grid* until it arrives, stalls, oscillates or runs out of steps.

    When *columns* is given, one trajectory row per tick is appended to it.
    """
    for label, (x, y) in (("location", agent.location), ("target", agent.target)):
        if not grid.in_bounds(x, y):
            raise ValueError(f"agent {label} {(x, y)} lies outside the grid")

    planner = planner_for(config.strategy)
    # The scored variant scans until blocked unless capped.
    radius = config.radius if config.strategy == PlannerStrategy.LOOK_AROUND else None
    overlay = ScanOverlay()
    stall_detector = StallDetector(window=config.stall_window)
    oscillation_detector = (
        OscillationDetector(
            max_period=config.oscillation_max_period,
            history_size=config.oscillation_history,
        )
        if config.detect_oscillation
        else None
    )

    ticks = 0
    termination_reason: str | None = None
    if config.stop_on_arrival and agent.arrived:
        termination_reason = TerminationReason.ARRIVED.value
    else:
        stall_detector.observe(agent.location)
        for step in range(config.steps):
            overlay.clear()
            result = planner(grid, agent, radius=radius, overlay=overlay)
            ticks += 1

            if columns is not None:
                x, y = agent.location
                columns["run_id"].append(run_id)
                columns["step"].append(step)
                columns["x"].append(x)
                columns["y"].append(y)
                columns["stage"].append(result.stage.value)
                columns["radius_used"].append(result.radius_used)
                columns["scanned_cells"].append(
                    sorted(cy * grid.width + cx for cx, cy in overlay.scanned_cells())
                )
                columns["distance_to_target"].append(euclidean(agent.location, agent.target))

            if agent.arrived:
                if config.stop_on_arrival:
                    termination_reason = TerminationReason.ARRIVED.value
                    break
                continue
            if stall_detector.observe(agent.location):
                termination_reason = TerminationReason.STALLED.value
                break
            if oscillation_detector is not None and oscillation_detector.observe(agent.location):
                termination_reason = TerminationReason.OSCILLATING.value
                break

    logger.info(
        "run %s finished after %d ticks at %s (%s)",
        run_id,
        ticks,
        agent.location,
        termination_reason or "budget exhausted",
    )
    return RunResult(
        run_id=run_id,
        termination_reason=termination_reason,
        ticks=ticks,
        final_location=agent.location,
        arrived=agent.arrived,
    )


def run_batch_search(
    n_runs: int,
    out_dir: Path,
    config: PursuitConfig | None = None,
    base_seed: int = 0,
    layout: Layout | None = None,
) -> list[RunResult]:
    """Run seeded pursuits and persist JSON/Parquet outputs.

    Each run gets its own generated obstacle layout unless *layout* is given,
    in which case every run starts from a copy of it.
    """
    if n_runs < 1:
        raise ValueError("n_runs must be >= 1")
    config = config or PursuitConfig()
    if layout is not None:
        if (layout.grid.width, layout.grid.height) != (config.grid_width, config.grid_height):
            raise ValueError("layout dimensions conflict with config grid size")
        if (layout.start, layout.target) != (config.start, config.target):
            raise ValueError("layout markers conflict with config start/target")

    out_dir = Path(out_dir)
    runs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    writer: pq.ParquetWriter | None = None
    columns = empty_trajectory_columns()
    summary_columns: dict[str, list] = {name: [] for name in RUN_SUMMARY_SCHEMA.names}
    results: list[RunResult] = []

    try:
        for i in range(n_runs):
            seed = base_seed + i
            run_id = _deterministic_run_id(config.strategy, seed)
            if layout is not None:
                grid = layout.grid.copy()
            else:
                grid = generate_layout(config, Random(seed))
            agent = Agent(location=config.start, target=config.target)
            initial_board = dump_layout(grid, agent.location, agent.target)

            result = run_pursuit(grid, agent, config, run_id=run_id, columns=columns)
            if len(columns["run_id"]) >= FLUSH_THRESHOLD:
                logger.debug("flushing %d trajectory rows", len(columns["run_id"]))
                writer = flush_trajectory_columns(columns, trajectory_log_path(out_dir), writer)

            final_distance = euclidean(result.final_location, config.target)
            summary_row = {
                "schema_version": RUN_PAYLOAD_SCHEMA_VERSION,
                "run_id": run_id,
                "seed": seed,
                "strategy": config.strategy.value,
                "grid_width": config.grid_width,
                "grid_height": config.grid_height,
                "obstacle_count": len(grid.blocked_cells()),
                "ticks": result.ticks,
                "arrived": result.arrived,
                "termination_reason": result.termination_reason,
                "final_x": result.final_location[0],
                "final_y": result.final_location[1],
                "final_distance": final_distance,
            }
            for key, value in summary_row.items():
                summary_columns[key].append(value)

            payload = {
                "run_id": run_id,
                "layout": initial_board,
                "result": {
                    "ticks": result.ticks,
                    "arrived": result.arrived,
                    "termination_reason": result.termination_reason,
                    "final_location": list(result.final_location),
                    "final_distance": final_distance,
                },
                "metadata": {
                    "seed": seed,
                    "strategy": config.strategy.value,
                    "grid_width": config.grid_width,
                    "grid_height": config.grid_height,
                    "radius": config.radius,
                    "steps": config.steps,
                    "stall_window": config.stall_window,
                    "detect_oscillation": config.detect_oscillation,
                    "stop_on_arrival": config.stop_on_arrival,
                    "obstacle_density": config.obstacle_density,
                    "start": list(config.start),
                    "target": list(config.target),
                    "schema_version": RUN_PAYLOAD_SCHEMA_VERSION,
                },
            }
            run_payload_path(out_dir, run_id).write_text(
                json.dumps(payload, ensure_ascii=False, indent=2)
            )
            results.append(result)

        writer = flush_trajectory_columns(columns, trajectory_log_path(out_dir), writer)
        if writer is None:
            # Every run ended before its first tick; readers still expect the file.
            pq.write_table(TRAJECTORY_SCHEMA.empty_table(), trajectory_log_path(out_dir))
    finally:
        if writer is not None:
            writer.close()

    pq.write_table(
        pa.Table.from_pydict(summary_columns, schema=RUN_SUMMARY_SCHEMA),
        run_summary_path(out_dir),
    )
    return results
