"""CLI entrypoint for pursuit runs.

This module owns CLI argument parsing and dispatch. All domain logic lives
in the extracted modules:

- ``grid_pursuit.config``            – configuration dataclasses
- ``grid_pursuit.io.layout``         – text board layouts
- ``grid_pursuit.simulation.engine`` – ``run_batch_search`` engine
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from grid_pursuit.config.constants import (
    DEFAULT_START,
    DEFAULT_TARGET,
    GRID_HEIGHT,
    GRID_WIDTH,
    NUM_STEPS,
    OBSTACLE_DENSITY,
    SEARCH_RADIUS,
    STALL_WINDOW,
)
from grid_pursuit.config.types import PlannerStrategy, PursuitConfig
from grid_pursuit.domain.filters import TerminationReason
from grid_pursuit.io.layout import load_layout
from grid_pursuit.simulation.engine import run_batch_search

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_strategy(raw_strategy: str) -> PlannerStrategy:
    """Parse planner strategy from CLI/config."""
    try:
        return PlannerStrategy(raw_strategy)
    except ValueError as exc:
        valid = ", ".join(strategy.value for strategy in PlannerStrategy)
        raise ValueError(f"strategy must be one of {valid}") from exc


def _parse_grid_size(raw_grid_size: str) -> tuple[int, int]:
    """Parse a grid size formatted as `WxH`."""
    tokens = raw_grid_size.strip().lower().split("x")
    if len(tokens) != 2:
        raise ValueError("grid-size must use WxH format")
    try:
        width = int(tokens[0])
        height = int(tokens[1])
    except ValueError as exc:
        raise ValueError("grid-size must use integer WxH values") from exc
    if width < 1 or height < 1:
        raise ValueError("grid-size must be >= 1x1")
    return width, height


def _parse_cell(raw_cell: object, key: str) -> tuple[int, int]:
    """Parse a cell given as `x,y` or as a two-element JSON list."""
    if isinstance(raw_cell, (list, tuple)):
        parts = list(raw_cell)
    elif isinstance(raw_cell, str):
        parts = [part.strip() for part in raw_cell.split(",")]
    else:
        raise ValueError(f"{key} must be formatted as x,y")
    if len(parts) != 2:
        raise ValueError(f"{key} must be formatted as x,y")
    return _coerce_int(parts[0], key), _coerce_int(parts[1], key)


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        return float(raw)
    raise ValueError(f"{key} must be a float value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_float(
    cli_val: float | None, key: str, file_cfg: dict[str, object], default: float
) -> float:
    return _coerce_float(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run local grid pursuit simulations")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument(
        "--layout",
        type=Path,
        default=None,
        help="Text board layout; overrides grid size, start and target",
    )
    parser.add_argument("--n-runs", type=int, default=None)
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--grid-size", type=str, default=None, help="WxH")
    parser.add_argument("--radius", type=int, default=None)
    parser.add_argument(
        "--strategy",
        type=str,
        choices=[strategy.value for strategy in PlannerStrategy],
        default=None,
    )
    parser.add_argument("--stall-window", type=int, default=None)
    parser.add_argument(
        "--detect-oscillation", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--stop-on-arrival", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--obstacle-density", type=float, default=None)
    parser.add_argument("--start", type=str, default=None, help="x,y")
    parser.add_argument("--target", type=str, default=None, help="x,y")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for pursuit runs.

    Supports ``--config path/to/config.json`` for reproducibility. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    n_runs = _get_int(args.n_runs, "n_runs", file_cfg, 1)
    steps = _get_int(args.steps, "steps", file_cfg, NUM_STEPS)
    seed = _get_int(args.seed, "seed", file_cfg, 0)
    out_dir = Path(_get_str(args.out_dir, "out_dir", file_cfg, "data"))
    radius = _get_int(args.radius, "radius", file_cfg, SEARCH_RADIUS)
    strategy = _parse_strategy(
        _get_str(args.strategy, "strategy", file_cfg, PlannerStrategy.LOOK_AROUND.value)
    )
    stall_window = _get_int(args.stall_window, "stall_window", file_cfg, STALL_WINDOW)
    detect_oscillation = _get_bool(
        args.detect_oscillation, "detect_oscillation", file_cfg, False
    )
    stop_on_arrival = _get_bool(args.stop_on_arrival, "stop_on_arrival", file_cfg, True)
    obstacle_density = _get_float(
        args.obstacle_density, "obstacle_density", file_cfg, OBSTACLE_DENSITY
    )

    layout_raw = _get_val(args.layout, "layout", file_cfg, None)
    layout = None
    if layout_raw is not None:
        layout_path = Path(_coerce_str(layout_raw, "layout"))
        try:
            layout = load_layout(layout_path)
        except FileNotFoundError:
            parser.error(f"Layout file not found: {layout_path}")
        grid_width, grid_height = layout.grid.width, layout.grid.height
        start, target = layout.start, layout.target
    else:
        grid_width, grid_height = _parse_grid_size(
            _get_str(args.grid_size, "grid_size", file_cfg, f"{GRID_WIDTH}x{GRID_HEIGHT}")
        )
        start = _parse_cell(_get_val(args.start, "start", file_cfg, list(DEFAULT_START)), "start")
        target = _parse_cell(
            _get_val(args.target, "target", file_cfg, list(DEFAULT_TARGET)), "target"
        )

    config = PursuitConfig(
        grid_width=grid_width,
        grid_height=grid_height,
        radius=radius,
        steps=steps,
        stall_window=stall_window,
        detect_oscillation=detect_oscillation,
        strategy=strategy,
        stop_on_arrival=stop_on_arrival,
        obstacle_density=obstacle_density,
        start=start,
        target=target,
    )
    results = run_batch_search(
        n_runs=n_runs,
        out_dir=out_dir,
        config=config,
        base_seed=seed,
        layout=layout,
    )

    summary = {
        "strategy": strategy.value,
        "layout": str(layout_raw) if layout_raw is not None else None,
        "total_runs": len(results),
        "arrived": sum(1 for r in results if r.arrived),
        "stalled": sum(
            1 for r in results if r.termination_reason == TerminationReason.STALLED.value
        ),
        "oscillating": sum(
            1 for r in results if r.termination_reason == TerminationReason.OSCILLATING.value
        ),
        "mean_ticks": sum(r.ticks for r in results) / len(results),
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
