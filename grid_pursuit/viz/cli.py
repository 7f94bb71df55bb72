from __future__ import annotations

import argparse
from pathlib import Path

from grid_pursuit.io.paths import run_payload_path, trajectory_log_path
from grid_pursuit.viz.render import render_filmstrip, render_run_animation, render_trajectory
from grid_pursuit.viz.theme import REGISTERED_THEMES, get_theme


def _add_run_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Batch output directory; fills in --trajectory-log and --run-json from --run-id",
    )
    p.add_argument("--run-id", type=str, default=None)
    p.add_argument("--trajectory-log", type=Path, default=None)
    p.add_argument("--run-json", type=Path, default=None)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _build_trajectory_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("trajectory", help="Render the full path of one run")
    p.set_defaults(func=_handle_trajectory)
    _add_run_arguments(p)


def _build_filmstrip_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("filmstrip", help="Render filmstrip of selected ticks")
    p.set_defaults(func=_handle_filmstrip)
    _add_run_arguments(p)
    p.add_argument("--n-frames", type=int, default=6)


def _build_animation_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("animation", help="Render tick-by-tick animation of one run")
    p.set_defaults(func=_handle_animation)
    _add_run_arguments(p)
    p.add_argument("--fps", type=int, default=4)


def _resolve_run_inputs(args: argparse.Namespace) -> tuple[Path, Path]:
    """Return (trajectory log, run JSON) from explicit paths or ``--out-dir``/``--run-id``."""
    trajectory_log = args.trajectory_log
    run_json = args.run_json
    if args.out_dir is not None:
        if trajectory_log is None:
            trajectory_log = trajectory_log_path(args.out_dir)
        if run_json is None:
            if args.run_id is None:
                raise ValueError("--run-id is required with --out-dir unless --run-json is given")
            run_json = run_payload_path(args.out_dir, args.run_id)
    if trajectory_log is None or run_json is None:
        raise ValueError("Provide --trajectory-log and --run-json, or --out-dir with --run-id")
    return trajectory_log, run_json


def _handle_trajectory(args: argparse.Namespace) -> None:
    trajectory_log, run_json = _resolve_run_inputs(args)
    render_trajectory(
        trajectory_log_path=trajectory_log,
        run_json_path=run_json,
        output_path=args.output,
        base_dir=args.base_dir,
        theme=get_theme(args.theme),
    )


def _handle_filmstrip(args: argparse.Namespace) -> None:
    trajectory_log, run_json = _resolve_run_inputs(args)
    render_filmstrip(
        trajectory_log_path=trajectory_log,
        run_json_path=run_json,
        output_path=args.output,
        n_frames=args.n_frames,
        base_dir=args.base_dir,
        theme=get_theme(args.theme),
    )


def _handle_animation(args: argparse.Namespace) -> None:
    trajectory_log, run_json = _resolve_run_inputs(args)
    render_run_animation(
        trajectory_log_path=trajectory_log,
        run_json_path=run_json,
        output_path=args.output,
        fps=args.fps,
        base_dir=args.base_dir,
        theme=get_theme(args.theme),
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Visualization tools for recorded pursuit runs")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        choices=sorted(REGISTERED_THEMES),
        help="Theme preset name",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_trajectory_parser(sub)
    _build_filmstrip_parser(sub)
    _build_animation_parser(sub)
    args = parser.parse_args(argv)

    try:
        args.func(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
