"""Visualization layer: themes, renderers, and CLI."""

from grid_pursuit.viz.cli import main
from grid_pursuit.viz.render import render_filmstrip, render_run_animation, render_trajectory
from grid_pursuit.viz.theme import (
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "main",
    "render_filmstrip",
    "render_run_animation",
    "render_trajectory",
]
