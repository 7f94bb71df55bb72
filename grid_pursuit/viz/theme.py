"""Visualization theme presets for run renderers.

Themes are frozen dataclasses that group all styling constants together, so
a palette can be swapped via the ``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    # Board cells
    open_cell_color: str = "#F0F0F0"
    blocked_cell_color: str = "#37474F"
    scanned_cell_color: str = "#FFE082"
    grid_line_color: str = "#CCCCCC"

    # Markers
    agent_color: str = "#2196F3"
    target_color: str = "#F44336"
    start_color: str = "#4CAF50"
    path_color: str = "#1565C0"

    # Per-stage labels shown in panel titles
    stage_labels: dict[str, str] = field(default_factory=dict)


_DEFAULT_STAGE_LABELS: dict[str, str] = {
    "arrived": "Arrived",
    "fast_path": "Fast path",
    "target_sighted": "Target sighted",
    "selected": "Selected",
    "stationary": "Stationary",
}

DEFAULT_THEME = Theme(stage_labels=_DEFAULT_STAGE_LABELS)

PAPER_THEME = Theme(
    open_cell_color="#FFFFFF",
    blocked_cell_color="#000000",
    scanned_cell_color="#E0E0E0",
    grid_line_color="#E0E0E0",
    agent_color="#1f77b4",
    target_color="#d62728",
    start_color="#2ca02c",
    path_color="#7f7f7f",
    stage_labels=_DEFAULT_STAGE_LABELS,
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
