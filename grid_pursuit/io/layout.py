"""Plain-text board layouts.

One line per row (``y``), one character per cell (``x``)::

    ..........
    ..|||||...
    ......|...
    .@....|.X.

``.`` is open, ``|`` or ``#`` is blocked, ``@`` marks the agent start and
``X`` the target; both markers sit on open cells. ``*`` marks an agent
that starts on its target. Blank leading/trailing lines are ignored, rows
must all have the same length.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np

from grid_pursuit.config.constants import (
    AGENT_CHAR,
    ARRIVED_CHAR,
    BLOCKED_CHARS,
    OPEN_CHAR,
    TARGET_CHAR,
)
from grid_pursuit.domain.geometry import Coordinate
from grid_pursuit.domain.grid import Grid


@dataclass(frozen=True)
class Layout:
    """A parsed board: obstacles plus the two markers."""

    grid: Grid
    start: Coordinate
    target: Coordinate


def parse_layout(text: str) -> Layout:
    """Parse layout *text*; raises ``ValueError`` on malformed input."""
    rows = [line.rstrip("\r") for line in text.strip("\n").split("\n")]
    rows = [row for row in rows if row.strip()]
    if not rows:
        raise ValueError("layout is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("layout rows must all have the same length")

    cells = np.zeros((len(rows), width), dtype=bool)
    start: Coordinate | None = None
    target: Coordinate | None = None
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in BLOCKED_CHARS:
                cells[y, x] = True
            elif char == AGENT_CHAR:
                if start is not None:
                    raise ValueError(f"duplicate agent marker at {(x, y)}")
                start = (x, y)
            elif char == ARRIVED_CHAR:
                if start is not None or target is not None:
                    raise ValueError(f"duplicate agent or target marker at {(x, y)}")
                start = target = (x, y)
            elif char == TARGET_CHAR:
                if target is not None:
                    raise ValueError(f"duplicate target marker at {(x, y)}")
                target = (x, y)
            elif char != OPEN_CHAR:
                raise ValueError(f"unknown layout character {char!r} at {(x, y)}")

    if start is None:
        raise ValueError(f"layout has no agent marker {AGENT_CHAR!r}")
    if target is None:
        raise ValueError(f"layout has no target marker {TARGET_CHAR!r}")
    return Layout(grid=Grid(cells=cells), start=start, target=target)


def dump_layout(grid: Grid, location: Coordinate, target: Coordinate) -> str:
    """Render *grid* with agent and target markers as layout text."""
    lines: list[str] = []
    for y in range(grid.height):
        chars: list[str] = []
        for x in range(grid.width):
            if (x, y) == location == target:
                chars.append(ARRIVED_CHAR)
            elif (x, y) == location:
                chars.append(AGENT_CHAR)
            elif (x, y) == target:
                chars.append(TARGET_CHAR)
            elif grid.is_blocked(x, y):
                chars.append(BLOCKED_CHARS[0])
            else:
                chars.append(OPEN_CHAR)
        lines.append("".join(chars))
    return "\n".join(lines) + "\n"


def load_layout(path: Path) -> Layout:
    return parse_layout(Path(path).read_text())
