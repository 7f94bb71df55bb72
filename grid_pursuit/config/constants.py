"""Centralized domain constants for pursuit runs.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 10
"""Default grid width in cells."""

GRID_HEIGHT = 10
"""Default grid height in cells."""

SEARCH_RADIUS = 5
"""Look-around radius used by the fast path and the full scan."""

DEFAULT_START: tuple[int, int] = (1, 8)
"""Default agent start cell."""

DEFAULT_TARGET: tuple[int, int] = (8, 1)
"""Default target cell."""

NUM_STEPS = 50
"""Default number of ticks per run."""

STALL_WINDOW = 10
"""Default stall-detector window (consecutive ticks without movement)."""

OSCILLATION_MAX_PERIOD = 4
"""Longest location cycle the oscillation detector looks for."""

OSCILLATION_HISTORY = 16
"""Number of recent locations retained by the oscillation detector."""

OBSTACLE_PENALTY_EXPONENT = 1.5
"""Scored variant: frontier score is raised to this power per blocked neighbor."""

OBSTACLE_DENSITY = 0.2
"""Default fraction of blocked cells in generated layouts."""

FLUSH_THRESHOLD = 8_192
"""Flush trajectory rows to Parquet once this in-memory row count is reached."""

OPEN_CHAR = "."
"""Layout character for an open cell."""

BLOCKED_CHARS: tuple[str, ...] = ("|", "#")
"""Layout characters accepted for a blocked cell; the first is used when dumping."""

AGENT_CHAR = "@"
"""Layout character marking the agent start (an open cell)."""

TARGET_CHAR = "X"
"""Layout character marking the target (an open cell)."""

ARRIVED_CHAR = "*"
"""Layout character for an agent start that coincides with the target."""
