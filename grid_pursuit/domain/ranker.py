"""Direction ranking: the fast-path probe and the radius-limited full scan."""

from __future__ import annotations

from grid_pursuit.domain.geometry import DIRECTIONS, NUM_DIRECTIONS, Coordinate, offset
from grid_pursuit.domain.grid import Grid
from grid_pursuit.domain.overlay import ScanOverlay

RunTable = tuple[int, ...]
"""Per-direction open run length, indexed like ``DIRECTIONS``."""


def try_fast_path(
    grid: Grid, location: Coordinate, direction: Coordinate, radius: int
) -> Coordinate | None:
    """Return ``location + direction`` if the straight line toward the target is clear.

    Cells ``location + direction * i`` for ``i = 1..radius`` are probed.
    Out-of-bounds probes are skipped; the first blocked probe abandons the
    fast path (``None``). A zero direction never qualifies, nor does a first
    step that would leave the grid.
    """
    if direction == (0, 0):
        return None
    if not grid.in_bounds(*offset(location, direction)):
        return None
    for i in range(1, radius + 1):
        x, y = offset(location, direction, i)
        if not grid.in_bounds(x, y):
            continue
        if grid.is_blocked(x, y):
            return None
    return offset(location, direction)


def rank_directions(
    grid: Grid,
    location: Coordinate,
    radius: int,
    overlay: ScanOverlay | None = None,
) -> RunTable:
    """Length of the unbroken open prefix from *location* in each direction, capped at *radius*.

    The scan walks rings outward (``i`` outer, direction inner). A direction
    only grows while its run equals ``i - 1``; a blocked or out-of-bounds
    cell leaves it short for every larger ``i``. Cells that extend a run
    are recorded on *overlay* when one is given.
    """
    runs = [0] * NUM_DIRECTIONS
    for i in range(1, radius + 1):
        for j, direction in enumerate(DIRECTIONS):
            x, y = offset(location, direction, i)
            if not grid.in_bounds(x, y):
                continue
            if grid.is_blocked(x, y):
                continue
            if runs[j] == i - 1:
                runs[j] = i
                if overlay is not None:
                    overlay.mark((x, y), j)
    return tuple(runs)
