"""Bounded obstacle grid.

The grid is a fixed ``(height, width)`` boolean array where ``True`` marks a
blocked cell. Dimensions never change after creation; single cells may be
edited between ticks. Anything outside ``[0, width) x [0, height)`` reads as
blocked, so probes that walk off the edge never need a separate bounds
branch at the call site.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from grid_pursuit.domain.geometry import Coordinate


@dataclass
class Grid:
    """Static map of open/blocked cells, indexed ``cells[y, x]``."""

    cells: np.ndarray

    def __post_init__(self) -> None:
        cells = np.array(self.cells, dtype=bool)
        if cells.ndim != 2:
            raise ValueError(f"grid cells must be 2-D, got shape {cells.shape}")
        if cells.shape[0] < 1 or cells.shape[1] < 1:
            raise ValueError("grid dimensions must be >= 1")
        self.cells = cells

    @classmethod
    def create(cls, width: int, height: int) -> Grid:
        """Return an all-open grid."""
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be >= 1")
        return cls(cells=np.zeros((height, width), dtype=bool))

    @classmethod
    def from_blocked(cls, width: int, height: int, blocked: Iterable[Coordinate]) -> Grid:
        """Return a grid with exactly the given cells blocked."""
        grid = cls.create(width, height)
        for x, y in blocked:
            grid.set_blocked(x, y)
        return grid

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blocked(self, x: int, y: int) -> bool:
        """True for blocked cells and for every out-of-bounds coordinate."""
        if not self.in_bounds(x, y):
            return True
        return bool(self.cells[y, x])

    def set_blocked(self, x: int, y: int, blocked: bool = True) -> None:
        """Set one cell. Raises ``IndexError`` outside the grid."""
        if not self.in_bounds(x, y):
            raise IndexError(f"cell {(x, y)} outside {self.width}x{self.height} grid")
        self.cells[y, x] = blocked

    def toggle(self, x: int, y: int) -> bool:
        """Flip one cell and return its new blocked state."""
        self.set_blocked(x, y, not self.is_blocked(x, y))
        return self.is_blocked(x, y)

    def blocked_cells(self) -> list[Coordinate]:
        """Blocked coordinates in row-major order."""
        ys, xs = np.nonzero(self.cells)
        return [(int(x), int(y)) for y, x in zip(ys, xs, strict=True)]

    def copy(self) -> Grid:
        return Grid(cells=self.cells.copy())
