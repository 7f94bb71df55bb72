"""Scan overlay: which cells the last full scan reached, and from which direction.

Purely observational. The planner writes it, renderers read it, and nothing
in the planner ever reads it back. Callers clear it before each tick.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from grid_pursuit.domain.geometry import Coordinate


@dataclass
class ScanOverlay:
    """Cell -> index of the direction whose run reached it."""

    marks: dict[Coordinate, int] = field(default_factory=dict)

    def mark(self, cell: Coordinate, direction_index: int) -> None:
        self.marks[cell] = direction_index

    def scanned_cells(self) -> set[Coordinate]:
        return set(self.marks)

    def clear(self) -> None:
        self.marks.clear()

    def __len__(self) -> int:
        return len(self.marks)
