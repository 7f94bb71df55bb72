"""The single mobile agent."""

from __future__ import annotations

from dataclasses import dataclass

from grid_pursuit.domain.geometry import Coordinate


@dataclass
class Agent:
    """Pursuing agent.

    ``location`` is rewritten at most once per tick by the planner.
    ``target`` only changes through external edits. ``last_visited`` is
    bookkeeping: the location held before the most recent move, never read
    by the planner itself.
    """

    location: Coordinate
    target: Coordinate
    last_visited: Coordinate | None = None

    def move_to(self, cell: Coordinate) -> None:
        self.last_visited = self.location
        self.location = cell

    @property
    def arrived(self) -> bool:
        return self.location == self.target
