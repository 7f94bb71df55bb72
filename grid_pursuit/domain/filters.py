"""Run-termination detectors observed once per tick by the driver."""

from __future__ import annotations

from collections import deque
from enum import Enum

from grid_pursuit.domain.geometry import Coordinate


class TerminationReason(str, Enum):
    """Termination reason labels persisted in run metadata."""

    ARRIVED = "arrived"
    STALLED = "stalled"
    OSCILLATING = "oscillating"


class StallDetector:
    """Detect N consecutive ticks without the agent moving."""

    def __init__(self, window: int) -> None:
        if window < 1:
            raise ValueError("window must be >= 1")
        self.window = window
        self._last_location: Coordinate | None = None
        self._unchanged_count = 0

    def observe(self, location: Coordinate) -> bool:
        """Return True once location has remained unchanged for `window` checks."""
        if self._last_location is None:
            self._last_location = location
            return False

        if location == self._last_location:
            self._unchanged_count += 1
        else:
            self._unchanged_count = 0
            self._last_location = location

        return self._unchanged_count >= self.window


class OscillationDetector:
    """Detect the agent cycling through the same few cells.

    Triggers when the most recent ``p`` locations repeat the ``p`` before
    them for some period ``2 <= p <= max_period``. Standing still is left
    to ``StallDetector``.
    """

    def __init__(self, max_period: int, history_size: int) -> None:
        if max_period < 2:
            raise ValueError("max_period must be >= 2")
        if history_size < 2 * max_period:
            raise ValueError("history_size must be >= 2 * max_period")
        self.max_period = max_period
        self._history: deque[Coordinate] = deque(maxlen=history_size)

    def observe(self, location: Coordinate) -> bool:
        self._history.append(location)
        recent = list(self._history)
        for period in range(2, self.max_period + 1):
            if len(recent) < 2 * period:
                break
            window = recent[-period:]
            if len(set(window)) < 2:
                continue
            if window == recent[-2 * period : -period]:
                return True
        return False
