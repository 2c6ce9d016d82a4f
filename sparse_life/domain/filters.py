"""Run-termination detectors over successive live-cell snapshots."""

from __future__ import annotations

from collections import deque
from enum import Enum

from sparse_life.domain.cell import Cell

Snapshot = frozenset[Cell]


class TerminationReason(Enum):
    """Enumerated reasons for stopping a run early."""

    EXTINCTION = "extinction"
    HALT = "halt"
    SHORT_PERIOD = "short_period"


class ExtinctionDetector:
    """Detect a population that has died out."""

    def observe(self, snapshot: Snapshot) -> bool:
        return not snapshot


class HaltDetector:
    """Detect still lifes: the snapshot is unchanged for ``window`` steps."""

    def __init__(self, window: int) -> None:
        if window < 1:
            raise ValueError("window must be >= 1")
        self.window = window
        self._last: Snapshot | None = None
        self._unchanged_steps = 0

    def observe(self, snapshot: Snapshot) -> bool:
        """Record one snapshot and return True once the run has halted."""
        if self._last == snapshot:
            self._unchanged_steps += 1
        else:
            self._unchanged_steps = 0
            self._last = snapshot
        return self._unchanged_steps >= self.window


class ShortPeriodDetector:
    """Detect oscillators with a period between 2 and ``max_period``.

    Nothing is reported until ``history_size`` snapshots have been observed;
    a period ``p`` is then reported only when the whole retained history
    repeats with that period, so transient coincidences do not trigger it.
    """

    def __init__(self, max_period: int = 2, history_size: int = 8) -> None:
        if max_period < 2:
            raise ValueError("max_period must be >= 2")
        if history_size < max_period * 2:
            raise ValueError("history_size must be >= 2 * max_period")
        self.max_period = max_period
        self.history: deque[Snapshot] = deque(maxlen=history_size)

    def observe(self, snapshot: Snapshot) -> bool:
        self.history.append(snapshot)
        return self.detected_period() is not None

    def detected_period(self) -> int | None:
        """Return the shortest period the full history repeats with, if any."""
        if len(self.history) < (self.history.maxlen or 0):
            return None
        items = list(self.history)
        if items[-1] == items[-2]:
            # a still life is periodic with every period; leave it to HaltDetector
            return None
        for period in range(2, self.max_period + 1):
            if all(items[i] == items[i - period] for i in range(period, len(items))):
                return period
        return None
