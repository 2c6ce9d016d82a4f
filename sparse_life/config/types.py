"""Configuration dataclasses for simulation runs."""

from __future__ import annotations

from dataclasses import dataclass

from sparse_life.config.constants import (
    HALT_WINDOW,
    NUM_STEPS,
    SHORT_PERIOD_HISTORY,
    SHORT_PERIOD_MAX,
)
from sparse_life.domain.cell import Cell

__all__ = [
    "RunConfig",
    "SimulationResult",
]


@dataclass(frozen=True)
class RunConfig:
    """Runtime knobs for one seeded run."""

    steps: int = NUM_STEPS
    halt_window: int = HALT_WINDOW
    stop_on_extinction: bool = True
    stop_on_halt: bool = True
    stop_on_period: bool = False
    short_period_max_period: int = SHORT_PERIOD_MAX
    short_period_history_size: int = SHORT_PERIOD_HISTORY
    strict: bool = True

    def __post_init__(self) -> None:
        if self.steps < 1:
            raise ValueError("steps must be >= 1")
        if self.halt_window < 1:
            raise ValueError("halt_window must be >= 1")
        if self.short_period_max_period < 2:
            raise ValueError("short_period_max_period must be >= 2")
        if self.short_period_history_size < self.short_period_max_period * 2:
            raise ValueError("short_period_history_size must be >= 2 * short_period_max_period")


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one run.

    ``history[0]`` is the seed; ``history[i]`` is the snapshot after ``i`` ticks.
    """

    history: tuple[frozenset[Cell], ...]
    terminated_at: int | None
    termination_reason: str | None

    @property
    def generations(self) -> int:
        return len(self.history) - 1

    @property
    def final(self) -> frozenset[Cell]:
        return self.history[-1]

    @property
    def survived(self) -> bool:
        return self.termination_reason is None
