"""Host loop: drive an entity store one generation at a time."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from sparse_life.config.types import RunConfig, SimulationResult
from sparse_life.domain.cell import Cell
from sparse_life.domain.filters import (
    ExtinctionDetector,
    HaltDetector,
    ShortPeriodDetector,
    TerminationReason,
)
from sparse_life.domain.step import step
from sparse_life.domain.store import EntityStore, InMemoryEntityStore, apply_actions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepReport:
    """Summary of one applied generation."""

    generation: int
    created: int
    destroyed: int
    population: int


class Simulation:
    """Serializes step calls against a single store.

    Only the ``EntityStore`` protocol is used, so any conforming store works.

    Each tick reads a snapshot, computes actions, and applies all of them
    before returning, so the next tick always sees a quiescent store.
    """

    def __init__(self, store: EntityStore, *, strict: bool = True) -> None:
        self.store = store
        self.strict = strict
        self.generation = 0

    @classmethod
    def from_cells(cls, cells: Iterable[Cell], *, strict: bool = True) -> Simulation:
        return cls(InMemoryEntityStore.from_cells(cells), strict=strict)

    def snapshot(self) -> frozenset[Cell]:
        return frozenset(cell for _, cell in self.store.list_live())

    def tick(self) -> StepReport:
        actions = step(self.store.list_live(), strict=self.strict)
        created, destroyed = apply_actions(self.store, actions)
        self.generation += 1
        report = StepReport(
            generation=self.generation,
            created=created,
            destroyed=destroyed,
            population=len(self.store.list_live()),
        )
        logger.info(
            "generation %d: +%d -%d population=%d",
            report.generation,
            report.created,
            report.destroyed,
            report.population,
        )
        return report

    def run(self, n: int) -> list[StepReport]:
        if n < 0:
            raise ValueError("n must be >= 0")
        return [self.tick() for _ in range(n)]


def run_simulation(
    initial_cells: Iterable[Cell], config: RunConfig | None = None
) -> SimulationResult:
    """Run from a seed until ``config.steps`` ticks or an enabled detector fires."""
    config = config or RunConfig()
    sim = Simulation.from_cells(initial_cells, strict=config.strict)

    extinction = ExtinctionDetector() if config.stop_on_extinction else None
    halt = HaltDetector(window=config.halt_window) if config.stop_on_halt else None
    short_period = (
        ShortPeriodDetector(
            max_period=config.short_period_max_period,
            history_size=config.short_period_history_size,
        )
        if config.stop_on_period
        else None
    )

    history: list[frozenset[Cell]] = [sim.snapshot()]
    if halt is not None:
        halt.observe(history[0])
    if short_period is not None:
        short_period.observe(history[0])

    terminated_at: int | None = None
    reason: TerminationReason | None = None
    for _ in range(config.steps):
        sim.tick()
        snapshot = sim.snapshot()
        history.append(snapshot)

        if extinction is not None and extinction.observe(snapshot):
            reason = TerminationReason.EXTINCTION
        elif halt is not None and halt.observe(snapshot):
            reason = TerminationReason.HALT
        elif short_period is not None and short_period.observe(snapshot):
            reason = TerminationReason.SHORT_PERIOD

        if reason is not None:
            terminated_at = sim.generation
            logger.info("run terminated at generation %d: %s", terminated_at, reason.value)
            break

    return SimulationResult(
        history=tuple(history),
        terminated_at=terminated_at,
        termination_reason=None if reason is None else reason.value,
    )
