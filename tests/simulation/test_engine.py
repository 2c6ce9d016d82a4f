"""Tests for sparse_life.simulation.engine module."""

from __future__ import annotations

import logging

import pytest

from sparse_life.config.types import RunConfig
from sparse_life.domain.cell import Cell
from sparse_life.domain.patterns import PATTERNS, translate
from sparse_life.errors import DuplicatePositionError
from sparse_life.simulation.engine import Simulation, StepReport, run_simulation


class TestSimulation:
    def test_tick_report(self) -> None:
        sim = Simulation.from_cells(PATTERNS["blinker"])
        report = sim.tick()
        assert report == StepReport(generation=1, created=2, destroyed=2, population=3)
        assert sim.generation == 1

    def test_run_returns_one_report_per_tick(self) -> None:
        sim = Simulation.from_cells(PATTERNS["block"])
        reports = sim.run(3)
        assert [r.generation for r in reports] == [1, 2, 3]
        assert all(r.created == 0 and r.destroyed == 0 for r in reports)

    def test_run_zero(self) -> None:
        assert Simulation.from_cells(PATTERNS["block"]).run(0) == []

    def test_run_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            Simulation.from_cells(PATTERNS["block"]).run(-1)

    def test_duplicate_seed_rejected(self) -> None:
        with pytest.raises(DuplicatePositionError):
            Simulation.from_cells([Cell(0, 0), Cell(0, 0)])

    def test_tick_logs_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="sparse_life.simulation.engine")
        Simulation.from_cells(PATTERNS["blinker"]).tick()
        assert "generation 1: +2 -2 population=3" in caplog.messages


class TestRunSimulation:
    def test_single_cell_goes_extinct(self) -> None:
        result = run_simulation([Cell(0, 0)])
        assert result.termination_reason == "extinction"
        assert result.terminated_at == 1
        assert result.history == (frozenset({Cell(0, 0)}), frozenset())
        assert result.survived is False

    def test_block_halts(self) -> None:
        result = run_simulation(PATTERNS["block"], RunConfig(halt_window=3))
        assert result.termination_reason == "halt"
        assert result.terminated_at == 3
        assert result.generations == 3
        assert all(snapshot == PATTERNS["block"] for snapshot in result.history)

    def test_blinker_runs_to_completion_without_period_filter(self) -> None:
        result = run_simulation(PATTERNS["blinker"], RunConfig(steps=10))
        assert result.survived is True
        assert result.terminated_at is None
        assert result.generations == 10
        assert result.final == PATTERNS["blinker"]

    def test_blinker_detected_as_short_period(self) -> None:
        result = run_simulation(PATTERNS["blinker"], RunConfig(steps=10, stop_on_period=True))
        assert result.termination_reason == "short_period"
        # the seed plus seven generations fill the default eight-snapshot history
        assert result.terminated_at == 7

    def test_glider_keeps_moving(self) -> None:
        glider = PATTERNS["glider"]
        result = run_simulation(glider, RunConfig(steps=8, stop_on_period=True))
        assert result.survived is True
        assert result.final == translate(glider, 2, 2)

    def test_detectors_can_be_disabled(self) -> None:
        config = RunConfig(steps=4, stop_on_extinction=False, stop_on_halt=False)
        result = run_simulation([Cell(0, 0)], config)
        assert result.survived is True
        assert result.generations == 4
        assert result.final == frozenset()


class ListStore:
    """EntityStore backed by a plain list, without the in-memory store's extras."""

    def __init__(self, cells: list[Cell]) -> None:
        self.live: list[tuple[int, Cell]] = list(enumerate(cells))
        self._next = len(cells)

    def list_live(self) -> list[tuple[int, Cell]]:
        return list(self.live)

    def create(self, cell: Cell) -> int:
        entity = self._next
        self._next += 1
        self.live.append((entity, cell))
        return entity

    def destroy(self, entity: int) -> None:
        self.live = [(e, c) for e, c in self.live if e != entity]


class TestSimulationOverProtocolStore:
    def test_blinker_on_list_store(self) -> None:
        sim = Simulation(ListStore(sorted(PATTERNS["blinker"])))
        report = sim.tick()
        assert report.population == 3
        assert sim.snapshot() == frozenset({Cell(0, -1), Cell(0, 0), Cell(0, 1)})
        sim.tick()
        assert sim.snapshot() == PATTERNS["blinker"]
