"""Tests for sparse_life.domain.patterns module."""

from __future__ import annotations

import pytest

from sparse_life.domain.cell import Cell
from sparse_life.domain.patterns import PATTERNS, get_pattern, parse_pattern, translate
from sparse_life.simulation.engine import Simulation


class TestParsePattern:
    def test_rows_map_to_y(self) -> None:
        assert parse_pattern(["#.", ".#"]) == frozenset({Cell(0, 0), Cell(1, 1)})

    def test_blank_rows_keep_offsets(self) -> None:
        assert parse_pattern(["..", ".#"]) == frozenset({Cell(1, 1)})

    def test_custom_alive_marker(self) -> None:
        assert parse_pattern(["O#O"], alive="O") == frozenset({Cell(0, 0), Cell(2, 0)})

    def test_blank_and_short_rows_are_dead(self) -> None:
        assert parse_pattern(["#", "", "#"]) == frozenset({Cell(0, 0), Cell(0, 2)})
        assert parse_pattern(["###", "#"]) == frozenset(
            {Cell(0, 0), Cell(1, 0), Cell(2, 0), Cell(0, 1)}
        )

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_pattern([])

    def test_multi_character_marker_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_pattern(["#"], alive="##")


class TestCatalogue:
    def test_blinker_centred_on_origin(self) -> None:
        assert PATTERNS["blinker"] == frozenset({Cell(-1, 0), Cell(0, 0), Cell(1, 0)})

    def test_block_at_origin(self) -> None:
        assert PATTERNS["block"] == frozenset({Cell(0, 0), Cell(0, 1), Cell(1, 0), Cell(1, 1)})

    def test_get_pattern_unknown(self) -> None:
        with pytest.raises(KeyError, match="unknown pattern 'nope'"):
            get_pattern("nope")

    def test_translate(self) -> None:
        assert translate([Cell(0, 0), Cell(1, 2)], 3, -1) == frozenset({Cell(3, -1), Cell(4, 1)})

    @pytest.mark.parametrize("name", ["block", "beehive"])
    def test_still_lifes(self, name: str) -> None:
        sim = Simulation.from_cells(get_pattern(name))
        sim.run(3)
        assert sim.snapshot() == get_pattern(name)

    @pytest.mark.parametrize("name", ["blinker", "toad"])
    def test_period_two_oscillators(self, name: str) -> None:
        sim = Simulation.from_cells(get_pattern(name))
        sim.tick()
        assert sim.snapshot() != get_pattern(name)
        sim.tick()
        assert sim.snapshot() == get_pattern(name)
