"""Seed patterns: parsing from text rows and a small named catalogue."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sparse_life.domain.cell import Cell


def parse_pattern(rows: Sequence[str], alive: str = "#") -> frozenset[Cell]:
    """Parse text rows into live cells. Row index is ``y``, column index is ``x``.

    Blank and short rows count as dead cells, so vertical offsets survive and
    trailing whitespace trimmed by editors does not matter. Any character other
    than ``alive`` is treated as dead.
    """
    if not rows:
        raise ValueError("pattern must have at least one row")
    if len(alive) != 1:
        raise ValueError("alive marker must be a single character")
    return frozenset(
        Cell(x, y) for y, row in enumerate(rows) for x, char in enumerate(row) if char == alive
    )


def translate(cells: Iterable[Cell], dx: int, dy: int) -> frozenset[Cell]:
    return frozenset(Cell(cell.x + dx, cell.y + dy) for cell in cells)


PATTERNS: dict[str, frozenset[Cell]] = {
    "block": parse_pattern(["##", "##"]),
    "blinker": translate(parse_pattern(["###"]), -1, 0),
    "beehive": parse_pattern([".##.", "#..#", ".##."]),
    "toad": parse_pattern([".###", "###."]),
    "glider": parse_pattern([".#.", "..#", "###"]),
}
"""Named seed patterns. Blinker is the horizontal triple centred on the origin."""


def get_pattern(name: str) -> frozenset[Cell]:
    """Look up a named pattern."""
    try:
        return PATTERNS[name]
    except KeyError:
        known = ", ".join(sorted(PATTERNS))
        raise KeyError(f"unknown pattern {name!r}; known patterns: {known}") from None
