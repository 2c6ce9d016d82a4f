"""One generation of Conway's Life over a sparse set of live entities.

The step never touches a store. It reads ``(entity, cell)`` pairs, builds a
neighbor tally keyed on ``(x, y)``, and returns the lifecycle actions that
take the population to the next generation. Each position's fate depends only
on its own tally entry, so tally iteration order cannot change the result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from sparse_life.config.constants import BIRTH_COUNTS, NEIGHBOR_OFFSETS, SURVIVAL_COUNTS
from sparse_life.domain.cell import Action, Cell, Create, Destroy, EntityId
from sparse_life.errors import DuplicatePositionError

logger = logging.getLogger(__name__)


@dataclass
class TallyEntry:
    """Occupancy and live-neighbor count for one position."""

    entity: EntityId | None = None
    live_neighbors: int = 0


NeighborTally = dict[tuple[int, int], TallyEntry]


def build_tally(
    live_cells: Iterable[tuple[EntityId, Cell]], *, strict: bool = True
) -> NeighborTally:
    """Tally occupancy and Moore-neighborhood counts for every touched position.

    With ``strict`` a second entity at an occupied position raises
    :class:`DuplicatePositionError`; otherwise the later entity silently
    replaces the earlier one.
    """
    tally: NeighborTally = {}
    for entity, cell in live_cells:
        logger.debug("in: live Cell %s at (%d, %d)", entity, cell.x, cell.y)

        entry = tally.setdefault((cell.x, cell.y), TallyEntry())
        if strict and entry.entity is not None:
            raise DuplicatePositionError((cell.x, cell.y), entry.entity, entity)
        entry.entity = entity

        for dx, dy in NEIGHBOR_OFFSETS:
            tally.setdefault((cell.x + dx, cell.y + dy), TallyEntry()).live_neighbors += 1
    return tally


def decide(position: tuple[int, int], entry: TallyEntry) -> Action | None:
    """Apply the birth, survival and death rules to a single tally entry."""
    x, y = position
    if entry.entity is None:
        if entry.live_neighbors in BIRTH_COUNTS:
            logger.debug("out: new Cell at (%d, %d)", x, y)
            return Create(Cell(x, y))
        return None
    if entry.live_neighbors in SURVIVAL_COUNTS:
        logger.debug("out: live Cell %s at (%d, %d)", entry.entity, x, y)
        return None
    logger.debug("out: dead Cell %s at (%d, %d)", entry.entity, x, y)
    return Destroy(entry.entity)


def step(live_cells: Iterable[tuple[EntityId, Cell]], *, strict: bool = True) -> list[Action]:
    """Compute the Create/Destroy actions for one generation.

    Create targets are always empty positions and Destroy targets are always
    occupants, so the returned actions can be applied in any order.
    """
    logger.debug("step")
    tally = build_tally(live_cells, strict=strict)
    actions: list[Action] = []
    for position, entry in tally.items():
        action = decide(position, entry)
        if action is not None:
            actions.append(action)
    return actions
