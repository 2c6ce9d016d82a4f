"""Entity stores that hold live cells between steps.

Store invariant: at most one top-level live entity per position. Entities
may own sub-entities; destroying an owner removes everything beneath it.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from sparse_life.domain.cell import Action, Cell, Create, Destroy, EntityId
from sparse_life.errors import DuplicatePositionError

logger = logging.getLogger(__name__)


class EntityStore(Protocol):
    """Host collaborator a step reads from and writes back to."""

    def list_live(self) -> list[tuple[EntityId, Cell]]: ...

    def create(self, cell: Cell) -> EntityId: ...

    def destroy(self, entity: EntityId) -> None: ...


@dataclass
class InMemoryEntityStore:
    """Mapping-backed registry of live cells and owned sub-entities."""

    cells: dict[EntityId, Cell] = field(default_factory=dict)
    occupancy: dict[tuple[int, int], EntityId] = field(default_factory=dict)
    parents: dict[EntityId, EntityId] = field(default_factory=dict)
    children: dict[EntityId, set[EntityId]] = field(default_factory=dict)
    _ids: itertools.count = field(default_factory=itertools.count, repr=False)

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> InMemoryEntityStore:
        """Seed a store with one live entity per cell."""
        store = cls()
        for cell in cells:
            store.create(cell)
        return store

    def __len__(self) -> int:
        return len(self.occupancy)

    def __contains__(self, entity: object) -> bool:
        return entity in self.cells

    def create(self, cell: Cell, parent: EntityId | None = None) -> EntityId:
        """Allocate an entity for ``cell``.

        Without ``parent`` the entity is a live cell and must not share a
        position with another live cell. With ``parent`` it is an owned
        sub-entity and does not take part in stepping.
        """
        if parent is None and cell.position in self.occupancy:
            raise DuplicatePositionError(cell.position, self.occupancy[cell.position])
        if parent is not None and parent not in self.cells:
            raise KeyError(f"unknown parent entity {parent}")

        entity = next(self._ids)
        self.cells[entity] = cell
        if parent is None:
            self.occupancy[cell.position] = entity
        else:
            self.parents[entity] = parent
            self.children.setdefault(parent, set()).add(entity)
        return entity

    def destroy(self, entity: EntityId) -> None:
        """Remove ``entity`` and, recursively, every sub-entity it owns."""
        if entity not in self.cells:
            raise KeyError(f"unknown entity {entity}")
        for child in sorted(self.children.pop(entity, ())):
            self.destroy(child)
        cell = self.cells.pop(entity)
        parent = self.parents.pop(entity, None)
        if parent is None:
            del self.occupancy[cell.position]
        else:
            self.children.get(parent, set()).discard(entity)

    def list_live(self) -> list[tuple[EntityId, Cell]]:
        """Return live top-level cells ordered by entity id."""
        return sorted((entity, self.cells[entity]) for entity in self.occupancy.values())

    def positions(self) -> frozenset[Cell]:
        return frozenset(self.cells[entity] for entity in self.occupancy.values())

    def owned_by(self, entity: EntityId) -> frozenset[EntityId]:
        return frozenset(self.children.get(entity, ()))


def apply_actions(store: EntityStore, actions: Iterable[Action]) -> tuple[int, int]:
    """Apply step actions to ``store``; returns ``(created, destroyed)``.

    Removals run before creations so a store that rejects duplicate positions
    never sees a transient overlap.
    """
    creates: list[Create] = []
    destroyed = 0
    for action in actions:
        if isinstance(action, Destroy):
            store.destroy(action.entity)
            destroyed += 1
        elif isinstance(action, Create):
            creates.append(action)
        else:
            raise TypeError(f"unsupported action: {action!r}")
    for action in creates:
        store.create(action.cell)
    logger.debug("applied %d creations and %d removals", len(creates), destroyed)
    return len(creates), destroyed
