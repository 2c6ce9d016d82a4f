"""Cell positions and the lifecycle actions a step emits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

EntityId: TypeAlias = int
"""Opaque handle allocated by an entity store. Never used for position logic."""


@dataclass(frozen=True, order=True)
class Cell:
    """Position of a live cell on the unbounded grid."""

    x: int
    y: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Create:
    """Allocate a new live entity at ``cell``."""

    cell: Cell


@dataclass(frozen=True)
class Destroy:
    """Remove ``entity`` (and anything it owns) from the store."""

    entity: EntityId


Action: TypeAlias = Create | Destroy
