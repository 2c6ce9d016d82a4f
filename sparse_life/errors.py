"""Exception types raised by sparse_life."""

from __future__ import annotations


class SparseLifeError(Exception):
    """Base class for sparse_life errors."""


class DuplicatePositionError(SparseLifeError, ValueError):
    """Two live entities claim the same grid position."""

    def __init__(
        self, position: tuple[int, int], existing: int, incoming: int | None = None
    ) -> None:
        self.position = position
        self.existing = existing
        self.incoming = incoming
        claimant = "a new entity" if incoming is None else f"entity {incoming}"
        super().__init__(
            f"position {position} already held by entity {existing}; "
            f"{claimant} cannot also occupy it"
        )
