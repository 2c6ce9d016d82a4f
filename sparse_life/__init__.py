"""Conway's Game of Life over a sparse, unbounded grid of live entities."""

from sparse_life.domain.cell import Action, Cell, Create, Destroy, EntityId
from sparse_life.domain.step import build_tally, step
from sparse_life.domain.store import EntityStore, InMemoryEntityStore, apply_actions
from sparse_life.errors import DuplicatePositionError, SparseLifeError
from sparse_life.simulation.engine import Simulation, run_simulation

__all__ = [
    "Action",
    "Cell",
    "Create",
    "Destroy",
    "DuplicatePositionError",
    "EntityId",
    "EntityStore",
    "InMemoryEntityStore",
    "Simulation",
    "SparseLifeError",
    "apply_actions",
    "build_tally",
    "run_simulation",
    "step",
]
