"""Domain layer: cells, the step transition, entity stores, and detectors."""

from sparse_life.domain.cell import Action, Cell, Create, Destroy, EntityId
from sparse_life.domain.filters import (
    ExtinctionDetector,
    HaltDetector,
    ShortPeriodDetector,
    TerminationReason,
)
from sparse_life.domain.patterns import PATTERNS, get_pattern, parse_pattern, translate
from sparse_life.domain.step import NeighborTally, TallyEntry, build_tally, decide, step
from sparse_life.domain.store import EntityStore, InMemoryEntityStore, apply_actions

__all__ = [
    "Action",
    "Cell",
    "Create",
    "Destroy",
    "EntityId",
    "EntityStore",
    "ExtinctionDetector",
    "HaltDetector",
    "InMemoryEntityStore",
    "NeighborTally",
    "PATTERNS",
    "ShortPeriodDetector",
    "TallyEntry",
    "TerminationReason",
    "apply_actions",
    "build_tally",
    "decide",
    "get_pattern",
    "parse_pattern",
    "step",
    "translate",
]
