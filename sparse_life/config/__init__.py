"""Configuration layer: constants and typed config dataclasses."""

from sparse_life.config.constants import (
    BIRTH_COUNTS,
    DEFAULT_PATTERN,
    HALT_WINDOW,
    NEIGHBOR_OFFSETS,
    NUM_STEPS,
    SHORT_PERIOD_HISTORY,
    SHORT_PERIOD_MAX,
    SURVIVAL_COUNTS,
)
from sparse_life.config.types import RunConfig, SimulationResult

__all__ = [
    "BIRTH_COUNTS",
    "DEFAULT_PATTERN",
    "HALT_WINDOW",
    "NEIGHBOR_OFFSETS",
    "NUM_STEPS",
    "RunConfig",
    "SHORT_PERIOD_HISTORY",
    "SHORT_PERIOD_MAX",
    "SURVIVAL_COUNTS",
    "SimulationResult",
]
