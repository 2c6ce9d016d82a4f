"""Centralized domain constants for sparse Life runs.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

NUM_STEPS = 100
"""Default number of generations per run."""

HALT_WINDOW = 3
"""Default halt-detector window (consecutive unchanged snapshots)."""

SHORT_PERIOD_MAX = 2
"""Longest oscillator period the short-period detector looks for by default."""

SHORT_PERIOD_HISTORY = 8
"""Number of recent snapshots retained by the short-period detector."""

BIRTH_COUNTS: frozenset[int] = frozenset({3})
"""Live-neighbor counts that bring an empty position to life (B3)."""

SURVIVAL_COUNTS: frozenset[int] = frozenset({2, 3})
"""Live-neighbor counts that keep a live cell alive (S23)."""

NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)
"""Moore neighborhood offsets, origin excluded."""

DEFAULT_PATTERN = "blinker"
"""Seed pattern used by the CLI when none is given."""
