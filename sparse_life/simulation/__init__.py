"""Simulation layer: the host loop around an entity store."""

from sparse_life.simulation.engine import Simulation, StepReport, run_simulation

__all__ = ["Simulation", "StepReport", "run_simulation"]
