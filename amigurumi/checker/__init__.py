"""checker — stitch conservation checks over compiled rows."""

from amigurumi.checker.simulate import (
    CheckerError,
    CheckerResult,
    SimulationResult,
    StitchInvariantError,
    check_pattern,
    simulate_row,
)

__all__ = [
    "CheckerError",
    "CheckerResult",
    "SimulationResult",
    "StitchInvariantError",
    "check_pattern",
    "simulate_row",
]
