"""planner — Row Planner public API."""

from amigurumi.planner.rows import (
    HeightOutOfRangeError,
    PlanError,
    feasible_counts,
    plan_rows,
    row_count,
    row_heights,
)

__all__ = [
    "HeightOutOfRangeError",
    "PlanError",
    "feasible_counts",
    "plan_rows",
    "row_count",
    "row_heights",
]
