"""
Row planner: profile and gauge to a per-row stitch count.

Rows are sampled every ``1 / rows_per_cm`` centimetres from the bottom pole,
one sample per row spacing plus the pole row itself:

    row_count = max(2, round(total_height_cm * rows_per_cm)) + 1
    h_i       = min(min_height + i / rows_per_cm, max_height)
    n_i       = max(3, round(2π · r(h_i) · stitches_per_cm))

where round() takes exact halves up.

The first row is the gathered starting loop and is floored to a workable
number of stitches.

plan_rows returns the ideal counts. feasible_counts then limits each
transition to what one row can be worked as: at most doubling (every base
stitch increased) and at most halving (every pair decreased).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from amigurumi.profile.sampler import radius_at_height
from amigurumi.schemas.profile import ProfileCurve
from amigurumi.utilities.conversion import (
    height_to_row_count,
    radius_to_stitch_count,
    round_half_up,
)
from amigurumi.utilities.shaping import max_decrease, max_increase
from amigurumi.utilities.types import AmigurumiConfig

logger = logging.getLogger(__name__)

MIN_ROW_STITCHES: int = 3
MIN_START_STITCHES: int = 4
MIN_ROW_SPACINGS: int = 2


class PlanError(ValueError):
    """Row planning failed."""

    code: str = "plan_failed"


class HeightOutOfRangeError(PlanError):
    """A row height could not be sampled on the profile. Indicates a defect."""

    code = "height_out_of_range"


def row_count(config: AmigurumiConfig) -> int:
    """Number of rows, including the starting row at the bottom pole."""
    return max(MIN_ROW_SPACINGS, height_to_row_count(config.total_height_cm, config.gauge)) + 1


def row_heights(curve: ProfileCurve, config: AmigurumiConfig) -> list[float]:
    """Height sampled for each row, bottom to top, clamped to the profile's top."""
    spacing = 1.0 / config.gauge.rows_per_cm
    return [
        min(curve.min_height + i * spacing, curve.max_height) for i in range(row_count(config))
    ]


def plan_rows(curve: ProfileCurve, config: AmigurumiConfig) -> list[int]:
    """
    Ideal stitch count for every row.

    Raises
    ------
    HeightOutOfRangeError
        If a row height cannot be sampled on *curve*.
    """
    counts: list[int] = []
    for i, h in enumerate(row_heights(curve, config)):
        r = radius_at_height(curve, h)
        if r is None:
            raise HeightOutOfRangeError(
                f"row {i + 1}: height {h:.4f} cm could not be sampled on a profile "
                f"spanning [{curve.min_height:.4f}, {curve.max_height:.4f}] cm"
            )
        n = max(MIN_ROW_STITCHES, round_half_up(radius_to_stitch_count(r, config.gauge)))
        if i == 0:
            n = max(MIN_START_STITCHES, n)
        counts.append(n)

    logger.debug("Planned %d rows: %s", len(counts), counts)
    return counts


def feasible_counts(targets: Sequence[int]) -> list[int]:
    """
    Limit each row-to-row change to what a single row can be worked as.

    A row can at most double its stitches and at most halve them (rounding the
    halved count up), and never drops below the minimum round.
    """
    if not targets:
        return []

    result = [targets[0]]
    for idx, ideal in enumerate(targets[1:], start=2):
        prev = result[-1]
        lowest = max(MIN_ROW_STITCHES, prev - max_decrease(prev))
        highest = prev + max_increase(prev)
        actual = min(max(ideal, lowest), highest)
        if actual != ideal:
            logger.warning(
                "Row %d: target %d stitches is unreachable from %d in one row; using %d",
                idx,
                ideal,
                prev,
                actual,
            )
        result.append(actual)
    return result

