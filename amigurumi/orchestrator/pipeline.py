"""
Compile pipeline: wires the compiler stages from anchors to a checked Pattern.

Pipeline stages:

  0. decrease_styles.get() → PipelineError("input") if it is not registered
  1. build_profile()      → ProfileCurve; PipelineError("profile") on bad anchors
  2. plan_rows()          → ideal stitch count per row; PipelineError("planner")
  3. feasible_counts()    → counts each row can actually be worked to
  4. emit_row_actions()   → Row per count (row 1 seeded as plain sc);
                            PipelineError("distributor")
  5. check_pattern()      → PipelineError("checker") if conservation fails
  6. aggregate()          → PatternMetadata

Every stage is a pure function; the pipeline keeps no state between calls.
Any failure aborts the compilation with no partial output.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from amigurumi.checker.simulate import check_pattern
from amigurumi.estimates.aggregator import aggregate
from amigurumi.estimates.registry import EstimatesRegistry
from amigurumi.planner.rows import feasible_counts, plan_rows
from amigurumi.profile.builder import build_profile
from amigurumi.schemas.pattern import Pattern, Row, StitchAction
from amigurumi.schemas.profile import AnchorPoint
from amigurumi.utilities import decrease_styles
from amigurumi.utilities.shaping import emit_row_actions, stagger_phase
from amigurumi.utilities.types import AmigurumiConfig

logger = logging.getLogger(__name__)


class PipelineError(Exception):
    """Raised when a pipeline stage fails.

    Attributes:
        stage: Name of the stage that failed
            (``"input"``, ``"profile"``, ``"planner"``, ``"distributor"``, or
            ``"checker"``).
        detail: Human-readable description of the failure.
        code: Stable machine-readable code, taken from the underlying error
            when it carries one.
    """

    def __init__(self, stage: str, detail: str, code: str | None = None) -> None:
        super().__init__(f"[{stage}] {detail}")
        self.stage = stage
        self.detail = detail
        self.code = code or f"{stage}_failed"


def build_rows(
    counts: Sequence[int],
    *,
    decrease_style: str = "invisible",
    stagger: bool = True,
) -> tuple[Row, ...]:
    """
    Turn a feasible stitch-count sequence into worked rows.

    Row 1 is the starting loop and is seeded as ``counts[0]`` single crochet.
    With *stagger*, every even-numbered shaping row is rotated by half a
    repeat so increases and decreases do not stack into visible corners.

    Raises
    ------
    ValueError
        If a transition cannot be worked in one row.
    KeyError
        If *decrease_style* is not registered.
    StitchInvariantError
        If an emitted row breaks stitch conservation.
    """
    if not counts:
        return ()

    rows = [
        Row(row_number=1, target_stitch_count=counts[0], actions=(StitchAction.SC,) * counts[0])
    ]
    for row_number, (previous, target) in enumerate(zip(counts, counts[1:]), start=2):
        phase = stagger_phase(previous, target) if stagger and row_number % 2 == 0 else 0
        actions = emit_row_actions(
            previous,
            target,
            decrease_style=decrease_style,
            phase=phase,
        )
        rows.append(Row(row_number=row_number, target_stitch_count=target, actions=actions))
    return tuple(rows)


def compile_pattern(
    anchors: Sequence[AnchorPoint],
    config: AmigurumiConfig,
    registry: EstimatesRegistry | None = None,
) -> Pattern:
    """Compile *anchors* and *config* into a complete, checked Pattern.

    Parameters
    ----------
    anchors:
        Profile anchors in centimetres, bottom pole first.
    config:
        Height, gauge and shaping options.
    registry:
        Estimate constants; defaults to the packaged table.

    Returns
    -------
    Pattern
        Rows in working order plus summary metadata.

    Raises
    ------
    PipelineError
        If any stage fails. ``stage`` names the failing stage and the
        original exception is chained as ``__cause__``.
    """
    logger.info(
        "Compiling profile with %d anchors at %.2f cm height", len(anchors), config.total_height_cm
    )

    # Stage 0: options checked before any work
    try:
        decrease_styles.get(config.decrease_style)
    except KeyError as exc:
        raise PipelineError("input", exc.args[0], "unknown_decrease_style") from exc

    # Stage 1: Curve Builder → ProfileCurve
    try:
        curve = build_profile(anchors)
    except Exception as exc:
        raise PipelineError("profile", str(exc), getattr(exc, "code", None)) from exc

    # Stage 2: Row Planner → ideal counts, then feasible counts
    try:
        targets = plan_rows(curve, config)
    except Exception as exc:
        raise PipelineError("planner", str(exc), getattr(exc, "code", None)) from exc
    counts = feasible_counts(targets)

    # Stage 3: Delta Distributor → rows
    try:
        rows = build_rows(
            counts,
            decrease_style=config.decrease_style,
            stagger=config.stagger_shaping,
        )
    except Exception as exc:
        raise PipelineError("distributor", str(exc)) from exc

    # Stage 4: conservation check over the whole sequence
    checker_result = check_pattern(rows)
    if not checker_result.passed:
        error_msgs = "; ".join(f"row {e.row_number}: {e.message}" for e in checker_result.errors)
        raise PipelineError("checker", error_msgs)

    # Stage 5: Metadata Aggregator
    metadata = aggregate(rows, config, registry)

    logger.debug("Row counts: %s", [row.target_stitch_count for row in rows])
    logger.info(
        "Compiled %d rows, %d stitches", metadata.total_rows, metadata.total_stitches
    )
    return Pattern(rows=rows, metadata=metadata)
