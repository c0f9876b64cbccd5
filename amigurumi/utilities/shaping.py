"""
Delta distributor: spread a row's increases or decreases evenly around the round.

Given the previous row's stitch count and the row's target count, produces the
ordered stitch actions for the row. Shaping positions are chosen with an
accumulator walk equivalent to Bresenham line rasterisation, so marked stitches
are spaced within one slot of perfectly even and only touch when the delta is
large enough to force it.

Increase rows mark ``delta`` of the ``previous`` base stitches as INC.
Decrease rows have ``previous - |delta|`` output slots of which ``|delta|`` are
decreases; each decrease consumes two base stitches, so the row consumes
exactly ``previous`` stitches.
"""

from __future__ import annotations

from amigurumi.checker.simulate import assert_row_conserves
from amigurumi.schemas.pattern import StitchAction
from amigurumi.utilities import decrease_styles


def max_increase(previous_count: int) -> int:
    """Largest increase one row can make: every base stitch becomes an INC."""
    return previous_count


def max_decrease(previous_count: int) -> int:
    """Largest decrease one row can make: every pair of base stitches is decreased."""
    return previous_count // 2


def spread_marks(slots: int, marks: int, phase: int = 0) -> list[bool]:
    """
    Choose *marks* of *slots* positions, evenly spaced.

    Walks the slots with an accumulator that gains *marks* per slot and marks
    the slot whenever it reaches *slots*. *phase* pre-loads the accumulator
    (taken modulo *slots*), rotating the marks without changing their spacing
    or count.

    Raises:
        ValueError: If marks is negative or greater than slots.
    """
    if marks < 0 or marks > slots:
        raise ValueError(f"cannot place {marks} marks in {slots} slots")
    if slots == 0:
        return []

    acc = phase % slots
    result: list[bool] = []
    for _ in range(slots):
        acc += marks
        if acc >= slots:
            acc -= slots
            result.append(True)
        else:
            result.append(False)
    return result


def emit_row_actions(
    previous_count: int,
    target_count: int,
    *,
    decrease_style: str = "invisible",
    phase: int = 0,
) -> tuple[StitchAction, ...]:
    """
    Build the stitch actions that take *previous_count* live stitches to *target_count*.

    Args:
        previous_count: Stitches on the previous row.
        target_count: Stitches the row must end with.
        decrease_style: Registered decrease style choosing DEC or INVDEC.
        phase: Accumulator offset used to stagger shaping between rows.

    Returns:
        Tuple of actions in working order.

    Raises:
        ValueError: If either count is < 1 or the delta cannot be worked in one
            row (more than doubling or more than halving).
        KeyError: If *decrease_style* is not registered.
        StitchInvariantError: If the emitted row breaks stitch conservation.
    """
    if previous_count < 1 or target_count < 1:
        raise ValueError(
            f"stitch counts must be >= 1, got {previous_count} -> {target_count}"
        )

    delta = target_count - previous_count

    if delta == 0:
        actions = (StitchAction.SC,) * previous_count

    elif delta > 0:
        if delta > max_increase(previous_count):
            raise ValueError(
                f"cannot increase {previous_count} -> {target_count} in one row "
                f"(at most {max_increase(previous_count)} increases)"
            )
        marks = spread_marks(previous_count, delta, phase)
        actions = tuple(StitchAction.INC if m else StitchAction.SC for m in marks)

    else:
        decreases = -delta
        if decreases > max_decrease(previous_count):
            raise ValueError(
                f"cannot decrease {previous_count} -> {target_count} in one row "
                f"(at most {max_decrease(previous_count)} decreases)"
            )
        pick = decrease_styles.get(decrease_style)
        marks = spread_marks(previous_count - decreases, decreases, phase)
        built: list[StitchAction] = []
        dec_index = 0
        for marked in marks:
            if marked:
                built.append(pick(dec_index))
                dec_index += 1
            else:
                built.append(StitchAction.SC)
        actions = tuple(built)

    assert_row_conserves(previous_count, target_count, actions)
    return actions


def stagger_phase(previous_count: int, target_count: int) -> int:
    """Accumulator offset that shifts shaping by half a repeat."""
    delta = target_count - previous_count
    if delta == 0:
        return 0
    slots = previous_count if delta > 0 else previous_count + delta
    return slots // 2
