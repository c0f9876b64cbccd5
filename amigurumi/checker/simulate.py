"""
Stitch-count simulation for compiled rows.

simulate_row replays one row's actions against the previous row's live
stitches and verifies the two conservation rules every row must satisfy:

  1. the actions consume exactly the previous row's stitches;
  2. the net change equals ``target - previous``.

It returns a SimulationResult rather than raising so the caller can collect
errors from every row before reporting. check_pattern runs the simulation over
a full row sequence. A failure in either indicates a compiler defect, not bad
input; callers that must abort raise StitchInvariantError.

CheckerError carries enough context for a message:
  - row_number: which round failed
  - message: human-readable description of the problem
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from amigurumi.schemas.pattern import Row, StitchAction


class StitchInvariantError(AssertionError):
    """A compiled row breaks stitch conservation. Always a compiler bug."""


@dataclass(frozen=True)
class CheckerError:
    """A single conservation failure."""

    row_number: int
    message: str


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of simulating one row."""

    passed: bool
    consumed: int
    produced: int
    errors: tuple[CheckerError, ...]


@dataclass(frozen=True)
class CheckerResult:
    """Outcome of simulating a full row sequence."""

    passed: bool
    errors: tuple[CheckerError, ...]


def simulate_row(
    previous_count: int,
    target_count: int,
    actions: Sequence[StitchAction],
    row_number: int = 0,
) -> SimulationResult:
    """
    Replay *actions* into *previous_count* live stitches.

    Parameters
    ----------
    previous_count:
        Live stitches on the previous row.
    target_count:
        Stitches the row is declared to end with.
    actions:
        The row's stitch actions, in working order.
    row_number:
        Used only to label errors.
    """
    consumed = sum(action.consumed for action in actions)
    produced = sum(action.produced for action in actions)
    net = sum(action.net_delta for action in actions)
    errors: list[CheckerError] = []

    if consumed != previous_count:
        errors.append(
            CheckerError(
                row_number=row_number,
                message=(
                    f"actions consume {consumed} stitches but the previous row "
                    f"has {previous_count}"
                ),
            )
        )
    if net != target_count - previous_count:
        errors.append(
            CheckerError(
                row_number=row_number,
                message=(
                    f"net change {net:+d} does not take {previous_count} "
                    f"stitches to {target_count}"
                ),
            )
        )
    return SimulationResult(
        passed=not errors,
        consumed=consumed,
        produced=produced,
        errors=tuple(errors),
    )


def check_pattern(rows: Sequence[Row]) -> CheckerResult:
    """
    Simulate every row in order.

    Row 1 is the gathered starting loop: it is worked into the loop itself, so
    it must be plain single crochet and produce its declared count. Every
    later row is simulated against the row before it.
    """
    errors: list[CheckerError] = []
    previous: Row | None = None

    for row in rows:
        if previous is None:
            if any(a is not StitchAction.SC for a in row.actions):
                errors.append(
                    CheckerError(row.row_number, "starting row must be plain single crochet")
                )
            if len(row.actions) != row.target_stitch_count:
                errors.append(
                    CheckerError(
                        row.row_number,
                        f"starting row works {len(row.actions)} stitches, "
                        f"declared {row.target_stitch_count}",
                    )
                )
        else:
            result = simulate_row(
                previous.target_stitch_count,
                row.target_stitch_count,
                row.actions,
                row_number=row.row_number,
            )
            errors.extend(result.errors)
        previous = row

    return CheckerResult(passed=not errors, errors=tuple(errors))


def assert_row_conserves(
    previous_count: int, target_count: int, actions: Sequence[StitchAction]
) -> None:
    """Raise StitchInvariantError if *actions* break conservation."""
    result = simulate_row(previous_count, target_count, actions)
    if not result.passed:
        raise StitchInvariantError("; ".join(e.message for e in result.errors))
