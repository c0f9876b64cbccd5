"""
Anchor-list validation.

validate_anchors reports every problem with a profile at once, unlike
build_profile which stops at the first. Codes match the ProfileError
subclasses so the editing surface can treat both the same way:

  too_few_points  → fewer than 3 anchors
  not_monotonic   → an anchor is not strictly above the one before it
  open_pole       → the first or last anchor is off the axis
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from amigurumi.profile.builder import (
    MIN_ANCHORS,
    NotMonotonicError,
    OpenPoleError,
    TooFewPointsError,
)
from amigurumi.schemas.profile import AnchorPoint


@dataclass(frozen=True)
class ValidationError:
    """A single validation failure or warning."""

    field: str
    message: str
    code: str
    severity: str = "error"  # "error" | "warning"


def validate_anchors(anchors: Sequence[AnchorPoint]) -> list[ValidationError]:
    """
    Check *anchors* against the profile invariants.

    Returns
    -------
    A list of ValidationErrors (empty if the profile is valid).
    """
    errors: list[ValidationError] = []

    if len(anchors) < MIN_ANCHORS:
        errors.append(
            ValidationError(
                field="anchors",
                message=(
                    f"profile needs at least {MIN_ANCHORS} points "
                    f"(two poles and one in between), got {len(anchors)}"
                ),
                code=TooFewPointsError.code,
            )
        )

    for idx in range(1, len(anchors)):
        if anchors[idx].height_cm <= anchors[idx - 1].height_cm:
            errors.append(
                ValidationError(
                    field=f"anchors[{idx}].height_cm",
                    message=(
                        f"point {idx} must be higher than point {idx - 1} "
                        f"({anchors[idx].height_cm} <= {anchors[idx - 1].height_cm})"
                    ),
                    code=NotMonotonicError.code,
                )
            )

    if anchors:
        if not anchors[0].on_axis:
            errors.append(
                ValidationError(
                    field="anchors[0].radius_cm",
                    message="profile must start on the axis (radius 0)",
                    code=OpenPoleError.code,
                )
            )
        last = len(anchors) - 1
        if last > 0 and not anchors[last].on_axis:
            errors.append(
                ValidationError(
                    field=f"anchors[{last}].radius_cm",
                    message="profile must end on the axis (radius 0)",
                    code=OpenPoleError.code,
                )
            )

    return errors
