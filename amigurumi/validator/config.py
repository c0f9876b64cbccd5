"""
Configuration validation, alone and against a profile.

Field-level ranges (positive gauge, positive height) are enforced when the
config is constructed. The checks here need context:

  unknown_decrease_style → decrease_style is not registered (error)
  height_mismatch        → total_height_cm differs from the profile's height
                           span by more than one row (warning)
"""

from __future__ import annotations

from collections.abc import Sequence

from amigurumi.schemas.profile import AnchorPoint
from amigurumi.utilities import decrease_styles
from amigurumi.utilities.conversion import row_height_cm
from amigurumi.utilities.types import AmigurumiConfig
from amigurumi.validator.profile import ValidationError


def validate_config(
    config: AmigurumiConfig,
    anchors: Sequence[AnchorPoint] | None = None,
) -> list[ValidationError]:
    """
    Check *config*, and its fit to *anchors* when given.

    Returns
    -------
    A list of ValidationErrors (may be empty).
    """
    errors: list[ValidationError] = []

    if config.decrease_style not in decrease_styles.list_styles():
        errors.append(
            ValidationError(
                field="decrease_style",
                message=(
                    f"unknown decrease style {config.decrease_style!r}; "
                    f"expected one of {decrease_styles.list_styles()}"
                ),
                code="unknown_decrease_style",
            )
        )

    if anchors and len(anchors) >= 2:
        span = anchors[-1].height_cm - anchors[0].height_cm
        if abs(span - config.total_height_cm) > row_height_cm(config.gauge):
            errors.append(
                ValidationError(
                    field="total_height_cm",
                    message=(
                        f"total height {config.total_height_cm} cm does not match the "
                        f"drawn profile's height of {span:.2f} cm"
                    ),
                    code="height_mismatch",
                    severity="warning",
                )
            )

    return errors
