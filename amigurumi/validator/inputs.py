"""
Compile-input validation pipeline.

validate_inputs runs the profile and config checks in sequence and collects
every problem into a ValidationResult, so the editing surface can show them
all at once.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from amigurumi.schemas.profile import AnchorPoint
from amigurumi.utilities.types import AmigurumiConfig
from amigurumi.validator.config import validate_config
from amigurumi.validator.profile import ValidationError, validate_anchors


@dataclass(frozen=True)
class ValidationResult:
    """Aggregate outcome of input validation."""

    passed: bool
    errors: tuple[ValidationError, ...]


def to_result(errors: Sequence[ValidationError]) -> ValidationResult:
    # Warnings do not cause a failure; only "error" severity does
    failed = any(e.severity == "error" for e in errors)
    return ValidationResult(passed=not failed, errors=tuple(errors))


def validate_inputs(
    anchors: Sequence[AnchorPoint],
    config: AmigurumiConfig | None = None,
) -> ValidationResult:
    """
    Validate *anchors* and, when given, *config* against them.

    Returns ``ValidationResult(passed=True, errors=())`` when everything is
    valid.
    """
    errors: list[ValidationError] = []
    errors.extend(validate_anchors(anchors))
    if config is not None:
        errors.extend(validate_config(config, anchors))
    return to_result(errors)
