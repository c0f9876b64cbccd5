"""
Input validator — public API.

Exposed names
-------------
validate_inputs    -- run the profile and config checks together
validate_anchors   -- every profile invariant violation in an anchor list
validate_config    -- config checks, optionally against a profile
ValidationResult   -- aggregate result (passed: bool, errors: tuple[ValidationError, ...])
ValidationError    -- a single failure or warning (field, message, code, severity)
"""

from amigurumi.validator.config import validate_config
from amigurumi.validator.inputs import ValidationResult, to_result, validate_inputs
from amigurumi.validator.profile import ValidationError, validate_anchors

__all__ = [
    "validate_inputs",
    "validate_anchors",
    "validate_config",
    "to_result",
    "ValidationResult",
    "ValidationError",
]
