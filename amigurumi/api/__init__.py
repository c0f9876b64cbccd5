"""api — JSON boundary around the compiler."""

from amigurumi.api.compile import CompileError, compile_pattern_json
from amigurumi.api.validate import validate_config, validate_profile
from amigurumi.api.worker import handle_message

__all__ = [
    "CompileError",
    "compile_pattern_json",
    "handle_message",
    "validate_config",
    "validate_profile",
]
