"""writer — pattern notation public API."""

from amigurumi.writer.notation import (
    ABBREVIATIONS,
    describe,
    describe_row,
    expand,
    find_repeat_block,
    run_length_encode,
)

__all__ = [
    "ABBREVIATIONS",
    "describe",
    "describe_row",
    "expand",
    "find_repeat_block",
    "run_length_encode",
]
