"""
Pattern schema: stitch actions, rows, and the compiled pattern.

A Pattern is the compiler's single output artifact. Rows are worked in the
round from the bottom pole upward; each row's actions are worked into the
stitches of the previous row, so the base stitches consumed by a row always
equal the previous row's stitch count.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StitchAction(str, Enum):
    """Single-crochet stitch actions worked into the previous row."""

    SC = "sc"
    INC = "inc"
    DEC = "dec"
    INVDEC = "invdec"

    @property
    def net_delta(self) -> int:
        """Change in live stitch count produced by this action."""
        match self:
            case StitchAction.SC:
                return 0
            case StitchAction.INC:
                return 1
            case StitchAction.DEC | StitchAction.INVDEC:
                return -1
            case _:
                raise ValueError(f"Unhandled stitch action: {self!r}")

    @property
    def consumed(self) -> int:
        """Stitches of the previous row this action is worked into."""
        match self:
            case StitchAction.SC | StitchAction.INC:
                return 1
            case StitchAction.DEC | StitchAction.INVDEC:
                return 2
            case _:
                raise ValueError(f"Unhandled stitch action: {self!r}")

    @property
    def produced(self) -> int:
        """Stitches this action leaves on the new row."""
        return self.consumed + self.net_delta

    @property
    def is_shaping(self) -> bool:
        return self is not StitchAction.SC


@dataclass(frozen=True)
class Row:
    """
    One round of the pattern.

    Attributes:
        row_number: 1-based position; row 1 is the gathered starting loop.
        target_stitch_count: Stitches on the hook side after the row is worked.
        actions: Ordered stitch actions for the round.
    """

    row_number: int
    target_stitch_count: int
    actions: tuple[StitchAction, ...]

    def __post_init__(self) -> None:
        if self.row_number < 1:
            raise ValueError(f"row_number must be >= 1, got {self.row_number}")
        if self.target_stitch_count < 3:
            raise ValueError(
                f"target_stitch_count must be >= 3, got {self.target_stitch_count}"
            )
        if isinstance(self.actions, list):
            object.__setattr__(self, "actions", tuple(self.actions))

    @property
    def is_starting_row(self) -> bool:
        return self.row_number == 1

    @property
    def base_stitch_count(self) -> int:
        """Stitches of the previous row consumed by this row's actions."""
        return sum(action.consumed for action in self.actions)


@dataclass(frozen=True)
class PatternMetadata:
    """Summary figures derived from the compiled rows and the gauge."""

    total_rows: int
    total_stitches: int
    estimated_time_minutes: float
    yarn_length_meters: float


@dataclass(frozen=True)
class Pattern:
    """Complete compiled pattern: rows in working order plus summary metadata."""

    rows: tuple[Row, ...]
    metadata: PatternMetadata

    def __post_init__(self) -> None:
        if isinstance(self.rows, list):
            object.__setattr__(self, "rows", tuple(self.rows))
        expected = tuple(range(1, len(self.rows) + 1))
        if tuple(r.row_number for r in self.rows) != expected:
            raise ValueError("rows must be numbered consecutively from 1")
