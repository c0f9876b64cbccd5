"""
Core configuration types shared by every compiler stage.

All types are frozen dataclasses with fail-fast validation in __post_init__.
They are owned by the caller and read-only to the compiler.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .conversion import per_inch_to_per_cm


@dataclass(frozen=True)
class GaugeConfig:
    """
    Crochet gauge: stitch and row density per centimetre, plus the hook used.

    All values must be strictly positive. Gauges are immutable after
    construction and safe to share across compilations.
    """

    stitches_per_cm: float
    rows_per_cm: float
    hook_size_mm: float

    def __post_init__(self) -> None:
        for name in ("stitches_per_cm", "rows_per_cm", "hook_size_mm"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    @classmethod
    def from_per_inch(
        cls, stitches_per_inch: float, rows_per_inch: float, hook_size_mm: float
    ) -> GaugeConfig:
        """Build a gauge from a swatch measured in stitches and rows per inch."""
        return cls(
            stitches_per_cm=per_inch_to_per_cm(stitches_per_inch),
            rows_per_cm=per_inch_to_per_cm(rows_per_inch),
            hook_size_mm=hook_size_mm,
        )


@dataclass(frozen=True)
class AmigurumiConfig:
    """
    Per-compilation settings.

    Attributes:
        total_height_cm: Finished height of the piece; sets the row count.
        gauge: Stitch/row density and hook size.
        decrease_style: Name of a registered decrease style (see
            ``amigurumi.utilities.decrease_styles``).
        stagger_shaping: Offset shaping on alternate rows so increases and
            decreases do not stack into visible corners.
    """

    total_height_cm: float
    gauge: GaugeConfig
    decrease_style: str = "invisible"
    stagger_shaping: bool = True

    def __post_init__(self) -> None:
        if not math.isfinite(self.total_height_cm) or self.total_height_cm <= 0:
            raise ValueError(f"total_height_cm must be positive, got {self.total_height_cm}")
        if not self.decrease_style:
            raise ValueError("decrease_style must be a non-empty style name")
