"""
Shared utilities for the amigurumi pattern compiler.

Provides the deterministic building blocks used by the planner and the
orchestrator: gauge configuration, unit conversion, and the registry of
decrease styles. The delta distributor lives in ``amigurumi.utilities.shaping``.
"""

from .conversion import (
    CM_PER_INCH,
    circumference_cm,
    cm_to_inches,
    height_to_row_count,
    inches_to_cm,
    per_inch_to_per_cm,
    radius_to_stitch_count,
    row_height_cm,
)
from .types import AmigurumiConfig, GaugeConfig

__all__ = [
    # types
    "AmigurumiConfig",
    "GaugeConfig",
    # conversion
    "CM_PER_INCH",
    "inches_to_cm",
    "cm_to_inches",
    "per_inch_to_per_cm",
    "circumference_cm",
    "radius_to_stitch_count",
    "row_height_cm",
    "height_to_row_count",
]
