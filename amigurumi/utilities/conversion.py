"""
Unit conversion between physical dimensions and stitch/row counts.

All physical dimensions are in centimetres unless otherwise noted.
All functions are pure.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import GaugeConfig

CM_PER_INCH: float = 2.54


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimetres."""
    return inches * CM_PER_INCH


def cm_to_inches(cm: float) -> float:
    """Convert centimetres to inches."""
    return cm / CM_PER_INCH


def per_inch_to_per_cm(density: float) -> float:
    """Convert a per-inch density (stitches or rows) to per-centimetre."""
    return density / CM_PER_INCH


def circumference_cm(radius_cm: float) -> float:
    """Circumference of a round of the given radius."""
    return 2.0 * math.pi * radius_cm


def radius_to_stitch_count(radius_cm: float, gauge: GaugeConfig) -> float:
    """Raw (non-integer) stitch count needed to go once around a round of *radius_cm*."""
    return circumference_cm(radius_cm) * gauge.stitches_per_cm


def row_height_cm(gauge: GaugeConfig) -> float:
    """Height of one worked row."""
    return 1.0 / gauge.rows_per_cm


def round_half_up(x: float) -> int:
    """Round to the nearest integer, with exact halves going up (2.5 -> 3, not 2)."""
    return math.floor(x + 0.5)


def height_to_row_count(height_cm: float, gauge: GaugeConfig) -> int:
    """Convert a physical height to an integer number of row spacings, halves rounding up."""
    return round_half_up(height_cm * gauge.rows_per_cm)
