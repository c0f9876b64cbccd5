"""
Metadata aggregator: summary figures for a compiled row sequence.

    total_rows            = len(rows)
    total_stitches        = Σ row.target_stitch_count
    seconds_per_stitch    = base · (reference_hook_mm / hook_size_mm) ** hook_exponent
    estimated_time        = total_stitches · seconds_per_stitch / 60
    yarn_length           = (total_stitches · yarn_widths_per_stitch / stitches_per_cm
                             + tail_allowance_cm) / 100

The constants come from the estimates registry.
"""

from __future__ import annotations

from collections.abc import Sequence

from amigurumi.estimates.registry import EstimatesRegistry, get_registry
from amigurumi.schemas.pattern import PatternMetadata, Row
from amigurumi.utilities.types import AmigurumiConfig, GaugeConfig


def seconds_per_stitch(gauge: GaugeConfig, registry: EstimatesRegistry | None = None) -> float:
    """Working time for one stitch with the configured hook."""
    constants = (registry or get_registry()).time
    return constants.base_seconds_per_stitch * (
        constants.reference_hook_mm / gauge.hook_size_mm
    ) ** constants.hook_exponent


def yarn_cm_per_stitch(gauge: GaugeConfig, registry: EstimatesRegistry | None = None) -> float:
    """Yarn consumed by one stitch at the configured gauge."""
    constants = (registry or get_registry()).yarn
    return constants.yarn_widths_per_stitch / gauge.stitches_per_cm


def aggregate(
    rows: Sequence[Row],
    config: AmigurumiConfig,
    registry: EstimatesRegistry | None = None,
) -> PatternMetadata:
    """Derive PatternMetadata from *rows* and the gauge in *config*."""
    registry = registry or get_registry()
    total_stitches = sum(row.target_stitch_count for row in rows)

    minutes = total_stitches * seconds_per_stitch(config.gauge, registry) / 60.0
    yarn_cm = total_stitches * yarn_cm_per_stitch(config.gauge, registry)
    if rows:
        yarn_cm += registry.yarn.tail_allowance_cm

    return PatternMetadata(
        total_rows=len(rows),
        total_stitches=total_stitches,
        estimated_time_minutes=minutes,
        yarn_length_meters=yarn_cm / 100.0,
    )
