"""
amigurumi — compile a drawn revolution profile into a crochet pattern.

The compiler turns a list of anchor points (radius and height in cm, closed
on the axis at both ends) and a gauge into rows of single crochet worked in
the round. See ``amigurumi.orchestrator.compile_pattern`` for the native entry
point and ``amigurumi.api`` for the JSON boundary.
"""

from amigurumi.orchestrator.pipeline import PipelineError, compile_pattern
from amigurumi.schemas.pattern import Pattern, PatternMetadata, Row, StitchAction
from amigurumi.schemas.profile import AnchorPoint
from amigurumi.utilities.types import AmigurumiConfig, GaugeConfig

__all__ = [
    "AmigurumiConfig",
    "AnchorPoint",
    "GaugeConfig",
    "Pattern",
    "PatternMetadata",
    "PipelineError",
    "Row",
    "StitchAction",
    "compile_pattern",
]
