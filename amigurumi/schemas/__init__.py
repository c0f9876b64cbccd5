"""
Schema definitions for the amigurumi compiler's data contracts.

Provides the shared data structures (anchor points, profile curve, stitch
actions, rows, compiled pattern) that flow between compiler stages.
"""

from .pattern import Pattern, PatternMetadata, Row, StitchAction
from .profile import (
    CONTINUITY_TOLERANCE_CM,
    POLE_TOLERANCE_CM,
    AnchorPoint,
    CurveSegment,
    Point2D,
    ProfileCurve,
)

__all__ = [
    # profile
    "POLE_TOLERANCE_CM",
    "CONTINUITY_TOLERANCE_CM",
    "AnchorPoint",
    "Point2D",
    "CurveSegment",
    "ProfileCurve",
    # pattern
    "StitchAction",
    "Row",
    "PatternMetadata",
    "Pattern",
]
