"""
Profile schema: anchor points and the piecewise Bézier profile curve.

Coordinates are in centimetres. ``x`` is the radius (distance from the axis of
revolution) and ``y`` is the height along the axis.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Anchors closer than this to the axis count as lying on it.
POLE_TOLERANCE_CM: float = 1e-9

# Maximum gap between the end of one segment and the start of the next.
CONTINUITY_TOLERANCE_CM: float = 1e-6

# Rounding slack allowed between consecutive control-point heights.
MONOTONIC_SLACK_CM: float = 1e-9


@dataclass(frozen=True)
class AnchorPoint:
    """A user-placed point on the profile."""

    radius_cm: float
    height_cm: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.radius_cm) and math.isfinite(self.height_cm)):
            raise ValueError(
                f"anchor coordinates must be finite, got ({self.radius_cm}, {self.height_cm})"
            )
        if self.radius_cm < 0:
            raise ValueError(f"radius_cm must be >= 0, got {self.radius_cm}")

    @property
    def on_axis(self) -> bool:
        return abs(self.radius_cm) <= POLE_TOLERANCE_CM


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class CurveSegment:
    """Cubic Bézier segment of the profile."""

    start: Point2D
    control1: Point2D
    control2: Point2D
    end: Point2D

    def evaluate(self, t: float) -> Point2D:
        """Point on the segment at parameter *t* in [0, 1]."""
        mt = 1.0 - t
        a = mt * mt * mt
        b = 3.0 * mt * mt * t
        c = 3.0 * mt * t * t
        d = t * t * t
        return Point2D(
            x=a * self.start.x + b * self.control1.x + c * self.control2.x + d * self.end.x,
            y=a * self.start.y + b * self.control1.y + c * self.control2.y + d * self.end.y,
        )

    def derivative(self, t: float) -> Point2D:
        """First derivative with respect to *t*."""
        mt = 1.0 - t
        a = 3.0 * mt * mt
        b = 6.0 * mt * t
        c = 3.0 * t * t
        return Point2D(
            x=a * (self.control1.x - self.start.x)
            + b * (self.control2.x - self.control1.x)
            + c * (self.end.x - self.control2.x),
            y=a * (self.control1.y - self.start.y)
            + b * (self.control2.y - self.control1.y)
            + c * (self.end.y - self.control2.y),
        )

    @property
    def height_range(self) -> tuple[float, float]:
        return self.start.y, self.end.y

    def is_height_monotonic(self) -> bool:
        """True when the control polygon never descends in height.

        A non-descending control polygon guarantees the segment's height is
        non-decreasing in *t*, so each height maps to a single point.
        """
        ys = (self.start.y, self.control1.y, self.control2.y, self.end.y)
        return all(lo <= hi + MONOTONIC_SLACK_CM for lo, hi in zip(ys, ys[1:]))


@dataclass(frozen=True)
class ProfileCurve:
    """
    Immutable piecewise cubic profile, ordered bottom to top.

    Invariants (checked at construction):
      - at least one segment;
      - consecutive segments share an endpoint;
      - every segment is height-monotonic.
    """

    segments: tuple[CurveSegment, ...]

    def __post_init__(self) -> None:
        if isinstance(self.segments, list):
            object.__setattr__(self, "segments", tuple(self.segments))
        if not self.segments:
            raise ValueError("ProfileCurve needs at least one segment")
        for idx, seg in enumerate(self.segments):
            if not seg.is_height_monotonic():
                raise ValueError(f"segment {idx} is not height-monotonic")
        for idx in range(1, len(self.segments)):
            gap = self.segments[idx - 1].end.distance_to(self.segments[idx].start)
            if gap > CONTINUITY_TOLERANCE_CM:
                raise ValueError(
                    f"segments {idx - 1} and {idx} are not continuous (gap {gap:.3g} cm)"
                )

    @property
    def min_height(self) -> float:
        return self.segments[0].start.y

    @property
    def max_height(self) -> float:
        return self.segments[-1].end.y

    @property
    def height_span(self) -> float:
        return self.max_height - self.min_height
