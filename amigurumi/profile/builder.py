"""
Curve builder: anchor points to a smooth, closed, height-monotonic profile.

The profile is a shape-preserving cubic Hermite spline (PCHIP) through the
anchors, parameterised uniformly by anchor index and handled per coordinate:

  radius: PCHIP tangents, so the curve never bulges past its anchors and a
          run of equal radii stays perfectly straight;
  height: PCHIP tangents capped at 1.5× the smaller neighbouring height step,
          so every Bézier control polygon climbs and each height maps to one
          point on the curve.

At both poles the height tangent is clamped to 0 and the radius tangent to the
adjacent chord: the curve leaves and meets the axis at a right angle, so the
revolved solid has no point at either end.

Each span is then re-expressed as a cubic Bézier in the same centimetre
coordinates as the anchors.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy.interpolate import PchipInterpolator

from amigurumi.schemas.profile import AnchorPoint, CurveSegment, Point2D, ProfileCurve

MIN_ANCHORS: int = 3

# Height tangents never exceed this multiple of the smaller adjacent step.
_HEIGHT_TANGENT_CAP: float = 1.5


class ProfileError(ValueError):
    """The anchor list cannot describe a closed solid of revolution."""

    code: str = "invalid_profile"


class TooFewPointsError(ProfileError):
    code = "too_few_points"


class NotMonotonicError(ProfileError):
    code = "not_monotonic"


class OpenPoleError(ProfileError):
    code = "open_pole"


def check_anchors(anchors: Sequence[AnchorPoint]) -> None:
    """
    Raise the first ProfileError *anchors* violates, in a fixed order:
    too few points, then non-increasing heights, then an open pole.
    """
    if len(anchors) < MIN_ANCHORS:
        raise TooFewPointsError(
            f"profile needs at least {MIN_ANCHORS} points, got {len(anchors)}"
        )
    for idx in range(1, len(anchors)):
        if anchors[idx].height_cm <= anchors[idx - 1].height_cm:
            raise NotMonotonicError(
                f"point {idx} (height {anchors[idx].height_cm}) is not above "
                f"point {idx - 1} (height {anchors[idx - 1].height_cm})"
            )
    if not anchors[0].on_axis:
        raise OpenPoleError(
            f"profile must start on the axis; first point has radius {anchors[0].radius_cm}"
        )
    if not anchors[-1].on_axis:
        raise OpenPoleError(
            f"profile must end on the axis; last point has radius {anchors[-1].radius_cm}"
        )


def build_profile(anchors: Sequence[AnchorPoint]) -> ProfileCurve:
    """
    Fit the profile curve through *anchors*.

    Parameters
    ----------
    anchors:
        Points ordered bottom to top, in centimetres.

    Returns
    -------
    ProfileCurve
        One Bézier segment per pair of consecutive anchors.

    Raises
    ------
    TooFewPointsError, NotMonotonicError, OpenPoleError
        If *anchors* violates a profile invariant.
    """
    check_anchors(anchors)

    knots = np.arange(len(anchors), dtype=float)
    radii = np.array([0.0] + [a.radius_cm for a in anchors[1:-1]] + [0.0])
    heights = np.array([a.height_cm for a in anchors])

    radius_tangents = _radius_tangents(knots, radii)
    height_tangents = _height_tangents(knots, heights)

    segments = []
    for k in range(len(anchors) - 1):
        p0 = Point2D(float(radii[k]), float(heights[k]))
        p1 = Point2D(float(radii[k + 1]), float(heights[k + 1]))
        segments.append(
            CurveSegment(
                start=p0,
                control1=Point2D(
                    p0.x + radius_tangents[k] / 3.0,
                    p0.y + height_tangents[k] / 3.0,
                ),
                control2=Point2D(
                    p1.x - radius_tangents[k + 1] / 3.0,
                    p1.y - height_tangents[k + 1] / 3.0,
                ),
                end=p1,
            )
        )
    return ProfileCurve(segments=tuple(segments))


def _radius_tangents(knots: np.ndarray, radii: np.ndarray) -> list[float]:
    tangents = PchipInterpolator(knots, radii).derivative()(knots)
    tangents[0] = radii[1] - radii[0]
    tangents[-1] = radii[-1] - radii[-2]
    return [float(m) for m in tangents]


def _height_tangents(knots: np.ndarray, heights: np.ndarray) -> list[float]:
    steps = np.diff(heights)
    tangents = PchipInterpolator(knots, heights).derivative()(knots)
    tangents[0] = 0.0
    tangents[-1] = 0.0
    cap = _HEIGHT_TANGENT_CAP * np.minimum(steps[:-1], steps[1:])
    tangents[1:-1] = np.clip(tangents[1:-1], 0.0, cap)
    return [float(m) for m in tangents]
