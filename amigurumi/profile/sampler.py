"""
Profile sampler: radius of the profile at a given height.

Segments are ordered bottom to top and each is height-monotonic, so a height
selects one segment by binary search and one parameter within it by
bisection.
"""

from __future__ import annotations

from bisect import bisect_right

from amigurumi.schemas.profile import CurveSegment, ProfileCurve

HEIGHT_TOLERANCE_CM: float = 1e-6
MAX_BISECTION_STEPS: int = 200


def find_segment(curve: ProfileCurve, h: float) -> int | None:
    """Index of the segment whose height range contains *h*, or None if out of range."""
    if h < curve.min_height or h > curve.max_height:
        return None
    starts = [seg.start.y for seg in curve.segments]
    return min(max(bisect_right(starts, h) - 1, 0), len(curve.segments) - 1)


def solve_height(
    segment: CurveSegment,
    h: float,
    tolerance: float = HEIGHT_TOLERANCE_CM,
    max_steps: int = MAX_BISECTION_STEPS,
) -> float | None:
    """
    Parameter ``t`` in [0, 1] at which *segment* reaches height *h*.

    Bisects on ``t`` until the height is within *tolerance* of *h*, rather than
    for a fixed number of steps, so nearly flat segments still converge.
    Returns None if *h* is not bracketed by the segment or the search does not
    converge within *max_steps*.
    """
    lo, hi = 0.0, 1.0
    y_lo, y_hi = segment.start.y, segment.end.y
    if abs(y_lo - h) <= tolerance:
        return lo
    if abs(y_hi - h) <= tolerance:
        return hi
    if not (y_lo < h < y_hi):
        return None

    for _ in range(max_steps):
        mid = 0.5 * (lo + hi)
        y = segment.evaluate(mid).y
        if abs(y - h) <= tolerance:
            return mid
        if y < h:
            lo = mid
        else:
            hi = mid
    return None


def radius_at_height(curve: ProfileCurve, h: float) -> float | None:
    """
    Radius of *curve* at height *h*.

    Returns None when *h* lies outside ``[curve.min_height, curve.max_height]``
    or the segment cannot be solved (malformed curve data). Callers treat the
    latter as fatal.
    """
    idx = find_segment(curve, h)
    if idx is None:
        return None
    segment = curve.segments[idx]
    t = solve_height(segment, h)
    if t is None:
        return None
    return max(0.0, segment.evaluate(t).x)
