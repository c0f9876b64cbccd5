"""Tests for the curve builder."""

import pytest

from amigurumi.profile.builder import (
    NotMonotonicError,
    OpenPoleError,
    ProfileError,
    TooFewPointsError,
    build_profile,
    check_anchors,
)
from amigurumi.schemas.profile import AnchorPoint, ProfileCurve


def _anchors(*pairs):
    return [AnchorPoint(radius_cm=r, height_cm=h) for r, h in pairs]


TEARDROP = _anchors((0, 0), (3, 2), (4, 4), (0, 6))
CYLINDER = _anchors((0, 0), (2, 0.01), (2, 5.99), (0, 6))


class TestCheckAnchors:
    def test_valid(self):
        check_anchors(TEARDROP)

    def test_too_few_points(self):
        with pytest.raises(TooFewPointsError) as exc_info:
            check_anchors(_anchors((0, 0), (0, 6)))
        assert exc_info.value.code == "too_few_points"

    def test_empty(self):
        with pytest.raises(TooFewPointsError):
            check_anchors([])

    def test_equal_heights(self):
        with pytest.raises(NotMonotonicError) as exc_info:
            check_anchors(_anchors((0, 0), (3, 2), (2, 2), (0, 6)))
        assert exc_info.value.code == "not_monotonic"

    def test_descending_heights(self):
        with pytest.raises(NotMonotonicError):
            check_anchors(_anchors((0, 0), (3, 4), (2, 3), (0, 6)))

    def test_open_bottom(self):
        with pytest.raises(OpenPoleError) as exc_info:
            check_anchors(_anchors((1, 0), (3, 2), (0, 6)))
        assert exc_info.value.code == "open_pole"

    def test_open_top(self):
        with pytest.raises(OpenPoleError, match="end on the axis"):
            check_anchors(_anchors((0, 0), (3, 2), (1, 6)))

    def test_count_checked_before_pole(self):
        with pytest.raises(TooFewPointsError):
            check_anchors(_anchors((1, 0), (1, 6)))

    def test_order_checked_before_pole(self):
        with pytest.raises(NotMonotonicError):
            check_anchors(_anchors((1, 0), (3, 2), (3, 1), (0, 6)))

    def test_errors_are_value_errors(self):
        for cls in (TooFewPointsError, NotMonotonicError, OpenPoleError):
            assert issubclass(cls, ProfileError)
            assert issubclass(cls, ValueError)


class TestBuildProfile:
    def test_one_segment_per_span(self):
        curve = build_profile(TEARDROP)
        assert isinstance(curve, ProfileCurve)
        assert len(curve.segments) == 3

    def test_passes_through_anchors(self):
        curve = build_profile(TEARDROP)
        for seg, (lo, hi) in zip(curve.segments, zip(TEARDROP, TEARDROP[1:])):
            assert seg.start.x == pytest.approx(lo.radius_cm)
            assert seg.start.y == pytest.approx(lo.height_cm)
            assert seg.end.x == pytest.approx(hi.radius_cm)
            assert seg.end.y == pytest.approx(hi.height_cm)

    def test_height_range(self):
        curve = build_profile(TEARDROP)
        assert curve.min_height == 0
        assert curve.max_height == 6

    def test_every_segment_height_monotonic(self):
        curve = build_profile(
            _anchors((0, 0), (1, 0.2), (5, 0.5), (0.5, 3.0), (6, 3.1), (2, 7.5), (0, 8))
        )
        assert all(seg.is_height_monotonic() for seg in curve.segments)

    def test_meets_axis_perpendicular_at_poles(self):
        """Height tangent is zero at both poles; radius tangent points away from the axis."""
        curve = build_profile(TEARDROP)
        bottom = curve.segments[0].derivative(0.0)
        top = curve.segments[-1].derivative(1.0)
        assert bottom.y == pytest.approx(0.0)
        assert bottom.x > 0
        assert top.y == pytest.approx(0.0)
        assert top.x < 0

    def test_pole_radius_snapped_to_axis(self):
        curve = build_profile(_anchors((1e-12, 0), (3, 2), (1e-12, 6)))
        assert curve.segments[0].start.x == 0.0
        assert curve.segments[-1].end.x == 0.0

    def test_equal_radii_stay_straight(self):
        """Two anchors at the same radius give a straight wall between them."""
        middle = build_profile(CYLINDER).segments[1]
        for point in (middle.start, middle.control1, middle.control2, middle.end):
            assert point.x == pytest.approx(2.0)

    def test_deterministic(self):
        assert build_profile(TEARDROP) == build_profile(TEARDROP)

    def test_rejects_invalid(self):
        with pytest.raises(OpenPoleError):
            build_profile(_anchors((0, 0), (3, 2), (4, 6)))
