"""Tests for anchor-list validation."""

from amigurumi.schemas.profile import AnchorPoint
from amigurumi.validator.profile import ValidationError, validate_anchors


def _anchors(*pairs):
    return [AnchorPoint(radius_cm=r, height_cm=h) for r, h in pairs]


def _codes(errors):
    return [e.code for e in errors]


class TestValidateAnchors:
    def test_valid_profile(self):
        assert validate_anchors(_anchors((0, 0), (3, 2), (4, 4), (0, 6))) == []

    def test_too_few_points(self):
        errors = validate_anchors(_anchors((0, 0), (0, 6)))
        assert _codes(errors) == ["too_few_points"]
        assert errors[0].field == "anchors"
        assert errors[0].severity == "error"

    def test_empty(self):
        assert _codes(validate_anchors([])) == ["too_few_points"]

    def test_each_out_of_order_point_reported(self):
        errors = validate_anchors(_anchors((0, 0), (3, 2), (2, 2), (4, 1), (0, 6)))
        assert _codes(errors) == ["not_monotonic", "not_monotonic"]
        assert [e.field for e in errors] == ["anchors[2].height_cm", "anchors[3].height_cm"]

    def test_open_poles(self):
        errors = validate_anchors(_anchors((1, 0), (3, 2), (0.5, 6)))
        assert _codes(errors) == ["open_pole", "open_pole"]
        assert errors[0].field == "anchors[0].radius_cm"
        assert errors[1].field == "anchors[2].radius_cm"

    def test_reports_everything_at_once(self):
        errors = validate_anchors(_anchors((1, 2), (1, 1)))
        assert set(_codes(errors)) == {"too_few_points", "not_monotonic", "open_pole"}

    def test_single_open_point_reported_once(self):
        errors = validate_anchors(_anchors((1, 0)))
        assert _codes(errors) == ["too_few_points", "open_pole"]

    def test_pole_tolerance(self):
        assert validate_anchors(_anchors((1e-12, 0), (3, 2), (1e-12, 6))) == []

    def test_error_is_frozen_record(self):
        error = ValidationError(field="anchors", message="m", code="c")
        assert error.severity == "error"
