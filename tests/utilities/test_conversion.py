"""Tests for unit conversion helpers."""

import math

import pytest

from amigurumi.utilities.conversion import (
    CM_PER_INCH,
    circumference_cm,
    cm_to_inches,
    height_to_row_count,
    inches_to_cm,
    per_inch_to_per_cm,
    radius_to_stitch_count,
    round_half_up,
    row_height_cm,
)
from amigurumi.utilities.types import GaugeConfig

GAUGE = GaugeConfig(stitches_per_cm=2.0, rows_per_cm=1.5, hook_size_mm=4.0)


class TestLengthConversion:
    def test_inches_to_cm(self):
        assert inches_to_cm(1.0) == pytest.approx(CM_PER_INCH)
        assert inches_to_cm(10.0) == pytest.approx(25.4)

    def test_cm_to_inches(self):
        assert cm_to_inches(2.54) == pytest.approx(1.0)

    def test_roundtrip(self):
        assert cm_to_inches(inches_to_cm(7.3)) == pytest.approx(7.3)

    def test_per_inch_to_per_cm(self):
        assert per_inch_to_per_cm(5.08) == pytest.approx(2.0)


class TestCircumference:
    def test_zero_radius(self):
        assert circumference_cm(0.0) == 0.0

    def test_unit_radius(self):
        assert circumference_cm(1.0) == pytest.approx(2 * math.pi)


class TestStitchAndRowCounts:
    def test_radius_to_stitch_count(self):
        """r = 3 cm at 2 sts/cm → 2π·3·2 ≈ 37.7 stitches."""
        assert radius_to_stitch_count(3.0, GAUGE) == pytest.approx(12 * math.pi)

    def test_radius_to_stitch_count_is_not_rounded(self):
        assert radius_to_stitch_count(1.0, GAUGE) != round(radius_to_stitch_count(1.0, GAUGE))

    def test_row_height(self):
        assert row_height_cm(GAUGE) == pytest.approx(1 / 1.5)

    def test_height_to_row_count_rounds_to_nearest(self):
        assert height_to_row_count(6.0, GAUGE) == 9
        assert height_to_row_count(1.0, GAUGE) == 2  # 1.5 rounds up
        assert height_to_row_count(1.1, GAUGE) == 2

    def test_height_to_row_count_rounds_halves_up(self):
        unit = GaugeConfig(stitches_per_cm=1.0, rows_per_cm=1.0, hook_size_mm=4.0)
        assert [height_to_row_count(h, unit) for h in (2.5, 3.5, 4.5, 5.5)] == [3, 4, 5, 6]


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, expected",
        [(0.5, 1), (2.5, 3), (3.5, 4), (2.49, 2), (2.51, 3), (0.0, 0), (7.0, 7)],
    )
    def test_rounds_to_nearest_with_halves_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_returns_int(self):
        assert isinstance(round_half_up(2.5), int)
