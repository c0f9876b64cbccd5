"""Tests for GaugeConfig and AmigurumiConfig."""

import math

import pytest

from amigurumi.utilities.types import AmigurumiConfig, GaugeConfig


class TestGaugeConfig:
    def test_fields(self):
        g = GaugeConfig(stitches_per_cm=2.0, rows_per_cm=1.5, hook_size_mm=3.5)
        assert g.stitches_per_cm == 2.0
        assert g.rows_per_cm == 1.5
        assert g.hook_size_mm == 3.5

    def test_is_frozen(self):
        g = GaugeConfig(stitches_per_cm=2.0, rows_per_cm=1.5, hook_size_mm=3.5)
        with pytest.raises(AttributeError):
            g.rows_per_cm = 3.0  # type: ignore[misc]

    @pytest.mark.parametrize("field", ["stitches_per_cm", "rows_per_cm", "hook_size_mm"])
    def test_rejects_zero(self, field):
        kwargs = {"stitches_per_cm": 2.0, "rows_per_cm": 1.5, "hook_size_mm": 3.5}
        kwargs[field] = 0.0
        with pytest.raises(ValueError, match=field):
            GaugeConfig(**kwargs)

    def test_rejects_negative(self):
        with pytest.raises(ValueError):
            GaugeConfig(stitches_per_cm=-1.0, rows_per_cm=1.5, hook_size_mm=3.5)

    def test_rejects_non_finite(self):
        with pytest.raises(ValueError):
            GaugeConfig(stitches_per_cm=math.inf, rows_per_cm=1.5, hook_size_mm=3.5)
        with pytest.raises(ValueError):
            GaugeConfig(stitches_per_cm=2.0, rows_per_cm=math.nan, hook_size_mm=3.5)

    def test_from_per_inch(self):
        """5.08 stitches and 2.54 rows per inch → 2 and 1 per cm."""
        g = GaugeConfig.from_per_inch(5.08, 2.54, hook_size_mm=4.0)
        assert g.stitches_per_cm == pytest.approx(2.0)
        assert g.rows_per_cm == pytest.approx(1.0)
        assert g.hook_size_mm == 4.0


class TestAmigurumiConfig:
    @pytest.fixture
    def gauge(self):
        return GaugeConfig(stitches_per_cm=2.0, rows_per_cm=1.0, hook_size_mm=4.0)

    def test_defaults(self, gauge):
        config = AmigurumiConfig(total_height_cm=6.0, gauge=gauge)
        assert config.decrease_style == "invisible"
        assert config.stagger_shaping is True

    def test_rejects_non_positive_height(self, gauge):
        with pytest.raises(ValueError, match="total_height_cm"):
            AmigurumiConfig(total_height_cm=0.0, gauge=gauge)
        with pytest.raises(ValueError):
            AmigurumiConfig(total_height_cm=-2.0, gauge=gauge)

    def test_rejects_empty_decrease_style(self, gauge):
        with pytest.raises(ValueError, match="decrease_style"):
            AmigurumiConfig(total_height_cm=6.0, gauge=gauge, decrease_style="")

    def test_unregistered_style_is_accepted_at_construction(self, gauge):
        """Style names are checked by the validator, not the dataclass."""
        config = AmigurumiConfig(total_height_cm=6.0, gauge=gauge, decrease_style="fancy")
        assert config.decrease_style == "fancy"

    def test_is_frozen(self, gauge):
        config = AmigurumiConfig(total_height_cm=6.0, gauge=gauge)
        with pytest.raises(AttributeError):
            config.total_height_cm = 8.0  # type: ignore[misc]
