"""Tests for config validation and the combined input check."""

from amigurumi.schemas.profile import AnchorPoint
from amigurumi.utilities.types import AmigurumiConfig, GaugeConfig
from amigurumi.validator import ValidationResult, validate_config, validate_inputs

GAUGE = GaugeConfig(stitches_per_cm=2.0, rows_per_cm=1.0, hook_size_mm=4.0)
TEARDROP = [
    AnchorPoint(radius_cm=r, height_cm=h) for r, h in [(0, 0), (3, 2), (4, 4), (0, 6)]
]


def _config(height=6.0, style="invisible"):
    return AmigurumiConfig(total_height_cm=height, gauge=GAUGE, decrease_style=style)


class TestValidateConfig:
    def test_valid(self):
        assert validate_config(_config()) == []

    def test_every_builtin_style_accepted(self):
        for style in ("invisible", "standard", "alternating"):
            assert validate_config(_config(style=style)) == []

    def test_unknown_decrease_style(self):
        errors = validate_config(_config(style="crossed"))
        assert [e.code for e in errors] == ["unknown_decrease_style"]
        assert errors[0].field == "decrease_style"
        assert errors[0].severity == "error"

    def test_height_matches_profile(self):
        """A difference under one row height is not reported."""
        assert validate_config(_config(height=6.5), TEARDROP) == []

    def test_height_mismatch_is_warning(self):
        errors = validate_config(_config(height=10.0), TEARDROP)
        assert [e.code for e in errors] == ["height_mismatch"]
        assert errors[0].severity == "warning"


class TestValidateInputs:
    def test_passes(self):
        result = validate_inputs(TEARDROP, _config())
        assert isinstance(result, ValidationResult)
        assert result.passed
        assert result.errors == ()

    def test_anchors_only(self):
        assert validate_inputs(TEARDROP).passed

    def test_warning_does_not_fail(self):
        result = validate_inputs(TEARDROP, _config(height=10.0))
        assert result.passed
        assert len(result.errors) == 1

    def test_collects_profile_and_config_errors(self):
        anchors = [AnchorPoint(radius_cm=1.0, height_cm=0.0), *TEARDROP[1:]]
        result = validate_inputs(anchors, _config(style="crossed"))
        assert not result.passed
        assert {e.code for e in result.errors} == {"open_pole", "unknown_decrease_style"}
