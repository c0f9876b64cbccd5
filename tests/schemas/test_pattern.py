"""Tests for the pattern schema: StitchAction, Row, Pattern."""

import pytest

from amigurumi.schemas.pattern import Pattern, PatternMetadata, Row, StitchAction

METADATA = PatternMetadata(
    total_rows=2, total_stitches=12, estimated_time_minutes=0.5, yarn_length_meters=0.6
)


class TestStitchAction:
    def test_values(self):
        assert StitchAction.SC.value == "sc"
        assert StitchAction.INC.value == "inc"
        assert StitchAction.DEC.value == "dec"
        assert StitchAction.INVDEC.value == "invdec"

    def test_is_str(self):
        """StitchAction inherits from str for serialization compatibility."""
        assert isinstance(StitchAction.INC, str)

    @pytest.mark.parametrize(
        "action, net, consumed, produced",
        [
            (StitchAction.SC, 0, 1, 1),
            (StitchAction.INC, 1, 1, 2),
            (StitchAction.DEC, -1, 2, 1),
            (StitchAction.INVDEC, -1, 2, 1),
        ],
    )
    def test_arithmetic(self, action, net, consumed, produced):
        assert action.net_delta == net
        assert action.consumed == consumed
        assert action.produced == produced

    def test_is_shaping(self):
        assert not StitchAction.SC.is_shaping
        assert StitchAction.INC.is_shaping
        assert StitchAction.INVDEC.is_shaping


class TestRow:
    def test_fields(self):
        row = Row(row_number=2, target_stitch_count=6, actions=(StitchAction.INC,) * 3)
        assert row.row_number == 2
        assert row.target_stitch_count == 6
        assert row.base_stitch_count == 3
        assert not row.is_starting_row

    def test_list_actions_become_tuple(self):
        row = Row(row_number=1, target_stitch_count=4, actions=[StitchAction.SC] * 4)
        assert isinstance(row.actions, tuple)
        assert row.is_starting_row

    def test_rejects_row_zero(self):
        with pytest.raises(ValueError, match="row_number"):
            Row(row_number=0, target_stitch_count=4, actions=())

    def test_rejects_fewer_than_three_stitches(self):
        with pytest.raises(ValueError, match="target_stitch_count"):
            Row(row_number=1, target_stitch_count=2, actions=(StitchAction.SC,) * 2)

    def test_is_frozen(self):
        row = Row(row_number=1, target_stitch_count=4, actions=(StitchAction.SC,) * 4)
        with pytest.raises(AttributeError):
            row.row_number = 2  # type: ignore[misc]


class TestPattern:
    def _rows(self):
        return (
            Row(row_number=1, target_stitch_count=6, actions=(StitchAction.SC,) * 6),
            Row(row_number=2, target_stitch_count=6, actions=(StitchAction.SC,) * 6),
        )

    def test_fields(self):
        pattern = Pattern(rows=self._rows(), metadata=METADATA)
        assert len(pattern.rows) == 2
        assert pattern.metadata.total_stitches == 12

    def test_list_rows_become_tuple(self):
        pattern = Pattern(rows=list(self._rows()), metadata=METADATA)
        assert isinstance(pattern.rows, tuple)

    def test_rejects_gap_in_numbering(self):
        rows = (
            Row(row_number=1, target_stitch_count=6, actions=(StitchAction.SC,) * 6),
            Row(row_number=3, target_stitch_count=6, actions=(StitchAction.SC,) * 6),
        )
        with pytest.raises(ValueError, match="consecutively"):
            Pattern(rows=rows, metadata=METADATA)

    def test_equal_patterns_compare_equal(self):
        assert Pattern(rows=self._rows(), metadata=METADATA) == Pattern(
            rows=self._rows(), metadata=METADATA
        )
