"""JSON payload models for the compiler boundary."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import AliasChoices, BaseModel, Field

from amigurumi.schemas.pattern import Pattern, PatternMetadata, Row
from amigurumi.schemas.profile import AnchorPoint
from amigurumi.utilities.types import AmigurumiConfig, GaugeConfig
from amigurumi.validator.profile import ValidationError
from amigurumi.writer.notation import describe_row

# ── Inputs ────────────────────────────────────────────────────────────────────


class AnchorPayload(BaseModel):
    radius_cm: float = Field(..., ge=0, allow_inf_nan=False, description="Distance from the axis")
    height_cm: float = Field(..., allow_inf_nan=False, description="Height above the origin")

    def to_anchor(self) -> AnchorPoint:
        return AnchorPoint(radius_cm=self.radius_cm, height_cm=self.height_cm)

    @classmethod
    def from_anchor(cls, anchor: AnchorPoint) -> AnchorPayload:
        return cls(radius_cm=anchor.radius_cm, height_cm=anchor.height_cm)


class GaugePayload(BaseModel):
    stitches_per_cm: float = Field(..., gt=0, allow_inf_nan=False)
    rows_per_cm: float = Field(..., gt=0, allow_inf_nan=False)
    hook_size_mm: float = Field(..., gt=0, allow_inf_nan=False)

    def to_gauge(self) -> GaugeConfig:
        return GaugeConfig(
            stitches_per_cm=self.stitches_per_cm,
            rows_per_cm=self.rows_per_cm,
            hook_size_mm=self.hook_size_mm,
        )


class ConfigPayload(BaseModel):
    total_height_cm: float = Field(..., gt=0, allow_inf_nan=False)
    gauge: GaugePayload
    decrease_style: str = Field(default="invisible", min_length=1)
    stagger_shaping: bool = Field(default=True, description="Offset shaping on alternate rows")

    def to_config(self) -> AmigurumiConfig:
        return AmigurumiConfig(
            total_height_cm=self.total_height_cm,
            gauge=self.gauge.to_gauge(),
            decrease_style=self.decrease_style,
            stagger_shaping=self.stagger_shaping,
        )


class CompileRequest(BaseModel):
    anchors: list[AnchorPayload] = Field(
        ...,
        validation_alias=AliasChoices("anchors", "profile"),
        description="Profile anchors in cm, bottom pole first",
    )
    config: ConfigPayload


def to_anchor_points(anchors: Sequence[AnchorPayload]) -> list[AnchorPoint]:
    return [a.to_anchor() for a in anchors]


# ── Outputs ───────────────────────────────────────────────────────────────────


class RowPayload(BaseModel):
    row_number: int
    target_stitch_count: int
    actions: list[str]
    instruction: str = ""

    @classmethod
    def from_row(cls, row: Row) -> RowPayload:
        return cls(
            row_number=row.row_number,
            target_stitch_count=row.target_stitch_count,
            actions=[action.value for action in row.actions],
            instruction=describe_row(row),
        )


class MetadataPayload(BaseModel):
    total_rows: int
    total_stitches: int
    estimated_time_minutes: float
    yarn_length_meters: float

    @classmethod
    def from_metadata(cls, metadata: PatternMetadata) -> MetadataPayload:
        return cls(
            total_rows=metadata.total_rows,
            total_stitches=metadata.total_stitches,
            estimated_time_minutes=metadata.estimated_time_minutes,
            yarn_length_meters=metadata.yarn_length_meters,
        )


class PatternPayload(BaseModel):
    rows: list[RowPayload]
    metadata: MetadataPayload

    @classmethod
    def from_pattern(cls, pattern: Pattern) -> PatternPayload:
        return cls(
            rows=[RowPayload.from_row(row) for row in pattern.rows],
            metadata=MetadataPayload.from_metadata(pattern.metadata),
        )


class ErrorPayload(BaseModel):
    stage: str = Field(..., description="Stage that failed, or 'input' for a bad payload")
    code: str
    message: str


class ValidationIssue(BaseModel):
    field: str
    message: str
    code: str
    severity: str = "error"

    @classmethod
    def from_error(cls, error: ValidationError) -> ValidationIssue:
        return cls(
            field=error.field,
            message=error.message,
            code=error.code,
            severity=error.severity,
        )


class ValidationReport(BaseModel):
    passed: bool
    errors: list[ValidationIssue] = Field(default_factory=list)

    @classmethod
    def from_issues(cls, issues: Sequence[ValidationIssue]) -> ValidationReport:
        # Warnings alone do not fail a report
        return cls(
            passed=not any(i.severity == "error" for i in issues),
            errors=list(issues),
        )
