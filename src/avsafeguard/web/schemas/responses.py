"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class ScreenDimensionsSchema(BaseModel):
    """Derived screen size."""

    width: float = Field(..., description="Image width in inches")
    height: float = Field(..., description="Image height in inches")


class ScreenFitSchema(BaseModel):
    """Screen width against room width."""

    fits: bool = Field(..., description="Whether the screen leaves side clearance")
    screen_width_inches: float = Field(..., description="Screen width in inches")
    room_width_inches: float = Field(..., description="Room width in inches")
    margin_inches: float = Field(..., description="Room width minus screen width")


class VerticalAngleSchema(BaseModel):
    """Vertical angles to the screen edges."""

    to_top: float = Field(..., description="Angle to the top edge in degrees")
    to_bottom: float = Field(..., description="Angle to the bottom edge in degrees")
    total: float = Field(..., description="Sum of both angles in degrees")


class RowAnalysisSchema(BaseModel):
    """Verdict for one seating row."""

    row_id: int
    distance_from_screen: float = Field(..., description="Distance in feet")
    vertical_viewing_angle: VerticalAngleSchema
    vertical_status: str = Field(..., description="optimal, marginal or warning")
    horizontal_viewing_angle: float = Field(..., description="Full angle in degrees")
    horizontal_half_angle: float = Field(..., description="Half angle in degrees")
    horizontal_limit: float = Field(..., description="Half-angle limit in degrees")
    vva_pass: bool
    hva_pass: bool
    sightline_blocked: bool
    sightline_clearance: float | None = Field(
        default=None, description="Clearance in inches, null for the closest row"
    )
    sightline_status: str | None = None
    overall_status: str = Field(..., description="optimal, acceptable, warning or fail")
    notes: list[str] = Field(default_factory=list)


class TreatmentSchema(BaseModel):
    """Treatment prescription for a problem frequency."""

    frequency: float = Field(..., description="Frequency in Hz")
    type: str = Field(..., description="Treatment type")
    description: str
    depth: str
    placement: str


class RoomModeSchema(BaseModel):
    """One axial room mode."""

    frequency: float = Field(..., description="Frequency in Hz")
    type: str = Field(..., description="Mode type")
    axis: str = Field(..., description="Axis and harmonic order")
    order: int
    intensity: float = Field(..., description="Relative intensity between 0 and 1")
    is_bass_leakage: bool
    estimated_reduction: str
    treatment: TreatmentSchema


class RT60Schema(BaseModel):
    """Reverberation time analysis."""

    untreated_rt60: float = Field(..., description="Estimate in seconds")
    target_rt60: float = Field(..., description="Target in seconds")
    coverage_required: float = Field(..., description="Coverage in percent")
    status: str


class AnalysisResultSchema(BaseModel):
    """Response for project analysis."""

    certification: str
    overall_score: int = Field(..., ge=0, le=100)
    bass_leakage_warning: bool
    wall_damping_factor: float
    screen_dimensions: ScreenDimensionsSchema
    screen_fit: ScreenFitSchema
    rows: list[RowAnalysisSchema]
    room_modes: list[RoomModeSchema]
    rt60_analysis: RT60Schema
    treatment_prescriptions: list[TreatmentSchema]


class ReportSchema(BaseModel):
    """Response for report generation."""

    certification: str
    overall_score: int
    report: str = Field(..., description="Markdown report")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    error_type: str
    details: list[dict[str, Any]] | None = None
