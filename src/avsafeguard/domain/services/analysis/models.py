"""Result types produced by the theater analysis services.

Every result is an immutable dataclass computed once per analysis run.
``to_dict`` methods produce JSON-ready dictionaries for exporters and the
REST API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from avsafeguard.domain.value_objects import (
    Certification,
    ModeType,
    RowStatus,
    RT60Status,
    SightlineStatus,
    TreatmentType,
    VerticalAngleStatus,
)


@dataclass(frozen=True)
class ScreenDimensions:
    """Visible image width and height in inches."""

    width: float
    height: float

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    def to_dict(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class VerticalViewingAngle:
    """Vertical angles from a seated eye to the screen edges, in degrees.

    Attributes:
        to_top: Angle from the eye up (or down) to the top edge.
        to_bottom: Angle from the eye down (or up) to the bottom edge.
    """

    to_top: float
    to_bottom: float

    @property
    def total(self) -> float:
        """Sum of both sub-angles."""
        return self.to_top + self.to_bottom

    def to_dict(self) -> dict[str, Any]:
        return {"to_top": self.to_top, "to_bottom": self.to_bottom, "total": self.total}


@dataclass(frozen=True)
class ScreenFit:
    """Result of checking the screen width against the room width.

    Attributes:
        fits: True when the screen leaves the required side clearance.
        screen_width_inches: Visible screen width.
        room_width_inches: Room width converted to inches.
        margin_inches: Room width minus screen width.
    """

    fits: bool
    screen_width_inches: float
    room_width_inches: float
    margin_inches: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "fits": self.fits,
            "screen_width_inches": self.screen_width_inches,
            "room_width_inches": self.room_width_inches,
            "margin_inches": self.margin_inches,
        }


@dataclass(frozen=True)
class SightlineTolerance:
    """Obstruction limits for one tier of one masking configuration.

    An obstruction stays inside the tier only if it is under the angle limit
    AND under (or, when ``height_inclusive`` is set, at) the height limit.
    """

    max_angle: float
    max_height: float
    height_inclusive: bool = False

    def admits(self, angle: float, height: float) -> bool:
        """Check whether an obstruction falls inside this tier."""
        if angle >= self.max_angle:
            return False
        if self.height_inclusive:
            return height <= self.max_height
        return height < self.max_height


@dataclass(frozen=True)
class SightlineResult:
    """Outcome of checking one row's view over the row in front of it.

    Attributes:
        status: Tier the obstruction falls into.
        clearance: Back-row eye level minus front-row head top (inches);
            negative when the head in front rises into the sightline.
        obstruction_height: Magnitude of the obstruction in inches, or None
            when the sightline is optimal.
        obstruction_angle: Angle subtended by the obstruction in degrees,
            or None when the sightline is optimal.
        masking_label: Label of the masking configuration whose tolerances
            were applied.
    """

    status: SightlineStatus
    clearance: float
    obstruction_height: float | None = None
    obstruction_angle: float | None = None
    masking_label: str = ""

    @property
    def is_blocked(self) -> bool:
        """Warning and fail tiers count as blocked."""
        return self.status.is_blocked

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "blocked": self.is_blocked,
            "clearance": self.clearance,
            "obstruction_height": self.obstruction_height,
            "obstruction_angle": self.obstruction_angle,
            "masking": self.masking_label,
        }


@dataclass(frozen=True)
class RowAnalysis:
    """Viewing-geometry verdict for a single seating row.

    Attributes:
        row_id: Identifier of the analyzed row.
        distance_from_screen: Row distance in feet.
        vertical_angle: Vertical sub-angles to the screen edges.
        vertical_status: Worse of the two sub-angle classifications.
        horizontal_viewing_angle: Full edge-to-edge horizontal angle (degrees).
        horizontal_half_angle: Half of the horizontal angle (degrees).
        horizontal_limit: Half-angle limit of the content standard.
        vva_pass: Both vertical sub-angles within the marginal limit.
        hva_pass: Half-angle within the content-standard limit.
        sightline_blocked: Row view obstructed by the row in front.
        sightline_clearance: Clearance over the head in front in inches, or
            None for the row closest to the screen.
        sightline_status: Sightline tier, or None for the closest row.
        overall_status: Combined four-tier verdict.
        notes: Human-readable diagnostics.
    """

    row_id: int
    distance_from_screen: float
    vertical_angle: VerticalViewingAngle
    vertical_status: VerticalAngleStatus
    horizontal_viewing_angle: float
    horizontal_half_angle: float
    horizontal_limit: float
    vva_pass: bool
    hva_pass: bool
    sightline_blocked: bool
    sightline_clearance: float | None
    sightline_status: SightlineStatus | None
    overall_status: RowStatus
    notes: tuple[str, ...] = ()

    @property
    def vertical_viewing_angle(self) -> float:
        """Total vertical angle subtended by the screen (degrees)."""
        return self.vertical_angle.total

    def to_dict(self) -> dict[str, Any]:
        return {
            "row_id": self.row_id,
            "distance_from_screen": self.distance_from_screen,
            "vertical_viewing_angle": self.vertical_angle.to_dict(),
            "vertical_status": self.vertical_status.value,
            "horizontal_viewing_angle": self.horizontal_viewing_angle,
            "horizontal_half_angle": self.horizontal_half_angle,
            "horizontal_limit": self.horizontal_limit,
            "vva_pass": self.vva_pass,
            "hva_pass": self.hva_pass,
            "sightline_blocked": self.sightline_blocked,
            "sightline_clearance": self.sightline_clearance,
            "sightline_status": (
                self.sightline_status.value if self.sightline_status else None
            ),
            "overall_status": self.overall_status.value,
            "notes": list(self.notes),
        }


@dataclass(frozen=True)
class TreatmentPrescription:
    """Acoustic treatment recommended for a problem frequency."""

    frequency: float
    type: TreatmentType
    description: str
    depth: str
    placement: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "frequency": self.frequency,
            "type": self.type.value,
            "description": self.description,
            "depth": self.depth,
            "placement": self.placement,
        }


@dataclass(frozen=True)
class RoomModeResult:
    """One standing-wave mode of the room.

    Attributes:
        frequency: Mode frequency in Hz, rounded for reporting.
        mode_type: Mode classification (always axial).
        axis: Axis label with harmonic order, e.g. "Length (1st)".
        order: Harmonic order.
        intensity: Damping-adjusted intensity between 0 and 1.
        is_bass_leakage: Low mode escaping through a flexible boundary.
        treatment: Treatment prescription for this frequency.
        exact_frequency: Unrounded frequency used for classification.
    """

    frequency: float
    mode_type: ModeType
    axis: str
    order: int
    intensity: float
    is_bass_leakage: bool
    treatment: TreatmentPrescription
    exact_frequency: float

    @property
    def estimated_reduction(self) -> str:
        """Expected modal energy reduction relative to a rigid boundary."""
        percent = self.intensity * 100
        if percent > 80:
            return "-3 dB (Untreated)"
        if percent >= 50:
            return "-6 dB (Natural Damping)"
        return "-9 dB (Flexible Boundary)"

    def to_dict(self) -> dict[str, Any]:
        return {
            "frequency": self.frequency,
            "type": self.mode_type.value,
            "axis": self.axis,
            "order": self.order,
            "intensity": self.intensity,
            "is_bass_leakage": self.is_bass_leakage,
            "estimated_reduction": self.estimated_reduction,
            "treatment": self.treatment.to_dict(),
        }


@dataclass(frozen=True)
class RT60Analysis:
    """Untreated reverberation time estimate against the target.

    Attributes:
        untreated_rt60: Sabine estimate in seconds (rounded to 0.01 s).
        target_rt60: Target reverberation time in seconds.
        coverage_required: Surface coverage needed to reach the target, in
            percent. Magnitude of the deviation in either direction.
        status: Three-tier status.
    """

    untreated_rt60: float
    target_rt60: float
    coverage_required: float
    status: RT60Status

    def to_dict(self) -> dict[str, Any]:
        return {
            "untreated_rt60": self.untreated_rt60,
            "target_rt60": self.target_rt60,
            "coverage_required": self.coverage_required,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Complete analysis of a project; the sole contract for consumers.

    Attributes:
        rows: Row analyses ordered by distance from the screen.
        room_modes: Axial room modes ordered by frequency.
        bass_leakage_warning: Flexible wall construction detected.
        wall_damping_factor: Damping factor applied to modal intensities.
        overall_score: Aggregate score between 0 and 100.
        certification: Certification tier.
        rt60_analysis: Reverberation time analysis.
        treatment_prescriptions: One prescription per treatment type.
        screen_fit: Screen width versus room width check.
        screen_dimensions: Derived screen size.
    """

    rows: tuple[RowAnalysis, ...]
    room_modes: tuple[RoomModeResult, ...]
    bass_leakage_warning: bool
    wall_damping_factor: float
    overall_score: int
    certification: Certification
    rt60_analysis: RT60Analysis
    treatment_prescriptions: tuple[TreatmentPrescription, ...]
    screen_fit: ScreenFit
    screen_dimensions: ScreenDimensions

    def count_rows(self, status: RowStatus) -> int:
        """Count rows with the given overall status."""
        return sum(1 for row in self.rows if row.overall_status == status)

    @property
    def optimal_count(self) -> int:
        return self.count_rows(RowStatus.OPTIMAL)

    @property
    def warning_count(self) -> int:
        return self.count_rows(RowStatus.WARNING)

    @property
    def fail_count(self) -> int:
        return self.count_rows(RowStatus.FAIL)

    def to_dict(self) -> dict[str, Any]:
        return {
            "certification": self.certification.value,
            "overall_score": self.overall_score,
            "bass_leakage_warning": self.bass_leakage_warning,
            "wall_damping_factor": self.wall_damping_factor,
            "screen_dimensions": self.screen_dimensions.to_dict(),
            "screen_fit": self.screen_fit.to_dict(),
            "rows": [row.to_dict() for row in self.rows],
            "room_modes": [mode.to_dict() for mode in self.room_modes],
            "rt60_analysis": self.rt60_analysis.to_dict(),
            "treatment_prescriptions": [
                prescription.to_dict() for prescription in self.treatment_prescriptions
            ],
        }


__all__ = [
    "AnalysisResult",
    "RoomModeResult",
    "RowAnalysis",
    "RT60Analysis",
    "ScreenDimensions",
    "ScreenFit",
    "SightlineResult",
    "SightlineTolerance",
    "TreatmentPrescription",
    "VerticalViewingAngle",
]
