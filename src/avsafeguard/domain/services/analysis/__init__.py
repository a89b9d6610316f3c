"""Home-theater analysis package.

This package turns a ProjectConfig into an AnalysisResult:
- Screen and viewing-angle geometry
- Multi-row sightline obstruction checks with masking-aware tolerances
- Per-row CEDIA/CTA-CEB23 viewing compliance
- Axial room modes with treatment prescriptions
- Sabine RT60 estimate and treatment coverage
- Aggregate score and certification tier

The package is organized into specialized sub-services:
- SightlineService: Front/back row obstruction grading
- RowAnalyzer: Vertical, horizontal and sightline verdict per row
- RoomModeService: Axial standing-wave modes
- RT60Service: Reverberation time estimate

The ProjectAnalyzer facade validates the configuration once and
orchestrates the sub-services.

Example:
    from avsafeguard.domain.services.analysis import ProjectAnalyzer

    result = ProjectAnalyzer().analyze(config)
    if result.fail_count:
        for row in result.rows:
            print(row.row_id, row.notes)
"""

from .analysis_facade import ProjectAnalyzer, analyze_project
from .geometry import (
    horizontal_viewing_angle,
    screen_dimensions,
    screen_fits_room,
    vertical_viewing_angle,
)
from .models import (
    AnalysisResult,
    RoomModeResult,
    RowAnalysis,
    RT60Analysis,
    ScreenDimensions,
    ScreenFit,
    SightlineResult,
    SightlineTolerance,
    TreatmentPrescription,
    VerticalViewingAngle,
)
from .room_mode_service import RoomModeService, placement_for_frequency, prescribe_treatment
from .row_analyzer import RowAnalyzer, classify_vertical_angle
from .rt60_service import RT60Service
from .sightline_service import SIGHTLINE_TOLERANCES, SightlineService
from .validation import validate_project

__all__ = [
    # Main facade
    "ProjectAnalyzer",
    "analyze_project",
    "validate_project",
    # Geometry
    "horizontal_viewing_angle",
    "screen_dimensions",
    "screen_fits_room",
    "vertical_viewing_angle",
    # Models
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
    # Sub-services
    "RoomModeService",
    "RowAnalyzer",
    "RT60Service",
    "SightlineService",
    "SIGHTLINE_TOLERANCES",
    "classify_vertical_angle",
    "placement_for_frequency",
    "prescribe_treatment",
]
