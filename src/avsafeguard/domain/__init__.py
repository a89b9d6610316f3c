"""Domain layer - core analysis logic."""

from .entities import ProjectConfig, RoomDimensions, ScreenConfig, SeatingRow
from .errors import (
    ConfigurationMissingError,
    EmptySeatingPlanError,
    InvalidRoomDimensionsError,
    InvalidRowError,
    InvalidScreenSizeError,
    ProjectValidationError,
)
from .services import AnalysisResult, ProjectAnalyzer, analyze_project
from .value_objects import (
    AspectRatio,
    Certification,
    ContentStandard,
    MaskingConfig,
    ModeType,
    RowStatus,
    RT60Status,
    SightlineStatus,
    TreatmentType,
    VerticalAngleStatus,
    WallConstruction,
)

__all__ = [
    "AnalysisResult",
    "AspectRatio",
    "Certification",
    "ConfigurationMissingError",
    "ContentStandard",
    "EmptySeatingPlanError",
    "InvalidRoomDimensionsError",
    "InvalidRowError",
    "InvalidScreenSizeError",
    "MaskingConfig",
    "ModeType",
    "ProjectAnalyzer",
    "ProjectConfig",
    "ProjectValidationError",
    "RoomDimensions",
    "RowStatus",
    "RT60Status",
    "ScreenConfig",
    "SeatingRow",
    "SightlineStatus",
    "TreatmentType",
    "VerticalAngleStatus",
    "WallConstruction",
    "analyze_project",
]
