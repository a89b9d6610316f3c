"""Domain services for home-theater analysis."""

from .analysis import (
    AnalysisResult,
    ProjectAnalyzer,
    RoomModeService,
    RowAnalyzer,
    RT60Service,
    SightlineService,
    analyze_project,
    validate_project,
)

__all__ = [
    "AnalysisResult",
    "ProjectAnalyzer",
    "RoomModeService",
    "RowAnalyzer",
    "RT60Service",
    "SightlineService",
    "analyze_project",
    "validate_project",
]
