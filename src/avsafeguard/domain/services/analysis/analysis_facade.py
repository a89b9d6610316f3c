"""Project analyzer facade that orchestrates the analysis sub-services.

The ProjectAnalyzer validates a configuration once, then runs the row,
room-mode and RT60 services and combines their results into a scored,
certified AnalysisResult.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from avsafeguard.domain.entities import ProjectConfig
from avsafeguard.domain.value_objects import Certification, RowStatus

from .constants import (
    BASS_LEAKAGE_PENALTY,
    COMPLIANT_SCORE_THRESHOLD,
    FAIL_ROW_PENALTY,
    LEAKY_WALL_CONSTRUCTION,
    MAX_SCORE,
    OPTIMAL_ROW_BONUS,
    PRESCRIPTION_MAX_FREQUENCY,
    SCREEN_CLEARANCE_MARGIN,
    WALL_DAMPING_FACTORS,
    WARNING_ROW_PENALTY,
)
from .geometry import screen_dimensions, screen_fits_room
from .models import (
    AnalysisResult,
    RoomModeResult,
    RowAnalysis,
    ScreenFit,
    TreatmentPrescription,
)
from .room_mode_service import RoomModeService
from .row_analyzer import RowAnalyzer
from .rt60_service import RT60Service
from .sightline_service import SightlineService
from .validation import validate_project

logger = logging.getLogger(__name__)

__all__ = ["ProjectAnalyzer", "analyze_project"]


class ProjectAnalyzer:
    """Service for analyzing a complete home-theater project.

    Stateless apart from its sub-services, so a single instance can be
    shared between callers.

    Example:
        analyzer = ProjectAnalyzer()
        result = analyzer.analyze(config)

        print(result.certification.value, result.overall_score)
        for row in result.rows:
            print(row.row_id, row.overall_status.value)
    """

    def __init__(self) -> None:
        """Initialize ProjectAnalyzer with its sub-services."""
        self._sightlines = SightlineService()
        self._room_modes = RoomModeService()
        self._rt60 = RT60Service()

    def analyze(self, config: ProjectConfig | None) -> AnalysisResult:
        """Run the full analysis pipeline.

        Args:
            config: Project configuration to analyze.

        Returns:
            AnalysisResult with per-row verdicts, room modes, RT60,
            treatment prescriptions, score and certification.

        Raises:
            ProjectValidationError: If the configuration is invalid. No
                partial result is produced.
        """
        config = validate_project(config)
        logger.debug(
            f"Analyzing project: {len(config.rows)} rows, "
            f"{config.room.length}x{config.room.width}x{config.room.height} ft room, "
            f"{config.screen.size} in {config.screen.aspect_ratio.value} screen"
        )

        # 1. Sort rows by distance from the screen
        rows = sorted(config.rows, key=lambda row: row.distance_from_screen)

        # 2. Screen fit and shared screen geometry
        screen = config.screen
        dimensions = screen_dimensions(screen.size, screen.aspect_ratio)
        screen_fit = screen_fits_room(screen.size, screen.aspect_ratio, config.room.width)
        if not screen_fit.fits:
            logger.debug(
                f"Screen width {screen_fit.screen_width_inches:.1f} in does not fit "
                f"room width {screen_fit.room_width_inches:.1f} in"
            )

        # 3. Pairwise row analysis
        row_analyzer = RowAnalyzer(
            screen,
            config.content_standard,
            dimensions=dimensions,
            sightline_service=self._sightlines,
        )
        row_results: list[RowAnalysis] = []
        predecessor = None
        for row in rows:
            analysis = row_analyzer.analyze(row, predecessor)
            if not screen_fit.fits:
                analysis = self._apply_screen_fit_override(analysis, screen_fit)
            row_results.append(analysis)
            predecessor = row

        # 4. Room modes and 5. RT60
        room_modes = self._room_modes.calculate(config.room, config.wall_construction)
        rt60_analysis = self._rt60.analyze(config.room, config.wall_construction)

        # 6. Treatment prescriptions
        prescriptions = self._collect_prescriptions(room_modes)

        # 7. Bass leakage
        bass_leakage = config.wall_construction == LEAKY_WALL_CONSTRUCTION

        # 8. Score and 9. certification
        score = self._score(row_results, bass_leakage, screen_fit)
        certification = self._certify(row_results, score, screen_fit)
        logger.debug(
            f"Analysis complete: score={score}, certification={certification.value}, "
            f"{len(room_modes)} modes, RT60={rt60_analysis.untreated_rt60}s"
        )

        return AnalysisResult(
            rows=tuple(row_results),
            room_modes=tuple(room_modes),
            bass_leakage_warning=bass_leakage,
            wall_damping_factor=WALL_DAMPING_FACTORS[config.wall_construction],
            overall_score=score,
            certification=certification,
            rt60_analysis=rt60_analysis,
            treatment_prescriptions=tuple(prescriptions),
            screen_fit=screen_fit,
            screen_dimensions=dimensions,
        )

    def _apply_screen_fit_override(
        self,
        analysis: RowAnalysis,
        screen_fit: ScreenFit,
    ) -> RowAnalysis:
        """Force a row to at least WARNING and prepend the screen-fit notes."""
        status = analysis.overall_status
        if status.severity < RowStatus.WARNING.severity:
            status = RowStatus.WARNING

        fit_notes = (
            "ACTION REQUIRED: Reduce the screen size or widen the screen wall "
            "before finalizing the seating plan.",
            f'CRITICAL: Screen width ({screen_fit.screen_width_inches:.1f}") exceeds '
            f'room width ({screen_fit.room_width_inches:.1f}") less the '
            f'{SCREEN_CLEARANCE_MARGIN:.0f}" side clearance.',
        )
        return replace(analysis, overall_status=status, notes=fit_notes + analysis.notes)

    def _collect_prescriptions(
        self,
        room_modes: list[RoomModeResult],
    ) -> list[TreatmentPrescription]:
        """One prescription per treatment type, lowest frequency first."""
        prescriptions: list[TreatmentPrescription] = []
        seen_types = set()
        for mode in room_modes:
            if mode.exact_frequency > PRESCRIPTION_MAX_FREQUENCY:
                continue
            if mode.treatment.type in seen_types:
                continue
            seen_types.add(mode.treatment.type)
            prescriptions.append(mode.treatment)
        return prescriptions

    def _score(
        self,
        rows: list[RowAnalysis],
        bass_leakage: bool,
        screen_fit: ScreenFit,
    ) -> int:
        if not screen_fit.fits:
            return 0

        score = MAX_SCORE
        for row in rows:
            if row.overall_status == RowStatus.FAIL:
                score -= FAIL_ROW_PENALTY
            elif row.overall_status == RowStatus.WARNING:
                score -= WARNING_ROW_PENALTY
            elif row.overall_status == RowStatus.OPTIMAL:
                score += OPTIMAL_ROW_BONUS
        if bass_leakage:
            score -= BASS_LEAKAGE_PENALTY

        return max(0, min(MAX_SCORE, score))

    def _certify(
        self,
        rows: list[RowAnalysis],
        score: int,
        screen_fit: ScreenFit,
    ) -> Certification:
        statuses = {row.overall_status for row in rows}
        if not screen_fit.fits or RowStatus.FAIL in statuses:
            return Certification.REQUIRES_REVISION
        if RowStatus.WARNING in statuses or score < COMPLIANT_SCORE_THRESHOLD:
            return Certification.ACCEPTABLE
        return Certification.CEDIA_COMPLIANT


def analyze_project(config: ProjectConfig | None) -> AnalysisResult:
    """Analyze a project with a default ProjectAnalyzer.

    Args:
        config: Project configuration to analyze.

    Returns:
        Complete AnalysisResult.
    """
    return ProjectAnalyzer().analyze(config)
