"""Per-row viewing-geometry analysis.

Combines vertical and horizontal viewing angles with the sightline check
against the row in front into one verdict per seating row.
"""

from __future__ import annotations

from avsafeguard.domain.entities import ScreenConfig, SeatingRow
from avsafeguard.domain.value_objects import (
    ContentStandard,
    RowStatus,
    SightlineStatus,
    VerticalAngleStatus,
)

from .constants import (
    HVA_LIMITS,
    HVA_OPTIMAL_HEADROOM,
    VVA_MARGINAL_MAX,
    VVA_OPTIMAL_MAX,
    VVA_PREMIUM_MAX,
)
from .geometry import horizontal_viewing_angle, screen_dimensions, vertical_viewing_angle
from .models import RowAnalysis, ScreenDimensions, SightlineResult, VerticalViewingAngle
from .sightline_service import SightlineService

__all__ = ["RowAnalyzer", "classify_vertical_angle"]


def classify_vertical_angle(angle: float) -> VerticalAngleStatus:
    """Classify one vertical sub-angle.

    Args:
        angle: Sub-angle in degrees.

    Returns:
        OPTIMAL up to 15 degrees, MARGINAL up to 18 degrees, else WARNING.
    """
    if angle <= VVA_OPTIMAL_MAX:
        return VerticalAngleStatus.OPTIMAL
    if angle <= VVA_MARGINAL_MAX:
        return VerticalAngleStatus.MARGINAL
    return VerticalAngleStatus.WARNING


class RowAnalyzer:
    """Analyzes seating rows against one screen and content standard.

    The screen dimensions are derived once and shared by every row the
    analyzer is asked about.

    Example:
        analyzer = RowAnalyzer(screen, ContentStandard.HDR)
        first = analyzer.analyze(rows[0])
        second = analyzer.analyze(rows[1], predecessor=rows[0])
    """

    def __init__(
        self,
        screen: ScreenConfig,
        content_standard: ContentStandard,
        dimensions: ScreenDimensions | None = None,
        sightline_service: SightlineService | None = None,
    ) -> None:
        """Initialize RowAnalyzer.

        Args:
            screen: Screen configuration.
            content_standard: Content standard setting the HVA limit.
            dimensions: Pre-computed screen dimensions (derived if omitted).
            sightline_service: Sightline evaluator to use.
        """
        self.screen = screen
        self.content_standard = content_standard
        self.dimensions = dimensions or screen_dimensions(screen.size, screen.aspect_ratio)
        self.hva_limit = HVA_LIMITS[content_standard]
        self._sightlines = sightline_service or SightlineService()

    def analyze(
        self,
        row: SeatingRow,
        predecessor: SeatingRow | None = None,
    ) -> RowAnalysis:
        """Analyze a single row.

        Args:
            row: Row to analyze.
            predecessor: Next row closer to the screen, or None for the
                closest row.

        Returns:
            RowAnalysis with angles, sightline and overall status.
        """
        vertical = vertical_viewing_angle(
            self.dimensions.height,
            self.screen.bottom_edge_height,
            row.eye_height,
            row.distance_from_screen,
        )
        vertical_status = max(
            classify_vertical_angle(vertical.to_top),
            classify_vertical_angle(vertical.to_bottom),
            key=lambda status: status.severity,
        )
        vva_pass = vertical.to_top <= VVA_MARGINAL_MAX and vertical.to_bottom <= VVA_MARGINAL_MAX

        horizontal = horizontal_viewing_angle(self.dimensions.width, row.distance_from_screen)
        half_angle = horizontal / 2
        hva_pass = half_angle <= self.hva_limit

        sightline: SightlineResult | None = None
        if predecessor is not None:
            sightline = self._sightlines.evaluate(
                predecessor,
                row,
                self.screen.masking,
                distance_feet=row.distance_from_screen,
            )

        notes = self._build_notes(vertical, vertical_status, half_angle, hva_pass, sightline)
        overall = self._overall_status(
            vertical, vertical_status, half_angle, hva_pass, sightline
        )

        return RowAnalysis(
            row_id=row.id,
            distance_from_screen=row.distance_from_screen,
            vertical_angle=vertical,
            vertical_status=vertical_status,
            horizontal_viewing_angle=horizontal,
            horizontal_half_angle=half_angle,
            horizontal_limit=self.hva_limit,
            vva_pass=vva_pass,
            hva_pass=hva_pass,
            sightline_blocked=sightline.is_blocked if sightline else False,
            sightline_clearance=sightline.clearance if sightline else None,
            sightline_status=sightline.status if sightline else None,
            overall_status=overall,
            notes=tuple(notes),
        )

    def _overall_status(
        self,
        vertical: VerticalViewingAngle,
        vertical_status: VerticalAngleStatus,
        half_angle: float,
        hva_pass: bool,
        sightline: SightlineResult | None,
    ) -> RowStatus:
        """Combine the row checks; the first matching rule wins."""
        sightline_status = sightline.status if sightline else None

        if sightline_status == SightlineStatus.FAIL:
            return RowStatus.FAIL
        if vertical_status == VerticalAngleStatus.WARNING or not hva_pass:
            return RowStatus.WARNING
        if sightline_status == SightlineStatus.WARNING:
            return RowStatus.WARNING
        if (
            sightline_status == SightlineStatus.ACCEPTABLE
            or vertical_status == VerticalAngleStatus.MARGINAL
        ):
            return RowStatus.ACCEPTABLE
        if (
            vertical.to_top <= VVA_PREMIUM_MAX
            and vertical.to_bottom <= VVA_PREMIUM_MAX
            and half_angle <= self.hva_limit - HVA_OPTIMAL_HEADROOM
        ):
            return RowStatus.OPTIMAL
        return RowStatus.ACCEPTABLE

    def _build_notes(
        self,
        vertical: VerticalViewingAngle,
        vertical_status: VerticalAngleStatus,
        half_angle: float,
        hva_pass: bool,
        sightline: SightlineResult | None,
    ) -> list[str]:
        notes: list[str] = []
        angles = f"{vertical.to_top:.1f}° to top, {vertical.to_bottom:.1f}° to bottom"

        if vertical_status == VerticalAngleStatus.WARNING:
            notes.append(
                f"VVA warning: {angles} exceeds the {VVA_MARGINAL_MAX:.0f}° limit. "
                "Adjust screen height or seating distance."
            )
        elif vertical_status == VerticalAngleStatus.MARGINAL:
            notes.append(
                f"VVA marginal: {angles} is above the {VVA_OPTIMAL_MAX:.0f}° optimum "
                f"(limit {VVA_MARGINAL_MAX:.0f}°)."
            )

        if not hva_pass:
            notes.append(
                f"HVA {half_angle:.1f}° exceeds the {self.hva_limit:.0f}° "
                f"{self.content_standard.value} limit. Move the row back or reduce screen size."
            )

        if sightline is None or sightline.status == SightlineStatus.OPTIMAL:
            return notes

        obstruction = (
            f'{sightline.obstruction_height:.1f}" obstruction at '
            f"{sightline.obstruction_angle:.2f}°"
        )
        if sightline.status == SightlineStatus.FAIL:
            notes.append(
                f"Sightline FAIL: {obstruction} exceeds {sightline.masking_label} "
                "tolerance. Increase riser height or stagger seating."
            )
        elif sightline.status == SightlineStatus.WARNING:
            notes.append(
                f"Sightline warning: {obstruction} is beyond the acceptable "
                f"{sightline.masking_label} tolerance. Consider a taller riser."
            )
        else:
            notes.append(
                f"Sightline acceptable: {obstruction} remains, within "
                f"{sightline.masking_label} tolerance."
            )
        return notes
