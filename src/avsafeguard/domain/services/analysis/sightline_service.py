"""Multi-row sightline obstruction analysis.

Checks whether the head of a viewer in the row in front intrudes into the
sightline of a viewer behind, and grades the obstruction against tolerance
tiers that depend on how much of the image the screen masking can hide.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping

from avsafeguard.domain.entities import SeatingRow
from avsafeguard.domain.value_objects import MaskingConfig, SightlineStatus

from .constants import (
    EYE_TO_CROWN_OFFSET,
    INCHES_PER_FOOT,
    MASKING_LABELS,
    SIGHTLINE_OPTIMAL_CLEARANCE,
)
from .models import SightlineResult, SightlineTolerance

__all__ = ["SIGHTLINE_TOLERANCES", "SightlineService"]


# (acceptable tier, warning tier) per masking configuration. Anything outside
# the warning tier fails.
SIGHTLINE_TOLERANCES: Mapping[
    MaskingConfig, tuple[SightlineTolerance, SightlineTolerance]
] = MappingProxyType(
    {
        MaskingConfig.NO_MASKING: (
            SightlineTolerance(max_angle=0.5, max_height=0.5, height_inclusive=True),
            SightlineTolerance(max_angle=1.0, max_height=2.0, height_inclusive=True),
        ),
        MaskingConfig.MOTORIZED: (
            SightlineTolerance(max_angle=2.0, max_height=6.0),
            SightlineTolerance(max_angle=3.0, max_height=8.0),
        ),
        MaskingConfig.FIXED_240: (
            SightlineTolerance(max_angle=1.0, max_height=4.0),
            SightlineTolerance(max_angle=2.0, max_height=6.0),
        ),
    }
)


class SightlineService:
    """Service for evaluating sightlines between adjacent seating rows.

    Example:
        service = SightlineService()
        result = service.evaluate(front_row, back_row, MaskingConfig.MOTORIZED)
        if result.is_blocked:
            print(result.status.value)
    """

    def evaluate(
        self,
        front: SeatingRow,
        back: SeatingRow,
        masking: MaskingConfig,
        distance_feet: float | None = None,
    ) -> SightlineResult:
        """Evaluate the back row's view over the row in front.

        Args:
            front: Row closer to the screen.
            back: Row farther from the screen.
            masking: Screen masking configuration.
            distance_feet: Viewing distance used for the obstruction angle.
                Defaults to the back row's distance from the screen.

        Returns:
            SightlineResult describing the obstruction tier.
        """
        if distance_feet is None:
            distance_feet = back.distance_from_screen

        front_head_top = front.ear_height + front.riser_height + EYE_TO_CROWN_OFFSET
        back_eye = back.ear_height + back.riser_height
        clearance = back_eye - front_head_top
        label = MASKING_LABELS[masking]

        if clearance >= SIGHTLINE_OPTIMAL_CLEARANCE:
            return SightlineResult(
                status=SightlineStatus.OPTIMAL,
                clearance=clearance,
                masking_label=label,
            )

        obstruction_height = abs(clearance)
        distance_inches = distance_feet * INCHES_PER_FOOT
        obstruction_angle = math.degrees(math.atan2(obstruction_height, distance_inches))

        return SightlineResult(
            status=self.classify_obstruction(obstruction_angle, obstruction_height, masking),
            clearance=clearance,
            obstruction_height=obstruction_height,
            obstruction_angle=obstruction_angle,
            masking_label=label,
        )

    def classify_obstruction(
        self,
        angle: float,
        height: float,
        masking: MaskingConfig,
    ) -> SightlineStatus:
        """Grade an obstruction against the masking tolerance tiers.

        Args:
            angle: Obstruction angle in degrees.
            height: Obstruction height in inches.
            masking: Screen masking configuration.

        Returns:
            ACCEPTABLE, WARNING or FAIL.
        """
        acceptable, warning = SIGHTLINE_TOLERANCES[masking]
        if acceptable.admits(angle, height):
            return SightlineStatus.ACCEPTABLE
        if warning.admits(angle, height):
            return SightlineStatus.WARNING
        return SightlineStatus.FAIL
