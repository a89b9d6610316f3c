"""Sabine reverberation time estimate for an untreated room."""

from __future__ import annotations

from avsafeguard.domain.entities import RoomDimensions
from avsafeguard.domain.value_objects import RT60Status, WallConstruction

from .constants import (
    CARPET_ABSORPTION,
    CEILING_ABSORPTION,
    RT60_ACCEPTABLE_TOLERANCE,
    RT60_OPTIMAL_TOLERANCE,
    SABINE_CONSTANT,
    SEATING_ABSORPTION,
    SEATING_FLOOR_FRACTION,
    TARGET_RT60,
    WALL_ABSORPTION_COEFFICIENTS,
)
from .models import RT60Analysis

__all__ = ["RT60Service"]


class RT60Service:
    """Service for estimating the untreated RT60 of a room.

    Absorption is a surface-weighted blend of the walls (per construction),
    a carpeted floor, the ceiling, and seating over part of the floor.
    """

    def __init__(self, target_rt60: float = TARGET_RT60) -> None:
        self.target_rt60 = target_rt60

    def total_absorption(
        self,
        room: RoomDimensions,
        wall_construction: WallConstruction,
    ) -> float:
        """Total absorption of the untreated room in sabins."""
        floor_area = room.floor_area
        return (
            room.wall_area * WALL_ABSORPTION_COEFFICIENTS[wall_construction]
            + floor_area * CARPET_ABSORPTION
            + floor_area * CEILING_ABSORPTION
            + floor_area * SEATING_FLOOR_FRACTION * SEATING_ABSORPTION
        )

    def analyze(
        self,
        room: RoomDimensions,
        wall_construction: WallConstruction,
    ) -> RT60Analysis:
        """Estimate RT60 and the treatment coverage needed to hit the target.

        The coverage figure is the magnitude of the absorption deviation, so
        an over-absorbed room also reports a non-zero coverage.

        Args:
            room: Room dimensions in feet.
            wall_construction: Wall construction.

        Returns:
            RT60Analysis with the rounded estimate, target, coverage and status.
        """
        surface = room.total_surface_area
        current_sabins = self.total_absorption(room, wall_construction)
        average_alpha = current_sabins / surface

        rt60 = SABINE_CONSTANT * room.volume / (surface * average_alpha)

        required_sabins = SABINE_CONSTANT * room.volume / self.target_rt60
        coverage = abs(required_sabins - current_sabins) / surface * 100
        coverage = min(max(coverage, 0.0), 100.0)

        return RT60Analysis(
            untreated_rt60=round(rt60, 2),
            target_rt60=self.target_rt60,
            coverage_required=round(coverage),
            status=self._classify(rt60),
        )

    def _classify(self, rt60: float) -> RT60Status:
        if rt60 <= self.target_rt60 + RT60_OPTIMAL_TOLERANCE:
            return RT60Status.OPTIMAL
        if rt60 <= self.target_rt60 + RT60_ACCEPTABLE_TOLERANCE:
            return RT60Status.ACCEPTABLE
        return RT60Status.NEEDS_TREATMENT
