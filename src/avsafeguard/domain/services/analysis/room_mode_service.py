"""Axial room-mode calculation and low-frequency treatment prescriptions."""

from __future__ import annotations

from avsafeguard.domain.entities import RoomDimensions
from avsafeguard.domain.value_objects import ModeType, TreatmentType, WallConstruction

from .constants import (
    BASS_LEAKAGE_FREQUENCY,
    BASS_TRAP_MAX_FREQUENCY,
    BOUNDARY_MAX_FREQUENCY,
    DIAPHRAGMATIC_MAX_FREQUENCY,
    FREQUENCY_PRECISION,
    LEAKY_WALL_CONSTRUCTION,
    MAX_MODE_FREQUENCY,
    MODE_ORDERS,
    SPEED_OF_SOUND,
    TRI_CORNER_MAX_FREQUENCY,
    WALL_DAMPING_FACTORS,
)
from .models import RoomModeResult, TreatmentPrescription

__all__ = ["RoomModeService", "placement_for_frequency", "prescribe_treatment"]


_ORDINALS = {1: "1st", 2: "2nd", 3: "3rd"}


def _ordinal(order: int) -> str:
    return _ORDINALS.get(order, f"{order}th")


def placement_for_frequency(frequency: float) -> str:
    """Where treatment for a given frequency is most effective."""
    if frequency < TRI_CORNER_MAX_FREQUENCY:
        return "Tri-corner placement (floor and ceiling corners)"
    if frequency <= BOUNDARY_MAX_FREQUENCY:
        return "Front and side wall boundaries"
    return "Rear wall and ceiling"


def prescribe_treatment(frequency: float) -> TreatmentPrescription:
    """Prescribe acoustic treatment for a problem frequency.

    Pure function of the frequency: equal inputs always give equal results.
    The band is chosen from the exact frequency; the prescription reports it
    rounded to FREQUENCY_PRECISION decimals.

    Args:
        frequency: Problem frequency in Hz.

    Returns:
        TreatmentPrescription with absorber type, depth and placement.
    """
    shown = round(frequency, FREQUENCY_PRECISION)
    if frequency < DIAPHRAGMATIC_MAX_FREQUENCY:
        treatment_type = TreatmentType.DIAPHRAGMATIC
        description = (
            f"Diaphragmatic (membrane) absorber tuned near {shown:g} Hz "
            "for deep bass control"
        )
        depth = "6-12 in"
    elif frequency <= BASS_TRAP_MAX_FREQUENCY:
        treatment_type = TreatmentType.HYBRID_BASS_TRAP
        description = (
            f"Hybrid bass trap (membrane-faced porous core) targeting {shown:g} Hz"
        )
        depth = "12-16 in"
    else:
        treatment_type = TreatmentType.BROADBAND_POROUS
        description = "Broadband porous absorber panels for upper-bass and midrange control"
        depth = "4-6 in"

    return TreatmentPrescription(
        frequency=shown,
        type=treatment_type,
        description=description,
        depth=depth,
        placement=placement_for_frequency(frequency),
    )


class RoomModeService:
    """Service for calculating the axial standing-wave modes of a room.

    Only axial modes are produced. Tangential and oblique modes are
    outside the scope of this calculator.

    Example:
        service = RoomModeService()
        modes = service.calculate(room, WallConstruction.HYBRID)
        lowest = modes[0].frequency
    """

    def calculate(
        self,
        room: RoomDimensions,
        wall_construction: WallConstruction,
    ) -> list[RoomModeResult]:
        """Calculate axial modes up to MAX_MODE_FREQUENCY.

        Leakage and treatment bands are decided on the exact frequency;
        only the reported frequency is rounded.

        Args:
            room: Room dimensions in feet.
            wall_construction: Wall construction setting the damping factor.

        Returns:
            Modes sorted ascending by frequency.
        """
        damping = WALL_DAMPING_FACTORS[wall_construction]
        leaky = wall_construction == LEAKY_WALL_CONSTRUCTION
        axes = (
            ("Length", room.length),
            ("Width", room.width),
            ("Height", room.height),
        )

        modes: list[RoomModeResult] = []
        for axis_name, dimension in axes:
            for order in MODE_ORDERS:
                exact = order * SPEED_OF_SOUND / (2 * dimension)
                if exact > MAX_MODE_FREQUENCY:
                    continue
                modes.append(
                    RoomModeResult(
                        frequency=round(exact, FREQUENCY_PRECISION),
                        mode_type=ModeType.AXIAL,
                        axis=f"{axis_name} ({_ordinal(order)})",
                        order=order,
                        intensity=damping / order,
                        is_bass_leakage=leaky and exact < BASS_LEAKAGE_FREQUENCY,
                        treatment=prescribe_treatment(exact),
                        exact_frequency=exact,
                    )
                )

        modes.sort(key=lambda mode: mode.exact_frequency)
        return modes
