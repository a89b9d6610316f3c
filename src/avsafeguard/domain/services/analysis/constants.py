"""Physical constants, thresholds and lookup tables for theater analysis.

Values follow CEDIA/CTA-CEB23 viewing guidance and CEDIA CEB-22 acoustic
guidance. Lookup tables are read-only mappings built once at import time.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from avsafeguard.domain.value_objects import (
    ContentStandard,
    MaskingConfig,
    WallConstruction,
)

# ==============================================================================
# Units
# ==============================================================================

INCHES_PER_FOOT: float = 12.0


# ==============================================================================
# Screen Geometry
# ==============================================================================

# Minimum side clearance between the screen and the side walls (inches)
SCREEN_CLEARANCE_MARGIN: float = 6.0


# ==============================================================================
# Vertical Viewing Angle
# ==============================================================================

VVA_OPTIMAL_MAX: float = 15.0
VVA_MARGINAL_MAX: float = 18.0
# Both sub-angles at or under this (with a comfortable HVA) rate a row optimal
VVA_PREMIUM_MAX: float = 12.0


# ==============================================================================
# Horizontal Viewing Angle
# ==============================================================================

# Half-angle headroom below the content limit required for an optimal row
HVA_OPTIMAL_HEADROOM: float = 5.0

HVA_LIMITS: Mapping[ContentStandard, float] = MappingProxyType(
    {
        ContentStandard.HDR: 40.0,
        ContentStandard.SDR: 45.0,
    }
)


# ==============================================================================
# Sightlines
# ==============================================================================

# Seated eye (ear) level to top of head (inches)
EYE_TO_CROWN_OFFSET: float = 4.0

# Clearance over the head in front at which a sightline is optimal (inches)
SIGHTLINE_OPTIMAL_CLEARANCE: float = 4.0

MASKING_LABELS: Mapping[MaskingConfig, str] = MappingProxyType(
    {
        MaskingConfig.FIXED_240: "Fixed 2.40:1 (Standard)",
        MaskingConfig.MOTORIZED: "Motorized Masking (Pro)",
        MaskingConfig.NO_MASKING: "16:9 (No Masking)",
    }
)


# ==============================================================================
# Acoustics
# ==============================================================================

# Speed of sound in ft/s at 68 degrees F
SPEED_OF_SOUND: float = 1125.0

# Axial harmonic orders evaluated per dimension
MODE_ORDERS: tuple[int, ...] = (1, 2, 3)

# Decimal places of reported mode and prescription frequencies
FREQUENCY_PRECISION: int = 1

# Modes above this frequency are not reported (Hz)
MAX_MODE_FREQUENCY: float = 300.0

# Only modes at or below this frequency contribute treatment prescriptions (Hz)
PRESCRIPTION_MAX_FREQUENCY: float = 200.0

# Bass leakage is flagged for modes below this frequency (Hz)
BASS_LEAKAGE_FREQUENCY: float = 80.0

# Treatment bands (Hz)
DIAPHRAGMATIC_MAX_FREQUENCY: float = 40.0
BASS_TRAP_MAX_FREQUENCY: float = 80.0

# Placement bands (Hz)
TRI_CORNER_MAX_FREQUENCY: float = 50.0
BOUNDARY_MAX_FREQUENCY: float = 100.0

# Sabine constant for imperial units (s/ft)
SABINE_CONSTANT: float = 0.049

# CEDIA reference reverberation time (seconds)
TARGET_RT60: float = 0.45
RT60_OPTIMAL_TOLERANCE: float = 0.1
RT60_ACCEPTABLE_TOLERANCE: float = 0.3

CARPET_ABSORPTION: float = 0.10
CEILING_ABSORPTION: float = 0.05
SEATING_ABSORPTION: float = 0.25
# Share of the floor area covered by seating
SEATING_FLOOR_FRACTION: float = 0.30

WALL_DAMPING_FACTORS: Mapping[WallConstruction, float] = MappingProxyType(
    {
        WallConstruction.DRYWALL: 0.50,
        WallConstruction.TREATED_DRYWALL: 0.70,
        WallConstruction.MLV_DRYWALL: 0.75,
        WallConstruction.HYBRID: 0.85,
        WallConstruction.CONCRETE: 1.00,
    }
)

WALL_ABSORPTION_COEFFICIENTS: Mapping[WallConstruction, float] = MappingProxyType(
    {
        WallConstruction.DRYWALL: 0.10,
        WallConstruction.TREATED_DRYWALL: 0.15,
        WallConstruction.MLV_DRYWALL: 0.08,
        WallConstruction.HYBRID: 0.06,
        WallConstruction.CONCRETE: 0.02,
    }
)

WALL_LABELS: Mapping[WallConstruction, str] = MappingProxyType(
    {
        WallConstruction.DRYWALL: "Standard Residential (Drywall)",
        WallConstruction.TREATED_DRYWALL: "Treated Drywall (Improved)",
        WallConstruction.MLV_DRYWALL: "MLV + Drywall",
        WallConstruction.HYBRID: "Hybrid (Concrete + Studs)",
        WallConstruction.CONCRETE: "Concrete (Rigid)",
    }
)

# The flexible boundary that lets bass escape to adjacent rooms
LEAKY_WALL_CONSTRUCTION: WallConstruction = WallConstruction.DRYWALL


# ==============================================================================
# Scoring
# ==============================================================================

MAX_SCORE: int = 100
FAIL_ROW_PENALTY: int = 25
WARNING_ROW_PENALTY: int = 8
BASS_LEAKAGE_PENALTY: int = 2
OPTIMAL_ROW_BONUS: int = 2
COMPLIANT_SCORE_THRESHOLD: int = 80


__all__ = [
    "BASS_LEAKAGE_FREQUENCY",
    "BASS_LEAKAGE_PENALTY",
    "BASS_TRAP_MAX_FREQUENCY",
    "BOUNDARY_MAX_FREQUENCY",
    "CARPET_ABSORPTION",
    "CEILING_ABSORPTION",
    "COMPLIANT_SCORE_THRESHOLD",
    "DIAPHRAGMATIC_MAX_FREQUENCY",
    "EYE_TO_CROWN_OFFSET",
    "FAIL_ROW_PENALTY",
    "FREQUENCY_PRECISION",
    "HVA_LIMITS",
    "HVA_OPTIMAL_HEADROOM",
    "INCHES_PER_FOOT",
    "LEAKY_WALL_CONSTRUCTION",
    "MASKING_LABELS",
    "MAX_MODE_FREQUENCY",
    "MAX_SCORE",
    "MODE_ORDERS",
    "OPTIMAL_ROW_BONUS",
    "PRESCRIPTION_MAX_FREQUENCY",
    "RT60_ACCEPTABLE_TOLERANCE",
    "RT60_OPTIMAL_TOLERANCE",
    "SABINE_CONSTANT",
    "SCREEN_CLEARANCE_MARGIN",
    "SEATING_ABSORPTION",
    "SEATING_FLOOR_FRACTION",
    "SIGHTLINE_OPTIMAL_CLEARANCE",
    "SPEED_OF_SOUND",
    "TARGET_RT60",
    "TRI_CORNER_MAX_FREQUENCY",
    "VVA_MARGINAL_MAX",
    "VVA_OPTIMAL_MAX",
    "VVA_PREMIUM_MAX",
    "WALL_ABSORPTION_COEFFICIENTS",
    "WALL_DAMPING_FACTORS",
    "WALL_LABELS",
    "WARNING_ROW_PENALTY",
]
