"""Value objects for the home-theater analysis domain.

Every enum uses ``(str, Enum)`` so values serialize directly to JSON and
round-trip through configuration files unchanged.
"""

from __future__ import annotations

from enum import Enum


class AspectRatio(str, Enum):
    """Projection screen aspect ratios.

    Attributes:
        WIDESCREEN: 16:9 television / HDTV format.
        SCOPE: 2.35:1 CinemaScope format.
        ULTRA: 2.40:1 modern anamorphic format.
    """

    WIDESCREEN = "16:9"
    SCOPE = "2.35:1"
    ULTRA = "2.40:1"

    @property
    def ratio(self) -> float:
        """Width-to-height ratio as a number."""
        return _ASPECT_RATIO_VALUES[self]


_ASPECT_RATIO_VALUES: dict[AspectRatio, float] = {
    AspectRatio.WIDESCREEN: 16 / 9,
    AspectRatio.SCOPE: 2.35,
    AspectRatio.ULTRA: 2.40,
}


class MaskingConfig(str, Enum):
    """Screen border masking configuration.

    Masking determines how much of a seating obstruction can be hidden
    by the screen border, and therefore how tolerant sightline checks are.

    Attributes:
        FIXED_240: Fixed 2.40:1 masking (the standard configuration).
        MOTORIZED: Motorized masking panels (most tolerant).
        NO_MASKING: 16:9 screen with no masking (strictest).
    """

    FIXED_240 = "fixed-240"
    MOTORIZED = "motorized"
    NO_MASKING = "16:9-no-masking"


class WallConstruction(str, Enum):
    """Wall construction classes.

    Each class maps to a damping factor (modal intensity) and an absorption
    coefficient (RT60) through the static tables in the analysis constants.

    Attributes:
        DRYWALL: Standard residential drywall, the flexible / leaky boundary.
        TREATED_DRYWALL: Drywall with acoustic treatment.
        MLV_DRYWALL: Mass-loaded vinyl plus drywall.
        HYBRID: Concrete plus stud walls.
        CONCRETE: Rigid concrete.
    """

    DRYWALL = "drywall"
    TREATED_DRYWALL = "treated-drywall"
    MLV_DRYWALL = "mlv-drywall"
    HYBRID = "hybrid"
    CONCRETE = "concrete"


class ContentStandard(str, Enum):
    """Content standard that sets the horizontal viewing-angle limit.

    Attributes:
        SDR: Standard dynamic range (45 degree limit).
        HDR: High dynamic range (40 degree limit, stricter).
    """

    SDR = "SDR"
    HDR = "HDR"


class RowStatus(str, Enum):
    """Overall four-tier status of one seating row."""

    OPTIMAL = "optimal"
    ACCEPTABLE = "acceptable"
    WARNING = "warning"
    FAIL = "fail"

    @property
    def severity(self) -> int:
        """Rank used to compare statuses (higher is worse)."""
        return _ROW_STATUS_SEVERITY[self]


_ROW_STATUS_SEVERITY: dict[RowStatus, int] = {
    RowStatus.OPTIMAL: 0,
    RowStatus.ACCEPTABLE: 1,
    RowStatus.WARNING: 2,
    RowStatus.FAIL: 3,
}


class VerticalAngleStatus(str, Enum):
    """Three-tier classification of a vertical viewing sub-angle.

    Kept separate from RowStatus: the marginal tier only exists for
    vertical angles and feeds the row precedence rules on its own.
    """

    OPTIMAL = "optimal"
    MARGINAL = "marginal"
    WARNING = "warning"

    @property
    def severity(self) -> int:
        """Rank used to pick the worst of two sub-angles."""
        return _VERTICAL_STATUS_SEVERITY[self]


_VERTICAL_STATUS_SEVERITY: dict[VerticalAngleStatus, int] = {
    VerticalAngleStatus.OPTIMAL: 0,
    VerticalAngleStatus.MARGINAL: 1,
    VerticalAngleStatus.WARNING: 2,
}


class SightlineStatus(str, Enum):
    """Outcome tier of a front/back row sightline evaluation.

    ACCEPTABLE obstructions are not considered blocked; WARNING and
    FAIL obstructions are.
    """

    OPTIMAL = "optimal"
    ACCEPTABLE = "acceptable"
    WARNING = "warning"
    FAIL = "fail"

    @property
    def is_blocked(self) -> bool:
        """Whether this tier counts as a blocked sightline."""
        return self in (SightlineStatus.WARNING, SightlineStatus.FAIL)


class RT60Status(str, Enum):
    """Reverberation time status relative to the target."""

    OPTIMAL = "optimal"
    ACCEPTABLE = "acceptable"
    NEEDS_TREATMENT = "needs-treatment"


class Certification(str, Enum):
    """Project certification tier."""

    CEDIA_COMPLIANT = "CEDIA Compliant"
    ACCEPTABLE = "Acceptable"
    REQUIRES_REVISION = "Requires Revision"


class ModeType(str, Enum):
    """Standing-wave mode classification.

    Only AXIAL modes are computed. TANGENTIAL and OBLIQUE are part of the
    result vocabulary but the calculator never produces them.
    """

    AXIAL = "axial"
    TANGENTIAL = "tangential"
    OBLIQUE = "oblique"


class TreatmentType(str, Enum):
    """Frequency-banded acoustic treatment families."""

    DIAPHRAGMATIC = "diaphragmatic"
    HYBRID_BASS_TRAP = "hybrid-bass-trap"
    BROADBAND_POROUS = "broadband-porous"

    @property
    def label(self) -> str:
        """Short human-readable name."""
        return {
            TreatmentType.DIAPHRAGMATIC: "Diaphragmatic",
            TreatmentType.HYBRID_BASS_TRAP: "Hybrid Bass Trap",
            TreatmentType.BROADBAND_POROUS: "Broadband Porous",
        }[self]


__all__ = [
    "AspectRatio",
    "Certification",
    "ContentStandard",
    "MaskingConfig",
    "ModeType",
    "RowStatus",
    "RT60Status",
    "SightlineStatus",
    "TreatmentType",
    "VerticalAngleStatus",
    "WallConstruction",
]
