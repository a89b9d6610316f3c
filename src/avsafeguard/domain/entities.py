"""Domain entities describing a home-theater project configuration.

These are plain immutable records. Range checks are not done in
``__post_init__``; the project analyzer validates a whole configuration
at its entry point and raises one specific error per violated field.
"""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import AspectRatio, ContentStandard, MaskingConfig, WallConstruction


@dataclass(frozen=True)
class RoomDimensions:
    """Interior room dimensions in feet.

    Attributes:
        length: Front-to-back length (screen wall to rear wall).
        width: Side-to-side width.
        height: Floor-to-ceiling height.
    """

    length: float
    width: float
    height: float

    @property
    def volume(self) -> float:
        """Room volume in cubic feet."""
        return self.length * self.width * self.height

    @property
    def floor_area(self) -> float:
        """Floor area in square feet (equal to the ceiling area)."""
        return self.length * self.width

    @property
    def wall_area(self) -> float:
        """Combined area of the four walls in square feet."""
        return 2 * (self.length * self.height + self.width * self.height)

    @property
    def total_surface_area(self) -> float:
        """Floor, ceiling and four walls in square feet."""
        return 2 * self.floor_area + self.wall_area


@dataclass(frozen=True)
class ScreenConfig:
    """Projection screen configuration.

    Attributes:
        size: Diagonal size in inches.
        aspect_ratio: Screen aspect ratio.
        bottom_edge_height: Height of the bottom edge of the image above the
            floor, in inches.
        masking: Border masking configuration.
    """

    size: float
    aspect_ratio: AspectRatio = AspectRatio.WIDESCREEN
    bottom_edge_height: float = 24.0
    masking: MaskingConfig = MaskingConfig.FIXED_240


@dataclass(frozen=True)
class SeatingRow:
    """One row of seats.

    Attributes:
        id: Unique row identifier.
        distance_from_screen: Distance from the screen in feet.
        ear_height: Seated ear height above the riser surface, in inches.
        riser_height: Height of the platform under the row, in inches.
    """

    id: int
    distance_from_screen: float
    ear_height: float
    riser_height: float = 0.0

    @property
    def eye_height(self) -> float:
        """Seated eye level above the room floor in inches."""
        return self.ear_height + self.riser_height


@dataclass(frozen=True)
class ProjectConfig:
    """Complete configuration handed to the analysis engine.

    Rows may be supplied in any order; the analyzer sorts them by distance
    from the screen before analysis.
    """

    room: RoomDimensions
    screen: ScreenConfig
    rows: tuple[SeatingRow, ...]
    wall_construction: WallConstruction = WallConstruction.HYBRID
    content_standard: ContentStandard = ContentStandard.HDR

    def __post_init__(self) -> None:
        # Accept any iterable of rows but store an immutable tuple.
        if not isinstance(self.rows, tuple):
            object.__setattr__(self, "rows", tuple(self.rows))


__all__ = ["ProjectConfig", "RoomDimensions", "ScreenConfig", "SeatingRow"]
