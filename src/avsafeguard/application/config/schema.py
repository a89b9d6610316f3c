"""Pydantic configuration schema models for theater project files.

This module defines the configuration schema for JSON-based project files.
It uses Pydantic v2 for validation and serialization.

The enums are reused from the domain layer to keep the accepted values and
the analysis vocabulary identical.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from avsafeguard.domain.value_objects import (
    AspectRatio,
    ContentStandard,
    MaskingConfig,
    WallConstruction,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with room, screen, rows and acoustics
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

MAX_ROOM_DIMENSION = 200.0
MAX_SCREEN_SIZE = 400.0
MAX_ROWS = 20


class RoomConfig(BaseModel):
    """Interior room dimensions in feet.

    Attributes:
        length: Screen wall to rear wall.
        width: Side wall to side wall.
        height: Floor to ceiling.
    """

    model_config = ConfigDict(extra="forbid")

    length: float = Field(default=20.0, gt=0, le=MAX_ROOM_DIMENSION)
    width: float = Field(default=14.0, gt=0, le=MAX_ROOM_DIMENSION)
    height: float = Field(default=9.0, gt=0, le=MAX_ROOM_DIMENSION)


class ScreenConfigSchema(BaseModel):
    """Projection screen configuration.

    Attributes:
        size: Diagonal in inches.
        aspect_ratio: "16:9", "2.35:1" or "2.40:1".
        bottom_edge_height: Image bottom above the floor in inches.
        masking: Border masking configuration.
    """

    model_config = ConfigDict(extra="forbid")

    size: float = Field(default=120.0, gt=0, le=MAX_SCREEN_SIZE)
    aspect_ratio: AspectRatio = AspectRatio.WIDESCREEN
    bottom_edge_height: float = Field(default=24.0, ge=0)
    masking: MaskingConfig = MaskingConfig.FIXED_240


class SeatingRowConfig(BaseModel):
    """One seating row.

    Attributes:
        id: Unique row identifier.
        distance_from_screen: Distance from the screen in feet.
        ear_height: Seated ear height in inches.
        riser_height: Riser (platform) height in inches.
    """

    model_config = ConfigDict(extra="forbid")

    id: int = Field(..., ge=1)
    distance_from_screen: float = Field(..., gt=0, le=MAX_ROOM_DIMENSION)
    ear_height: float = Field(default=42.0, ge=0)
    riser_height: float = Field(default=0.0, ge=0)


class ProjectConfiguration(BaseModel):
    """Root configuration model for a theater project file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        room: Room dimensions
        screen: Screen configuration
        rows: Seating rows, in any order
        wall_construction: Wall construction class
        content_standard: Content standard for the horizontal angle limit

    Example:
        >>> config = ProjectConfiguration(
        ...     rows=[SeatingRowConfig(id=1, distance_from_screen=12)]
        ... )
        >>> config.room.width
        14.0
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    room: RoomConfig = Field(default_factory=RoomConfig)
    screen: ScreenConfigSchema = Field(default_factory=ScreenConfigSchema)
    rows: list[SeatingRowConfig] = Field(..., min_length=1, max_length=MAX_ROWS)
    wall_construction: WallConstruction = WallConstruction.HYBRID
    content_standard: ContentStandard = ContentStandard.HDR

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("rows")
    @classmethod
    def validate_unique_row_ids(cls, v: list[SeatingRowConfig]) -> list[SeatingRowConfig]:
        """Ensure no two rows share an id."""
        seen: set[int] = set()
        for row in v:
            if row.id in seen:
                raise ValueError(f"Duplicate row id {row.id}")
            seen.add(row.id)
        return v


__all__ = [
    "MAX_ROOM_DIMENSION",
    "MAX_ROWS",
    "MAX_SCREEN_SIZE",
    "ProjectConfiguration",
    "RoomConfig",
    "SUPPORTED_VERSIONS",
    "ScreenConfigSchema",
    "SeatingRowConfig",
]
