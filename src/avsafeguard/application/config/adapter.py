"""Adapter converting a ProjectConfiguration into domain objects.

The configuration schema and the domain entities are kept separate so
that file-format concerns (defaults, schema versions, range limits) stay
out of the analysis engine.
"""

from avsafeguard.application.config.schema import (
    ProjectConfiguration,
    RoomConfig,
    ScreenConfigSchema,
    SeatingRowConfig,
)
from avsafeguard.domain.entities import (
    ProjectConfig,
    RoomDimensions,
    ScreenConfig,
    SeatingRow,
)


def config_to_project(config: ProjectConfiguration) -> ProjectConfig:
    """Convert a ProjectConfiguration to a domain ProjectConfig.

    Args:
        config: A validated ProjectConfiguration.

    Returns:
        ProjectConfig ready for the project analyzer. Rows keep their file
        order; the analyzer sorts them.
    """
    room = config.room
    screen = config.screen
    return ProjectConfig(
        room=RoomDimensions(length=room.length, width=room.width, height=room.height),
        screen=ScreenConfig(
            size=screen.size,
            aspect_ratio=screen.aspect_ratio,
            bottom_edge_height=screen.bottom_edge_height,
            masking=screen.masking,
        ),
        rows=tuple(
            SeatingRow(
                id=row.id,
                distance_from_screen=row.distance_from_screen,
                ear_height=row.ear_height,
                riser_height=row.riser_height,
            )
            for row in config.rows
        ),
        wall_construction=config.wall_construction,
        content_standard=config.content_standard,
    )


def default_configuration() -> ProjectConfiguration:
    """Build the default two-row project.

    A 20 x 14 x 9 ft room with a 120 in 16:9 screen, hybrid walls, HDR
    content, and rows at 11 ft (floor level) and 15 ft (10 in riser).
    """
    return ProjectConfiguration(
        room=RoomConfig(),
        screen=ScreenConfigSchema(),
        rows=[
            SeatingRowConfig(id=1, distance_from_screen=11, ear_height=42, riser_height=0),
            SeatingRowConfig(id=2, distance_from_screen=15, ear_height=42, riser_height=10),
        ],
    )
