"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from avsafeguard.application.config.schema import (
    ProjectConfiguration,
    RoomConfig,
    ScreenConfigSchema,
)


def _pick(override: Any, current: Any) -> Any:
    return override if override is not None else current


def merge_config_with_cli(
    config: ProjectConfiguration,
    *,
    length: float | None = None,
    width: float | None = None,
    height: float | None = None,
    screen_size: float | None = None,
    aspect_ratio: str | None = None,
    bottom_edge_height: float | None = None,
    masking: str | None = None,
    wall_construction: str | None = None,
    content_standard: str | None = None,
) -> ProjectConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base ProjectConfiguration to merge with
        length: Override for room.length
        width: Override for room.width
        height: Override for room.height
        screen_size: Override for screen.size
        aspect_ratio: Override for screen.aspect_ratio
        bottom_edge_height: Override for screen.bottom_edge_height
        masking: Override for screen.masking
        wall_construction: Override for wall_construction
        content_standard: Override for content_standard

    Returns:
        A new ProjectConfiguration with merged values. Override values are
        validated against the schema like file values.

    Raises:
        pydantic.ValidationError: If an override is out of range.

    Example:
        >>> merged = merge_config_with_cli(config, width=16.0)
        >>> merged.room.width
        16.0
    """
    room = config.room
    room_data: dict[str, Any] = {
        "length": _pick(length, room.length),
        "width": _pick(width, room.width),
        "height": _pick(height, room.height),
    }

    screen = config.screen
    screen_data: dict[str, Any] = {
        "size": _pick(screen_size, screen.size),
        "aspect_ratio": _pick(aspect_ratio, screen.aspect_ratio),
        "bottom_edge_height": _pick(bottom_edge_height, screen.bottom_edge_height),
        "masking": _pick(masking, screen.masking),
    }

    return ProjectConfiguration(
        schema_version=config.schema_version,
        room=RoomConfig.model_validate(room_data),
        screen=ScreenConfigSchema.model_validate(screen_data),
        rows=[row.model_copy() for row in config.rows],
        wall_construction=_pick(wall_construction, config.wall_construction),
        content_standard=_pick(content_standard, config.content_standard),
    )
