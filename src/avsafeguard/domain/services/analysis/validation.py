"""Entry-point validation for project configurations."""

from __future__ import annotations

import math

from avsafeguard.domain.entities import ProjectConfig
from avsafeguard.domain.errors import (
    ConfigurationMissingError,
    EmptySeatingPlanError,
    InvalidRoomDimensionsError,
    InvalidRowError,
    InvalidScreenSizeError,
)

__all__ = ["validate_project"]


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def _is_non_negative(value: float) -> bool:
    return math.isfinite(value) and value >= 0


def validate_project(config: ProjectConfig | None) -> ProjectConfig:
    """Validate a configuration before any numeric work runs.

    Checks run in a fixed order and the first violation is raised.

    Args:
        config: Configuration to validate.

    Returns:
        The same configuration, for chaining.

    Raises:
        ConfigurationMissingError: If config is None.
        InvalidRoomDimensionsError: If a room dimension is not positive.
        InvalidScreenSizeError: If the screen diagonal is not positive.
        EmptySeatingPlanError: If there are no rows.
        InvalidRowError: If a row has a negative distance or ear height,
            a non-finite riser height, or repeats an earlier row id.
    """
    if config is None:
        raise ConfigurationMissingError()

    room = config.room
    for dimension in ("length", "width", "height"):
        value = getattr(room, dimension)
        if not _is_positive(value):
            raise InvalidRoomDimensionsError(dimension, value)

    if not _is_positive(config.screen.size):
        raise InvalidScreenSizeError(config.screen.size)

    if not config.rows:
        raise EmptySeatingPlanError()

    seen_ids: set[int] = set()
    for position, row in enumerate(config.rows, start=1):
        if not (
            _is_non_negative(row.distance_from_screen)
            and _is_non_negative(row.ear_height)
            and math.isfinite(row.riser_height)
        ):
            raise InvalidRowError(position)
        if row.id in seen_ids:
            raise InvalidRowError(position, reason=f"duplicates row id {row.id}")
        seen_ids.add(row.id)

    return config
