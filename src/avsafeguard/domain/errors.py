"""Validation errors raised before a project is analyzed."""

from __future__ import annotations


class ProjectValidationError(ValueError):
    """Base class for project configuration validation failures.

    Attributes:
        field: Name of the offending configuration field.
        message: Human-readable description of the problem.
    """

    error_type: str = "invalid_project"

    def __init__(self, message: str, field: str) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class ConfigurationMissingError(ProjectValidationError):
    """Raised when no configuration was supplied at all."""

    error_type = "configuration_missing"

    def __init__(self) -> None:
        super().__init__("Project configuration is required", field="config")


class InvalidRoomDimensionsError(ProjectValidationError):
    """Raised when a room dimension is zero, negative or not finite."""

    error_type = "invalid_room_dimensions"

    def __init__(self, dimension: str, value: float) -> None:
        self.value = value
        super().__init__(
            f"Room dimensions must be positive numbers (room.{dimension} = {value})",
            field=f"room.{dimension}",
        )


class InvalidScreenSizeError(ProjectValidationError):
    """Raised when the screen diagonal is zero, negative or not finite."""

    error_type = "invalid_screen_size"

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(
            f"Screen size must be positive (screen.size = {value})",
            field="screen.size",
        )


class EmptySeatingPlanError(ProjectValidationError):
    """Raised when the configuration has no seating rows."""

    error_type = "empty_seating_plan"

    def __init__(self) -> None:
        super().__init__("At least one seating row is required", field="rows")


class InvalidRowError(ProjectValidationError):
    """Raised when a seating row has invalid dimensions or a duplicate id.

    Attributes:
        position: 1-based position of the row in the supplied list.
    """

    error_type = "invalid_row"

    def __init__(self, position: int, reason: str = "has invalid dimensions") -> None:
        self.position = position
        super().__init__(f"Row {position} {reason}", field=f"rows[{position - 1}]")


__all__ = [
    "ConfigurationMissingError",
    "EmptySeatingPlanError",
    "InvalidRoomDimensionsError",
    "InvalidRowError",
    "InvalidScreenSizeError",
    "ProjectValidationError",
]
