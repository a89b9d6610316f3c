"""Validation structures and theater design advisory checks.

This module provides validation result structures plus the domain
validation and design advisories applied to a project configuration.
"""

from dataclasses import dataclass, field
from typing import Any

from avsafeguard.application.config.adapter import config_to_project
from avsafeguard.application.config.schema import ProjectConfiguration
from avsafeguard.domain.errors import ProjectValidationError
from avsafeguard.domain.services.analysis import screen_fits_room, validate_project

# Rooms lower than this are flagged as acoustically compromised (feet)
MIN_RECOMMENDED_ROOM_HEIGHT = 8.0

# Rooms narrower than this are tight for more than MAX_ROWS_NARROW_ROOM rows (feet)
NARROW_ROOM_WIDTH = 12.0
MAX_ROWS_NARROW_ROOM = 3


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "rows[0]")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if the configuration has any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_design_advisories(config: ProjectConfiguration) -> ValidationResult:
    """Check a configuration against theater design recommendations.

    Args:
        config: A ProjectConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing warnings only
    """
    result = ValidationResult()
    room = config.room

    if room.height < MIN_RECOMMENDED_ROOM_HEIGHT:
        result.add_warning(
            path="room.height",
            message=(
                f"Room height ({room.height} ft) is below the recommended "
                f"{MIN_RECOMMENDED_ROOM_HEIGHT:.0f} ft and may impact acoustics"
            ),
            suggestion="Plan for thinner ceiling treatment and shallower risers",
        )

    if len(config.rows) > MAX_ROWS_NARROW_ROOM and room.width < NARROW_ROOM_WIDTH:
        result.add_warning(
            path="rows",
            message=(
                f"Room width ({room.width} ft) may be tight for "
                f"{len(config.rows)} seating rows"
            ),
            suggestion=f"Limit the plan to {MAX_ROWS_NARROW_ROOM} rows or widen the room",
        )

    fit = screen_fits_room(config.screen.size, config.screen.aspect_ratio, room.width)
    if not fit.fits:
        result.add_warning(
            path="screen.size",
            message=(
                f"Screen width ({fit.screen_width_inches:.1f}\") does not fit room "
                f"width ({fit.room_width_inches:.1f}\") with side clearance"
            ),
            suggestion="Reduce the screen size or choose a different aspect ratio",
        )

    ordered = sorted(
        enumerate(config.rows), key=lambda item: item[1].distance_from_screen
    )
    for (_, front), (index, back) in zip(ordered, ordered[1:]):
        if back.riser_height < front.riser_height:
            result.add_warning(
                path=f"rows[{index}].riser_height",
                message=(
                    f"Row {back.id} riser ({back.riser_height}\") is lower than the "
                    f"riser of row {front.id} in front of it ({front.riser_height}\")"
                ),
                suggestion="Raise rear rows at least as high as the rows in front",
            )

    return result


def validate_config(config: ProjectConfiguration) -> ValidationResult:
    """Perform full validation of a project configuration.

    Runs the same domain validation the analyzer applies, then the design
    advisories.

    Args:
        config: A ProjectConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()

    try:
        validate_project(config_to_project(config))
    except ProjectValidationError as e:
        result.add_error(path=e.field, message=e.message, value=getattr(e, "value", None))

    result.merge(check_design_advisories(config))
    return result
