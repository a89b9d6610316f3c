"""Screen and viewing-angle geometry.

Pure functions shared by the row analyzer and the project analyzer. Inputs
are assumed to be validated already; distances are in feet, heights and
screen sizes in inches, angles returned in degrees.
"""

from __future__ import annotations

import math

from avsafeguard.domain.value_objects import AspectRatio

from .constants import INCHES_PER_FOOT, SCREEN_CLEARANCE_MARGIN
from .models import ScreenDimensions, ScreenFit, VerticalViewingAngle

__all__ = [
    "horizontal_viewing_angle",
    "screen_dimensions",
    "screen_fits_room",
    "vertical_viewing_angle",
]


def _angle_degrees(opposite: float, adjacent: float) -> float:
    # atan2 matches atan(opposite / adjacent) for adjacent > 0 and saturates
    # at 90 degrees for a seat placed directly at the screen.
    return math.degrees(math.atan2(opposite, adjacent))


def screen_dimensions(diagonal: float, aspect_ratio: AspectRatio) -> ScreenDimensions:
    """Derive image width and height from the diagonal.

    Solves ``height = diagonal / sqrt(ratio^2 + 1)`` and
    ``width = height * ratio``.

    Args:
        diagonal: Screen diagonal in inches.
        aspect_ratio: Screen aspect ratio.

    Returns:
        ScreenDimensions in inches.

    Example:
        >>> dims = screen_dimensions(120, AspectRatio.WIDESCREEN)
        >>> round(dims.width, 1), round(dims.height, 1)
        (104.6, 58.8)
    """
    ratio = aspect_ratio.ratio
    height = diagonal / math.sqrt(ratio**2 + 1)
    return ScreenDimensions(width=height * ratio, height=height)


def vertical_viewing_angle(
    screen_height: float,
    bottom_edge: float,
    eye_height: float,
    distance_feet: float,
) -> VerticalViewingAngle:
    """Calculate the vertical angles from a seated eye to the screen edges.

    Both sub-angles are reported as magnitudes. They differ whenever the eye
    is not level with the centre of the image.

    Args:
        screen_height: Image height in inches.
        bottom_edge: Height of the image bottom above the floor in inches.
        eye_height: Eye level above the floor in inches.
        distance_feet: Horizontal distance from the screen in feet.

    Returns:
        VerticalViewingAngle with top, bottom and total angles.
    """
    distance_inches = distance_feet * INCHES_PER_FOOT
    screen_top = bottom_edge + screen_height

    to_top = abs(_angle_degrees(screen_top - eye_height, distance_inches))
    to_bottom = abs(_angle_degrees(eye_height - bottom_edge, distance_inches))

    return VerticalViewingAngle(to_top=to_top, to_bottom=to_bottom)


def horizontal_viewing_angle(screen_width: float, distance_feet: float) -> float:
    """Calculate the full edge-to-edge horizontal viewing angle in degrees."""
    distance_inches = distance_feet * INCHES_PER_FOOT
    return 2 * _angle_degrees(screen_width / 2, distance_inches)


def screen_fits_room(
    diagonal: float,
    aspect_ratio: AspectRatio,
    room_width_feet: float,
) -> ScreenFit:
    """Check that the screen leaves the minimum side clearance.

    The screen fails to fit when its width exceeds the room width minus
    SCREEN_CLEARANCE_MARGIN.

    Args:
        diagonal: Screen diagonal in inches.
        aspect_ratio: Screen aspect ratio.
        room_width_feet: Room width in feet.

    Returns:
        ScreenFit with the widths involved and the remaining margin.
    """
    screen_width = screen_dimensions(diagonal, aspect_ratio).width
    room_width = room_width_feet * INCHES_PER_FOOT

    return ScreenFit(
        fits=screen_width <= room_width - SCREEN_CLEARANCE_MARGIN,
        screen_width_inches=screen_width,
        room_width_inches=room_width,
        margin_inches=room_width - screen_width,
    )
