"""Unit tests for entry-point project validation."""

from __future__ import annotations

import math
from dataclasses import replace

import pytest

from avsafeguard.domain.entities import ProjectConfig, RoomDimensions, SeatingRow
from avsafeguard.domain.errors import (
    ConfigurationMissingError,
    EmptySeatingPlanError,
    InvalidRoomDimensionsError,
    InvalidRowError,
    InvalidScreenSizeError,
    ProjectValidationError,
)
from avsafeguard.domain.services.analysis import validate_project


class TestValidateProject:
    """Tests for validate_project."""

    def test_valid_project_returned(self, default_project: ProjectConfig) -> None:
        assert validate_project(default_project) is default_project

    def test_missing_configuration(self) -> None:
        with pytest.raises(ConfigurationMissingError) as exc_info:
            validate_project(None)

        assert exc_info.value.field == "config"
        assert exc_info.value.error_type == "configuration_missing"

    @pytest.mark.parametrize("dimension", ["length", "width", "height"])
    @pytest.mark.parametrize("value", [0.0, -1.0, math.nan, math.inf])
    def test_bad_room_dimension(
        self, default_project: ProjectConfig, dimension: str, value: float
    ) -> None:
        room = replace(default_project.room, **{dimension: value})

        with pytest.raises(InvalidRoomDimensionsError) as exc_info:
            validate_project(replace(default_project, room=room))

        assert exc_info.value.field == f"room.{dimension}"

    @pytest.mark.parametrize("size", [0.0, -120.0, math.nan])
    def test_bad_screen_size(self, default_project: ProjectConfig, size: float) -> None:
        screen = replace(default_project.screen, size=size)

        with pytest.raises(InvalidScreenSizeError) as exc_info:
            validate_project(replace(default_project, screen=screen))

        assert exc_info.value.field == "screen.size"

    def test_empty_rows(self, default_project: ProjectConfig) -> None:
        with pytest.raises(EmptySeatingPlanError):
            validate_project(replace(default_project, rows=()))

    def test_room_checked_before_rows(self, default_project: ProjectConfig) -> None:
        """The first violation in check order is the one raised."""
        project = replace(
            default_project,
            room=RoomDimensions(length=20, width=0, height=9),
            rows=(),
        )

        with pytest.raises(InvalidRoomDimensionsError):
            validate_project(project)

    @pytest.mark.parametrize(
        "row",
        [
            SeatingRow(id=2, distance_from_screen=-1, ear_height=42),
            SeatingRow(id=2, distance_from_screen=15, ear_height=-1),
            SeatingRow(id=2, distance_from_screen=math.nan, ear_height=42),
            SeatingRow(id=2, distance_from_screen=15, ear_height=42, riser_height=math.inf),
        ],
    )
    def test_bad_row(self, default_project: ProjectConfig, row: SeatingRow) -> None:
        """Row errors report the 1-based position in the supplied list."""
        project = replace(default_project, rows=(default_project.rows[0], row))

        with pytest.raises(InvalidRowError) as exc_info:
            validate_project(project)

        assert exc_info.value.position == 2
        assert exc_info.value.field == "rows[1]"
        assert exc_info.value.message == "Row 2 has invalid dimensions"

    def test_zero_distance_allowed(self, default_project: ProjectConfig) -> None:
        row = SeatingRow(id=1, distance_from_screen=0, ear_height=42)

        validate_project(replace(default_project, rows=(row,)))

    def test_duplicate_row_id(self, default_project: ProjectConfig) -> None:
        rows = (
            SeatingRow(id=1, distance_from_screen=11, ear_height=42),
            SeatingRow(id=1, distance_from_screen=15, ear_height=42, riser_height=10),
        )

        with pytest.raises(InvalidRowError, match="duplicates row id 1"):
            validate_project(replace(default_project, rows=rows))

    def test_errors_share_base_class(self) -> None:
        """Callers can catch every validation failure as a ValueError."""
        assert issubclass(InvalidRowError, ProjectValidationError)
        assert issubclass(ProjectValidationError, ValueError)
