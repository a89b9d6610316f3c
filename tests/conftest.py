"""Pytest configuration and shared fixtures for theater analysis tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from avsafeguard.domain.entities import (
    ProjectConfig,
    RoomDimensions,
    ScreenConfig,
    SeatingRow,
)
from avsafeguard.domain.value_objects import (
    AspectRatio,
    ContentStandard,
    MaskingConfig,
    WallConstruction,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared project fixtures
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON configuration fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def default_room() -> RoomDimensions:
    """20 x 14 x 9 ft room."""
    return RoomDimensions(length=20.0, width=14.0, height=9.0)


@pytest.fixture
def default_screen() -> ScreenConfig:
    """120 in 16:9 screen, 24 in off the floor, fixed masking."""
    return ScreenConfig(
        size=120.0,
        aspect_ratio=AspectRatio.WIDESCREEN,
        bottom_edge_height=24.0,
        masking=MaskingConfig.FIXED_240,
    )


@pytest.fixture
def default_rows() -> tuple[SeatingRow, ...]:
    """Front row at 11 ft on the floor, back row at 15 ft on a 10 in riser."""
    return (
        SeatingRow(id=1, distance_from_screen=11.0, ear_height=42.0, riser_height=0.0),
        SeatingRow(id=2, distance_from_screen=15.0, ear_height=42.0, riser_height=10.0),
    )


@pytest.fixture
def default_project(
    default_room: RoomDimensions,
    default_screen: ScreenConfig,
    default_rows: tuple[SeatingRow, ...],
) -> ProjectConfig:
    """The reference two-row project with hybrid walls and HDR content."""
    return ProjectConfig(
        room=default_room,
        screen=default_screen,
        rows=default_rows,
        wall_construction=WallConstruction.HYBRID,
        content_standard=ContentStandard.HDR,
    )
