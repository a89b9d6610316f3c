"""Unit tests for CLI override merging and domain conversion."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from avsafeguard.application.config import (
    ProjectConfiguration,
    config_to_project,
    default_configuration,
    merge_config_with_cli,
)
from avsafeguard.domain.entities import ProjectConfig
from avsafeguard.domain.value_objects import (
    AspectRatio,
    ContentStandard,
    MaskingConfig,
    WallConstruction,
)


@pytest.fixture
def base_config() -> ProjectConfiguration:
    return default_configuration()


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli."""

    def test_no_overrides(self, base_config: ProjectConfiguration) -> None:
        assert merge_config_with_cli(base_config) == base_config

    def test_room_override(self, base_config: ProjectConfiguration) -> None:
        """Only the given dimension changes."""
        merged = merge_config_with_cli(base_config, width=16.0)

        assert merged.room.width == 16.0
        assert merged.room.length == base_config.room.length
        assert merged.room.height == base_config.room.height

    def test_screen_overrides(self, base_config: ProjectConfiguration) -> None:
        merged = merge_config_with_cli(
            base_config,
            screen_size=150,
            aspect_ratio="2.35:1",
            bottom_edge_height=30,
            masking="motorized",
        )

        assert merged.screen.size == 150
        assert merged.screen.aspect_ratio == AspectRatio.SCOPE
        assert merged.screen.bottom_edge_height == 30
        assert merged.screen.masking == MaskingConfig.MOTORIZED

    def test_acoustic_overrides(self, base_config: ProjectConfiguration) -> None:
        merged = merge_config_with_cli(
            base_config, wall_construction="drywall", content_standard="SDR"
        )

        assert merged.wall_construction == WallConstruction.DRYWALL
        assert merged.content_standard == ContentStandard.SDR

    def test_rows_preserved(self, base_config: ProjectConfiguration) -> None:
        merged = merge_config_with_cli(base_config, height=10)

        assert merged.rows == base_config.rows

    def test_original_untouched(self, base_config: ProjectConfiguration) -> None:
        merge_config_with_cli(base_config, width=30)

        assert base_config.room.width == 14

    @pytest.mark.parametrize(
        "overrides",
        [
            {"width": -1.0},
            {"screen_size": 0.0},
            {"aspect_ratio": "4:3"},
            {"wall_construction": "brick"},
        ],
    )
    def test_invalid_override_rejected(
        self, base_config: ProjectConfiguration, overrides: dict
    ) -> None:
        with pytest.raises(PydanticValidationError):
            merge_config_with_cli(base_config, **overrides)


class TestConfigToProject:
    """Tests for config_to_project and default_configuration."""

    def test_default_configuration(self, default_project: ProjectConfig) -> None:
        """The default file configuration converts to the reference project."""
        assert config_to_project(default_configuration()) == default_project

    def test_row_order_preserved(self) -> None:
        config = ProjectConfiguration.model_validate(
            {
                "rows": [
                    {"id": 2, "distance_from_screen": 15},
                    {"id": 1, "distance_from_screen": 11},
                ]
            }
        )

        project = config_to_project(config)

        assert [row.id for row in project.rows] == [2, 1]
        assert isinstance(project.rows, tuple)
