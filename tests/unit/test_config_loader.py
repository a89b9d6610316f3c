"""Unit tests for the project configuration schema and loader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from avsafeguard.application.config import (
    ConfigError,
    ProjectConfiguration,
    SeatingRowConfig,
    load_config,
    load_config_from_dict,
)
from avsafeguard.application.config.loader import _format_json_path
from avsafeguard.domain.value_objects import (
    AspectRatio,
    ContentStandard,
    MaskingConfig,
    WallConstruction,
)


class TestProjectConfigurationSchema:
    """Tests for the Pydantic schema models."""

    def test_defaults(self) -> None:
        config = ProjectConfiguration(rows=[SeatingRowConfig(id=1, distance_from_screen=12)])

        assert config.schema_version == "1.0"
        assert (config.room.length, config.room.width, config.room.height) == (20, 14, 9)
        assert config.screen.size == 120
        assert config.screen.aspect_ratio == AspectRatio.WIDESCREEN
        assert config.screen.masking == MaskingConfig.FIXED_240
        assert config.rows[0].ear_height == 42
        assert config.rows[0].riser_height == 0
        assert config.wall_construction == WallConstruction.HYBRID
        assert config.content_standard == ContentStandard.HDR

    def test_enum_values_accepted(self) -> None:
        config = ProjectConfiguration.model_validate(
            {
                "screen": {"aspect_ratio": "2.40:1", "masking": "16:9-no-masking"},
                "rows": [{"id": 1, "distance_from_screen": 12}],
                "wall_construction": "mlv-drywall",
                "content_standard": "SDR",
            }
        )

        assert config.screen.aspect_ratio == AspectRatio.ULTRA
        assert config.screen.masking == MaskingConfig.NO_MASKING
        assert config.wall_construction == WallConstruction.MLV_DRYWALL
        assert config.content_standard == ContentStandard.SDR

    def test_rows_required(self) -> None:
        with pytest.raises(PydanticValidationError):
            ProjectConfiguration.model_validate({})

    def test_duplicate_row_ids_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="Duplicate row id 1"):
            ProjectConfiguration.model_validate(
                {
                    "rows": [
                        {"id": 1, "distance_from_screen": 11},
                        {"id": 1, "distance_from_screen": 15},
                    ]
                }
            )

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            ProjectConfiguration.model_validate(
                {"rows": [{"id": 1, "distance_from_screen": 12, "recliner": True}]}
            )

    def test_unknown_enum_value_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            ProjectConfiguration.model_validate(
                {"rows": [{"id": 1, "distance_from_screen": 12}], "wall_construction": "brick"}
            )

    @pytest.mark.parametrize("version", ["1.0", "1.3"])
    def test_supported_versions(self, version: str) -> None:
        config = ProjectConfiguration.model_validate(
            {"schema_version": version, "rows": [{"id": 1, "distance_from_screen": 12}]}
        )

        assert config.schema_version == version

    @pytest.mark.parametrize("version", ["2.0", "one"])
    def test_unsupported_versions(self, version: str) -> None:
        with pytest.raises(PydanticValidationError):
            ProjectConfiguration.model_validate(
                {"schema_version": version, "rows": [{"id": 1, "distance_from_screen": 12}]}
            )


class TestFormatJsonPath:
    """Tests for Pydantic location formatting."""

    @pytest.mark.parametrize(
        "loc,expected",
        [
            (("room", "width"), "room.width"),
            (("rows", 1, "distance_from_screen"), "rows[1].distance_from_screen"),
            ((0,), "[0]"),
        ],
    )
    def test_paths(self, loc: tuple, expected: str) -> None:
        assert _format_json_path(loc) == expected


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_default(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_default.json")

        assert len(config.rows) == 2
        assert config.rows[1].riser_height == 10

    def test_load_minimal(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_minimal.json")

        assert config.room.width == 14
        assert config.rows[0].distance_from_screen == 12

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert exc_info.value.error_type == "file_not_found"
        assert "Config file not found" in str(exc_info.value)

    def test_invalid_json(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_json.json")

        assert exc_info.value.error_type == "json_parse"
        assert "line" in exc_info.value.details[0]

    def test_empty_rows(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "empty_rows.json")

        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "rows"

    def test_invalid_values_reports_each_field(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_values.json")

        paths = {detail["path"] for detail in exc_info.value.details}
        assert paths == {"room.width", "screen.size"}
        assert "(got: -14)" in exc_info.value.message

    def test_unknown_field(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "unknown_field.json")

        assert exc_info.value.details[0]["path"] == "projector"

    def test_load_from_dict(self, fixtures_path: Path) -> None:
        data = json.loads((fixtures_path / "valid_default.json").read_text())

        assert load_config_from_dict(data) == load_config(fixtures_path / "valid_default.json")

    def test_load_from_dict_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"rows": [{"id": 0, "distance_from_screen": 12}]})

        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path is None
        assert exc_info.value.details[0]["path"] == "rows[0].id"
