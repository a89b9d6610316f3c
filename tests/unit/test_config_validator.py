"""Unit tests for configuration validation and design advisories."""

from __future__ import annotations

from pathlib import Path

from avsafeguard.application.config import (
    ProjectConfiguration,
    RoomConfig,
    ScreenConfigSchema,
    SeatingRowConfig,
    ValidationResult,
    check_design_advisories,
    default_configuration,
    load_config,
    validate_config,
)


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_empty_result(self) -> None:
        result = ValidationResult()

        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warning_exit_code(self) -> None:
        result = ValidationResult().add_warning("room.height", "Low ceiling")

        assert result.is_valid
        assert result.exit_code == 2

    def test_error_exit_code_wins(self) -> None:
        result = ValidationResult().add_warning("rows", "Tight").add_error("room.width", "Bad")

        assert not result.is_valid
        assert result.exit_code == 1

    def test_merge(self) -> None:
        first = ValidationResult().add_error("a", "first")
        second = ValidationResult().add_warning("b", "second", suggestion="fix it")

        merged = first.merge(second)

        assert merged is first
        assert len(merged.errors) == 1
        assert merged.warnings[0].suggestion == "fix it"


class TestDesignAdvisories:
    """Tests for check_design_advisories."""

    def test_default_project_has_no_advisories(self) -> None:
        result = check_design_advisories(default_configuration())

        assert result.warnings == []
        assert result.errors == []

    def test_fixture_with_warnings(self, fixtures_path: Path) -> None:
        """Low ceiling, four rows in a narrow room and a dipping riser."""
        config = load_config(fixtures_path / "valid_with_warnings.json")

        result = check_design_advisories(config)

        assert [w.path for w in result.warnings] == [
            "room.height",
            "rows",
            "rows[2].riser_height",
        ]
        assert all(w.suggestion for w in result.warnings)

    def test_three_rows_in_narrow_room_ok(self) -> None:
        config = ProjectConfiguration(
            room=RoomConfig(width=11),
            screen=ScreenConfigSchema(size=100),
            rows=[
                SeatingRowConfig(id=i, distance_from_screen=8 + 3 * i, riser_height=8 * i)
                for i in range(1, 4)
            ],
        )

        assert check_design_advisories(config).warnings == []

    def test_screen_fit(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "screen_too_wide.json")

        result = check_design_advisories(config)

        assert [w.path for w in result.warnings] == ["screen.size"]

    def test_riser_order_follows_distance(self) -> None:
        """Rows listed back to front are compared in seating order."""
        config = ProjectConfiguration(
            rows=[
                SeatingRowConfig(id=2, distance_from_screen=15, riser_height=10),
                SeatingRowConfig(id=1, distance_from_screen=11, riser_height=0),
            ],
        )

        assert check_design_advisories(config).warnings == []


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid_default(self) -> None:
        result = validate_config(default_configuration())

        assert result.exit_code == 0

    def test_warnings_only(self, fixtures_path: Path) -> None:
        result = validate_config(load_config(fixtures_path / "valid_with_warnings.json"))

        assert result.is_valid
        assert result.exit_code == 2

    def test_domain_error_reported(self) -> None:
        """Values that bypass the schema are still caught by domain validation."""
        config = ProjectConfiguration.model_construct(
            schema_version="1.0",
            room=RoomConfig.model_construct(length=20.0, width=0.0, height=9.0),
            screen=ScreenConfigSchema(),
            rows=[SeatingRowConfig(id=1, distance_from_screen=12)],
            wall_construction=default_configuration().wall_construction,
            content_standard=default_configuration().content_standard,
        )

        result = validate_config(config)

        assert not result.is_valid
        assert result.errors[0].path == "room.width"
        assert result.errors[0].value == 0.0
        assert result.exit_code == 1
