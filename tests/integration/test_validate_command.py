"""Integration tests for the validate CLI command.

These tests verify the validate command works end-to-end, including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Design advisories are displayed
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from avsafeguard.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_default_config(self, runner: CliRunner) -> None:
        """The reference project passes with exit code 0."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_default.json")])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_valid_minimal_config(self, runner: CliRunner) -> None:
        """A single row with default room and screen passes."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_minimal.json")])

        assert result.exit_code == 0

    def test_warnings_exit_code(self, runner: CliRunner) -> None:
        """Design advisories give exit code 2 and are listed."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "valid_with_warnings.json")]
        )

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "room.height" in result.output
        assert "rows[2].riser_height" in result.output
        assert "Suggestion:" in result.output
        assert "Validation passed with 3 warning(s)" in result.output

    def test_screen_too_wide_is_warning(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "screen_too_wide.json")])

        assert result.exit_code == 2
        assert "screen.size" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        """Non-existent file should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        """Invalid JSON should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line" in result.output

    def test_invalid_values(self, runner: CliRunner) -> None:
        """Each out-of-range field is reported with its value."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_values.json")])

        assert result.exit_code == 1
        assert "room.width" in result.output
        assert "screen.size" in result.output
        assert "Value: -14" in result.output
        assert "Validation failed." in result.output

    def test_empty_rows(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "empty_rows.json")])

        assert result.exit_code == 1
        assert "rows" in result.output

    def test_unknown_field(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "projector" in result.output
