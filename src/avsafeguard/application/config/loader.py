"""Reading theater project files.

Every failure on the way from a path to a ProjectConfiguration surfaces as
ConfigError, tagged with an error_type the CLI and the API switch on:
"file_not_found", "permission_denied", "file_read_error", "json_parse" or
"validation".
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from avsafeguard.application.config.schema import ProjectConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A project file or payload that could not be turned into a configuration.

    Attributes:
        message: Human-readable summary, also the exception text.
        error_type: Failure category (see module docstring).
        path: Source file, or None for in-memory payloads.
        details: One dict per problem. JSON errors carry line/column/message;
            schema errors carry path/message/value/error_type.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a Pydantic error location, e.g. ("rows", 1, "id") -> "rows[1].id"."""
    rendered = ""
    for segment in loc:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = str(segment)
    return rendered


def _schema_problems(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(problem["loc"]),
            "message": problem["msg"],
            "value": problem.get("input"),
            "error_type": problem["type"],
        }
        for problem in error.errors()
    ]


def _describe_problem(problem: dict[str, Any]) -> str:
    value = problem.get("value")
    # Nested inputs would repeat the whole offending section
    if value is None or isinstance(value, (dict, list)):
        return f"  - {problem['path']}: {problem['message']}"
    return f"  - {problem['path']}: {problem['message']} (got: {value!r})"


def _validate(data: Any, path: Path | None = None) -> ProjectConfiguration:
    try:
        return ProjectConfiguration.model_validate(data)
    except PydanticValidationError as e:
        problems = _schema_problems(e)
        logger.debug(f"Project {path or '<payload>'} has {len(problems)} schema problems")
        summary = "\n".join(
            ["Configuration validation failed:", *map(_describe_problem, problems)]
        )
        raise ConfigError(summary, error_type="validation", path=path, details=problems)


def load_config(path: Path) -> ProjectConfiguration:
    """Read a theater project from a JSON file.

    Args:
        path: Project file location.

    Returns:
        The validated project configuration.

    Raises:
        ConfigError: When the file is missing or unreadable, is not JSON,
            or does not match the project schema.
    """
    logger.debug(f"Reading theater project {path}")

    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}", error_type="file_not_found", path=path
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            f"Cannot read project file (permission denied): {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            f"Cannot read project file {path}: {e}", error_type="file_read_error", path=path
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Project file {path} is not valid JSON at line {e.lineno}, column {e.colno}: {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> ProjectConfiguration:
    """Validate an already-parsed project, such as an API request body."""
    return _validate(data)
