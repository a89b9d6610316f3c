"""Configuration schema and loading system for theater project files.

This package provides JSON-based configuration loading and validation. It
includes Pydantic models for schema validation, a configuration loader with
error handling, CLI override merging, conversion to domain objects, and
theater design advisory checks.

Public API:
    - ProjectConfiguration: Root configuration model
    - RoomConfig: Room dimensions model
    - ScreenConfigSchema: Screen configuration model
    - SeatingRowConfig: Seating row model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - config_to_project: Convert a configuration to a domain ProjectConfig
    - default_configuration: The default two-row project
    - ValidationResult: Container for validation results
    - validate_config: Perform full configuration validation

Example:
    >>> from pathlib import Path
    >>> from avsafeguard.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("theater.json"))
    ...     print(f"Rows: {len(config.rows)}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from avsafeguard.application.config.adapter import config_to_project, default_configuration
from avsafeguard.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from avsafeguard.application.config.merger import merge_config_with_cli
from avsafeguard.application.config.schema import (
    SUPPORTED_VERSIONS,
    ProjectConfiguration,
    RoomConfig,
    ScreenConfigSchema,
    SeatingRowConfig,
)
from avsafeguard.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_design_advisories,
    validate_config,
)

__all__ = [
    # Schema models
    "ProjectConfiguration",
    "RoomConfig",
    "ScreenConfigSchema",
    "SeatingRowConfig",
    "SUPPORTED_VERSIONS",
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Merger and adapter
    "config_to_project",
    "default_configuration",
    "merge_config_with_cli",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_design_advisories",
    "validate_config",
]
