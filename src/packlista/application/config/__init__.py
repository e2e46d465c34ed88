"""Configuration schema and loading system for booth packing lists.

This package provides JSON-based configuration loading and validation.
It includes Pydantic models for schema validation, a loader with
detailed error reporting, and packlista advisory checks.

Public API:
    - BoothConfiguration: Root configuration model
    - BoothConfig: Booth geometry model
    - StorageConfig: Storage unit model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - validate_config: Run advisory checks on a loaded configuration
    - config_to_booth_input: Convert booth geometry to a BoothInput DTO
    - config_to_storages: Convert storages to domain StorageUnit objects
    - merge_config_with_cli: Apply CLI overrides to a loaded configuration

Example:
    >>> from pathlib import Path
    >>> from packlista.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-booth.json"))
    ...     print(f"Booth: {config.booth.floor_width}x{config.booth.floor_depth}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from packlista.application.config.adapter import (
    config_to_booth_input,
    config_to_storages,
    storage_config_to_unit,
)
from packlista.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from packlista.application.config.merger import merge_config_with_cli
from packlista.application.config.schema import (
    SUPPORTED_VERSIONS,
    BoothConfig,
    BoothConfiguration,
    PositionConfig,
    StorageConfig,
)
from packlista.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "BoothConfig",
    "BoothConfiguration",
    "PositionConfig",
    "StorageConfig",
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Merger
    "merge_config_with_cli",
    # Adapter
    "config_to_booth_input",
    "config_to_storages",
    "storage_config_to_unit",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
]
