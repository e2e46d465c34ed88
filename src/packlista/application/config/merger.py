"""Configuration merging utilities for CLI override support.

This module merges CLI arguments with configuration file values,
following the precedence: CLI args > config values > defaults.

Only non-None CLI arguments override configuration values.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from packlista.application.config.loader import (
    ConfigError,
    _extract_validation_errors,
    _format_validation_error_message,
)
from packlista.application.config.schema import BoothConfig, BoothConfiguration


def merge_config_with_cli(
    config: BoothConfiguration,
    *,
    wall_shape: str | None = None,
    floor_width: float | None = None,
    floor_depth: float | None = None,
    wall_height: float | None = None,
) -> BoothConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base BoothConfiguration to merge with
        wall_shape: Override for booth.wall_shape (if not None)
        floor_width: Override for booth.floor_width (if not None)
        floor_depth: Override for booth.floor_depth (if not None)
        wall_height: Override for booth.wall_height (if not None)

    Returns:
        A new BoothConfiguration with merged values. Storages are kept.

    Raises:
        ConfigError: If an override falls outside the schema bounds.

    Example:
        >>> config = load_config(Path("booth.json"))
        >>> merged = merge_config_with_cli(config, wall_height=3.0)
        >>> merged.booth.wall_height
        3.0
    """
    booth_data = _build_booth_data(
        config, wall_shape, floor_width, floor_depth, wall_height
    )
    try:
        booth = BoothConfig.model_validate(booth_data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        for detail in details:
            detail["path"] = f"booth.{detail['path']}"
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )

    return BoothConfiguration(
        schema_version=config.schema_version,
        booth=booth,
        storages=list(config.storages),
    )


def _build_booth_data(
    config: BoothConfiguration,
    wall_shape: str | None,
    floor_width: float | None,
    floor_depth: float | None,
    wall_height: float | None,
) -> dict[str, Any]:
    booth = config.booth
    return {
        "wall_shape": wall_shape if wall_shape is not None else booth.wall_shape,
        "floor_width": floor_width if floor_width is not None else booth.floor_width,
        "floor_depth": floor_depth if floor_depth is not None else booth.floor_depth,
        "wall_height": wall_height if wall_height is not None else booth.wall_height,
    }
