"""Unit tests for configuration schema, loader and adapter."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from packlista.application.config import (
    BoothConfiguration,
    ConfigError,
    StorageConfig,
    config_to_booth_input,
    config_to_storages,
    load_config,
    load_config_from_dict,
)
from packlista.domain import StorageUnit, WallShape


def _write(tmp_path: Path, data: object, name: str = "booth.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestBoothConfiguration:
    """Tests for the root configuration model."""

    def test_minimal_config_defaults(self) -> None:
        config = BoothConfiguration.model_validate(
            {"schema_version": "1.0", "booth": {"floor_width": 3, "floor_depth": 2}}
        )

        assert config.booth.wall_shape is WallShape.STRAIGHT
        assert config.booth.wall_height == 2.5
        assert config.storages == []

    def test_newer_minor_version_accepted(self) -> None:
        config = BoothConfiguration.model_validate(
            {"schema_version": "1.3", "booth": {"floor_width": 3, "floor_depth": 2}}
        )

        assert config.schema_version == "1.3"

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            BoothConfiguration.model_validate(
                {"schema_version": "2.0", "booth": {"floor_width": 3, "floor_depth": 2}}
            )

    @pytest.mark.parametrize(
        "booth",
        [
            {"floor_width": 0, "floor_depth": 2},
            {"floor_width": 51, "floor_depth": 2},
            {"floor_width": 3, "floor_depth": 2, "wall_height": 11},
            {"floor_width": 3, "floor_depth": 2, "wall_shape": "o"},
            {"floor_width": 3, "floor_depth": 2, "color": "red"},
        ],
    )
    def test_invalid_booth(self, booth: dict) -> None:
        with pytest.raises(ValidationError):
            BoothConfiguration.model_validate({"schema_version": "1.0", "booth": booth})

    def test_too_many_storages(self) -> None:
        with pytest.raises(ValidationError):
            BoothConfiguration.model_validate(
                {
                    "schema_version": "1.0",
                    "booth": {"floor_width": 3, "floor_depth": 2},
                    "storages": [{}] * 51,
                }
            )


class TestStorageConfig:
    """Tests for storage entries, including legacy fields."""

    def test_defaults(self) -> None:
        storage = StorageConfig()

        assert (storage.resolved_x, storage.resolved_z) == (0.0, 0.0)
        assert (storage.resolved_width, storage.resolved_depth) == (1.0, 1.0)

    def test_legacy_position_and_type(self) -> None:
        storage = StorageConfig.model_validate(
            {"id": 3, "position": {"x": -1.5, "z": -1.0, "y": 0}, "type": 2}
        )

        assert storage.resolved_x == -1.5
        assert storage.resolved_z == -1.0
        assert storage.resolved_width == 2

    def test_flat_fields_win_over_legacy(self) -> None:
        storage = StorageConfig.model_validate(
            {"x": 1.0, "position": {"x": 9.0, "z": 9.0}, "width": 3, "type": 2}
        )

        assert storage.resolved_x == 1.0
        assert storage.resolved_z == 9.0
        assert storage.resolved_width == 3

    def test_rejects_non_finite(self) -> None:
        with pytest.raises(ValidationError, match="finite"):
            StorageConfig(x=float("inf"))


class TestLoadConfig:
    """Tests for loading configuration files."""

    def test_load_valid_file(self, tmp_path: Path, booth_config_data: dict) -> None:
        config = load_config(_write(tmp_path, booth_config_data))

        assert config.booth.floor_width == 3
        assert config.storages[0].id == "s1"

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": "1.0",', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "json_parse"
        assert "line" in exc_info.value.details[0]

    def test_validation_error_paths(self, tmp_path: Path) -> None:
        data = {
            "schema_version": "1.0",
            "booth": {"floor_width": 3, "floor_depth": 2},
            "storages": [{"width": "wide"}],
        }

        with pytest.raises(ConfigError) as exc_info:
            load_config(_write(tmp_path, data))

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "storages[0].width"
        assert error.details[0]["value"] == "wide"
        assert "storages[0].width" in str(error)

    def test_load_from_dict(self, booth_config_data: dict) -> None:
        config = load_config_from_dict(booth_config_data)

        assert config.booth.wall_height == 3.0

    def test_load_from_dict_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "1.0"})

        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "booth"


class TestConfigAdapter:
    """Tests for converting configuration to DTOs and domain objects."""

    def test_booth_input(self, booth_config_data: dict) -> None:
        booth_input = config_to_booth_input(load_config_from_dict(booth_config_data))

        assert booth_input.wall_shape == "straight"
        assert booth_input.floor_width == 3
        assert booth_input.floor_depth == 2
        assert booth_input.wall_height == 3.0
        assert booth_input.validate() == []

    def test_storages(self, booth_config_data: dict) -> None:
        booth_config_data["storages"].append({"position": {"x": 1, "z": 0}, "type": 2})

        storages = config_to_storages(load_config_from_dict(booth_config_data))

        assert storages == [
            StorageUnit(id="s1", x=0, z=-0.5, width=1, depth=1),
            StorageUnit(id=None, x=1, z=0, width=2, depth=1.0),
        ]
