"""Conversion from configuration models to application and domain objects."""

from packlista.application.config.schema import BoothConfiguration, StorageConfig
from packlista.application.dtos import BoothInput
from packlista.domain import StorageUnit


def config_to_booth_input(config: BoothConfiguration) -> BoothInput:
    """Convert the booth section of a configuration to a BoothInput DTO."""
    booth = config.booth
    return BoothInput(
        wall_shape=booth.wall_shape.value,
        floor_width=booth.floor_width,
        floor_depth=booth.floor_depth,
        wall_height=booth.wall_height,
    )


def storage_config_to_unit(storage: StorageConfig) -> StorageUnit:
    """Convert one storage configuration, resolving legacy fields."""
    return StorageUnit(
        id=storage.id,
        x=storage.resolved_x,
        z=storage.resolved_z,
        width=storage.resolved_width,
        depth=storage.resolved_depth,
    )


def config_to_storages(config: BoothConfiguration) -> list[StorageUnit]:
    """Convert all storage configurations to domain storage units."""
    return [storage_config_to_unit(s) for s in config.storages]
