"""Validation structures and booth advisory checks.

Schema validation is handled by Pydantic when the configuration is
loaded. This module adds checks that need the packlista rules: wall
heights that no panel stack can reach, storage units that fall back to
default hardware, and placements the engine treats leniently.
"""

from dataclasses import dataclass, field
from typing import Any

from packlista.application.config.adapter import config_to_storages
from packlista.application.config.schema import BoothConfiguration
from packlista.domain.services import (
    FloorGeometry,
    StorageHardwareAllocator,
    build_walls,
    solve_column_stack,
    split_length,
    storage_dimension,
    uses_top_row,
)
from packlista.domain.services.constants import (
    EPS,
    HALF_COLUMN_THRESHOLD,
    STORAGE_HARDWARE,
)
from packlista.domain.value_objects import PlacementKind


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "booth.wall_height")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> None:
        self.errors.append(ValidationError(path=path, message=message, value=value))

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> None:
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )


def check_wall_height(config: BoothConfiguration, result: ValidationResult) -> None:
    """Error if no panel combination reaches the wall height exactly."""
    height = config.booth.wall_height
    if uses_top_row(height):
        return
    if solve_column_stack(height) is None:
        result.add_error(
            path="booth.wall_height",
            message=f"No valid panel combination for height {height:g} m",
            value=height,
        )


def check_wall_remainders(
    config: BoothConfiguration, result: ValidationResult
) -> None:
    """Warn when part of a wall length is too short for a half column."""
    booth = config.booth
    fields = {"back": "booth.floor_width"}
    walls = build_walls(
        booth.wall_shape, booth.floor_width, booth.floor_depth, booth.wall_height
    )
    seen: set[str] = set()
    for wall in walls:
        _, remainder = split_length(wall.length)
        path = fields.get(wall.name.value, "booth.floor_depth")
        if remainder <= 0 or remainder >= HALF_COLUMN_THRESHOLD or path in seen:
            continue
        seen.add(path)
        result.add_warning(
            path=path,
            message=(
                f"{wall.length:g} m leaves {remainder:g} m too short for a "
                f"half column; it is not included in the packing list"
            ),
            suggestion="Use a length in 0.5 m steps",
        )


def check_storages(config: BoothConfiguration, result: ValidationResult) -> None:
    """Warn about storage units the engine handles leniently."""
    booth = config.booth
    walls = build_walls(
        booth.wall_shape, booth.floor_width, booth.floor_depth, booth.wall_height
    )
    floor = FloorGeometry(booth.floor_width, booth.floor_depth)
    allocator = StorageHardwareAllocator(floor, {w.name: w.height for w in walls})
    table_widths = STORAGE_HARDWARE[PlacementKind.STRAIGHT].keys()

    for i, (storage, unit) in enumerate(zip(config.storages, config_to_storages(config))):
        path = f"storages[{i}]"

        for name, value in (("width", unit.width), ("depth", unit.depth)):
            if value < 0.5:
                result.add_warning(
                    path=f"{path}.{name}",
                    message=f"Storage {name} {value:g} m is rounded up to 1 m",
                )

        record = allocator.classify(unit)
        if record.width not in table_widths:
            result.add_warning(
                path=f"{path}.width",
                message=(
                    f"No hardware table entry for width {record.width} m; "
                    f"width 1 hardware is used"
                ),
                suggestion="Use a storage width between 1 and 4 m",
            )

        half_w = storage_dimension(unit.width) / 2
        half_d = storage_dimension(unit.depth) / 2
        if (
            unit.x - half_w < floor.left_x - EPS
            or unit.x + half_w > floor.right_x + EPS
            or unit.z - half_d < floor.back_z - EPS
            or unit.z + half_d > -floor.back_z + EPS
        ):
            result.add_warning(
                path=path,
                message="Storage extends outside the booth floor",
            )

        if not record.is_attached:
            label = storage.id if storage.id is not None else i
            result.add_warning(
                path=path,
                message=f"Storage {label} does not stand against any wall",
                suggestion="Free-standing storage is counted but not listed under a wall",
            )


def validate_config(config: BoothConfiguration) -> ValidationResult:
    """Run all advisory checks on a loaded configuration.

    Args:
        config: Configuration that already passed schema validation.

    Returns:
        ValidationResult with blocking errors and warnings.
    """
    result = ValidationResult()
    check_wall_height(config, result)
    check_wall_remainders(config, result)
    check_storages(config, result)
    return result
