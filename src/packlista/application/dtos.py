"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from packlista.domain import PacklistaResult, WallShape

MAX_FLOOR_DIMENSION = 50.0
MAX_WALL_HEIGHT = 10.0


@dataclass
class BoothInput:
    """Input DTO for booth geometry."""

    wall_shape: str
    floor_width: float
    floor_depth: float
    wall_height: float

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        valid_shapes = [s.value for s in WallShape]
        if self.wall_shape not in valid_shapes:
            errors.append(f"Wall shape must be one of: {', '.join(valid_shapes)}")
        for label, value, maximum in (
            ("Floor width", self.floor_width, MAX_FLOOR_DIMENSION),
            ("Floor depth", self.floor_depth, MAX_FLOOR_DIMENSION),
            ("Wall height", self.wall_height, MAX_WALL_HEIGHT),
        ):
            if not math.isfinite(value) or value <= 0:
                errors.append(f"{label} must be positive")
            elif value > maximum:
                errors.append(f"{label} exceeds maximum ({maximum:g} m)")
        return errors


@dataclass
class PacklistaOutput:
    """Output DTO containing the computed packing list.

    Attributes:
        result: Packing list, or None if the input was rejected.
        errors: Input errors that prevented the computation.
        warnings: Gaps in the computed packing list (walls with columns
            or top rows that could not be built).
    """

    result: PacklistaResult | None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the packing list was computed."""
        return self.result is not None and not self.errors

