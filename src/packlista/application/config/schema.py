"""Pydantic models for booth configuration files.

A configuration file describes one booth: its wall shape, floor
dimensions, wall height and the storage units placed on the floor.

Example:
    {
        "schema_version": "1.0",
        "booth": {"wall_shape": "u", "floor_width": 4, "floor_depth": 3,
                  "wall_height": 3.0},
        "storages": [{"id": "s1", "x": -1.5, "z": -1.0, "width": 1, "depth": 1}]
    }
"""

import math

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from packlista.domain.value_objects import WallShape

# Supported schema versions for configuration files
# Version 1.0: Initial booth schema with storages
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class BoothConfig(BaseModel):
    """Booth geometry.

    Attributes:
        wall_shape: Wall configuration ("straight", "l" or "u")
        floor_width: Floor width in meters (back wall length)
        floor_depth: Floor depth in meters (side wall length)
        wall_height: Height of all walls in meters
    """

    model_config = ConfigDict(extra="forbid")

    wall_shape: WallShape = WallShape.STRAIGHT
    floor_width: float = Field(..., gt=0.0, le=50.0)
    floor_depth: float = Field(..., gt=0.0, le=50.0)
    wall_height: float = Field(default=2.5, gt=0.0, le=10.0)


class PositionConfig(BaseModel):
    """Legacy nested position of a storage unit."""

    model_config = ConfigDict(extra="ignore")

    x: float = 0.0
    z: float = 0.0


class StorageConfig(BaseModel):
    """A storage unit placed on the booth floor.

    Position is the unit's center with the origin at the floor center.
    Older exports nest the position under ``position`` and store the
    width as ``type``; both are accepted.

    Attributes:
        id: Optional identifier, echoed back in the packing list
        x: Center x in meters
        z: Center z in meters
        width: Width along x in meters (rounded to whole meters)
        depth: Depth along z in meters (rounded to whole meters)
        position: Legacy nested position, used when x/z are absent
        type: Legacy width field, used when width is absent
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str | int | None = None
    x: float | None = None
    z: float | None = None
    width: float | None = None
    depth: float | None = None
    position: PositionConfig | None = None
    legacy_type: float | None = Field(default=None, alias="type")

    @field_validator("x", "z", "width", "depth", "legacy_type")
    @classmethod
    def validate_finite(cls, v: float | None) -> float | None:
        """Reject infinities and NaN."""
        if v is not None and not math.isfinite(v):
            raise ValueError("must be a finite number")
        return v

    @property
    def resolved_x(self) -> float:
        """Center x, falling back to the legacy position and then 0."""
        if self.x is not None:
            return self.x
        if self.position is not None:
            return self.position.x
        return 0.0

    @property
    def resolved_z(self) -> float:
        """Center z, falling back to the legacy position and then 0."""
        if self.z is not None:
            return self.z
        if self.position is not None:
            return self.position.z
        return 0.0

    @property
    def resolved_width(self) -> float:
        """Width, falling back to the legacy ``type`` field and then 1."""
        if self.width is not None:
            return self.width
        if self.legacy_type is not None:
            return self.legacy_type
        return 1.0

    @property
    def resolved_depth(self) -> float:
        """Depth, defaulting to 1."""
        return self.depth if self.depth is not None else 1.0


class BoothConfiguration(BaseModel):
    """Root configuration model for booth packing lists.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        booth: Booth geometry
        storages: Storage units placed on the floor (up to 50)
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    booth: BoothConfig
    storages: list[StorageConfig] = Field(default_factory=list, max_length=50)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
