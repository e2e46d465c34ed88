"""Common Pydantic schemas shared across requests and responses."""

from enum import Enum

from pydantic import BaseModel, Field


class WallShapeEnum(str, Enum):
    """Booth wall configuration options."""

    STRAIGHT = "straight"
    L = "l"
    U = "u"


class StorageSchema(BaseModel):
    """Storage unit placed on the booth floor - mirrors domain StorageUnit."""

    id: str | int | None = Field(default=None, description="Optional identifier")
    x: float = Field(default=0.0, allow_inf_nan=False, description="Center x in meters")
    z: float = Field(default=0.0, allow_inf_nan=False, description="Center z in meters")
    width: float = Field(
        default=1.0, allow_inf_nan=False, description="Width in meters (rounded)"
    )
    depth: float = Field(
        default=1.0, allow_inf_nan=False, description="Depth in meters (rounded)"
    )
