"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from packlista.web.schemas.common import StorageSchema, WallShapeEnum


class PacklistaRequest(BaseModel):
    """Request for computing a booth packing list."""

    wall_shape: WallShapeEnum = Field(
        default=WallShapeEnum.STRAIGHT, description="Wall configuration"
    )
    floor_width: float = Field(
        ..., gt=0, le=50, description="Floor width in meters (back wall length)"
    )
    floor_depth: float = Field(
        ..., gt=0, le=50, description="Floor depth in meters (side wall length)"
    )
    wall_height: float = Field(
        default=2.5, gt=0, le=10, description="Wall height in meters"
    )
    storages: list[StorageSchema] = Field(
        default_factory=list, max_length=50, description="Storage units on the floor"
    )


class PacklistaFromConfigRequest(BaseModel):
    """Request for computing a packing list from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full booth configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Booth configuration JSON")
