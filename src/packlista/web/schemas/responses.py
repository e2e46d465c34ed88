"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PanelCountSchema(BaseModel):
    """Panels of one height in a column stack."""

    height: float = Field(..., description="Panel height in meters")
    count: int = Field(..., description="Number of panels")


class ColumnSchema(BaseModel):
    """One column of a wall."""

    width: float = Field(..., description="Column width in meters")
    stack: list[PanelCountSchema] | None = Field(
        default=None, description="Panel stack, or null if no combination exists"
    )


class TopRowSchema(BaseModel):
    """Top-row covering of a 3.5m wall."""

    pieces: dict[str, int] = Field(
        default_factory=dict, description="Piece width label to count"
    )
    waste: float | None = Field(
        default=None, description="Overshoot in meters, or null if not covered"
    )


class StorageRecordSchema(BaseModel):
    """Classified storage unit with its table entries."""

    id: str | int | None = Field(default=None, description="Storage identifier")
    width: int = Field(..., description="Rounded width in meters")
    depth: int = Field(..., description="Rounded depth in meters")
    corner_placement: bool = Field(..., description="Whether it sits in a back corner")
    attached_wall: str | None = Field(
        default=None, description="Wall the unit stands against"
    )
    placement_kind: str = Field(..., description="Hardware table used")
    hardware: dict[str, int] = Field(..., description="Hardware counts from the table")
    frame_sections: int = Field(..., description="Nominal frame sections")


class WallInfoSchema(BaseModel):
    """Decomposition of one booth wall."""

    length: float = Field(..., description="Wall length in meters")
    height: float = Field(..., description="Wall height in meters")
    columns: list[ColumnSchema] = Field(default_factory=list, description="Columns")
    infeasible_columns: list[int] = Field(
        default_factory=list, description="Indices of columns with no panel stack"
    )
    connectors: int = Field(default=0, description="Connectors for this wall")
    top_row: TopRowSchema | None = Field(default=None, description="Top row, 3.5m walls")
    storages: list[StorageRecordSchema] = Field(
        default_factory=list, description="Storage units against this wall"
    )


class PacklistaResponseSchema(BaseModel):
    """Response for packing list computation."""

    is_valid: bool = Field(..., description="Whether computation was successful")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    warnings: list[str] = Field(
        default_factory=list, description="Walls that could not be fully built"
    )
    wall_shape: str = Field(..., description="Booth wall shape")
    totals: dict[str, int] = Field(default_factory=dict, description="Item key to count")
    categories: dict[str, dict[str, int]] = Field(
        default_factory=dict, description="Totals grouped into frames, hardware, other"
    )
    per_wall: dict[str, WallInfoSchema] = Field(
        default_factory=dict, description="Wall decompositions by wall name"
    )
    unattached_storages: list[StorageRecordSchema] = Field(
        default_factory=list, description="Storage units not against any wall"
    )


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
