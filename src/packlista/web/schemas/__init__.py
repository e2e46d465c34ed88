"""Pydantic schemas for the REST API."""

from packlista.web.schemas.common import StorageSchema, WallShapeEnum
from packlista.web.schemas.requests import (
    ConfigValidateRequest,
    PacklistaFromConfigRequest,
    PacklistaRequest,
)
from packlista.web.schemas.responses import (
    ColumnSchema,
    ErrorResponseSchema,
    PacklistaResponseSchema,
    PanelCountSchema,
    StorageRecordSchema,
    TopRowSchema,
    ValidationResultSchema,
    WallInfoSchema,
)

__all__ = [
    # Common
    "StorageSchema",
    "WallShapeEnum",
    # Requests
    "ConfigValidateRequest",
    "PacklistaFromConfigRequest",
    "PacklistaRequest",
    # Responses
    "ColumnSchema",
    "ErrorResponseSchema",
    "PacklistaResponseSchema",
    "PanelCountSchema",
    "StorageRecordSchema",
    "TopRowSchema",
    "ValidationResultSchema",
    "WallInfoSchema",
]
