"""Packing list computation endpoints."""

from fastapi import APIRouter, HTTPException

from packlista.application.config import (
    config_to_booth_input,
    config_to_storages,
    load_config_from_dict,
)
from packlista.application.dtos import BoothInput, PacklistaOutput
from packlista.domain import StorageUnit
from packlista.infrastructure import categorize_totals, result_to_dict
from packlista.web.dependencies import PacklistaCommandDep
from packlista.web.exceptions import PacklistaComputationError
from packlista.web.schemas.requests import PacklistaFromConfigRequest, PacklistaRequest
from packlista.web.schemas.responses import PacklistaResponseSchema

router = APIRouter(prefix="/packlista", tags=["packlista"])


def _output_to_schema(output: PacklistaOutput) -> PacklistaResponseSchema:
    """Convert PacklistaOutput to response schema."""
    result = output.result
    assert result is not None
    categories = {
        category: dict(items)
        for category, items in categorize_totals(result.totals).items()
    }
    return PacklistaResponseSchema.model_validate(
        {
            "is_valid": output.is_valid,
            "errors": output.errors,
            "warnings": output.warnings,
            "categories": categories,
            **result_to_dict(result),
        }
    )


@router.post("", response_model=PacklistaResponseSchema)
async def compute_packlista(
    request: PacklistaRequest,
    command: PacklistaCommandDep,
) -> PacklistaResponseSchema:
    """Compute a packing list from booth dimensions.

    Args:
        request: Booth shape, dimensions and storage units.
        command: Injected ComputePacklistaCommand.

    Returns:
        Packing list totals with per-wall details.

    Raises:
        HTTPException: If the booth input is rejected.
    """
    booth_input = BoothInput(
        wall_shape=request.wall_shape.value,
        floor_width=request.floor_width,
        floor_depth=request.floor_depth,
        wall_height=request.wall_height,
    )

    errors = booth_input.validate()
    if errors:
        raise HTTPException(status_code=422, detail={"errors": errors})

    storages = [
        StorageUnit(id=s.id, x=s.x, z=s.z, width=s.width, depth=s.depth)
        for s in request.storages
    ]
    output = command.execute(booth_input, storages)

    if not output.is_valid:
        raise PacklistaComputationError(output.errors)

    return _output_to_schema(output)


@router.post("/from-config", response_model=PacklistaResponseSchema)
async def compute_packlista_from_config(
    request: PacklistaFromConfigRequest,
    command: PacklistaCommandDep,
) -> PacklistaResponseSchema:
    """Compute a packing list from a full booth configuration.

    Args:
        request: Request containing the booth configuration.
        command: Injected ComputePacklistaCommand.

    Returns:
        Packing list totals with per-wall details.

    Raises:
        ConfigError: If the configuration is invalid (handled as HTTP 422).
        PacklistaComputationError: If the computation is rejected.
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config_to_booth_input(config), config_to_storages(config))

    if not output.is_valid:
        raise PacklistaComputationError(output.errors)

    return _output_to_schema(output)
