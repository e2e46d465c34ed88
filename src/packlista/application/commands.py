"""Application commands (use cases) for packing list computation."""

from __future__ import annotations

import logging
from typing import Iterable

from packlista.domain import PacklistaAggregator, PacklistaResult, StorageUnit

from .dtos import BoothInput, PacklistaOutput

logger = logging.getLogger(__name__)


class ComputePacklistaCommand:
    """Command to compute the packing list for a booth."""

    def __init__(self, aggregator: PacklistaAggregator | None = None) -> None:
        self.aggregator = aggregator or PacklistaAggregator()

    def execute(
        self,
        booth_input: BoothInput,
        storages: Iterable[StorageUnit] | None = None,
    ) -> PacklistaOutput:
        """Execute the packing list computation.

        Args:
            booth_input: Booth shape and dimensions.
            storages: Storage units placed on the booth floor.

        Returns:
            PacklistaOutput with the result, or with errors if the input
            was rejected. Walls that could not be fully built are listed
            in ``warnings``; their totals are still returned.
        """
        errors = booth_input.validate()
        if errors:
            return PacklistaOutput(result=None, errors=errors)

        result = self.aggregator.compute(
            booth_input.wall_shape,
            booth_input.floor_width,
            booth_input.floor_depth,
            booth_input.wall_height,
            list(storages or ()),
        )
        warnings = describe_gaps(result)
        for warning in warnings:
            logger.info(warning)
        return PacklistaOutput(result=result, warnings=warnings)


def describe_gaps(result: PacklistaResult) -> list[str]:
    """Human-readable messages for walls that could not be fully built."""
    messages: list[str] = []
    for name, info in result.per_wall.items():
        if info.infeasible_columns:
            messages.append(
                f"{name.value} wall: no valid panel combination for height "
                f"{info.height:g} m ({len(info.infeasible_columns)} of "
                f"{len(info.columns)} columns)"
            )
        if info.top_row is not None and not info.top_row.has_covering:
            messages.append(
                f"{name.value} wall: no top row covering for length {info.length:g} m"
            )
    return messages
