"""Packing list aggregation for a booth.

This module provides PacklistaAggregator, which builds the walls of a
booth, lays out their columns and top rows, allocates connector and
storage hardware, and sums everything into one totals map.

The aggregator never raises for numeric input: infeasible columns show
up as None stacks on the affected wall, and an unknown booth shape gives
no walls (only storage hardware is counted).
"""

from __future__ import annotations

import logging
from typing import Iterable

from packlista.domain.entities import PacklistaResult, WallInfo
from packlista.domain.value_objects import (
    Column,
    StorageUnit,
    Wall,
    WallName,
    WallShape,
    is_close,
)

from .column_layout import ColumnDecomposer, uses_top_row
from .constants import (
    BASEPLATE,
    CONNECTORS,
    CONNECTORS_PER_JOIN,
    CORNER_90_4PIN,
    CORNERED_BASEPLATE_MIN_PERIMETER,
    CORNERED_BASEPLATES,
    DEFAULT_CONNECTORS_PER_JOIN,
    EPS,
    SHAPE_HARDWARE,
    STRAIGHT_BACK_STORAGE_CORNERS,
    STRAIGHT_BASEPLATES,
    STRAIGHT_BASEPLATES_WIDE,
    STRAIGHT_BASEPLATES_WIDE_MIN_WIDTH,
)
from .storage_hardware import (
    FloorGeometry,
    StorageHardwareAllocator,
    count_back_wall_storages,
)
from .top_row import TopRowSolver, top_row_key

logger = logging.getLogger(__name__)


def _parse_shape(wall_shape: WallShape | str) -> WallShape | None:
    if isinstance(wall_shape, WallShape):
        return wall_shape
    try:
        return WallShape(wall_shape)
    except ValueError:
        return None


def build_walls(
    shape: WallShape | None,
    floor_width: float,
    floor_depth: float,
    wall_height: float,
) -> list[Wall]:
    """Walls of a booth, back wall first.

    Args:
        shape: Booth shape, or None for an unknown shape.
        floor_width: Floor width in meters (back wall length).
        floor_depth: Floor depth in meters (side wall length).
        wall_height: Height shared by all walls in meters.

    Returns:
        List of walls; empty for an unknown shape.
    """
    if shape is None:
        return []
    walls = [Wall(WallName.BACK, floor_width, wall_height)]
    if shape in (WallShape.L, WallShape.U):
        walls.append(Wall(WallName.LEFT, floor_depth, wall_height))
    if shape is WallShape.U:
        walls.append(Wall(WallName.RIGHT, floor_depth, wall_height))
    return walls


def connectors_per_join(height: float) -> int:
    """Connectors needed at each seam for a wall of the given height."""
    for rule_height, per_join in CONNECTORS_PER_JOIN:
        if is_close(height, rule_height, EPS):
            return per_join
    return DEFAULT_CONNECTORS_PER_JOIN


def wall_connectors(column_count: int, height: float) -> int:
    """Connectors for joining the columns of one wall.

    Ordinary walls are charged per join between neighbouring columns;
    3.5m walls are charged per column, since every column also has a
    seam to the top row.
    """
    per_join = connectors_per_join(height)
    if uses_top_row(height):
        return column_count * per_join
    return max(0, column_count - 1) * per_join


def baseplate_count(
    shape: WallShape | None, floor_width: float, floor_depth: float
) -> int:
    """Ballast baseplates for the booth.

    Straight booths use a lookup on the exact floor width; L and U booths
    get one plate once the floor perimeter reaches 6m.
    """
    if shape is WallShape.STRAIGHT:
        if floor_width in STRAIGHT_BASEPLATES:
            return STRAIGHT_BASEPLATES[floor_width]
        if floor_width >= STRAIGHT_BASEPLATES_WIDE_MIN_WIDTH:
            return STRAIGHT_BASEPLATES_WIDE
        return 0
    if shape in (WallShape.L, WallShape.U):
        perimeter = 2 * (floor_width + floor_depth)
        if perimeter >= CORNERED_BASEPLATE_MIN_PERIMETER:
            return CORNERED_BASEPLATES
    return 0


class PacklistaAggregator:
    """Computes the packing list for a booth.

    Stateless apart from its collaborators; every call builds its own
    DP tables and totals.
    """

    def __init__(
        self,
        column_decomposer: ColumnDecomposer | None = None,
        top_row_solver: TopRowSolver | None = None,
    ) -> None:
        self.column_decomposer = column_decomposer or ColumnDecomposer()
        self.top_row_solver = top_row_solver or TopRowSolver()

    def compute(
        self,
        wall_shape: WallShape | str,
        floor_width: float,
        floor_depth: float,
        wall_height: float,
        storages: Iterable[StorageUnit] | None = None,
    ) -> PacklistaResult:
        """Compute the packing list.

        Args:
            wall_shape: "straight", "l" or "u". Unknown shapes yield no walls.
            floor_width: Floor width in meters.
            floor_depth: Floor depth in meters.
            wall_height: Wall height in meters.
            storages: Storage units placed on the floor.

        Returns:
            PacklistaResult with per-wall details and the totals map.
        """
        shape = _parse_shape(wall_shape)
        if shape is None:
            logger.warning(f"Unknown wall shape {wall_shape!r}; no walls built")

        result = PacklistaResult(
            wall_shape=shape.value if shape is not None else str(wall_shape)
        )
        totals = result.totals

        for wall in build_walls(shape, floor_width, floor_depth, wall_height):
            info = self._process_wall(wall, totals)
            result.per_wall[wall.name] = info
            if info.infeasible_columns:
                logger.warning(
                    f"{wall.name.value} wall: no valid panel combination for "
                    f"height {wall.height}m in {len(info.infeasible_columns)} column(s)"
                )

        if shape is not None:
            for key, count in SHAPE_HARDWARE[shape].items():
                _add(totals, key, count)

        self._process_storages(result, floor_width, floor_depth, wall_height, storages)

        if shape is WallShape.STRAIGHT and count_back_wall_storages(
            result.per_wall[WallName.BACK].storages
        ):
            _add(totals, CORNER_90_4PIN, STRAIGHT_BACK_STORAGE_CORNERS)

        plates = baseplate_count(shape, floor_width, floor_depth)
        if plates > 0:
            totals[BASEPLATE] = plates

        logger.debug(f"Packlista for {result.wall_shape} booth: {totals}")
        return result

    def _process_wall(self, wall: Wall, totals: dict[str, int]) -> WallInfo:
        columns = self.column_decomposer.decompose(wall.length, wall.height)
        info = WallInfo(
            name=wall.name,
            length=wall.length,
            height=wall.height,
            columns=columns,
        )
        _add_columns(totals, columns)

        info.connectors = wall_connectors(len(columns), wall.height)
        _add(totals, CONNECTORS, info.connectors)

        if uses_top_row(wall.height):
            info.top_row = self.top_row_solver.solve(wall.length)
            for label, count in info.top_row.pieces.items():
                _add(totals, top_row_key(label), count)
        return info

    def _process_storages(
        self,
        result: PacklistaResult,
        floor_width: float,
        floor_depth: float,
        wall_height: float,
        storages: Iterable[StorageUnit] | None,
    ) -> None:
        allocator = StorageHardwareAllocator(
            FloorGeometry(floor_width, floor_depth),
            {name: info.height for name, info in result.per_wall.items()},
        )
        for unit in storages or ():
            record = allocator.classify(unit)
            if record.attached_wall is not None:
                result.per_wall[record.attached_wall].storages.append(record)
            else:
                result.unattached_storages.append(record)
            for key, count in allocator.allocate(record, wall_height).items():
                _add(result.totals, key, count)


def _add(totals: dict[str, int], key: str, count: int) -> None:
    totals[key] = totals.get(key, 0) + count


def _add_columns(totals: dict[str, int], columns: list[Column]) -> None:
    for column in columns:
        for key, count in column.panel_counts().items():
            _add(totals, key, count)


def compute_packlista(
    wall_shape: WallShape | str,
    floor_width: float,
    floor_depth: float,
    wall_height: float,
    storages: Iterable[StorageUnit] | None = None,
) -> PacklistaResult:
    """Compute a booth packing list with the standard palettes.

    See PacklistaAggregator.compute.
    """
    return PacklistaAggregator().compute(
        wall_shape, floor_width, floor_depth, wall_height, storages
    )
