"""Domain layer for the booth packlista engine."""

from .entities import PacklistaResult, WallInfo
from .services import (
    ALLOWED_HEIGHTS,
    TOP_WIDTHS,
    ColumnDecomposer,
    ColumnStackSolver,
    PacklistaAggregator,
    TopRowSolver,
    compute_columns_for_length,
    compute_packlista,
    compute_top_row_pieces,
    solve_column_stack,
)
from .value_objects import (
    Column,
    PlacementKind,
    StorageHardware,
    StorageRecord,
    StorageUnit,
    TopRowResult,
    Wall,
    WallName,
    WallShape,
    format_length,
    panel_key,
)

__all__ = [
    # Value objects
    "Column",
    "PlacementKind",
    "StorageHardware",
    "StorageRecord",
    "StorageUnit",
    "TopRowResult",
    "Wall",
    "WallName",
    "WallShape",
    "format_length",
    "panel_key",
    # Entities
    "PacklistaResult",
    "WallInfo",
    # Services
    "ALLOWED_HEIGHTS",
    "TOP_WIDTHS",
    "ColumnStackSolver",
    "ColumnDecomposer",
    "TopRowSolver",
    "PacklistaAggregator",
    "solve_column_stack",
    "compute_columns_for_length",
    "compute_top_row_pieces",
    "compute_packlista",
]
