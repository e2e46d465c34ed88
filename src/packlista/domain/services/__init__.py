"""Packlista domain services.

This package provides the four cooperating packlista algorithms:
- ColumnStackSolver: fewest stacked panels reaching an exact wall height
- ColumnDecomposer: full and half columns along a wall
- TopRowSolver: minimal-waste top-row covering for 3.5m walls
- PacklistaAggregator: walls, connectors, storage hardware and baseplates

plus the shared weighted unbounded coin-change DP they are built on.
"""

from __future__ import annotations

from .coin_change import (
    CoinTable,
    reconstruct_coins,
    solve_unbounded_coins,
    to_units,
)
from .column_layout import (
    ColumnDecomposer,
    compute_columns_for_length,
    split_length,
    uses_top_row,
)
from .column_stack import ColumnStackSolver, solve_column_stack
from .constants import ALLOWED_HEIGHTS, EPS, SCALE, TOP_WIDTHS
from .packlista import (
    PacklistaAggregator,
    baseplate_count,
    build_walls,
    compute_packlista,
    connectors_per_join,
    wall_connectors,
)
from .storage_hardware import (
    FloorGeometry,
    StorageHardwareAllocator,
    storage_dimension,
)
from .top_row import TopRowSolver, compute_top_row_pieces, top_row_key

__all__ = [
    # Constants
    "ALLOWED_HEIGHTS",
    "TOP_WIDTHS",
    "SCALE",
    "EPS",
    # Coin-change DP
    "CoinTable",
    "solve_unbounded_coins",
    "reconstruct_coins",
    "to_units",
    # Column stacks and layout
    "ColumnStackSolver",
    "solve_column_stack",
    "ColumnDecomposer",
    "compute_columns_for_length",
    "split_length",
    "uses_top_row",
    # Top row
    "TopRowSolver",
    "compute_top_row_pieces",
    "top_row_key",
    # Storage hardware
    "FloorGeometry",
    "StorageHardwareAllocator",
    "storage_dimension",
    # Aggregation
    "PacklistaAggregator",
    "compute_packlista",
    "build_walls",
    "connectors_per_join",
    "wall_connectors",
    "baseplate_count",
]
