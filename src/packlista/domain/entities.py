"""Result entities produced by the packlista aggregator."""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import (
    Column,
    StorageRecord,
    TopRowResult,
    WallName,
    WallShape,
)


@dataclass
class WallInfo:
    """Decomposition of one booth wall.

    Attributes:
        name: Which wall this is.
        length: Wall length in meters.
        height: Wall height in meters.
        columns: Columns from left to right; infeasible columns have a
            None stack and add no panels.
        connectors: Connectors charged for joining this wall's columns.
        top_row: Top-row covering for 3.5m walls, otherwise None.
        storages: Storage units standing against this wall.
    """

    name: WallName
    length: float
    height: float
    columns: list[Column] = field(default_factory=list)
    connectors: int = 0
    top_row: TopRowResult | None = None
    storages: list[StorageRecord] = field(default_factory=list)

    @property
    def infeasible_columns(self) -> list[int]:
        """Indices of columns with no valid panel combination."""
        return [i for i, c in enumerate(self.columns) if not c.is_feasible]

    @property
    def has_gaps(self) -> bool:
        """True if any column or the top row could not be built."""
        if self.infeasible_columns:
            return True
        return self.top_row is not None and not self.top_row.has_covering


@dataclass
class PacklistaResult:
    """Complete packing list for a booth.

    Attributes:
        wall_shape: Booth shape as given by the caller.
        per_wall: Wall decompositions keyed by wall name.
        totals: Totals key -> count. Absent keys mean zero.
        unattached_storages: Storage units not standing against any wall.
    """

    wall_shape: str
    per_wall: dict[WallName, WallInfo] = field(default_factory=dict)
    totals: dict[str, int] = field(default_factory=dict)
    unattached_storages: list[StorageRecord] = field(default_factory=list)

    @property
    def storages(self) -> list[StorageRecord]:
        """All storage records, wall-attached first in wall order."""
        records: list[StorageRecord] = []
        for info in self.per_wall.values():
            records.extend(info.storages)
        records.extend(self.unattached_storages)
        return records

    @property
    def infeasible_walls(self) -> list[WallName]:
        """Walls with at least one column or top row that could not be built."""
        return [name for name, info in self.per_wall.items() if info.has_gaps]

    @property
    def total_pieces(self) -> int:
        """Sum of all counts in the totals."""
        return sum(self.totals.values())

    def count(self, key: str) -> int:
        """Count for a totals key, zero if absent."""
        return self.totals.get(key, 0)

    @property
    def shape(self) -> WallShape | None:
        """Booth shape as an enum, or None if the caller's shape is unknown."""
        try:
            return WallShape(self.wall_shape)
        except ValueError:
            return None
