"""Storage unit classification and hardware allocation.

This module provides StorageHardwareAllocator, which decides whether a
storage unit sits in a back corner, which wall it stands against, and
which hardware and frame sections it adds to the packing list.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Collection, Mapping

from packlista.domain.value_objects import (
    PlacementKind,
    StorageRecord,
    StorageUnit,
    WallName,
    is_close,
    is_finite,
    panel_key,
)

from .constants import (
    CONNECTORS,
    EPS,
    EXTRA_CONNECTORS_PER_WIDTH,
    FALLBACK_STORAGE_WIDTH,
    FULL_COLUMN_WIDTH,
    STORAGE_FRAME_SECTIONS,
    STORAGE_HARDWARE,
    TOP_ROW_HEIGHT,
)

logger = logging.getLogger(__name__)

STANDARD_FRAME_HEIGHT = 2.5
TALL_FRAME_HEIGHT = 3.0
TOP_STRIP_WALL_HEIGHT = 3.5


def storage_dimension(value: float | None) -> int:
    """Round a storage dimension to whole meters, clamped to at least 1.

    Missing and non-finite values count as 1.
    """
    if not is_finite(value):
        return 1
    return max(1, int(math.floor(value + 0.5)))


@dataclass(frozen=True)
class FloorGeometry:
    """Wall lines of a booth floor centered on the origin."""

    width: float
    depth: float

    @property
    def back_z(self) -> float:
        return -self.depth / 2

    @property
    def left_x(self) -> float:
        return -self.width / 2

    @property
    def right_x(self) -> float:
        return self.width / 2


class StorageHardwareAllocator:
    """Classifies storage units and allocates their hardware.

    Attributes:
        floor: Floor geometry the units are placed on.
        walls: Wall name -> wall height for the walls the booth has.
        eps: Tolerance for "touches wall" tests in meters.
    """

    def __init__(
        self,
        floor: FloorGeometry,
        walls: Mapping[WallName, float],
        eps: float = EPS,
    ) -> None:
        self.floor = floor
        self.walls = dict(walls)
        self.eps = eps

    def classify(self, unit: StorageUnit) -> StorageRecord:
        """Build the storage record for a unit.

        Args:
            unit: Storage unit as placed by the caller.

        Returns:
            StorageRecord with placement, attached wall and table entries.
        """
        width = storage_dimension(unit.width)
        depth = storage_dimension(unit.depth)
        x = unit.x if unit.x is not None else 0.0
        z = unit.z if unit.z is not None else 0.0
        half_w = width / 2
        half_d = depth / 2

        corner = self._is_corner(x, z, half_w, half_d)
        kind = PlacementKind.CORNER if corner else PlacementKind.STRAIGHT
        attached = self._attached_wall(x, z, half_w, half_d)

        hardware_table = STORAGE_HARDWARE[kind]
        hardware = hardware_table.get(width, hardware_table[FALLBACK_STORAGE_WIDTH])
        frame_table = STORAGE_FRAME_SECTIONS[kind]
        if width in frame_table:
            frame_sections = frame_table[width]
        else:
            frame_sections = STORAGE_FRAME_SECTIONS[PlacementKind.STRAIGHT][
                FALLBACK_STORAGE_WIDTH
            ]

        logger.debug(
            f"Storage {unit.id!r} {width}x{depth} at ({x}, {z}): "
            f"{kind.value}, attached to {attached.value if attached else 'none'}"
        )
        return StorageRecord(
            id=unit.id,
            width=width,
            depth=depth,
            corner_placement=corner,
            attached_wall=attached,
            placement_kind=kind,
            hardware=hardware,
            frame_sections=frame_sections,
        )

    def _is_corner(self, x: float, z: float, half_w: float, half_d: float) -> bool:
        if not is_close(z - half_d, self.floor.back_z, self.eps):
            return False
        return is_close(x - half_w, self.floor.left_x, self.eps) or is_close(
            x + half_w, self.floor.right_x, self.eps
        )

    def _attached_wall(
        self, x: float, z: float, half_w: float, half_d: float
    ) -> WallName | None:
        checks = (
            (WallName.LEFT, (x - half_w, x + half_w), self.floor.left_x),
            (WallName.RIGHT, (x - half_w, x + half_w), self.floor.right_x),
            (WallName.BACK, (z - half_d, z + half_d), self.floor.back_z),
        )
        for name, edges, line in checks:
            if name not in self.walls:
                continue
            if any(is_close(edge, line, self.eps) for edge in edges):
                return name
        return None

    def allocate(self, record: StorageRecord, default_height: float) -> dict[str, int]:
        """Hardware and frame sections a classified unit adds to the totals.

        Args:
            record: Classified storage unit.
            default_height: Wall height used for free-standing units.

        Returns:
            Totals key -> count to add, in insertion order.
        """
        additions: dict[str, int] = dict(record.hardware.as_totals())

        extra = max(0, record.width - 1) * EXTRA_CONNECTORS_PER_WIDTH
        if extra > 0:
            additions[CONNECTORS] += extra

        height = default_height
        if record.attached_wall is not None and record.attached_wall in self.walls:
            height = self.walls[record.attached_wall]

        if record.attached_wall is WallName.BACK and not record.corner_placement:
            frames = self._back_wall_frames(height, record.frame_sections)
        else:
            frames = self._frames(height, record.frame_sections)
        for key, count in frames.items():
            additions[key] = additions.get(key, 0) + count
        return additions

    def _back_wall_frames(self, height: float, frame_sections: int) -> dict[str, int]:
        if is_close(height, STANDARD_FRAME_HEIGHT, self.eps):
            return {_frame_key(STANDARD_FRAME_HEIGHT): 1}
        if is_close(height, TALL_FRAME_HEIGHT, self.eps):
            return {_frame_key(TALL_FRAME_HEIGHT): 1}
        if is_close(height, TOP_STRIP_WALL_HEIGHT, self.eps):
            return {_frame_key(STANDARD_FRAME_HEIGHT): 1, _frame_key(TOP_ROW_HEIGHT): 1}
        return {_frame_key(STANDARD_FRAME_HEIGHT): frame_sections}

    def _frames(self, height: float, frame_sections: int) -> dict[str, int]:
        if is_close(height, TALL_FRAME_HEIGHT, self.eps):
            return {_frame_key(TALL_FRAME_HEIGHT): frame_sections}
        if is_close(height, TOP_STRIP_WALL_HEIGHT, self.eps):
            return {
                _frame_key(STANDARD_FRAME_HEIGHT): frame_sections,
                _frame_key(TOP_ROW_HEIGHT): frame_sections,
            }
        return {_frame_key(STANDARD_FRAME_HEIGHT): frame_sections}


def _frame_key(height: float) -> str:
    return panel_key(height, FULL_COLUMN_WIDTH)


def count_back_wall_storages(records: Collection[StorageRecord]) -> int:
    """Number of records attached to the back wall."""
    return sum(1 for r in records if r.attached_wall is WallName.BACK)
