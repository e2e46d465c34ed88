"""Value objects for the packlista domain.

This module provides the immutable data types shared by the packlista
algorithms: wall and booth enums, walls, columns, top-row coverings and
storage units. All lengths are in meters.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


class WallName(str, Enum):
    """Walls a booth can carry, named from the visitor's point of view."""

    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


class WallShape(str, Enum):
    """Booth wall configurations.

    - STRAIGHT: Back wall only
    - L: Back wall plus left wall
    - U: Back, left and right walls
    """

    STRAIGHT = "straight"
    L = "l"
    U = "u"


class PlacementKind(str, Enum):
    """How a storage unit sits relative to the booth walls."""

    STRAIGHT = "straight"
    CORNER = "corner"


def format_length(value: float) -> str:
    """Format a length in meters as a catalog label.

    Whole numbers drop the decimal part so that labels match the
    catalog naming ("3x1", "2.5x0.5").

    Examples:
        >>> format_length(3.0)
        '3'
        >>> format_length(2.5)
        '2.5'
    """
    return f"{value:g}"


def panel_key(height: float, width: float) -> str:
    """Totals key for a frame panel of the given height and width."""
    return f"{format_length(height)}x{format_length(width)}"


@dataclass(frozen=True)
class Wall:
    """A booth wall to be built from stacked panel columns.

    Attributes:
        name: Which wall of the booth this is.
        length: Wall length in meters.
        height: Wall height in meters.
    """

    name: WallName
    length: float
    height: float


@dataclass(frozen=True)
class Column:
    """One vertical slice of a wall.

    Attributes:
        width: Column width in meters (1.0 or 0.5).
        stack: Panel height -> count, bottom to top in solver order.
            None when no exact panel combination reaches the wall height.
    """

    width: float
    stack: dict[float, int] | None

    @property
    def is_feasible(self) -> bool:
        """True if the column has a panel stack."""
        return self.stack is not None

    @property
    def piece_count(self) -> int:
        """Number of panels in the stack (0 for infeasible columns)."""
        if self.stack is None:
            return 0
        return sum(self.stack.values())

    @property
    def stacked_height(self) -> float:
        """Sum of stacked panel heights in meters."""
        if self.stack is None:
            return 0.0
        return sum(height * count for height, count in self.stack.items())

    def panel_counts(self) -> dict[str, int]:
        """Stack contents keyed by totals key ("2.5x1")."""
        if self.stack is None:
            return {}
        return {
            panel_key(height, self.width): count
            for height, count in self.stack.items()
        }


@dataclass(frozen=True)
class TopRowResult:
    """Covering of a wall length by top-row pieces.

    Attributes:
        pieces: Top width label ("3", "1.1") -> count.
        waste: Overshoot in meters, or None if no covering was found.
    """

    pieces: dict[str, int] = field(default_factory=dict)
    waste: float | None = None

    @property
    def has_covering(self) -> bool:
        """True if a covering was found."""
        return self.waste is not None

    @property
    def piece_count(self) -> int:
        """Total number of top-row pieces."""
        return sum(self.pieces.values())


@dataclass(frozen=True)
class StorageUnit:
    """A storage box placed on the booth floor.

    Position is the unit's center in floor coordinates with the origin at
    the floor center; the back wall lies at z = -floor_depth / 2.

    Attributes:
        id: Caller-supplied identifier, if any.
        x: Center x in meters.
        z: Center z in meters.
        width: Width along x in meters (rounded to whole meters).
        depth: Depth along z in meters (rounded to whole meters).
    """

    id: str | int | None = None
    x: float = 0.0
    z: float = 0.0
    width: float = 1.0
    depth: float = 1.0


@dataclass(frozen=True)
class StorageHardware:
    """Hardware counts for one storage unit."""

    connectors: int = 0
    corner_90_4pin: int = 0
    m8_pin: int = 0
    t_5pin: int = 0

    def as_totals(self) -> dict[str, int]:
        """Counts keyed by totals key, in catalog order."""
        return {
            "connectors": self.connectors,
            "corner_90_4pin": self.corner_90_4pin,
            "m8_pin": self.m8_pin,
            "t_5pin": self.t_5pin,
        }


@dataclass(frozen=True)
class StorageRecord:
    """Classification and hardware allocation for one storage unit.

    Attributes:
        id: Identifier copied from the input unit.
        width: Rounded width in whole meters (at least 1).
        depth: Rounded depth in whole meters (at least 1).
        corner_placement: True if the unit sits in a back corner.
        attached_wall: Wall the unit stands against, or None if free-standing.
        placement_kind: Lookup table used for the hardware counts.
        hardware: Connector, bracket and pin counts from the lookup table.
        frame_sections: Nominal frame section count from the lookup table.
    """

    id: str | int | None
    width: int
    depth: int
    corner_placement: bool
    attached_wall: WallName | None
    placement_kind: PlacementKind
    hardware: StorageHardware
    frame_sections: int

    @property
    def is_attached(self) -> bool:
        """True if the unit stands against one of the booth walls."""
        return self.attached_wall is not None


def is_close(a: float, b: float, eps: float) -> bool:
    """Absolute-tolerance comparison used for all geometric tests."""
    return abs(a - b) < eps


def is_finite(value: float | None) -> bool:
    """True for real, finite numbers."""
    return value is not None and math.isfinite(value)
