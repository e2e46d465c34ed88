"""Packlista constants for panel palettes, tolerances and hardware tables.

This module provides:
- Panel height and top-row width palettes
- Fixed-point scale and geometric tolerances
- Connector rules for joins between wall columns
- Storage hardware and frame-section lookup tables
- Shape-level fixed hardware and baseplate rules
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from packlista.domain.value_objects import PlacementKind, StorageHardware, WallShape


# Stackable frame heights in meters, in solver preference order
ALLOWED_HEIGHTS: tuple[float, ...] = (2.5, 3.0, 2.0, 1.5, 1.0, 0.5)

# Top-row piece widths in meters (3.5m walls only)
TOP_WIDTHS: tuple[float, ...] = (3.0, 2.5, 2.0, 1.5, 1.1, 1.0, 0.5)

# Height of the top-row pieces, used in their totals key ("1x3")
TOP_ROW_HEIGHT: float = 1.0

# Panel height preferred when breaking ties between equal-size stacks
PREFERRED_HEIGHT: float = 2.5

# Lengths are scaled to integer tenths of a meter before any DP
SCALE: int = 10

# Absolute tolerance for height and geometry comparisons, in meters
EPS: float = 1e-6

# --- Column layout ---

FULL_COLUMN_WIDTH: float = 1.0
HALF_COLUMN_WIDTH: float = 0.5

# Remainders at or above this become a half column; smaller ones are trim
HALF_COLUMN_THRESHOLD: float = 0.499

# Walls of this height get a fixed 2.5m stack plus a 1.0m top row
TOP_ROW_WALL_HEIGHT: float = 3.5
TOP_ROW_WALL_STACK: Mapping[float, int] = MappingProxyType({2.5: 1})

# --- Connectors between wall columns ---

DEFAULT_CONNECTORS_PER_JOIN: int = 2
CONNECTORS_PER_JOIN: tuple[tuple[float, int], ...] = (
    (2.5, 2),
    (3.0, 3),
    (3.5, 3),
)

# --- Storage hardware (keyed by rounded storage width in meters) ---

STORAGE_HARDWARE: Mapping[PlacementKind, Mapping[int, StorageHardware]] = (
    MappingProxyType(
        {
            PlacementKind.STRAIGHT: MappingProxyType(
                {
                    1: StorageHardware(connectors=0, corner_90_4pin=4, m8_pin=14, t_5pin=2),
                    2: StorageHardware(connectors=2, corner_90_4pin=4, m8_pin=14, t_5pin=2),
                    3: StorageHardware(connectors=4, corner_90_4pin=4, m8_pin=14, t_5pin=2),
                    4: StorageHardware(connectors=6, corner_90_4pin=4, m8_pin=14, t_5pin=2),
                }
            ),
            PlacementKind.CORNER: MappingProxyType(
                {
                    1: StorageHardware(connectors=0, corner_90_4pin=4, m8_pin=20, t_5pin=4),
                    2: StorageHardware(connectors=2, corner_90_4pin=4, m8_pin=20, t_5pin=4),
                    3: StorageHardware(connectors=4, corner_90_4pin=4, m8_pin=20, t_5pin=4),
                    4: StorageHardware(connectors=6, corner_90_4pin=4, m8_pin=20, t_5pin=4),
                }
            ),
        }
    )
)

# Nominal frame sections per storage unit
STORAGE_FRAME_SECTIONS: Mapping[PlacementKind, Mapping[int, int]] = MappingProxyType(
    {
        PlacementKind.STRAIGHT: MappingProxyType({1: 3, 2: 4, 3: 5, 4: 6}),
        PlacementKind.CORNER: MappingProxyType({1: 3, 2: 3, 3: 4, 4: 5}),
    }
)

# Width used when a storage width has no table entry
FALLBACK_STORAGE_WIDTH: int = 1

# Extra connectors per meter of storage width beyond the first
EXTRA_CONNECTORS_PER_WIDTH: int = 2

# Bracing added when a straight booth gets a back-wall storage unit
STRAIGHT_BACK_STORAGE_CORNERS: int = 2

# --- Shape-level hardware ---

SHAPE_HARDWARE: Mapping[WallShape, Mapping[str, int]] = MappingProxyType(
    {
        WallShape.STRAIGHT: MappingProxyType({}),
        WallShape.L: MappingProxyType({"m8_pin": 4}),
        WallShape.U: MappingProxyType({"corner_90_4pin": 4, "m8_pin": 8}),
    }
)

# --- Baseplates ---

# Straight booths: exact floor width -> baseplates; widths >= 5 get 3
STRAIGHT_BASEPLATES: Mapping[float, int] = MappingProxyType({3: 1, 4: 2})
STRAIGHT_BASEPLATES_WIDE_MIN_WIDTH: float = 5
STRAIGHT_BASEPLATES_WIDE: int = 3

# L/U booths: one baseplate once 2 * (width + depth) reaches this
CORNERED_BASEPLATE_MIN_PERIMETER: float = 6
CORNERED_BASEPLATES: int = 1

# Totals keys for hardware
CONNECTORS = "connectors"
CORNER_90_4PIN = "corner_90_4pin"
M8_PIN = "m8_pin"
T_5PIN = "t_5pin"
BASEPLATE = "baseplate"
