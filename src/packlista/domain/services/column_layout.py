"""Column layout for booth walls.

Splits a wall length into full 1.0m columns plus an optional 0.5m column
and stacks panels in each of them.
"""

from __future__ import annotations

import logging
import math

from packlista.domain.value_objects import Column, is_close, is_finite

from .column_stack import ColumnStackSolver
from .constants import (
    EPS,
    FULL_COLUMN_WIDTH,
    HALF_COLUMN_THRESHOLD,
    HALF_COLUMN_WIDTH,
    TOP_ROW_WALL_HEIGHT,
    TOP_ROW_WALL_STACK,
)

logger = logging.getLogger(__name__)


def split_length(length: float) -> tuple[int, float]:
    """Split a wall length into full columns and a centimeter-rounded remainder.

    Args:
        length: Wall length in meters.

    Returns:
        Tuple of (full column count, remainder in meters). Non-positive and
        non-finite lengths give (0, 0.0).
    """
    if not is_finite(length) or length <= 0:
        return 0, 0.0
    full = math.floor(length / FULL_COLUMN_WIDTH + EPS)
    remainder = math.floor((length - full * FULL_COLUMN_WIDTH) * 100 + 0.5) / 100
    return full, remainder


def uses_top_row(height: float) -> bool:
    """True for wall heights built as a 2.5m stack plus a top row."""
    return is_finite(height) and is_close(height, TOP_ROW_WALL_HEIGHT, EPS)


class ColumnDecomposer:
    """Lays out the columns of a wall, left to right."""

    def __init__(self, stack_solver: ColumnStackSolver | None = None) -> None:
        self.stack_solver = stack_solver or ColumnStackSolver()

    def decompose(self, length: float, height: float) -> list[Column]:
        """Build the ordered column list for a wall.

        Every full column and the optional half column is solved on its
        own; infeasible heights give columns with a None stack.

        Args:
            length: Wall length in meters.
            height: Wall height in meters.

        Returns:
            Columns covering the wall from left to right.
        """
        full, remainder = split_length(length)
        widths = [FULL_COLUMN_WIDTH] * full
        if remainder >= HALF_COLUMN_THRESHOLD:
            widths.append(HALF_COLUMN_WIDTH)

        if uses_top_row(height):
            # The top 1.0m is covered by the top row, not by the stack
            return [Column(width=w, stack=dict(TOP_ROW_WALL_STACK)) for w in widths]

        columns = [Column(width=w, stack=self.stack_solver.solve(height)) for w in widths]
        logger.debug(
            f"Wall {length}m x {height}m: {full} full column(s), "
            f"remainder {remainder}m, {len(columns)} column(s) total"
        )
        return columns


def compute_columns_for_length(length: float, height: float) -> list[Column]:
    """Lay out the columns of a wall with the standard panel palette.

    See ColumnDecomposer.decompose.
    """
    return ColumnDecomposer().decompose(length, height)
