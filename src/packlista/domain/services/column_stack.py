"""Panel stacking for a single wall column.

This module provides ColumnStackSolver, which finds the fewest stacked
frame panels whose heights sum exactly to a wall height, preferring
2.5m panels among equally short stacks.
"""

from __future__ import annotations

import logging
from typing import Sequence

from packlista.domain.value_objects import is_finite

from .coin_change import reconstruct_coins, solve_unbounded_coins, to_units
from .constants import ALLOWED_HEIGHTS, PREFERRED_HEIGHT

logger = logging.getLogger(__name__)


class ColumnStackSolver:
    """Solves exact-height panel stacks.

    Attributes:
        heights: Available panel heights in meters, in preference order.
        preferred: Height favoured when piece counts tie.
    """

    def __init__(
        self,
        heights: Sequence[float] = ALLOWED_HEIGHTS,
        preferred: float = PREFERRED_HEIGHT,
    ) -> None:
        self.heights = tuple(heights)
        self.preferred = preferred
        self._sizes = tuple(to_units(h) for h in self.heights)
        preferred_units = to_units(preferred)
        self._costs = tuple(
            (1, -1 if size == preferred_units else 0) for size in self._sizes
        )

    def solve(self, height: float) -> dict[float, int] | None:
        """Find the panel stack for a column of the given height.

        Args:
            height: Target column height in meters.

        Returns:
            Panel height -> count summing exactly to ``height``, or None if
            no exact combination exists (including non-positive heights).
        """
        if not is_finite(height):
            logger.warning(f"No panel stack for non-finite height {height!r}")
            return None

        target = to_units(height)
        if target <= 0:
            logger.warning(f"No panel stack for non-positive height {height}m")
            return None

        table = solve_unbounded_coins(self._sizes, target, self._costs.__getitem__)
        counts = reconstruct_coins(table, target)
        if counts is None:
            logger.warning(f"No valid panel combination for height {height}m")
            return None

        stack = {self.heights[i]: n for i, n in counts.items()}
        logger.debug(f"Column stack for {height}m: {stack}")
        return stack


_default_solver = ColumnStackSolver()


def solve_column_stack(height: float) -> dict[float, int] | None:
    """Solve a column stack with the standard panel palette.

    See ColumnStackSolver.solve.
    """
    return _default_solver.solve(height)
