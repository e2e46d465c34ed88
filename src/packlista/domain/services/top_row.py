"""Top-row covering for 3.5m walls.

The top row is a horizontal strip of 1.0m-high pieces laid above the
2.5m column stacks. The piece palette cannot tile every length exactly,
so the solver accepts overshoot and picks the covering with the least
waste, then the fewest pieces.
"""

from __future__ import annotations

import logging
from typing import Sequence

from packlista.domain.value_objects import TopRowResult, format_length, is_finite

from .coin_change import reconstruct_coins, solve_unbounded_coins, to_units
from .constants import SCALE, TOP_ROW_HEIGHT, TOP_WIDTHS

logger = logging.getLogger(__name__)


def top_row_key(label: str) -> str:
    """Totals key for a top-row piece of the given width label ("1x2.5")."""
    return f"{format_length(TOP_ROW_HEIGHT)}x{label}"


class TopRowSolver:
    """Minimal-waste covering of a length by top-row pieces."""

    def __init__(self, widths: Sequence[float] = TOP_WIDTHS) -> None:
        self.widths = tuple(widths)
        self._sizes = tuple(to_units(w) for w in self.widths)

    def solve(self, length: float) -> TopRowResult:
        """Cover ``length`` with top-row pieces.

        Searches every reachable total between the length and the length
        plus the widest piece, choosing the smallest overshoot and then
        the fewest pieces.

        Args:
            length: Wall length in meters.

        Returns:
            TopRowResult with pieces keyed by width label. ``waste`` is None
            when no covering exists within the search bound.
        """
        if not is_finite(length):
            logger.warning(f"No top row covering for non-finite length {length!r}")
            return TopRowResult(pieces={}, waste=None)

        target = max(0, to_units(length))
        bound = target + max(self._sizes)
        table = solve_unbounded_coins(self._sizes, bound, lambda i: (1,))

        best_sum: int | None = None
        best_key: tuple[int, int] | None = None
        for s in range(target, bound + 1):
            cost = table.cost(s)
            if cost is None:
                continue
            key = (s - target, cost[0])
            if best_key is None or key < best_key:
                best_key = key
                best_sum = s

        if best_sum is None:
            logger.warning(f"No top row covering found for {length}m")
            return TopRowResult(pieces={}, waste=None)

        counts = reconstruct_coins(table, best_sum) or {}
        pieces = {format_length(self.widths[i]): n for i, n in counts.items()}
        waste = (best_sum - target) / SCALE
        logger.debug(f"Top row for {length}m: {pieces}, waste {waste}m")
        return TopRowResult(pieces=pieces, waste=waste)


_default_solver = TopRowSolver()


def compute_top_row_pieces(length: float) -> TopRowResult:
    """Cover a length with the standard top-row palette.

    See TopRowSolver.solve.
    """
    return _default_solver.solve(length)
