"""Weighted unbounded coin-change dynamic programming.

Both panel solvers reduce to the same problem: reach an integer sum with
an unlimited supply of integer-sized pieces, minimising a cost that is
accumulated per piece. Costs are tuples compared lexicographically, so a
solver can express "fewest pieces, then most of a preferred size" as
``(1, -1)`` for the preferred piece and ``(1, 0)`` for the others.

All sizes and sums are integers; callers rescale meters with ``to_units``
before building a table.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

from .constants import SCALE

Cost = tuple[int, ...]


def to_units(value: float, scale: int = SCALE) -> int:
    """Convert meters to integer fixed-point units, rounding half up.

    Args:
        value: Length in meters. Must be finite.
        scale: Units per meter.

    Returns:
        Nearest integer number of units.
    """
    return int(math.floor(value * scale + 0.5))


@dataclass(frozen=True)
class CoinTable:
    """Filled DP table for one palette and bound.

    Attributes:
        sizes: Integer piece sizes, in palette order.
        best: Optimal accumulated cost per sum, or None if unreachable.
        choice: Palette index of the last piece on the optimal path to
            each sum, or None for the empty sum and unreachable sums.
    """

    sizes: tuple[int, ...]
    best: tuple[Cost | None, ...]
    choice: tuple[int | None, ...]

    @property
    def limit(self) -> int:
        """Largest sum covered by the table."""
        return len(self.best) - 1

    def is_reachable(self, total: int) -> bool:
        """True if ``total`` can be composed exactly from the palette."""
        return 0 <= total <= self.limit and self.best[total] is not None

    def cost(self, total: int) -> Cost | None:
        """Optimal cost for ``total``, or None if unreachable."""
        if not 0 <= total <= self.limit:
            return None
        return self.best[total]


def _add(a: Cost, b: Cost) -> Cost:
    return tuple(x + y for x, y in zip(a, b))


def solve_unbounded_coins(
    sizes: Sequence[int],
    limit: int,
    piece_cost: Callable[[int], Cost],
) -> CoinTable:
    """Fill the optimal-cost table for every sum in ``0..limit``.

    Sums are processed in increasing order, so every predecessor is final
    before it is extended. A candidate replaces the current entry only if
    its cost is strictly smaller; ties keep the first path found.

    Args:
        sizes: Positive integer piece sizes.
        limit: Largest sum to compute. Negative limits yield an empty table.
        piece_cost: Maps a palette index to the cost of using that piece
            once. All costs must have the same length.

    Returns:
        CoinTable with costs and back-pointers for reconstruction.
    """
    sizes = tuple(sizes)
    if limit < 0:
        return CoinTable(sizes=sizes, best=(), choice=())

    costs = [piece_cost(i) for i in range(len(sizes))]
    zero: Cost = tuple(0 for _ in costs[0]) if costs else ()

    best: list[Cost | None] = [None] * (limit + 1)
    choice: list[int | None] = [None] * (limit + 1)
    best[0] = zero

    for s in range(limit + 1):
        current = best[s]
        if current is None:
            continue
        for i, size in enumerate(sizes):
            ns = s + size
            if ns > limit:
                continue
            candidate = _add(current, costs[i])
            existing = best[ns]
            if existing is None or candidate < existing:
                best[ns] = candidate
                choice[ns] = i

    return CoinTable(sizes=sizes, best=tuple(best), choice=tuple(choice))


def reconstruct_coins(table: CoinTable, total: int) -> dict[int, int] | None:
    """Recover the pieces of the optimal path to ``total``.

    Walks the back-pointers from ``total`` down to zero, counting each
    palette index in the order it is met.

    Args:
        table: Filled table from solve_unbounded_coins.
        total: Sum to reconstruct.

    Returns:
        Palette index -> count, or None if ``total`` is unreachable.
    """
    if not table.is_reachable(total):
        return None

    counts: dict[int, int] = {}
    cur = total
    while cur > 0:
        i = table.choice[cur]
        if i is None:
            break
        counts[i] = counts.get(i, 0) + 1
        cur -= table.sizes[i]
    return counts
