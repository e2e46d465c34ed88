"""Unit tests for the weighted unbounded coin-change DP."""

import pytest

from packlista.domain.services import (
    reconstruct_coins,
    solve_unbounded_coins,
    to_units,
)


class TestToUnits:
    """Tests for meter to fixed-point conversion."""

    @pytest.mark.parametrize(
        "value,expected",
        [(2.5, 25), (3.0, 30), (1.1, 11), (0.0, 0), (2.2, 22), (0.25, 3), (0.04, 0)],
    )
    def test_rounds_half_up(self, value: float, expected: int) -> None:
        """Values are scaled by 10 and rounded half up."""
        assert to_units(value) == expected

    def test_negative_half_rounds_up(self) -> None:
        """-0.05 m is -0.5 units, which rounds up to zero."""
        assert to_units(-0.05) == 0

    def test_custom_scale(self) -> None:
        """A different scale is honoured."""
        assert to_units(1.23, scale=100) == 123


class TestSolveUnboundedCoins:
    """Tests for the DP table."""

    def test_fewest_pieces(self) -> None:
        """Fewest pieces wins with a uniform cost."""
        table = solve_unbounded_coins((10, 25), 50, lambda i: (1,))

        assert table.cost(50) == (2,)
        assert reconstruct_coins(table, 50) == {1: 2}

    def test_unreachable_sum(self) -> None:
        """Sums that cannot be composed have no cost."""
        table = solve_unbounded_coins((5,), 12, lambda i: (1,))

        assert not table.is_reachable(12)
        assert table.cost(12) is None
        assert reconstruct_coins(table, 12) is None

    def test_zero_is_reachable_with_no_pieces(self) -> None:
        """The empty sum costs nothing and reconstructs to no pieces."""
        table = solve_unbounded_coins((5, 10), 10, lambda i: (1, 0))

        assert table.cost(0) == (0, 0)
        assert reconstruct_coins(table, 0) == {}

    def test_out_of_range_sum(self) -> None:
        """Sums beyond the table limit are not reachable."""
        table = solve_unbounded_coins((5,), 10, lambda i: (1,))

        assert table.limit == 10
        assert table.cost(15) is None
        assert table.cost(-5) is None

    def test_negative_limit_gives_empty_table(self) -> None:
        """A negative limit yields a table with nothing reachable."""
        table = solve_unbounded_coins((5,), -1, lambda i: (1,))

        assert table.best == ()
        assert not table.is_reachable(0)

    def test_secondary_cost_breaks_ties(self) -> None:
        """Among equal piece counts, the lower secondary cost wins."""
        # 40 = 30 + 10 = 25 + 15; the second uses the preferred 25
        sizes = (30, 25, 15, 10)
        costs = [(1, 0), (1, -1), (1, 0), (1, 0)]
        table = solve_unbounded_coins(sizes, 40, costs.__getitem__)

        assert table.cost(40) == (2, -1)
        assert reconstruct_coins(table, 40) == {1: 1, 2: 1}

    def test_ties_keep_first_path(self) -> None:
        """Equal-cost alternatives do not replace the first path found."""
        # 20 = 5 + 15 is reached from s=5 before 10 + 10 is tried from s=10
        table = solve_unbounded_coins((10, 15, 5), 20, lambda i: (1,))

        assert reconstruct_coins(table, 20) == {1: 1, 2: 1}
