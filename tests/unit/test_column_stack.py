"""Unit tests for ColumnStackSolver."""

import math

import pytest

from packlista.domain.services import ColumnStackSolver, solve_column_stack


class TestSolveColumnStack:
    """Tests for exact-height panel stacks."""

    @pytest.mark.parametrize(
        "height,expected",
        [
            (0.5, {0.5: 1}),
            (1.0, {1.0: 1}),
            (2.5, {2.5: 1}),
            (3.0, {3.0: 1}),
            (3.5, {2.5: 1, 1.0: 1}),
            (4.0, {2.5: 1, 1.5: 1}),
            (4.5, {2.5: 1, 2.0: 1}),
            (5.0, {2.5: 2}),
            (5.5, {2.5: 1, 3.0: 1}),
            (6.0, {3.0: 2}),
            (7.5, {2.5: 3}),
        ],
    )
    def test_known_stacks(self, height: float, expected: dict[float, int]) -> None:
        """Fewest pieces, preferring 2.5m panels among ties."""
        assert solve_column_stack(height) == expected

    @pytest.mark.parametrize("height", [1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0])
    def test_stack_sums_exactly_to_height(self, height: float) -> None:
        """Returned stacks sum exactly to the target height."""
        stack = solve_column_stack(height)

        assert stack is not None
        total = sum(h * n for h, n in stack.items())
        assert math.isclose(total, height, abs_tol=1e-9)

    def test_single_panel_beats_two_pieces_with_25(self) -> None:
        """3.0m is one 3.0 panel, not 2.5 + 0.5."""
        stack = solve_column_stack(3.0)

        assert stack == {3.0: 1}
        assert sum(stack.values()) == 1

    def test_prefers_25_among_equal_counts(self) -> None:
        """4.0m uses a 2.5 panel rather than 3.0 + 1.0 or 2.0 + 2.0."""
        stack = solve_column_stack(4.0)

        assert stack is not None
        assert stack.get(2.5) == 1
        assert sum(stack.values()) == 2

    @pytest.mark.parametrize("height", [0.3, 0.7, 2.2])
    def test_unreachable_height_is_infeasible(self, height: float) -> None:
        """Heights off the 0.5m grid have no exact stack."""
        assert solve_column_stack(height) is None

    @pytest.mark.parametrize("height", [0.0, -2.5, 0.04])
    def test_non_positive_height_is_infeasible(self, height: float) -> None:
        """Heights that scale to zero or below are infeasible."""
        assert solve_column_stack(height) is None

    @pytest.mark.parametrize("height", [float("nan"), float("inf")])
    def test_non_finite_height_is_infeasible(self, height: float) -> None:
        """NaN and infinity are infeasible, not errors."""
        assert solve_column_stack(height) is None

    def test_infeasible_height_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """An infeasible height is logged at WARNING."""
        with caplog.at_level("WARNING"):
            solve_column_stack(2.2)

        assert "No valid panel combination" in caplog.text


class TestColumnStackSolver:
    """Tests for custom palettes."""

    def test_custom_palette(self) -> None:
        """A solver only uses the heights it was given."""
        solver = ColumnStackSolver(heights=(2.0, 1.0), preferred=2.0)

        assert solver.solve(3.0) == {2.0: 1, 1.0: 1}
        assert solver.solve(0.5) is None

    def test_repeated_calls_are_independent(self) -> None:
        """Results do not depend on earlier calls."""
        solver = ColumnStackSolver()

        first = solver.solve(5.5)
        solver.solve(2.2)
        assert solver.solve(5.5) == first
