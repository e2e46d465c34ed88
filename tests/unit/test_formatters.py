"""Unit tests for the packing list text formatters."""

import pytest

from packlista.domain import PacklistaResult, StorageUnit
from packlista.domain.services import PacklistaAggregator
from packlista.infrastructure import (
    PacklistaReportFormatter,
    WallBreakdownFormatter,
    categorize_key,
    categorize_totals,
    display_name,
)


class TestCategorizeKey:
    """Tests for report categories."""

    @pytest.mark.parametrize("key", ["3x1", "2.5x0.5", "1x3", "1x1.1", "10x2"])
    def test_frames(self, key: str) -> None:
        assert categorize_key(key) == "frames"

    @pytest.mark.parametrize(
        "key", ["connectors", "baseplate", "corner_90_4pin", "m8_pin", "t_5pin"]
    )
    def test_hardware(self, key: str) -> None:
        assert categorize_key(key) == "hardware"

    @pytest.mark.parametrize("key", ["carpet", "x3", "3x", "graphics_print"])
    def test_unknown_keys_are_other(self, key: str) -> None:
        assert categorize_key(key) == "other"

    def test_categorize_totals_keeps_order(self) -> None:
        totals = {"3x1": 3, "connectors": 6, "carpet": 1, "1x3": 1, "baseplate": 1}

        categories = categorize_totals(totals)

        assert list(categories) == ["frames", "hardware", "other"]
        assert categories["frames"] == [("3x1", 3), ("1x3", 1)]
        assert categories["hardware"] == [("connectors", 6), ("baseplate", 1)]
        assert categories["other"] == [("carpet", 1)]

    def test_categorize_empty(self) -> None:
        assert categorize_totals({}) == {"frames": [], "hardware": [], "other": []}


class TestDisplayName:
    """Tests for item display names."""

    @pytest.mark.parametrize(
        "key,expected",
        [
            ("corner_90_4pin", "Corner 90° 4-pin"),
            ("t_5pin", "T 5-pin"),
            ("m8_pin", "M8 pin"),
            ("connectors", "Connectors"),
            ("baseplate", "Baseplate"),
            ("2.5x1", "2.5x1"),
            ("graphics_print", "graphics print"),
        ],
    )
    def test_names(self, key: str, expected: str) -> None:
        assert display_name(key) == expected


class TestPacklistaReportFormatter:
    """Tests for the categorized report."""

    def test_report_content(self, aggregator: PacklistaAggregator) -> None:
        result = aggregator.compute("straight", 3.0, 2.0, 3.0)

        report = PacklistaReportFormatter().format(result)
        lines = report.splitlines()

        assert lines[0] == "PACKING LIST"
        assert "Booth: straight, walls: back" in report
        assert "FRAMES" in report
        assert "HARDWARE" in report
        assert "OTHER" not in report
        assert "Connectors" in report
        assert lines[-1].split() == ["TOTAL", "10"]

    def test_custom_title(self, aggregator: PacklistaAggregator) -> None:
        result = aggregator.compute("straight", 3.0, 2.0, 3.0)

        report = PacklistaReportFormatter().format(result, title="BOOTH 12")

        assert report.splitlines()[0] == "BOOTH 12"

    def test_zero_counts_hidden_by_default(self) -> None:
        result = PacklistaResult(wall_shape="straight", totals={"3x1": 2, "t_5pin": 0})

        assert "T 5-pin" not in PacklistaReportFormatter().format(result)
        assert "T 5-pin" in PacklistaReportFormatter(show_zero=True).format(result)

    def test_empty_totals(self) -> None:
        result = PacklistaResult(wall_shape="triangle")

        report = PacklistaReportFormatter().format(result)

        assert "Booth: triangle, walls: none" in report
        assert report.endswith("No items required.")


class TestWallBreakdownFormatter:
    """Tests for the per-wall breakdown."""

    def test_columns_and_connectors(self, aggregator: PacklistaAggregator) -> None:
        result = aggregator.compute("l", 4.0, 3.0, 2.5)

        text = WallBreakdownFormatter().format(result)

        assert "BACK WALL (4 m x 2.5 m)" in text
        assert "LEFT WALL (3 m x 2.5 m)" in text
        assert "(1 m): 1x 2.5 m" in text
        assert "Connectors: 6" in text
        assert "Connectors: 4" in text
        assert "Top row" not in text

    def test_top_row(self, aggregator: PacklistaAggregator) -> None:
        result = aggregator.compute("straight", 3.0, 2.0, 3.5)

        text = WallBreakdownFormatter().format(result)

        assert "Top row: 1x 1x3 (waste 0 m)" in text

    def test_infeasible_columns_flagged(self, aggregator: PacklistaAggregator) -> None:
        result = aggregator.compute("straight", 3.0, 2.0, 2.2)

        text = WallBreakdownFormatter().format(result)

        assert text.count("NO VALID PANEL COMBINATION") == 3

    def test_storage_listed_under_wall(self, aggregator: PacklistaAggregator) -> None:
        result = aggregator.compute(
            "straight", 3.0, 2.0, 3.0, [StorageUnit(id="s1", x=0.0, z=-0.5)]
        )

        text = WallBreakdownFormatter().format(result)

        assert "  Storage:" in text
        assert "s1: 1x1 m, straight" in text
        assert "FREE-STANDING STORAGE" not in text

    def test_unknown_shape(self, aggregator: PacklistaAggregator) -> None:
        result = aggregator.compute(
            "triangle", 3.0, 2.0, 2.5, [StorageUnit(id=7, x=0.0, z=0.0)]
        )

        text = WallBreakdownFormatter().format(result)

        assert "No walls for booth shape 'triangle'." in text
        assert "FREE-STANDING STORAGE" in text
        assert "7: 1x1 m, straight" in text
