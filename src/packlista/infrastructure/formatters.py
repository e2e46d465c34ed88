"""Text formatters for booth packing lists."""

from __future__ import annotations

import re

from packlista.domain import PacklistaResult, WallInfo
from packlista.domain.services import top_row_key
from packlista.domain.value_objects import Column, StorageRecord

# Frame panel keys look like "3x1" or "2.5x0.5"
FRAME_KEY_PATTERN = re.compile(r"^\d+(\.\d+)?x\d+(\.\d+)?$")

HARDWARE_KEYS = frozenset({"connectors", "baseplate", "t_5pin"})

DISPLAY_NAMES: dict[str, str] = {
    "corner_90_4pin": "Corner 90° 4-pin",
    "t_5pin": "T 5-pin",
    "m8_pin": "M8 pin",
    "connectors": "Connectors",
    "baseplate": "Baseplate",
}

CATEGORY_ORDER = ("frames", "hardware", "other")


def categorize_key(key: str) -> str:
    """Report category for a totals key: "frames", "hardware" or "other"."""
    if FRAME_KEY_PATTERN.match(key):
        return "frames"
    if "corner" in key or "_pin" in key or key in HARDWARE_KEYS:
        return "hardware"
    return "other"


def categorize_totals(totals: dict[str, int]) -> dict[str, list[tuple[str, int]]]:
    """Group totals entries by report category.

    Entries keep their totals order within a category. Every category is
    present in the result, possibly empty.
    """
    categories: dict[str, list[tuple[str, int]]] = {c: [] for c in CATEGORY_ORDER}
    for key, count in totals.items():
        categories[categorize_key(key)].append((key, count))
    return categories


def display_name(key: str) -> str:
    """Human-readable item name for a totals key."""
    if key in DISPLAY_NAMES:
        return DISPLAY_NAMES[key]
    if FRAME_KEY_PATTERN.match(key):
        return key
    return key.replace("_", " ")


class PacklistaReportFormatter:
    """Formats the packing list totals as a categorized report.

    Zero counts are hidden unless ``show_zero`` is set; the engine writes
    storage hardware keys even when their count is zero.
    """

    def __init__(self, show_zero: bool = False) -> None:
        self.show_zero = show_zero

    def format(self, result: PacklistaResult, title: str = "PACKING LIST") -> str:
        """Format packing list totals as a readable report.

        Args:
            result: Computed packing list.
            title: Report title.

        Returns:
            Formatted report string.
        """
        lines = [
            title,
            "=" * 60,
            f"Booth: {result.wall_shape}, walls: "
            + (", ".join(name.value for name in result.per_wall) or "none"),
            "",
        ]

        entries = {
            k: v for k, v in result.totals.items() if self.show_zero or v != 0
        }
        if not entries:
            lines.append("No items required.")
            return "\n".join(lines)

        lines.append(f"{'Item':<35} {'Qty':>8}")
        lines.append("-" * 60)

        for category, items in categorize_totals(entries).items():
            if not items:
                continue
            lines.append(f"\n{category.upper()}")
            for key, count in items:
                lines.append(f"  {display_name(key):<33} {count:>8}")

        lines.append("")
        lines.append("-" * 60)
        lines.append(f"{'TOTAL':<35} {sum(entries.values()):>8}")
        return "\n".join(lines)


class WallBreakdownFormatter:
    """Formats the per-wall decomposition of a packing list.

    Shows each wall's columns and stacks, its connector count, the top
    row for 3.5m walls and the storage units standing against it.
    Columns and top rows that could not be built are flagged.
    """

    def format(self, result: PacklistaResult) -> str:
        """Format per-wall details as a readable report."""
        lines = [
            "WALL BREAKDOWN",
            "=" * 60,
        ]

        if not result.per_wall:
            lines.append("")
            lines.append(f"No walls for booth shape '{result.wall_shape}'.")

        for info in result.per_wall.values():
            lines.append("")
            lines.extend(self._format_wall(info))

        if result.unattached_storages:
            lines.append("")
            lines.append("FREE-STANDING STORAGE")
            lines.append("-" * 60)
            for record in result.unattached_storages:
                lines.append(f"  {self._format_storage(record)}")

        return "\n".join(lines)

    def _format_wall(self, info: WallInfo) -> list[str]:
        lines = [
            f"{info.name.value.upper()} WALL ({info.length:g} m x {info.height:g} m)",
            "-" * 60,
        ]
        if not info.columns:
            lines.append("  No columns")
        for i, column in enumerate(info.columns, start=1):
            lines.append(f"  Column {i:>2} ({column.width:g} m): {self._format_stack(column)}")

        lines.append(f"  Connectors: {info.connectors}")

        if info.top_row is not None:
            if info.top_row.has_covering:
                pieces = ", ".join(
                    f"{count}x {top_row_key(label)}"
                    for label, count in info.top_row.pieces.items()
                )
                lines.append(
                    f"  Top row: {pieces or 'none'} (waste {info.top_row.waste:g} m)"
                )
            else:
                lines.append("  Top row: NO COVERING FOUND")

        if info.storages:
            lines.append("  Storage:")
            for record in info.storages:
                lines.append(f"    {self._format_storage(record)}")
        return lines

    def _format_stack(self, column: Column) -> str:
        if column.stack is None:
            return "NO VALID PANEL COMBINATION"
        return " + ".join(
            f"{count}x {height:g} m" for height, count in column.stack.items()
        )

    def _format_storage(self, record: StorageRecord) -> str:
        label = record.id if record.id is not None else "(no id)"
        placement = "corner" if record.corner_placement else "straight"
        return f"{label}: {record.width}x{record.depth} m, {placement}"
