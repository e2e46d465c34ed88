"""JSON export of booth packing lists.

The exported document mirrors PacklistaResult: the totals map, the
per-wall decomposition and every storage record. Column stacks are
written as lists of ``{"height", "count"}`` pairs since JSON objects
cannot be keyed by numbers.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from packlista.domain import PacklistaResult, WallInfo
from packlista.domain.value_objects import Column, StorageRecord, TopRowResult

logger = logging.getLogger(__name__)

# Current schema version for JSON output
SCHEMA_VERSION = "1.0"


def column_to_dict(column: Column) -> dict[str, Any]:
    stack = None
    if column.stack is not None:
        stack = [{"height": h, "count": n} for h, n in column.stack.items()]
    return {"width": column.width, "stack": stack}


def top_row_to_dict(top_row: TopRowResult) -> dict[str, Any]:
    return {"pieces": dict(top_row.pieces), "waste": top_row.waste}


def storage_to_dict(record: StorageRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "width": record.width,
        "depth": record.depth,
        "corner_placement": record.corner_placement,
        "attached_wall": (
            record.attached_wall.value if record.attached_wall is not None else None
        ),
        "placement_kind": record.placement_kind.value,
        "hardware": record.hardware.as_totals(),
        "frame_sections": record.frame_sections,
    }


def wall_to_dict(info: WallInfo) -> dict[str, Any]:
    return {
        "length": info.length,
        "height": info.height,
        "columns": [column_to_dict(c) for c in info.columns],
        "infeasible_columns": info.infeasible_columns,
        "connectors": info.connectors,
        "top_row": top_row_to_dict(info.top_row) if info.top_row is not None else None,
        "storages": [storage_to_dict(r) for r in info.storages],
    }


def result_to_dict(result: PacklistaResult) -> dict[str, Any]:
    """Convert a packing list to JSON-serializable primitives."""
    return {
        "wall_shape": result.wall_shape,
        "totals": dict(result.totals),
        "per_wall": {
            name.value: wall_to_dict(info) for name, info in result.per_wall.items()
        },
        "unattached_storages": [storage_to_dict(r) for r in result.unattached_storages],
    }


class JsonExporter:
    """Exports packing lists as JSON.

    Attributes:
        indent: JSON indentation level.
    """

    format_name = "json"
    file_extension = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, result: PacklistaResult, path: Path) -> None:
        """Export a packing list to a JSON file.

        Args:
            result: Computed packing list.
            path: Path where the JSON file will be saved.
        """
        content = self.export_string(result)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Exported packing list JSON to {path}")

    def export_string(
        self, result: PacklistaResult, warnings: list[str] | None = None
    ) -> str:
        """Generate the JSON document as a string.

        Args:
            result: Computed packing list.
            warnings: Optional warnings to include alongside the result.

        Returns:
            JSON string with schema version, totals and wall details.
        """
        data: dict[str, Any] = {"schema_version": SCHEMA_VERSION}
        data.update(result_to_dict(result))
        if warnings:
            data["warnings"] = list(warnings)
        return json.dumps(data, indent=self.indent, ensure_ascii=False)
