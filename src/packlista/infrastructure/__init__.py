"""Infrastructure layer - report formatters and exporters."""

from .exporters import JsonExporter, result_to_dict
from .formatters import (
    PacklistaReportFormatter,
    WallBreakdownFormatter,
    categorize_key,
    categorize_totals,
    display_name,
)

__all__ = [
    # Formatters
    "PacklistaReportFormatter",
    "WallBreakdownFormatter",
    "categorize_key",
    "categorize_totals",
    "display_name",
    # Exporters
    "JsonExporter",
    "result_to_dict",
]
