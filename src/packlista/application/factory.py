"""Service factory for dependency injection.

This module provides a ServiceFactory that creates and wires up all
application services. It acts as a composition root for the packlista
engine, its command and the report formatters.

The factory uses lazy initialization for the aggregator, creating it
on first access and caching it for reuse.

Example:
    factory = ServiceFactory()
    command = factory.create_packlista_command()
    output = command.execute(booth_input)

For testing, you can provide mock implementations:
    factory = ServiceFactory()
    factory._aggregator = mock_aggregator
    command = factory.create_packlista_command()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from packlista.application.commands import ComputePacklistaCommand
    from packlista.domain.services import PacklistaAggregator
    from packlista.infrastructure.exporters import JsonExporter
    from packlista.infrastructure.formatters import (
        PacklistaReportFormatter,
        WallBreakdownFormatter,
    )


@dataclass
class ServiceFactory:
    """Factory for creating application services with dependency injection.

    The factory is stateless apart from the cached aggregator, which holds
    no per-call state and can be shared between commands.
    """

    _aggregator: "PacklistaAggregator | None" = field(
        default=None, init=False, repr=False
    )

    def get_aggregator(self) -> "PacklistaAggregator":
        """Get or create packlista aggregator instance."""
        if self._aggregator is None:
            from packlista.domain.services import PacklistaAggregator

            self._aggregator = PacklistaAggregator()
        return self._aggregator

    def get_report_formatter(self) -> "PacklistaReportFormatter":
        """Create packing list report formatter instance."""
        from packlista.infrastructure.formatters import PacklistaReportFormatter

        return PacklistaReportFormatter()

    def get_wall_formatter(self) -> "WallBreakdownFormatter":
        """Create wall breakdown formatter instance."""
        from packlista.infrastructure.formatters import WallBreakdownFormatter

        return WallBreakdownFormatter()

    def get_json_exporter(self) -> "JsonExporter":
        """Create JSON exporter instance."""
        from packlista.infrastructure.exporters import JsonExporter

        return JsonExporter()

    def create_packlista_command(self) -> "ComputePacklistaCommand":
        """Create a fully configured ComputePacklistaCommand."""
        from packlista.application.commands import ComputePacklistaCommand

        return ComputePacklistaCommand(aggregator=self.get_aggregator())


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
