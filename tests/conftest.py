"""Pytest configuration and shared fixtures for packlista tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from packlista.application.commands import ComputePacklistaCommand
    from packlista.domain.services import PacklistaAggregator


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests across CLI, web and engine"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def aggregator() -> "PacklistaAggregator":
    """Create a PacklistaAggregator with the standard palettes."""
    from packlista.domain.services import PacklistaAggregator

    return PacklistaAggregator()


@pytest.fixture
def packlista_command() -> "ComputePacklistaCommand":
    """Create a ComputePacklistaCommand instance using the factory."""
    from packlista.application.factory import get_factory

    return get_factory().create_packlista_command()


@pytest.fixture
def booth_config_data() -> dict:
    """A valid straight booth configuration with one back-wall storage."""
    return {
        "schema_version": "1.0",
        "booth": {
            "wall_shape": "straight",
            "floor_width": 3,
            "floor_depth": 2,
            "wall_height": 3.0,
        },
        "storages": [{"id": "s1", "x": 0, "z": -0.5, "width": 1, "depth": 1}],
    }
