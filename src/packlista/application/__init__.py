"""Application layer - use cases and orchestration."""

from .commands import ComputePacklistaCommand, describe_gaps
from .dtos import BoothInput, PacklistaOutput
from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "BoothInput",
    "ComputePacklistaCommand",
    "PacklistaOutput",
    "ServiceFactory",
    "describe_gaps",
    "get_factory",
    "reset_factory",
    "set_factory",
]
