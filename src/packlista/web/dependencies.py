"""FastAPI dependency injection for packlista services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from packlista.application.commands import ComputePacklistaCommand
from packlista.application.factory import ServiceFactory, get_factory


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_packlista_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> ComputePacklistaCommand:
    """Dependency for ComputePacklistaCommand."""
    return factory.create_packlista_command()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
PacklistaCommandDep = Annotated[
    ComputePacklistaCommand, Depends(get_packlista_command)
]
