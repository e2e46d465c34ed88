"""API routers for the REST API."""

from packlista.web.routers.packlista import router as packlista_router
from packlista.web.routers.validate import router as validate_router

__all__ = [
    "packlista_router",
    "validate_router",
]
