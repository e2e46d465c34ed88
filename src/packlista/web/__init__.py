"""FastAPI REST API for booth packing lists.

This module provides a REST API for computing packing lists and
validating booth configurations.

Usage:
    uvicorn packlista.web:app --reload
"""

from packlista.web.app import app, create_app

__all__ = ["app", "create_app"]
