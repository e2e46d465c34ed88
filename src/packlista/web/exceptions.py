"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from packlista.application.config import ConfigError


class PacklistaComputationError(Exception):
    """Raised when a packing list cannot be computed."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Computation failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(PacklistaComputationError)
    async def computation_error_handler(
        request: Request, exc: PacklistaComputationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Packing list computation failed",
                "error_type": "computation",
                "details": [{"message": e} for e in exc.errors],
            },
        )
