"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from trusses.application.presets import PresetNotFoundError
from trusses.domain import InvalidDimensionError, InvalidInventoryEntryError
from trusses.infrastructure.exporters import UnsupportedFormatError


class PlanningError(Exception):
    """Raised when a frame cannot be planned from the request."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Planning failed: {errors}")


def _error(status_code: int, error: str, error_type: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "error_type": error_type, "details": details},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(PlanningError)
    async def planning_error_handler(request: Request, exc: PlanningError) -> JSONResponse:
        return _error(
            422,
            "Frame planning failed",
            "planning",
            [{"message": e} for e in exc.errors],
        )

    @app.exception_handler(InvalidDimensionError)
    async def invalid_dimension_handler(
        request: Request, exc: InvalidDimensionError
    ) -> JSONResponse:
        return _error(422, str(exc), "invalid_dimension", {"length": str(exc.length)})

    @app.exception_handler(InvalidInventoryEntryError)
    async def invalid_inventory_handler(
        request: Request, exc: InvalidInventoryEntryError
    ) -> JSONResponse:
        return _error(
            422,
            str(exc),
            "invalid_inventory_entry",
            {"key": str(exc.key), "reason": exc.reason},
        )

    @app.exception_handler(PresetNotFoundError)
    async def preset_not_found_handler(
        request: Request, exc: PresetNotFoundError
    ) -> JSONResponse:
        return _error(404, f"Preset not found: {exc.name}", "not_found")

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return _error(
            400,
            str(exc),
            "unsupported_format",
            {"format": exc.format_name, "available": exc.available},
        )
