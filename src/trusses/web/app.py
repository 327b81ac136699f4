"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trusses.web.exceptions import register_exception_handlers
from trusses.web.routers import (
    export_router,
    fit_router,
    plan_router,
    presets_router,
    validate_router,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Truss Frame Planner API",
        description="REST API for planning photo-zone truss frames from owned modules",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(plan_router, prefix="/api/v1")
    app.include_router(fit_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")
    app.include_router(presets_router, prefix="/api/v1")
    app.include_router(export_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
