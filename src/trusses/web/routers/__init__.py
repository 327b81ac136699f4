"""API routers for the REST API."""

from trusses.web.routers.export import router as export_router
from trusses.web.routers.fit import router as fit_router
from trusses.web.routers.plan import router as plan_router
from trusses.web.routers.presets import router as presets_router
from trusses.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "fit_router",
    "plan_router",
    "presets_router",
    "validate_router",
]
