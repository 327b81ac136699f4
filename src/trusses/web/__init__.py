"""FastAPI REST API for truss frame planning.

Usage:
    uvicorn trusses.web:app --reload
"""

from trusses.web.app import app, create_app

__all__ = ["app", "create_app"]
