"""FastAPI REST API for shelving design analysis.

Usage:
    uvicorn shelfgrid.web:app --reload
"""

from shelfgrid.web.app import app, create_app

__all__ = ["app", "create_app"]
