"""API routers for the REST API."""

from shelfgrid.web.routers.analyze import router as analyze_router
from shelfgrid.web.routers.validate import router as validate_router

__all__ = [
    "analyze_router",
    "validate_router",
]
