"""API routers for the REST API."""

from avsafeguard.web.routers.analyze import router as analyze_router
from avsafeguard.web.routers.validate import router as validate_router

__all__ = [
    "analyze_router",
    "validate_router",
]
