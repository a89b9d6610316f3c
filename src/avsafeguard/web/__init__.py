"""FastAPI REST API for theater analysis.

Usage:
    uvicorn avsafeguard.web:app --reload
"""

from avsafeguard.web.app import app, create_app

__all__ = ["app", "create_app"]
