"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from avsafeguard.application.config import ConfigError
from avsafeguard.domain.errors import ProjectValidationError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ProjectValidationError)
    async def project_validation_error_handler(
        request: Request, exc: ProjectValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": "invalid_project",
                "details": [
                    {"field": exc.field, "message": exc.message, "kind": exc.error_type}
                ],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid project configuration",
                "error_type": exc.error_type,
                "details": [
                    {
                        "path": detail.get("path"),
                        "message": detail.get("message"),
                        "error_type": detail.get("error_type"),
                    }
                    for detail in exc.details
                ],
            },
        )
