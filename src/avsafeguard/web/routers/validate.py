"""Configuration validation endpoints."""

from fastapi import APIRouter

from avsafeguard.application.config import load_config_from_dict, validate_config
from avsafeguard.web.schemas.requests import ConfigValidateRequest
from avsafeguard.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a project configuration without analyzing it.

    Schema errors are reported through the ConfigError handler; project
    errors and design advisories are returned in the body.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
