"""Configuration validation endpoints."""

from fastapi import APIRouter

from shelfgrid.application.config import (
    ConfigError,
    ValidationResult,
    load_config_from_dict,
    validate_config,
)
from shelfgrid.web.schemas.requests import ConfigValidateRequest
from shelfgrid.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a design configuration without analyzing it.

    Schema problems are reported as errors in the response body rather
    than as an HTTP error.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        result = ValidationResult.from_config_error(e)
    else:
        result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        exit_code=result.exit_code,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
