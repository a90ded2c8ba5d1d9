"""Design analysis endpoints."""

from fastapi import APIRouter

from shelfgrid.application.config import config_to_params, load_config_from_dict
from shelfgrid.infrastructure import JsonExporter
from shelfgrid.web.dependencies import AnalyzeCommandDep
from shelfgrid.web.schemas.requests import AnalyzeRequest
from shelfgrid.web.schemas.responses import AnalysisSchema, ErrorResponseSchema

router = APIRouter(prefix="/analyze", tags=["analyze"])


@router.post(
    "",
    response_model=AnalysisSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def analyze_design(
    request: AnalyzeRequest,
    command: AnalyzeCommandDep,
) -> AnalysisSchema:
    """Analyze a design configuration.

    Each request is computed from its own configuration; nothing is shared
    between requests.

    Raises:
        ConfigError: If the configuration is invalid (handled as HTTP 422).
    """
    params = config_to_params(load_config_from_dict(request.config))
    analysis = command.execute(params, include_sheets=request.include_sheets)
    return AnalysisSchema.model_validate(JsonExporter().to_dict(analysis))
