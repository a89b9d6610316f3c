"""Project analysis endpoints."""

import logging

from fastapi import APIRouter

from avsafeguard.application.config import config_to_project, load_config_from_dict
from avsafeguard.web.dependencies import ProjectAnalyzerDep, ReportFormatterDep
from avsafeguard.web.schemas.requests import AnalyzeRequest
from avsafeguard.web.schemas.responses import AnalysisResultSchema, ReportSchema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analyze", tags=["analyze"])


@router.post("", response_model=AnalysisResultSchema)
async def analyze_project(
    request: AnalyzeRequest,
    analyzer: ProjectAnalyzerDep,
) -> AnalysisResultSchema:
    """Analyze a project configuration.

    Args:
        request: Request containing the project configuration.
        analyzer: Project analyzer dependency.

    Returns:
        Complete analysis result.

    Raises:
        ConfigError: If the configuration fails schema validation.
        ProjectValidationError: If the project values are rejected.
    """
    config = load_config_from_dict(request.config)
    result = analyzer.analyze(config_to_project(config))
    logger.debug(f"API analysis complete with score {result.overall_score}")
    return AnalysisResultSchema.model_validate(result.to_dict())


@router.post("/report", response_model=ReportSchema)
async def analyze_report(
    request: AnalyzeRequest,
    analyzer: ProjectAnalyzerDep,
    formatter: ReportFormatterDep,
) -> ReportSchema:
    """Analyze a project and render the markdown report.

    Args:
        request: Request containing the project configuration.
        analyzer: Project analyzer dependency.
        formatter: Report formatter dependency.

    Returns:
        Certification, score and markdown report.
    """
    config = load_config_from_dict(request.config)
    project = config_to_project(config)
    result = analyzer.analyze(project)
    return ReportSchema(
        certification=result.certification.value,
        overall_score=result.overall_score,
        report=formatter.format(project, result),
    )
