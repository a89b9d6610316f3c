"""FastAPI dependency injection for analysis services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from avsafeguard.domain.services.analysis import ProjectAnalyzer
from avsafeguard.infrastructure import ReportFormatter


@lru_cache(maxsize=1)
def get_project_analyzer() -> ProjectAnalyzer:
    """Get the shared ProjectAnalyzer instance."""
    return ProjectAnalyzer()


def get_report_formatter() -> ReportFormatter:
    """Dependency for ReportFormatter."""
    return ReportFormatter()


# Type aliases for cleaner endpoint signatures
ProjectAnalyzerDep = Annotated[ProjectAnalyzer, Depends(get_project_analyzer)]
ReportFormatterDep = Annotated[ReportFormatter, Depends(get_report_formatter)]
