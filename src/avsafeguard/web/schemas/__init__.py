"""Pydantic schemas for the REST API."""

from avsafeguard.web.schemas.requests import AnalyzeRequest, ConfigValidateRequest
from avsafeguard.web.schemas.responses import (
    AnalysisResultSchema,
    ErrorResponseSchema,
    ReportSchema,
    RoomModeSchema,
    RowAnalysisSchema,
    RT60Schema,
    ScreenDimensionsSchema,
    ScreenFitSchema,
    TreatmentSchema,
    ValidationResultSchema,
    VerticalAngleSchema,
)

__all__ = [
    # Requests
    "AnalyzeRequest",
    "ConfigValidateRequest",
    # Responses
    "AnalysisResultSchema",
    "ErrorResponseSchema",
    "ReportSchema",
    "RoomModeSchema",
    "RowAnalysisSchema",
    "RT60Schema",
    "ScreenDimensionsSchema",
    "ScreenFitSchema",
    "TreatmentSchema",
    "ValidationResultSchema",
    "VerticalAngleSchema",
]
