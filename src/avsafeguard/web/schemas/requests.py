"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Request for analyzing a project configuration."""

    config: dict[str, Any] = Field(..., description="Full project configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Project configuration JSON")
