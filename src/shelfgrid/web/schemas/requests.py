"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Request for analyzing a design."""

    config: dict[str, Any] = Field(..., description="Design configuration JSON")
    include_sheets: bool = Field(
        default=True, description="Whether to compute sheet cutting layouts"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a design configuration."""

    config: dict[str, Any] = Field(..., description="Design configuration JSON")
