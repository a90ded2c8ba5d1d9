"""Pydantic schemas for the REST API."""

from shelfgrid.web.schemas.requests import AnalyzeRequest, ConfigValidateRequest
from shelfgrid.web.schemas.responses import (
    AnalysisSchema,
    DimensionsSchema,
    ErrorResponseSchema,
    HardwareSchema,
    HorizontalSegmentSchema,
    LayoutSchema,
    MaterialEstimateSchema,
    OversizedPartSchema,
    PartSchema,
    PlacedPartSchema,
    RipCutSchema,
    SheetLayoutSchema,
    ValidationResultSchema,
    VerticalSegmentSchema,
    WarningSchema,
)

__all__ = [
    # Requests
    "AnalyzeRequest",
    "ConfigValidateRequest",
    # Responses
    "AnalysisSchema",
    "DimensionsSchema",
    "ErrorResponseSchema",
    "HardwareSchema",
    "HorizontalSegmentSchema",
    "LayoutSchema",
    "MaterialEstimateSchema",
    "OversizedPartSchema",
    "PartSchema",
    "PlacedPartSchema",
    "RipCutSchema",
    "SheetLayoutSchema",
    "ValidationResultSchema",
    "VerticalSegmentSchema",
    "WarningSchema",
]
