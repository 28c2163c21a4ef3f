"""
API-specific response models for FastAPI endpoints.

These models wrap the core domain models (Load, CarrierVerificationResult,
CallClassification, CallMetrics) in the {success, data[, count]} envelope
the voice agent integration expects.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from carrier_sales.models.calls import CallClassification, CallMetrics
from carrier_sales.models.carrier import CarrierVerificationResult
from carrier_sales.models.load import Load


class LoadListResponse(BaseModel):
    """Response for listing and searching loads."""

    success: bool = True
    data: list[Load]
    count: int = Field(ge=0, description="Number of loads in data")


class LoadResponse(BaseModel):
    """Response for a single load lookup."""

    success: bool = True
    data: Load


class CarrierVerifyRequest(BaseModel):
    """
    Request body for carrier verification.

    mc_number is optional at the schema level so that a missing value is
    reported as an invalid_input error by the verifier. Numeric values
    are accepted and coerced to strings.
    """

    mc_number: Optional[str] = Field(
        default=None,
        description="Motor carrier (MC) number",
        examples=["123456"],
    )

    @field_validator("mc_number", mode="before")
    @classmethod
    def _coerce_numeric_mc_number(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class CarrierVerificationResponse(BaseModel):
    success: bool = True
    data: CarrierVerificationResult


class CallClassificationResponse(BaseModel):
    success: bool = True
    data: CallClassification


class CallMetricsResponse(BaseModel):
    success: bool = True
    data: CallMetrics


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = Field(
        description="Overall health status",
        examples=["OK"],
    )
    version: str = Field(
        description="Service version",
        examples=["1.0.0"],
    )
    services: dict[str, Any] = Field(
        default_factory=dict,
        description="Component status",
        examples=[{"catalog_loads": 10, "carrier_registry": "static", "metrics_source": "static"}],
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="Health check timestamp (UTC)",
    )


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    error: str = Field(
        description="Error code",
        examples=["not_found", "invalid_input", "unauthorized", "upstream_error", "internal_error"],
    )
    message: str = Field(
        description="Human-readable error message"
    )
    details: Optional[Any] = Field(
        default=None,
        description="Additional error details (e.g., validation failures)",
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="Error timestamp (UTC)",
    )
