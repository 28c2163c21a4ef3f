"""Carrier verification models."""

from typing import Optional

from pydantic import BaseModel, Field

from carrier_sales.models.enums import CarrierStatus


class CarrierVerificationResult(BaseModel):
    """Registry answer for a single MC number. Never persisted."""

    mc_number: str = Field(description="MC number as received (trimmed)")
    is_valid: bool
    carrier_name: Optional[str] = Field(
        default=None,
        description="Carrier display name (absent when invalid)",
    )
    status: CarrierStatus
    authority_type: Optional[str] = Field(
        default=None,
        description="Operating authority label (absent when invalid)",
        examples=["Motor Carrier"],
    )

    @classmethod
    def invalid(cls, mc_number: str) -> "CarrierVerificationResult":
        """Result for an MC number the registry does not recognise."""
        return cls(
            mc_number=mc_number,
            is_valid=False,
            carrier_name=None,
            status=CarrierStatus.INVALID,
            authority_type=None,
        )
