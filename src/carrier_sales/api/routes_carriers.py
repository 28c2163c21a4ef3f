"""Carrier verification routes."""

from typing import Optional

from fastapi import APIRouter, Body, Depends, status

from carrier_sales.api.dependencies import get_carrier_verifier
from carrier_sales.api.models import (
    CarrierVerificationResponse,
    CarrierVerifyRequest,
    ErrorResponse,
)
from carrier_sales.carriers.verifier import CarrierVerifier

router = APIRouter()


@router.post(
    "/verify",
    response_model=CarrierVerificationResponse,
    status_code=status.HTTP_200_OK,
    summary="Verify a carrier by MC number",
    description="""
    Check a carrier's operating authority in the configured registry.

    An unknown MC number is not an error: the response has is_valid=false
    and status=INVALID.
    """,
    responses={
        400: {"model": ErrorResponse, "description": "MC number missing"},
        502: {"model": ErrorResponse, "description": "Carrier registry unavailable"},
    },
)
def verify_carrier(
    request: Optional[CarrierVerifyRequest] = Body(default=None),
    verifier: CarrierVerifier = Depends(get_carrier_verifier),
) -> CarrierVerificationResponse:
    mc_number = request.mc_number if request else None
    return CarrierVerificationResponse(data=verifier.verify(mc_number))
