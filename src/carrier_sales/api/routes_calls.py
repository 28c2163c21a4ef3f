"""
Call analytics routes.

- POST /api/calls/classify  outcome + sentiment for one call
- GET  /api/calls/metrics   aggregate metrics snapshot
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, status

from carrier_sales.api.dependencies import get_call_classifier, get_metrics_source
from carrier_sales.api.models import (
    CallClassificationResponse,
    CallMetricsResponse,
    ErrorResponse,
)
from carrier_sales.calls.classifier import CallClassifier
from carrier_sales.calls.metrics_source import MetricsSource
from carrier_sales.models.calls import CallClassificationRequest

router = APIRouter()


@router.post(
    "/classify",
    response_model=CallClassificationResponse,
    status_code=status.HTTP_200_OK,
    summary="Classify a call",
    description="""
    Derive outcome and sentiment from call metadata.

    Rules (first match wins): a positive final_price means SUCCESS;
    three or more negotiation rounds mean NEGOTIATION_FAILED; otherwise
    the transcript only drives sentiment and the outcome is UNKNOWN.
    """,
    responses={400: {"model": ErrorResponse, "description": "Malformed request"}},
)
def classify_call(
    request: Optional[CallClassificationRequest] = Body(default=None),
    classifier: CallClassifier = Depends(get_call_classifier),
) -> CallClassificationResponse:
    result = classifier.classify(request or CallClassificationRequest())
    return CallClassificationResponse(data=result)


@router.get(
    "/metrics",
    response_model=CallMetricsResponse,
    status_code=status.HTTP_200_OK,
    summary="Call metrics snapshot",
    responses={502: {"model": ErrorResponse, "description": "Metrics source unavailable"}},
)
def call_metrics(
    source: MetricsSource = Depends(get_metrics_source),
) -> CallMetricsResponse:
    return CallMetricsResponse(data=source.get_snapshot())
