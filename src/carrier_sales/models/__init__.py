"""
Pydantic data models for the Carrier Sales API.

Includes:
- Enums (CallOutcome, Sentiment, CarrierStatus)
- Load models (Load, LoadSearchCriteria, LoadSearchResult)
- Carrier models (CarrierVerificationResult)
- Call models (CallClassificationRequest, CallClassification, CallMetrics, ...)
"""

from carrier_sales.models.enums import CallOutcome, CarrierStatus, Sentiment
from carrier_sales.models.load import Load, LoadSearchCriteria, LoadSearchResult
from carrier_sales.models.carrier import CarrierVerificationResult
from carrier_sales.models.calls import (
    CallClassification,
    CallClassificationRequest,
    CallMetrics,
    EquipmentTypeCount,
    ExtractedCallData,
    OutcomeDistribution,
    SentimentDistribution,
)

__all__ = [
    # Enums
    "CallOutcome",
    "CarrierStatus",
    "Sentiment",
    # Load models
    "Load",
    "LoadSearchCriteria",
    "LoadSearchResult",
    # Carrier models
    "CarrierVerificationResult",
    # Call models
    "CallClassification",
    "CallClassificationRequest",
    "CallMetrics",
    "EquipmentTypeCount",
    "ExtractedCallData",
    "OutcomeDistribution",
    "SentimentDistribution",
]
