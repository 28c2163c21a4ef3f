"""
Call analytics models: classification input/output and metrics snapshot.

CallClassification is ephemeral (computed per request, never stored).
CallMetrics is the aggregate structure served to the dashboard.
"""

from typing import Optional

from pydantic import BaseModel, Field

from carrier_sales.models.enums import CallOutcome, Sentiment


class CallClassificationRequest(BaseModel):
    """Call metadata submitted for classification. Every field is optional."""

    call_transcript: Optional[str] = Field(
        default=None,
        description="Free-text transcript or summary of the call",
    )
    final_price: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="Agreed price in USD, if a deal was reached",
    )
    negotiation_rounds: Optional[int] = Field(
        default=None,
        description="Number of counter-offer rounds (any value below 3 leaves the outcome to the transcript)",
    )


class ExtractedCallData(BaseModel):
    """Fields echoed from the request plus placeholder call details."""

    final_price: Optional[float] = None
    negotiation_rounds: Optional[int] = None
    call_duration: int = Field(
        description="Call duration in seconds (placeholder, not measured)",
    )
    key_topics: list[str] = Field(default_factory=list)


class CallClassification(BaseModel):
    """Outcome and sentiment for one call."""

    outcome: CallOutcome
    sentiment: Sentiment
    confidence: float = Field(ge=0.0, le=1.0)
    extracted_data: ExtractedCallData


class EquipmentTypeCount(BaseModel):
    type: str
    count: int = Field(ge=0)


class SentimentDistribution(BaseModel):
    positive: int = Field(ge=0)
    neutral: int = Field(ge=0)
    negative: int = Field(ge=0)


class OutcomeDistribution(BaseModel):
    success: int = Field(ge=0)
    negotiation_failed: int = Field(ge=0)
    no_interest: int = Field(ge=0)


class CallMetrics(BaseModel):
    """Aggregate call metrics snapshot."""

    total_calls: int = Field(ge=0)
    successful_calls: int = Field(ge=0)
    failed_calls: int = Field(ge=0)
    average_negotiation_rounds: float = Field(ge=0)
    average_call_duration: float = Field(ge=0, description="Seconds")
    success_rate: float = Field(ge=0, le=100, description="Percent")
    sentiment_distribution: SentimentDistribution
    outcome_distribution: OutcomeDistribution
    top_equipment_types: list[EquipmentTypeCount] = Field(default_factory=list)
