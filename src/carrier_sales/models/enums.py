"""
Enumerations for Carrier Sales data models.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class CallOutcome(str, Enum):
    """
    Categorical result of a carrier negotiation call.

    UNKNOWN is returned whenever no rule establishes a result, even if
    the transcript carries a clear sentiment.
    """

    SUCCESS = "SUCCESS"
    NEGOTIATION_FAILED = "NEGOTIATION_FAILED"
    UNKNOWN = "UNKNOWN"


class Sentiment(str, Enum):
    """Coarse carrier sentiment derived from call content."""

    POSITIVE = "POSITIVE"
    NEUTRAL = "NEUTRAL"
    NEGATIVE = "NEGATIVE"


class CarrierStatus(str, Enum):
    """Registry status of a carrier's operating authority."""

    ACTIVE = "ACTIVE"
    INVALID = "INVALID"
