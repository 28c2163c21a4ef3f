"""
Rule-based call outcome and sentiment classifier.

Rules are evaluated in order; the first that applies decides:
1. final_price > 0            -> SUCCESS / POSITIVE
2. negotiation_rounds >= 3    -> NEGOTIATION_FAILED / NEGATIVE
3. transcript present         -> UNKNOWN / lexicon sentiment
4. otherwise                  -> UNKNOWN / NEUTRAL

Outcome and sentiment are independent: rule 3 may report a POSITIVE or
NEGATIVE sentiment while the outcome stays UNKNOWN.
"""

import random
from typing import Optional

import structlog

from carrier_sales.models.calls import (
    CallClassification,
    CallClassificationRequest,
    ExtractedCallData,
)
from carrier_sales.models.enums import CallOutcome, Sentiment
from carrier_sales.monitoring.metrics import call_classifications_total

logger = structlog.get_logger(__name__)

POSITIVE_TERMS = ("interested", "accept", "good", "deal", "yes")
NEGATIVE_TERMS = ("no", "reject", "too expensive", "not interested")

FAILED_NEGOTIATION_ROUNDS = 3
CONFIDENCE = 0.85
KEY_TOPICS = ("pricing", "delivery_time", "equipment_type")

# Placeholder call duration range in seconds, [min, max)
CALL_DURATION_RANGE = (60, 360)


def count_terms(text: str, terms: tuple[str, ...]) -> int:
    """Count how many terms occur in text as substrings (each at most once)."""
    return sum(1 for term in terms if term in text)


def transcript_sentiment(transcript: str) -> Sentiment:
    """Lexicon vote over a lower-cased transcript. Ties are NEUTRAL."""
    text = transcript.lower()
    positive = count_terms(text, POSITIVE_TERMS)
    negative = count_terms(text, NEGATIVE_TERMS)
    if positive > negative:
        return Sentiment.POSITIVE
    if negative > positive:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


class CallClassifier:
    """
    Deterministic call classifier.

    The only non-deterministic field is the placeholder call_duration,
    drawn from `rng`. Inject a seeded random.Random to make it repeatable.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def classify(self, request: CallClassificationRequest) -> CallClassification:
        outcome, sentiment = self._decide(request)

        call_classifications_total.labels(
            outcome=outcome.value, sentiment=sentiment.value
        ).inc()
        logger.info(
            "Call classified",
            outcome=outcome.value,
            sentiment=sentiment.value,
            has_transcript=bool(request.call_transcript),
            final_price=request.final_price,
            negotiation_rounds=request.negotiation_rounds,
        )

        return CallClassification(
            outcome=outcome,
            sentiment=sentiment,
            confidence=CONFIDENCE,
            extracted_data=ExtractedCallData(
                final_price=request.final_price,
                negotiation_rounds=request.negotiation_rounds,
                call_duration=self.rng.randrange(*CALL_DURATION_RANGE),
                key_topics=list(KEY_TOPICS),
            ),
        )

    def _decide(self, request: CallClassificationRequest) -> tuple[CallOutcome, Sentiment]:
        if request.final_price is not None and request.final_price > 0:
            return CallOutcome.SUCCESS, Sentiment.POSITIVE

        rounds = request.negotiation_rounds
        if rounds is not None and rounds >= FAILED_NEGOTIATION_ROUNDS:
            return CallOutcome.NEGOTIATION_FAILED, Sentiment.NEGATIVE

        if request.call_transcript:
            return CallOutcome.UNKNOWN, transcript_sentiment(request.call_transcript)

        return CallOutcome.UNKNOWN, Sentiment.NEUTRAL
