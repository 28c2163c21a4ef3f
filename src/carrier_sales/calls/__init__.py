"""
Call analytics.

- classifier.py: rule-based outcome/sentiment classifier
- metrics_source.py: MetricsSource interface with static and HTTP backends
"""

from carrier_sales.calls.classifier import CallClassifier, transcript_sentiment
from carrier_sales.calls.metrics_source import (
    DEFAULT_SNAPSHOT,
    HTTPMetricsSource,
    MetricsSource,
    StaticMetricsSource,
)

__all__ = [
    "CallClassifier",
    "transcript_sentiment",
    "MetricsSource",
    "StaticMetricsSource",
    "HTTPMetricsSource",
    "DEFAULT_SNAPSHOT",
]
