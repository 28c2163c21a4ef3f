"""
Call metrics sources.

The dashboard and /api/calls/metrics read a CallMetrics snapshot from a
MetricsSource picked by configuration:
- StaticMetricsSource: fixed snapshot (demo/test)
- HTTPMetricsSource: fetches the snapshot from a call-analytics service
"""

from abc import ABC, abstractmethod
from typing import Optional

import httpx
import structlog
from pydantic import ValidationError

from carrier_sales.exceptions import MetricsSourceError
from carrier_sales.models.calls import (
    CallMetrics,
    EquipmentTypeCount,
    OutcomeDistribution,
    SentimentDistribution,
)

logger = structlog.get_logger(__name__)


class MetricsSource(ABC):
    """Provider of aggregate call metrics."""

    name: str = "abstract"

    @abstractmethod
    def get_snapshot(self) -> CallMetrics:
        """
        Return the current metrics snapshot.

        Raises:
            MetricsSourceError: The snapshot could not be produced
        """

    def close(self) -> None:
        """Release any held resources."""


DEFAULT_SNAPSHOT = CallMetrics(
    total_calls=150,
    successful_calls=89,
    failed_calls=61,
    average_negotiation_rounds=2.3,
    average_call_duration=245,
    success_rate=59.3,
    sentiment_distribution=SentimentDistribution(positive=45, neutral=35, negative=20),
    outcome_distribution=OutcomeDistribution(success=89, negotiation_failed=35, no_interest=26),
    top_equipment_types=[
        EquipmentTypeCount(type="Dry Van", count=45),
        EquipmentTypeCount(type="Reefer", count=32),
        EquipmentTypeCount(type="Flatbed", count=28),
    ],
)


class StaticMetricsSource(MetricsSource):
    """Returns the same snapshot on every call."""

    name = "static"

    def __init__(self, snapshot: CallMetrics = DEFAULT_SNAPSHOT):
        self.snapshot = snapshot

    def get_snapshot(self) -> CallMetrics:
        return self.snapshot


class HTTPMetricsSource(MetricsSource):
    """
    Reads a snapshot from a remote JSON endpoint.

    Accepts either the bare CallMetrics object or the API envelope
    {"success": true, "data": {...}}.
    """

    name = "http"

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        client: Optional[httpx.Client] = None,
    ):
        if not url:
            raise ValueError("HTTP metrics source requires a URL (METRICS_SOURCE_URL)")
        self.url = url
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout))

    def get_snapshot(self) -> CallMetrics:
        try:
            response = self._client.get(self.url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise MetricsSourceError(
                "Metrics source returned an error",
                details={"url": self.url, "status_code": exc.response.status_code},
            ) from exc
        except httpx.HTTPError as exc:
            raise MetricsSourceError(
                "Metrics source unreachable",
                details={"url": self.url, "error": type(exc).__name__},
            ) from exc
        except ValueError as exc:
            raise MetricsSourceError(
                "Metrics source returned invalid JSON",
                details={"url": self.url},
            ) from exc

        if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
            payload = payload["data"]

        try:
            return CallMetrics.model_validate(payload)
        except ValidationError as exc:
            logger.warning(
                "Metrics snapshot failed validation",
                url=self.url,
                errors=exc.error_count(),
            )
            raise MetricsSourceError(
                "Metrics source returned an invalid snapshot",
                details={"url": self.url, "errors": exc.error_count()},
            ) from exc

    def close(self) -> None:
        self._client.close()
