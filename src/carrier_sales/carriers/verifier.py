"""Carrier verification: input validation in front of a registry lookup."""

from typing import Optional

import structlog

from carrier_sales.carriers.base_registry import CarrierRegistry
from carrier_sales.exceptions import CarrierRegistryError, InvalidInputError
from carrier_sales.models.carrier import CarrierVerificationResult
from carrier_sales.monitoring.metrics import carrier_verifications_total

logger = structlog.get_logger(__name__)


class CarrierVerifier:
    """Validates an MC number and asks the configured registry about it."""

    def __init__(self, registry: CarrierRegistry):
        self.registry = registry

    def verify(self, mc_number: Optional[str]) -> CarrierVerificationResult:
        """
        Verify a carrier by MC number.

        Raises:
            InvalidInputError: mc_number is missing or blank
            CarrierRegistryError: the registry could not answer
        """
        mc_number = (mc_number or "").strip()
        if not mc_number:
            raise InvalidInputError("MC number is required", field="mc_number")

        try:
            result = self.registry.lookup(mc_number)
        except CarrierRegistryError:
            carrier_verifications_total.labels(
                registry=self.registry.name, status="error"
            ).inc()
            raise

        carrier_verifications_total.labels(
            registry=self.registry.name, status=result.status.value
        ).inc()
        logger.info(
            "Carrier verified",
            mc_number=mc_number,
            registry=self.registry.name,
            status=result.status.value,
        )
        return result
