"""
Abstract carrier registry.

Defines the interface every registry backend (static allow-list, FMCSA)
must adhere to. The verifier and API layer only depend on this contract:
a synchronous membership test that returns a CarrierVerificationResult.
"""

from abc import ABC, abstractmethod

from carrier_sales.models.carrier import CarrierVerificationResult


class CarrierRegistry(ABC):
    """
    Source of truth for carrier operating authority.

    Responsibilities:
    - Answer whether an MC number belongs to an authorised carrier
    - Provide display name and authority type for valid carriers

    Does NOT handle:
    - Input validation (that's CarrierVerifier's job)
    """

    #: Short backend name used in logs and metric labels
    name: str = "abstract"

    @abstractmethod
    def lookup(self, mc_number: str) -> CarrierVerificationResult:
        """
        Look up a non-empty, trimmed MC number.

        Returns:
            CarrierVerificationResult (INVALID when the carrier is unknown)

        Raises:
            CarrierRegistryError: The registry could not be reached or
                returned an unusable answer
        """

    def close(self) -> None:
        """Release any held resources (HTTP connections)."""
