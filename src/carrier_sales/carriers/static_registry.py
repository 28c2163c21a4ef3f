"""Allow-list registry used for demos, local development and tests."""

from typing import Iterable

from carrier_sales.carriers.base_registry import CarrierRegistry
from carrier_sales.models.carrier import CarrierVerificationResult
from carrier_sales.models.enums import CarrierStatus

DEFAULT_KNOWN_MC_NUMBERS = ("123456", "789012", "345678", "901234")
AUTHORITY_TYPE = "Motor Carrier"


class StaticCarrierRegistry(CarrierRegistry):
    """Treats a fixed set of MC numbers as active carriers."""

    name = "static"

    def __init__(self, known_mc_numbers: Iterable[str] = DEFAULT_KNOWN_MC_NUMBERS):
        self.known_mc_numbers = frozenset(str(mc).strip() for mc in known_mc_numbers)

    def lookup(self, mc_number: str) -> CarrierVerificationResult:
        if mc_number not in self.known_mc_numbers:
            return CarrierVerificationResult.invalid(mc_number)
        return CarrierVerificationResult(
            mc_number=mc_number,
            is_valid=True,
            carrier_name=f"Carrier {mc_number}",
            status=CarrierStatus.ACTIVE,
            authority_type=AUTHORITY_TYPE,
        )
