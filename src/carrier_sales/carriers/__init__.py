"""
Carrier verification.

- base_registry.py: CarrierRegistry interface
- static_registry.py: allow-list registry (demo/test)
- fmcsa_registry.py: FMCSA QCMobile registry (production)
- verifier.py: CarrierVerifier (input validation + lookup)
"""

from carrier_sales.carriers.base_registry import CarrierRegistry
from carrier_sales.carriers.fmcsa_registry import FMCSACarrierRegistry
from carrier_sales.carriers.static_registry import StaticCarrierRegistry
from carrier_sales.carriers.verifier import CarrierVerifier

__all__ = [
    "CarrierRegistry",
    "CarrierVerifier",
    "FMCSACarrierRegistry",
    "StaticCarrierRegistry",
]
