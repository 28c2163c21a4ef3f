"""
FMCSA QCMobile registry client.

Looks carriers up by MC (docket) number using httpx:
- GET /carriers/docket-number/{mc_number}?webKey=...

Response shape (trimmed):
{
    "content": [
        {"carrier": {"legalName": "ACME TRUCKING LLC", "allowedToOperate": "Y", ...}}
    ]
}

An empty "content" means the docket number is unknown, which is an
INVALID carrier, not an error.
"""

from typing import Any, Optional

import httpx
import structlog

from carrier_sales.carriers.base_registry import CarrierRegistry
from carrier_sales.carriers.static_registry import AUTHORITY_TYPE
from carrier_sales.exceptions import CarrierRegistryError
from carrier_sales.models.carrier import CarrierVerificationResult
from carrier_sales.models.enums import CarrierStatus

logger = structlog.get_logger(__name__)


class FMCSACarrierRegistry(CarrierRegistry):
    """
    Registry backed by the FMCSA QCMobile API.

    A single httpx.Client is kept for connection pooling. Pass `client`
    to supply a preconfigured one (tests use httpx.MockTransport).
    """

    name = "fmcsa"

    def __init__(
        self,
        base_url: str,
        web_key: str,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ):
        if not web_key:
            raise ValueError("FMCSA registry requires a web key (FMCSA_WEB_KEY)")

        self.base_url = base_url.rstrip("/")
        self.web_key = web_key
        self.timeout = timeout
        self._client = client or httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
        )

        logger.info(
            "FMCSA registry initialized",
            base_url=self.base_url,
            timeout=timeout,
        )

    def lookup(self, mc_number: str) -> CarrierVerificationResult:
        try:
            response = self._client.get(
                f"/carriers/docket-number/{mc_number}",
                params={"webKey": self.web_key},
            )
        except httpx.TimeoutException as exc:
            raise CarrierRegistryError(
                "FMCSA registry request timed out",
                details={"mc_number": mc_number, "timeout": self.timeout},
            ) from exc
        except httpx.HTTPError as exc:
            raise CarrierRegistryError(
                "FMCSA registry unreachable",
                details={"mc_number": mc_number, "error": type(exc).__name__},
            ) from exc

        if response.status_code == 404:
            return CarrierVerificationResult.invalid(mc_number)
        if response.status_code != 200:
            raise CarrierRegistryError(
                "FMCSA registry returned an error",
                details={"mc_number": mc_number, "status_code": response.status_code},
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise CarrierRegistryError(
                "FMCSA registry returned invalid JSON",
                details={"mc_number": mc_number},
            ) from exc

        carrier = _first_carrier(payload)
        if carrier is None:
            logger.info("Carrier not found in FMCSA", mc_number=mc_number)
            return CarrierVerificationResult.invalid(mc_number)

        if str(carrier.get("allowedToOperate", "")).upper() != "Y":
            logger.info(
                "Carrier not allowed to operate",
                mc_number=mc_number,
                legal_name=carrier.get("legalName"),
            )
            return CarrierVerificationResult.invalid(mc_number)

        return CarrierVerificationResult(
            mc_number=mc_number,
            is_valid=True,
            carrier_name=carrier.get("legalName") or carrier.get("dbaName"),
            status=CarrierStatus.ACTIVE,
            authority_type=AUTHORITY_TYPE,
        )

    def close(self) -> None:
        self._client.close()


def _first_carrier(payload: Any) -> Optional[dict[str, Any]]:
    """Extract the first carrier record from a QCMobile response."""
    if not isinstance(payload, dict):
        return None
    content = payload.get("content")
    if isinstance(content, dict):
        content = [content]
    if not content:
        return None
    first = content[0]
    if not isinstance(first, dict):
        return None
    carrier = first.get("carrier", first)
    return carrier if isinstance(carrier, dict) else None
