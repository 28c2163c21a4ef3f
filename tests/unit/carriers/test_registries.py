"""
Unit tests for carrier registries (static allow-list and FMCSA).

FMCSA calls go through httpx.MockTransport; no network access.
"""

import httpx
import pytest

from carrier_sales.carriers.fmcsa_registry import FMCSACarrierRegistry
from carrier_sales.carriers.static_registry import StaticCarrierRegistry
from carrier_sales.exceptions import CarrierRegistryError
from carrier_sales.models.enums import CarrierStatus

FMCSA_BASE_URL = "https://mobile.fmcsa.test/qc/services"


class TestStaticCarrierRegistry:
    """Allow-list membership."""

    def test_known_mc_is_active(self):
        result = StaticCarrierRegistry().lookup("123456")
        assert result.is_valid is True
        assert result.status == CarrierStatus.ACTIVE
        assert result.carrier_name == "Carrier 123456"
        assert result.authority_type == "Motor Carrier"
        assert result.mc_number == "123456"

    def test_unknown_mc_is_invalid(self):
        result = StaticCarrierRegistry().lookup("999999")
        assert result.is_valid is False
        assert result.status == CarrierStatus.INVALID
        assert result.carrier_name is None
        assert result.authority_type is None

    @pytest.mark.parametrize("mc", ["123456", "789012", "345678", "901234"])
    def test_default_allow_list(self, mc):
        assert StaticCarrierRegistry().lookup(mc).is_valid

    def test_custom_allow_list(self):
        registry = StaticCarrierRegistry(["111111", " 222222 "])
        assert registry.lookup("111111").is_valid
        assert registry.lookup("222222").is_valid
        assert not registry.lookup("123456").is_valid


def fmcsa_payload(legal_name="ACME TRUCKING LLC", allowed="Y"):
    return {
        "content": [
            {
                "carrier": {
                    "legalName": legal_name,
                    "dbaName": None,
                    "allowedToOperate": allowed,
                    "dotNumber": 1234567,
                }
            }
        ],
        "retrievalDate": "2025-09-23T10:00:00.000+0000",
    }


@pytest.fixture
def fmcsa_registry(mock_http_client):
    """Factory: FMCSACarrierRegistry whose HTTP calls go to `handler`."""
    def _create(handler):
        client = mock_http_client(handler, base_url=FMCSA_BASE_URL)
        return FMCSACarrierRegistry(base_url=FMCSA_BASE_URL, web_key="test-web-key", client=client)

    return _create


class TestFMCSACarrierRegistry:
    """QCMobile response mapping and failure handling."""

    def test_requires_web_key(self):
        with pytest.raises(ValueError):
            FMCSACarrierRegistry(base_url=FMCSA_BASE_URL, web_key="")

    def test_request_shape(self, fmcsa_registry):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["web_key"] = request.url.params.get("webKey")
            return httpx.Response(200, json=fmcsa_payload())

        fmcsa_registry(handler).lookup("123456")
        assert seen["path"] == "/qc/services/carriers/docket-number/123456"
        assert seen["web_key"] == "test-web-key"

    def test_authorized_carrier_is_active(self, fmcsa_registry):
        registry = fmcsa_registry(lambda request: httpx.Response(200, json=fmcsa_payload()))
        result = registry.lookup("123456")
        assert result.is_valid is True
        assert result.status == CarrierStatus.ACTIVE
        assert result.carrier_name == "ACME TRUCKING LLC"
        assert result.authority_type == "Motor Carrier"

    def test_not_allowed_to_operate_is_invalid(self, fmcsa_registry):
        registry = fmcsa_registry(lambda request: httpx.Response(200, json=fmcsa_payload(allowed="N")))
        result = registry.lookup("123456")
        assert result.is_valid is False
        assert result.status == CarrierStatus.INVALID
        assert result.carrier_name is None

    def test_empty_content_is_invalid(self, fmcsa_registry):
        registry = fmcsa_registry(lambda request: httpx.Response(200, json={"content": []}))
        assert registry.lookup("999999").status == CarrierStatus.INVALID

    def test_null_content_is_invalid(self, fmcsa_registry):
        registry = fmcsa_registry(lambda request: httpx.Response(200, json={"content": None}))
        assert registry.lookup("999999").status == CarrierStatus.INVALID

    def test_404_is_invalid(self, fmcsa_registry):
        registry = fmcsa_registry(lambda request: httpx.Response(404))
        assert registry.lookup("999999").is_valid is False

    def test_server_error_raises(self, fmcsa_registry):
        registry = fmcsa_registry(lambda request: httpx.Response(503))
        with pytest.raises(CarrierRegistryError) as exc_info:
            registry.lookup("123456")
        assert exc_info.value.details["status_code"] == 503

    def test_invalid_json_raises(self, fmcsa_registry):
        registry = fmcsa_registry(lambda request: httpx.Response(200, content=b"<html>"))
        with pytest.raises(CarrierRegistryError):
            registry.lookup("123456")

    def test_timeout_raises(self, fmcsa_registry):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(CarrierRegistryError, match="timed out"):
            fmcsa_registry(handler).lookup("123456")

    def test_connection_error_raises(self, fmcsa_registry):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(CarrierRegistryError, match="unreachable"):
            fmcsa_registry(handler).lookup("123456")
