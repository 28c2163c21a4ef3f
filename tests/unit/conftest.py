"""Unit test fixtures (mocks and stubs).

Provides mock objects and fake transports for testing without external services.
"""

from typing import Callable

import httpx
import pytest
from unittest.mock import Mock

from carrier_sales.carriers.base_registry import CarrierRegistry
from carrier_sales.models.carrier import CarrierVerificationResult


@pytest.fixture
def mock_registry():
    """Mock CarrierRegistry that reports every carrier as INVALID."""
    mock = Mock(spec=CarrierRegistry)
    mock.name = "mock"
    mock.lookup = Mock(side_effect=CarrierVerificationResult.invalid)
    return mock


@pytest.fixture
def mock_http_client():
    """Factory for httpx.Client backed by a request handler (no network).

    Usage:
        def test_something(mock_http_client):
            client = mock_http_client(lambda request: httpx.Response(200, json={}))
    """
    def _create(
        handler: Callable[[httpx.Request], httpx.Response],
        base_url: str = "",
    ) -> httpx.Client:
        return httpx.Client(base_url=base_url, transport=httpx.MockTransport(handler))

    return _create
