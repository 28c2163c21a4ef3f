"""
Unit tests for API request/response models.
"""

import pytest
from pydantic import ValidationError

from carrier_sales.api.models import (
    CarrierVerifyRequest,
    ErrorResponse,
    HealthResponse,
    LoadListResponse,
)


class TestCarrierVerifyRequest:

    def test_string_mc_number(self):
        assert CarrierVerifyRequest(mc_number="123456").mc_number == "123456"

    def test_numeric_mc_number_coerced(self):
        assert CarrierVerifyRequest(mc_number=123456).mc_number == "123456"

    def test_missing_mc_number_allowed(self):
        # Reported as invalid_input by the verifier, not by the schema
        assert CarrierVerifyRequest().mc_number is None

    def test_boolean_rejected(self):
        with pytest.raises(ValidationError):
            CarrierVerifyRequest(mc_number=True)

    def test_list_rejected(self):
        with pytest.raises(ValidationError):
            CarrierVerifyRequest(mc_number=["123456"])


def test_load_list_response(sample_loads):
    response = LoadListResponse(data=sample_loads, count=len(sample_loads))
    assert response.success is True
    assert response.count == 5


def test_load_list_response_negative_count():
    with pytest.raises(ValidationError):
        LoadListResponse(data=[], count=-1)


def test_health_response_defaults():
    response = HealthResponse(status="OK", version="1.0.0")
    assert response.services == {}
    assert response.timestamp is not None


def test_error_response():
    response = ErrorResponse(error="not_found", message="Load not found")
    assert response.success is False
    assert response.details is None
