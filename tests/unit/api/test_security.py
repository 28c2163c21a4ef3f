"""
Unit tests for API key authentication.
"""

import pytest

from carrier_sales.api.security import extract_api_key, require_api_key
from carrier_sales.exceptions import AuthenticationError


class TestExtractApiKey:

    def test_x_api_key(self):
        assert extract_api_key("abc", None) == "abc"

    def test_x_api_key_wins_over_bearer(self):
        assert extract_api_key("abc", "Bearer xyz") == "abc"

    def test_bearer(self):
        assert extract_api_key(None, "Bearer xyz") == "xyz"

    def test_bearer_scheme_case_insensitive(self):
        assert extract_api_key(None, "bearer xyz") == "xyz"

    @pytest.mark.parametrize("authorization", ["Basic xyz", "Bearer", "xyz", ""])
    def test_unusable_authorization(self, authorization):
        assert extract_api_key(None, authorization) is None

    def test_nothing_supplied(self):
        assert extract_api_key(None, None) is None


class TestRequireApiKey:

    def test_correct_key(self, test_settings):
        require_api_key(x_api_key="test-key", authorization=None, settings=test_settings)

    def test_correct_bearer(self, test_settings):
        require_api_key(x_api_key=None, authorization="Bearer test-key", settings=test_settings)

    def test_wrong_key(self, test_settings):
        with pytest.raises(AuthenticationError):
            require_api_key(x_api_key="nope", authorization=None, settings=test_settings)

    def test_missing_key(self, test_settings):
        with pytest.raises(AuthenticationError):
            require_api_key(x_api_key=None, authorization=None, settings=test_settings)

    def test_non_ascii_key_rejected(self, test_settings):
        with pytest.raises(AuthenticationError):
            require_api_key(x_api_key="tëst-key", authorization=None, settings=test_settings)

    def test_disabled_when_unset(self, test_settings):
        open_settings = test_settings.model_copy(update={"API_KEY": None})
        require_api_key(x_api_key=None, authorization=None, settings=open_settings)
