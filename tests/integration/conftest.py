"""Integration test fixtures (app client with injected dependencies).

The app is imported once; each test gets fresh dependency overrides so the
fixture catalog and test settings replace the process-wide singletons.
"""

import random

import pytest
from fastapi.testclient import TestClient

from carrier_sales.api.dependencies import (
    get_call_classifier,
    get_carrier_registry,
    get_load_catalog,
    get_metrics_source,
    get_settings,
)
from carrier_sales.calls.classifier import CallClassifier
from carrier_sales.calls.metrics_source import StaticMetricsSource
from carrier_sales.carriers.static_registry import StaticCarrierRegistry
from carrier_sales.main import app


@pytest.fixture
def api_app(test_settings, catalog):
    """FastAPI app with test settings, fixture catalog and static backends."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_load_catalog] = lambda: catalog
    app.dependency_overrides[get_carrier_registry] = lambda: StaticCarrierRegistry(
        test_settings.KNOWN_MC_NUMBERS
    )
    app.dependency_overrides[get_metrics_source] = lambda: StaticMetricsSource()
    app.dependency_overrides[get_call_classifier] = lambda: CallClassifier(
        rng=random.Random(test_settings.CLASSIFIER_SEED)
    )

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(api_app, test_settings):
    """TestClient that sends the test API key on every request."""
    return TestClient(api_app, headers={"X-API-Key": test_settings.API_KEY})


@pytest.fixture
def anonymous_client(api_app):
    """TestClient without credentials."""
    return TestClient(api_app)
