"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json
import random
from pathlib import Path
from typing import Any, Dict

import pytest

from carrier_sales.calls.classifier import CallClassifier
from carrier_sales.config import Settings
from carrier_sales.loads.catalog import LoadCatalog
from carrier_sales.models.load import Load


@pytest.fixture
def test_settings(fixtures_dir: Path) -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.API_KEY = None
    """
    return Settings(
        # === Application ===
        APP_NAME="Carrier Sales API (Test)",
        APP_VERSION="1.0.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Security ===
        API_KEY="test-key",

        # === Backends ===
        LOADS_DATA_PATH=str(fixtures_dir / "loads.json"),
        CARRIER_REGISTRY="static",
        KNOWN_MC_NUMBERS=["123456", "789012", "345678", "901234"],
        METRICS_SOURCE="static",
        CLASSIFIER_SEED=42,

        # === Feature Flags ===
        DASHBOARD_ENABLED=True,
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_loads_data(fixtures_dir: Path) -> list[Dict[str, Any]]:
    """Load sample loads fixture as list of dicts."""
    with open(fixtures_dir / "loads.json") as f:
        return json.load(f)


@pytest.fixture
def sample_loads(sample_loads_data: list[Dict[str, Any]]) -> list[Load]:
    """Parsed Load instances from sample fixture, in file order."""
    return [Load(**record) for record in sample_loads_data]


@pytest.fixture
def catalog(sample_loads: list[Load]) -> LoadCatalog:
    """LoadCatalog built from the sample fixture."""
    return LoadCatalog(sample_loads)


@pytest.fixture
def seeded_classifier() -> CallClassifier:
    """Classifier whose call_duration sequence is fixed (seed 42)."""
    return CallClassifier(rng=random.Random(42))


@pytest.fixture
def create_test_load():
    """Factory fixture to create Load with custom values.

    Usage:
        def test_something(create_test_load):
            load = create_test_load(load_id="X1", loadboard_rate=500)
    """
    def _create(
        load_id: str = "T001",
        origin: str = "Dallas, TX",
        destination: str = "Houston, TX",
        equipment_type: str = "Dry Van",
        loadboard_rate: float = 800,
        **extra: Any,
    ) -> Load:
        return Load(
            load_id=load_id,
            origin=origin,
            destination=destination,
            equipment_type=equipment_type,
            loadboard_rate=loadboard_rate,
            **extra,
        )

    return _create
