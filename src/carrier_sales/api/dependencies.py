"""
FastAPI dependency injection for the Carrier Sales API.

Provides singleton instances of process-wide resources (catalog, registry,
metrics source, classifier) and factory functions for lightweight
per-request components. Tests swap any of them through
app.dependency_overrides.
"""

import random
from functools import lru_cache

import structlog
from fastapi import Depends

from carrier_sales.calls.classifier import CallClassifier
from carrier_sales.calls.metrics_source import (
    HTTPMetricsSource,
    MetricsSource,
    StaticMetricsSource,
)
from carrier_sales.carriers.base_registry import CarrierRegistry
from carrier_sales.carriers.fmcsa_registry import FMCSACarrierRegistry
from carrier_sales.carriers.static_registry import StaticCarrierRegistry
from carrier_sales.carriers.verifier import CarrierVerifier
from carrier_sales.config import Settings, settings
from carrier_sales.dashboard.renderer import DashboardRenderer
from carrier_sales.loads.catalog import LoadCatalog
from carrier_sales.loads.loader import load_loads
from carrier_sales.monitoring.metrics import catalog_loads

logger = structlog.get_logger(__name__)


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_load_catalog() -> LoadCatalog:
    """
    Get the load catalog, reading the dataset on first use.

    The data file is read exactly once per process. A missing or broken
    file yields an empty catalog (see loads/loader.py).

    Returns:
        LoadCatalog instance
    """
    config = get_settings()
    catalog = LoadCatalog(load_loads(config.LOADS_DATA_PATH))
    catalog_loads.set(len(catalog))
    logger.info(
        "Load catalog ready",
        path=config.LOADS_DATA_PATH,
        loads=len(catalog),
    )
    return catalog


@lru_cache()
def get_carrier_registry() -> CarrierRegistry:
    """
    Get the carrier registry selected by CARRIER_REGISTRY.

    Returns:
        StaticCarrierRegistry or FMCSACarrierRegistry

    Raises:
        ValueError: Unknown backend name or missing backend configuration
    """
    config = get_settings()
    backend = config.CARRIER_REGISTRY.lower()

    if backend == "static":
        return StaticCarrierRegistry(config.KNOWN_MC_NUMBERS)
    if backend == "fmcsa":
        return FMCSACarrierRegistry(
            base_url=config.FMCSA_BASE_URL,
            web_key=config.FMCSA_WEB_KEY or "",
            timeout=config.FMCSA_TIMEOUT,
        )
    raise ValueError(
        f"Unknown CARRIER_REGISTRY {config.CARRIER_REGISTRY!r} (expected 'static' or 'fmcsa')"
    )


def get_carrier_verifier(
    registry: CarrierRegistry = Depends(get_carrier_registry),
) -> CarrierVerifier:
    """
    Create carrier verifier around the registry singleton.

    Note: CarrierVerifier is NOT cached because it's lightweight and
    stateless. The registry (which may hold an HTTP pool) is the singleton.
    """
    return CarrierVerifier(registry)


@lru_cache()
def get_metrics_source() -> MetricsSource:
    """
    Get the call metrics source selected by METRICS_SOURCE.

    Raises:
        ValueError: Unknown source name or missing source configuration
    """
    config = get_settings()
    source = config.METRICS_SOURCE.lower()

    if source == "static":
        return StaticMetricsSource()
    if source == "http":
        return HTTPMetricsSource(
            url=config.METRICS_SOURCE_URL or "",
            timeout=config.METRICS_SOURCE_TIMEOUT,
        )
    raise ValueError(
        f"Unknown METRICS_SOURCE {config.METRICS_SOURCE!r} (expected 'static' or 'http')"
    )


@lru_cache()
def get_call_classifier() -> CallClassifier:
    """
    Get classifier singleton.

    CLASSIFIER_SEED fixes the placeholder call_duration sequence.
    """
    config = get_settings()
    return CallClassifier(rng=random.Random(config.CLASSIFIER_SEED))


@lru_cache()
def get_dashboard_renderer() -> DashboardRenderer:
    """Get dashboard renderer singleton (template loaded once)."""
    config = get_settings()
    return DashboardRenderer(
        title="Carrier Sales Dashboard",
        refresh_seconds=config.DASHBOARD_REFRESH_SECONDS,
    )
