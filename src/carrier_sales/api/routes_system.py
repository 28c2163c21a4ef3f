"""
Service routes: root info, health check and the metrics dashboard.

None of these require an API key. The dashboard JSON endpoint serves the
same snapshot as /api/calls/metrics so the browser page can poll it
without embedding a key.
"""

from datetime import datetime

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse

from carrier_sales.api.dependencies import (
    get_carrier_registry,
    get_dashboard_renderer,
    get_load_catalog,
    get_metrics_source,
    get_settings,
)
from carrier_sales.api.models import CallMetricsResponse, HealthResponse
from carrier_sales.calls.metrics_source import MetricsSource
from carrier_sales.carriers.base_registry import CarrierRegistry
from carrier_sales.config import Settings
from carrier_sales.dashboard.renderer import DashboardRenderer
from carrier_sales.loads.catalog import LoadCatalog

logger = structlog.get_logger(__name__)

router = APIRouter()
dashboard_router = APIRouter()


@router.get("/", summary="Service info")
def root(settings: Settings = Depends(get_settings)):
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/health",
        "api": "/api",
        "dashboard": "/dashboard" if settings.DASHBOARD_ENABLED else None,
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Service health check",
    description="""
    Report service status and the configured backends.

    An empty catalog is reported but does not make the service unhealthy:
    a missing data file degrades to zero loads by design of the loader.
    """,
)
def health_check(
    settings: Settings = Depends(get_settings),
    catalog: LoadCatalog = Depends(get_load_catalog),
    registry: CarrierRegistry = Depends(get_carrier_registry),
    metrics_source: MetricsSource = Depends(get_metrics_source),
) -> HealthResponse:
    services = {
        "catalog_loads": len(catalog),
        "carrier_registry": registry.name,
        "metrics_source": metrics_source.name,
    }
    logger.debug("Health check", services=services)
    return HealthResponse(
        status="OK",
        version=settings.APP_VERSION,
        services=services,
        timestamp=datetime.utcnow(),
    )


@dashboard_router.get(
    "",
    response_class=HTMLResponse,
    summary="Call metrics dashboard",
)
def dashboard_page(
    renderer: DashboardRenderer = Depends(get_dashboard_renderer),
) -> HTMLResponse:
    return HTMLResponse(content=renderer.render())


@dashboard_router.get(
    "/metrics",
    response_model=CallMetricsResponse,
    summary="Metrics snapshot for the dashboard",
)
def dashboard_metrics(
    source: MetricsSource = Depends(get_metrics_source),
) -> CallMetricsResponse:
    return CallMetricsResponse(data=source.get_snapshot())
