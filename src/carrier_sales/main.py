"""
FastAPI application entry point for the Carrier Sales API.
"""

import structlog
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from carrier_sales.api.dependencies import (
    get_carrier_registry,
    get_load_catalog,
    get_metrics_source,
)
from carrier_sales.api.error_handlers import EXCEPTION_HANDLERS
from carrier_sales.api.middleware import RequestTracingMiddleware
from carrier_sales.api.routes_calls import router as calls_router
from carrier_sales.api.routes_carriers import router as carriers_router
from carrier_sales.api.routes_loads import router as loads_router
from carrier_sales.api.routes_system import dashboard_router
from carrier_sales.api.routes_system import router as system_router
from carrier_sales.api.security import require_api_key
from carrier_sales.config import settings
from carrier_sales.logging_config import configure_logging

# Configure structured logging before the app is built
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT, version=settings.APP_VERSION)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Load search, carrier verification and call analytics for inbound carrier sales",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Added before CORS so it runs inside it; preflight responses carry no request id
app.add_middleware(RequestTracingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

# Include routers
api_dependencies = [Depends(require_api_key)]
app.include_router(system_router, tags=["system"])
app.include_router(loads_router, prefix="/api/loads", tags=["loads"], dependencies=api_dependencies)
app.include_router(carriers_router, prefix="/api/carriers", tags=["carriers"], dependencies=api_dependencies)
app.include_router(calls_router, prefix="/api/calls", tags=["calls"], dependencies=api_dependencies)
if settings.DASHBOARD_ENABLED:
    app.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])


@app.on_event("startup")
async def startup():
    """Application startup - build the catalog and backends once."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        carrier_registry=settings.CARRIER_REGISTRY,
        metrics_source=settings.METRICS_SOURCE,
    )

    if not settings.API_KEY:
        logger.warning("API_KEY not set - /api routes are unauthenticated")

    catalog = get_load_catalog()
    if len(catalog) == 0:
        logger.warning("Load catalog is empty", path=settings.LOADS_DATA_PATH)

    # Fail fast on misconfigured backends
    get_carrier_registry()
    get_metrics_source()

    logger.info("Application startup complete")


@app.on_event("shutdown")
async def shutdown():
    """Application shutdown - release backend HTTP pools."""
    logger.info("Application shutdown")
    get_carrier_registry().close()
    get_metrics_source().close()
    logger.info("Application shutdown complete")


# Prometheus metrics instrumentation
if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "carrier_sales.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
