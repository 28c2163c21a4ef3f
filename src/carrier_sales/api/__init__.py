"""
FastAPI API routes and endpoints.

- routes_loads.py: Load catalog (GET /api/loads, GET /api/loads/{id}, POST /api/loads/search)
- routes_carriers.py: Carrier verification (POST /api/carriers/verify)
- routes_calls.py: Call analytics (POST /api/calls/classify, GET /api/calls/metrics)
- routes_system.py: Root, health check and dashboard
- dependencies.py: Dependency injection for catalog, registry, classifier, etc.
- security.py: API key check for /api routes
- models.py: API-specific request/response models
- error_handlers.py: Exception handlers for structured error responses
"""

from carrier_sales.api import dependencies, error_handlers, models
from carrier_sales.api.routes_calls import router as calls_router
from carrier_sales.api.routes_carriers import router as carriers_router
from carrier_sales.api.routes_loads import router as loads_router
from carrier_sales.api.routes_system import dashboard_router
from carrier_sales.api.routes_system import router as system_router

__all__ = [
    "loads_router",
    "carriers_router",
    "calls_router",
    "system_router",
    "dashboard_router",
    "dependencies",
    "error_handlers",
    "models",
]
