"""Monitoring and metrics instrumentation for the Carrier Sales API.

Exports custom Prometheus metrics for operational monitoring.
"""

from carrier_sales.monitoring.metrics import (
    call_classifications_total,
    carrier_verifications_total,
    catalog_loads,
    load_search_results,
    load_searches_total,
)

__all__ = [
    "catalog_loads",
    "load_searches_total",
    "load_search_results",
    "carrier_verifications_total",
    "call_classifications_total",
]
