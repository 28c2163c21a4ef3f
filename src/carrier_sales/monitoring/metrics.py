"""Custom Prometheus metrics for the Carrier Sales API.

These metrics are exposed at /metrics alongside the HTTP metrics produced
by prometheus-fastapi-instrumentator.
"""

from prometheus_client import Counter, Gauge, Histogram

# === Load Catalog Metrics ===

catalog_loads = Gauge(
    "catalog_loads",
    "Number of loads held by the catalog",
)

load_searches_total = Counter(
    "load_searches_total",
    "Total load searches by whether any criteria were supplied",
    ["filtered"],
)

load_search_results = Histogram(
    "load_search_results",
    "Number of loads returned per search",
    buckets=[0, 1, 2, 5, 10, 25, 50, 100, 250],
)
"""
Result-size histogram.

A growing share of empty results usually means the agent is asking for
lanes or equipment the board does not carry.
"""

# === Carrier Verification Metrics ===

carrier_verifications_total = Counter(
    "carrier_verifications_total",
    "Total carrier verifications by registry backend and resulting status",
    ["registry", "status"],
)
"""
Labels:
- registry: static, fmcsa
- status: ACTIVE, INVALID, error
"""

# === Call Classification Metrics ===

call_classifications_total = Counter(
    "call_classifications_total",
    "Total call classifications by outcome and sentiment",
    ["outcome", "sentiment"],
)
