"""
Smoke test against a running Carrier Sales API.

Exercises every endpoint once and checks the error paths (bad API key,
missing MC number, unknown load). Exits non-zero if any check fails.

Usage:
  carrier-sales-smoke --base-url http://localhost:8000 --api-key demo-key
"""

import argparse
import os
import sys
from typing import Callable

import httpx
import structlog

from carrier_sales.exceptions import CarrierSalesError

logger = structlog.get_logger(__name__)

Check = Callable[[httpx.Client], None]


class SmokeCheckError(CarrierSalesError):
    """A response did not look the way a healthy server answers."""


def expect(condition: bool, message: str, **details) -> None:
    if not condition:
        raise SmokeCheckError(message, details=details)


def check_health(client: httpx.Client) -> None:
    response = client.get("/health")
    response.raise_for_status()
    status = response.json().get("status")
    expect(status == "OK", "Health status is not OK", status=status)


def check_loads(client: httpx.Client) -> None:
    listing = client.get("/api/loads")
    listing.raise_for_status()
    loads = listing.json()["data"]
    if loads:
        first_id = loads[0]["load_id"]
        single = client.get(f"/api/loads/{first_id}")
        single.raise_for_status()
        got = single.json()["data"]["load_id"]
        expect(got == first_id, "Load lookup returned another load", expected=first_id, got=got)

    search = client.post(
        "/api/loads/search",
        json={"origin": "Los Angeles", "destination": "Phoenix", "equipment_type": "Dry Van"},
    )
    search.raise_for_status()
    body = search.json()
    expect(
        body["count"] == len(body["data"]),
        "Search count does not match data",
        count=body["count"],
        returned=len(body["data"]),
    )


def check_carriers(client: httpx.Client) -> None:
    valid = client.post("/api/carriers/verify", json={"mc_number": "123456"})
    valid.raise_for_status()
    invalid = client.post("/api/carriers/verify", json={"mc_number": "999999"})
    invalid.raise_for_status()
    is_valid = invalid.json()["data"]["is_valid"]
    expect(is_valid is False, "Unknown MC number verified as valid", is_valid=is_valid)


def check_calls(client: httpx.Client) -> None:
    classify = client.post(
        "/api/calls/classify",
        json={
            "call_transcript": "Carrier was very interested in the load and accepted the price immediately.",
            "final_price": 1200,
            "negotiation_rounds": 1,
        },
    )
    classify.raise_for_status()
    outcome = classify.json()["data"]["outcome"]
    expect(outcome == "SUCCESS", "Agreed call not classified as SUCCESS", outcome=outcome)

    metrics = client.get("/api/calls/metrics")
    metrics.raise_for_status()
    expect("total_calls" in metrics.json()["data"], "Metrics snapshot has no total_calls")


def check_error_handling(client: httpx.Client) -> None:
    bad_key = client.get("/api/loads", headers={"X-API-Key": "invalid-key"})
    # 200 when the server runs without API_KEY
    expect(bad_key.status_code in (200, 401), "Bad API key not rejected", status_code=bad_key.status_code)

    missing_mc = client.post("/api/carriers/verify", json={})
    expect(missing_mc.status_code == 400, "Missing MC number not rejected", status_code=missing_mc.status_code)

    missing_load = client.get("/api/loads/NONEXISTENT")
    expect(missing_load.status_code == 404, "Unknown load not reported", status_code=missing_load.status_code)


CHECKS: list[tuple[str, Check]] = [
    ("health", check_health),
    ("loads", check_loads),
    ("carriers", check_carriers),
    ("calls", check_calls),
    ("error_handling", check_error_handling),
]


def run_checks(client: httpx.Client) -> int:
    """Run every check; return the number of failures."""
    failures = 0
    for name, check in CHECKS:
        try:
            check(client)
        except (httpx.HTTPError, SmokeCheckError, KeyError, ValueError) as exc:
            failures += 1
            logger.error("Smoke check failed", check=name, error=repr(exc))
        else:
            logger.info("Smoke check passed", check=name)
    return failures


def main() -> None:
    parser = argparse.ArgumentParser(description="Smoke test a running Carrier Sales API.")
    parser.add_argument(
        "--base-url",
        default=os.getenv("API_BASE_URL", "http://localhost:8000"),
        help="API base URL (default: $API_BASE_URL or http://localhost:8000)",
    )
    parser.add_argument(
        "--api-key",
        default=os.getenv("API_KEY", "demo-key"),
        help="API key sent as X-API-Key (default: $API_KEY or demo-key)",
    )
    args = parser.parse_args()

    with httpx.Client(
        base_url=args.base_url,
        headers={"X-API-Key": args.api_key},
        timeout=10.0,
    ) as client:
        failures = run_checks(client)

    logger.info("Smoke test finished", passed=len(CHECKS) - failures, total=len(CHECKS))
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
