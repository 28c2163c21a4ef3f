"""
Domain exceptions for the Carrier Sales API.

Each exception maps to one error kind reported at the HTTP boundary
(see api/error_handlers.py):
- LoadNotFoundError -> 404 not_found
- InvalidInputError -> 400 invalid_input
- AuthenticationError -> 401 unauthorized
- CarrierRegistryError, MetricsSourceError -> 502 upstream_error
Anything else is treated as an internal error.
"""

from typing import Any


class CarrierSalesError(Exception):
    """
    Base exception for all domain errors.

    All service-specific exceptions inherit from this to allow catching
    any domain error with a single except clause.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class LoadNotFoundError(CarrierSalesError):
    """Raised when no load in the catalog has the requested identifier."""

    def __init__(self, load_id: str):
        super().__init__("Load not found", details={"load_id": load_id})
        self.load_id = load_id


class InvalidInputError(CarrierSalesError):
    """
    Raised when a required field is missing or empty.

    Client-facing: reported as-is, never retried.
    """

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, details)
        self.field = field


class CarrierRegistryError(CarrierSalesError):
    """
    Raised when the external carrier registry cannot answer.

    Includes network errors, timeouts and non-2xx responses. A registry
    that answers "not found" is NOT an error (the carrier is INVALID).
    """
    pass


class MetricsSourceError(CarrierSalesError):
    """Raised when a remote metrics source cannot produce a snapshot."""
    pass


class AuthenticationError(CarrierSalesError):
    """Raised when an /api request lacks a valid API key."""

    def __init__(self, message: str = "Valid API key required"):
        super().__init__(message)
