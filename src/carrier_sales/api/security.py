"""API key authentication for /api routes."""

import secrets
from typing import Optional

import structlog
from fastapi import Depends, Header

from carrier_sales.api.dependencies import get_settings
from carrier_sales.config import Settings
from carrier_sales.exceptions import AuthenticationError

logger = structlog.get_logger(__name__)


def extract_api_key(
    x_api_key: Optional[str],
    authorization: Optional[str],
) -> Optional[str]:
    """Prefer X-API-Key; fall back to an Authorization bearer token."""
    if x_api_key:
        return x_api_key.strip()
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token:
            return token.strip()
    return None


def require_api_key(
    x_api_key: Optional[str] = Header(default=None),
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Reject the request unless it carries the configured API key.

    Accepts either "X-API-Key: <key>" or "Authorization: Bearer <key>".
    When API_KEY is not configured, authentication is disabled.

    Raises:
        AuthenticationError: Key missing or wrong
    """
    if not settings.API_KEY:
        return

    supplied = extract_api_key(x_api_key, authorization)
    if not supplied or not secrets.compare_digest(
        supplied.encode("utf-8"), settings.API_KEY.encode("utf-8")
    ):
        logger.warning("Rejected request with missing or invalid API key")
        raise AuthenticationError()
