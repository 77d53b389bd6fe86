"""Opt-in logging of backend traffic, enabled with JP_LOG_REQUESTS=true."""

import json
import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REQUEST_LOG_ENV_VAR = "JP_LOG_REQUESTS"
REDACTED = "***REDACTED***"
_SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def should_log_requests() -> bool:
    """Whether JP_LOG_REQUESTS is set to "true" (case-insensitive)."""
    return os.getenv(REQUEST_LOG_ENV_VAR, "").lower() == "true"


def _full_url(url: str, params: dict[str, Any] | None) -> str:
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(sorted(params.items()))}"


def _redact(headers: dict[str, str]) -> dict[str, str]:
    return {
        name: REDACTED if name.lower() in _SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log an outgoing backend request.

    Args:
        method: HTTP method.
        url: Request URL without the query string.
        params: Query parameters, appended sorted by name.
        headers: Request headers. Credentials are redacted.
    """
    if not should_log_requests():
        return

    message = f"API Request: {method} {_full_url(url, params)}"
    if headers:
        message += f"\nHeaders: {json.dumps(_redact(headers), indent=2)}"
    logger.info(message)


def log_api_response(url: str, status: int, elapsed_seconds: float) -> None:
    """Log the status and latency of a backend response."""
    if not should_log_requests():
        return
    logger.info(f"API Response: {status} from {url} in {elapsed_seconds * 1000:.0f} ms")
