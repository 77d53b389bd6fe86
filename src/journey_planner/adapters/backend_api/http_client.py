"""HTTP client for the routing backend."""

import asyncio
import json
import logging
import time
from typing import TYPE_CHECKING, Any

import aiohttp

from journey_planner.adapters.api_request_logger import log_api_request, log_api_response
from journey_planner.adapters.backend_api.constants import DEFAULT_HEADERS
from journey_planner.adapters.config.app_config import AppConfig
from journey_planner.domain.errors import (
    BackendHttpError,
    MalformedResponseError,
    RouteTimeoutError,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class BackendHttpClient:
    """Performs JSON GET requests against the routing backend."""

    def __init__(self, session: "ClientSession", config: AppConfig) -> None:
        """Initialize with an aiohttp session and the application configuration."""
        self._session = session
        self._base_url = config.api_base_url
        self._timeout_seconds = config.request_timeout_seconds

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET a backend path and decode the JSON body.

        Args:
            path: Path below the API base URL, starting with "/".
            params: Query parameters. Booleans are sent as "true"/"false".

        Returns:
            The decoded JSON body.

        Raises:
            RouteTimeoutError: If no response arrives within the configured timeout.
            BackendHttpError: If the backend is unreachable or answers with an error status.
            MalformedResponseError: If the body is not JSON.
        """
        url = f"{self._base_url}{path}"
        query = self._encode_params(params)
        log_api_request("GET", url, query, DEFAULT_HEADERS)

        timeout = aiohttp.ClientTimeout(total=self._timeout_seconds)
        started = time.monotonic()
        try:
            async with self._session.get(
                url, params=query, headers=DEFAULT_HEADERS, timeout=timeout
            ) as response:
                log_api_response(url, response.status, time.monotonic() - started)
                if response.status != 200:
                    await self._raise_for_status(response, url)
                return await self._decode_body(response, url)
        except asyncio.TimeoutError as e:
            logger.error(f"Request to {url} timed out after {self._timeout_seconds:g}s")
            raise RouteTimeoutError(self._timeout_seconds) from e
        except aiohttp.ClientError as e:
            logger.warning(f"Error requesting {url}: {e}")
            raise BackendHttpError(
                f"Could not reach the routing backend: {e}", retryable=True
            ) from e

    @staticmethod
    def _encode_params(params: dict[str, Any] | None) -> dict[str, str | int | float] | None:
        """Convert query parameters to types aiohttp accepts."""
        if not params:
            return None
        return {
            key: str(value).lower() if isinstance(value, bool) else value
            for key, value in params.items()
            if value is not None
        }

    async def _decode_body(self, response: "ClientResponse", url: str) -> Any:
        """Decode a successful response body."""
        try:
            return await response.json(content_type=None)
        except (aiohttp.ContentTypeError, json.JSONDecodeError, ValueError) as e:
            logger.error(f"Backend returned a non-JSON body for {url}: {e}")
            raise MalformedResponseError("Backend returned an unreadable response") from e

    async def _raise_for_status(self, response: "ClientResponse", url: str) -> None:
        """Log an error response and raise BackendHttpError."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        logger.error(f"Backend returned status {response.status} for {url}: {error_body}")

        reason = f"HTTP error! status: {response.status}"
        if response.status == 422:
            reason = self._extract_validation_message(error_text) or reason
        raise BackendHttpError(
            reason, status_code=response.status, retryable=response.status >= 500
        )

    @staticmethod
    def _extract_validation_message(error_text: str) -> str | None:
        """Pull the 'detail' or 'message' field out of a validation error body."""
        try:
            data = json.loads(error_text)
        except (TypeError, ValueError):
            return None
        if not isinstance(data, dict):
            return None
        detail = data.get("detail") or data.get("message")
        if not detail:
            return None
        return detail if isinstance(detail, str) else json.dumps(detail)
