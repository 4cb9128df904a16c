# ABOUTME: HTTP client for the remote document store's REST API.
# ABOUTME: Provides retry with backoff, and injectable transport for testing.

import logging
import time
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class RemoteFetchError(Exception):
    """Raised when a request to the remote store cannot be completed."""


class HttpStatusError(RemoteFetchError):
    """Raised for a non-retryable HTTP error status."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP {status_code} from {url}")


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for JSON requests against the document store API."""

    def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]: ...

    def close(self) -> None: ...


class LibrisHttpClient:
    """HTTP client with retry for document store calls.

    Wraps httpx.Client with retry logic for transient failures (429, 5xx).
    An API key, when given, is sent as the ``key`` query parameter.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": "libris/0.1.0"},
            "timeout": timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)
        self._api_key = api_key
        self._max_retries = max_retries
        self._retry_delay = retry_delay

    def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a request, retrying transient failures.

        Args:
            method: HTTP method, e.g. "GET" or "PATCH".
            url: The URL to request.
            params: Optional query parameters. List values repeat the key.
            json: Optional JSON request body.

        Returns:
            Parsed JSON response body ({} for an empty body).

        Raises:
            HttpStatusError: On a non-retryable HTTP error status.
            RemoteFetchError: On transport errors or exhausted retries.
        """
        query = dict(params or {})
        if self._api_key:
            query["key"] = self._api_key

        attempts = 1 + self._max_retries
        last_status = 0
        for attempt in range(attempts):
            try:
                response = self._client.request(method, url, params=query, json=json)
                last_status = response.status_code
            except httpx.HTTPError as exc:
                raise RemoteFetchError(f"Request failed: {method} {url}: {exc}") from exc

            if response.is_success:
                return response.json() if response.content else {}

            if response.status_code not in _RETRYABLE_STATUS_CODES:
                raise HttpStatusError(response.status_code, url)

            if attempt < attempts - 1:
                delay = self._retry_delay * (2**attempt)
                logger.warning(
                    "HTTP %d from %s, retrying in %.1fs (attempt %d/%d)",
                    response.status_code,
                    url,
                    delay,
                    attempt + 1,
                    self._max_retries,
                )
                time.sleep(delay)

        raise RemoteFetchError(f"HTTP {last_status} from {url} after {attempts} attempts")

    def close(self) -> None:
        self._client.close()
