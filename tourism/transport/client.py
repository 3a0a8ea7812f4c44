"""HTTP transport for tourism endpoints.

Performs one blocking GET per call and hands back the status code and raw
body. No retries, no caching, no JSON decoding.
"""

import logging
import ssl
import threading
from typing import Protocol

import httpx

from tourism.core.types import TransportResponse
from tourism.exceptions import ServerError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_ACCEPT = "application/json"


class Transport(Protocol):
    """Anything that can execute a single request for a URI."""

    def execute(self, uri: str) -> TransportResponse: ...

    def close(self) -> None: ...


class TransportClient:
    """httpx-backed transport with a fixed timeout and Accept header.

    Usage:
        with TransportClient(timeout=10.0) as transport:
            response = transport.execute("https://example.org/tourism/")
            if response.ok:
                data = response.json()
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        accept: str = DEFAULT_ACCEPT,
        transport: httpx.BaseTransport | None = None,
    ):
        self._timeout = timeout
        self._accept = accept
        self._transport = transport  # injected in tests
        self._client: httpx.Client | None = None
        self._lock = threading.Lock()

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            with self._lock:
                # Double-check after acquiring lock
                if self._client is None:
                    self._client = httpx.Client(
                        timeout=self._timeout,
                        headers={"Accept": self._accept},
                        transport=self._transport,
                    )
        return self._client

    def _is_ssl_error(self, error: Exception) -> bool:
        """Check if an error is SSL-related."""
        if isinstance(error, ssl.SSLError):
            return True
        error_str = str(error).lower()
        return "ssl" in error_str or "eof occurred" in error_str

    def execute(self, uri: str) -> TransportResponse:
        """GET a URI.

        Args:
            uri: Fully built request URI

        Returns:
            Status code and body of the response, whatever the status

        Raises:
            ServerError: no response was received (status_code is None)
        """
        logger.debug("[HTTP] GET %s", uri)
        try:
            response = self._get_client().get(uri)
        except (httpx.RequestError, RuntimeError, OSError) as e:
            # RuntimeError: "Cannot send a request, as the client has been closed"
            logger.warning("[HTTP] Request failed for %s: %s", uri, e)

            # Reset connection pool on SSL errors so the next call starts fresh
            if self._is_ssl_error(e):
                logger.info("[HTTP] SSL error detected, resetting connection pool")
                self._reset_client()

            raise ServerError(f"Request to {uri} failed: {e}") from e

        if response.status_code != 200:
            logger.warning("[HTTP] %d for %s", response.status_code, uri)
        return TransportResponse(status_code=response.status_code, body=response.text)

    def _reset_client(self) -> None:
        """Reset the HTTP client to clear stale connections."""
        with self._lock:
            if self._client:
                try:
                    self._client.close()
                except (httpx.HTTPError, RuntimeError, OSError) as e:
                    logger.debug("[HTTP] Ignoring error while closing client: %s", e)
                self._client = None

    def close(self) -> None:
        """Close the HTTP client."""
        with self._lock:
            if self._client:
                self._client.close()
                self._client = None

    def __enter__(self) -> "TransportClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
