"""httpx-backed transport."""

import logging

import httpx

from onecall.core.exceptions import TransportError
from onecall.weather.protocols import TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Blocking GET transport on top of an ``httpx.Client``."""

    TIMEOUT = 30.0

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float | None = None,
    ):
        """Initialize the transport.

        Args:
            client: Optional httpx client (for testing/reuse)
            timeout: Request timeout in seconds when creating our own client
        """
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout if timeout is not None else self.TIMEOUT

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self._timeout)
        return self._client

    def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def get(self, url: str) -> TransportResponse:
        """Send a GET request and read the whole body.

        Raises:
            TransportError: On invalid URLs, connection errors, timeouts or
                body read failures
        """
        client = self._get_client()
        try:
            response = client.get(url)
            body = response.read()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Request failed: {e}", cause=e) from e

        logger.debug(f"HTTP {response.status_code} ({len(body)} bytes)")
        return TransportResponse(response.status_code, body)
