"""Transport protocol (interface) for the forecast client."""

from typing import NamedTuple, Protocol


class TransportResponse(NamedTuple):
    """Status code and raw body of an HTTP response."""

    status_code: int
    body: bytes

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    """Protocol for something that can perform a blocking GET."""

    def get(self, url: str) -> TransportResponse:
        """Send a GET request.

        Args:
            url: Fully formed request URL

        Returns:
            Status code and body, whatever the status

        Raises:
            TransportError: If no response could be obtained
        """
        ...
