"""One Call API client."""

import json
import logging
import re
from decimal import Decimal

from onecall.core.exceptions import DecodeError, TransportError
from onecall.weather.decoder import decode_forecast
from onecall.weather.models import ForecastResponse
from onecall.weather.params import OptionalParameter
from onecall.weather.protocols import Transport, TransportResponse
from onecall.weather.request import BASE_URL, build_url
from onecall.weather.transport import HttpxTransport

logger = logging.getLogger(__name__)

_APPID_RE = re.compile(r"(appid=)[^&]*")


def _redact(url: str) -> str:
    return _APPID_RE.sub(r"\1***", url)


def _service_message(body: bytes) -> str | None:
    """Extract the ``message`` of a structured error body, if there is one."""
    try:
        data = json.loads(body)
    except (ValueError, RecursionError):
        return None
    if isinstance(data, dict) and data.get("message") is not None:
        return str(data["message"])
    return None


def _is_json(body: bytes) -> bool:
    try:
        json.loads(body)
    except (ValueError, RecursionError):
        return False
    return True


class OneCallClient:
    """Client for the OpenWeatherMap One Call forecast endpoint.

    Each ``get_forecast`` call performs exactly one request. There is no
    retry or caching; transport and decode failures are raised as
    ``TransportError`` and ``DecodeError`` so callers can tell them apart.
    """

    BASE_URL = BASE_URL

    def __init__(
        self,
        appid: str,
        transport: Transport | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize the client.

        Args:
            appid: Access token sent with every request
            transport: Optional transport (for testing/reuse)
            base_url: Endpoint override
            timeout: Request timeout in seconds for the default transport
        """
        self.appid = appid
        self.base_url = base_url or self.BASE_URL
        self._transport = transport
        self._owns_transport = transport is None
        self._timeout = timeout

    def _get_transport(self) -> Transport:
        """Get or create the transport."""
        if self._transport is None:
            self._transport = HttpxTransport(timeout=self._timeout)
        return self._transport

    def close(self) -> None:
        """Close the transport if we own it."""
        if self._owns_transport and self._transport is not None:
            self._transport.close()
            self._transport = None

    def __enter__(self) -> "OneCallClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_forecast(
        self,
        lat: Decimal | int | str | float,
        lon: Decimal | int | str | float,
        *params: OptionalParameter,
    ) -> ForecastResponse:
        """Fetch and decode the forecast for a location.

        Args:
            lat: Latitude
            lon: Longitude
            *params: Optional parameters (exclude_sections, units, language)

        Returns:
            The decoded forecast

        Raises:
            InvalidLocationError: If a coordinate is not a finite number
            TransportError: If no usable response was received
            DecodeError: If the response body does not match the schema
        """
        url = build_url(lat, lon, self.appid, *params, base_url=self.base_url)
        logger.debug(f"GET {_redact(url)}")

        try:
            response = self._get_transport().get(url)
        except TransportError:
            raise
        except Exception as e:
            raise TransportError(f"Request failed: {e}", cause=e) from e

        if not response.is_success:
            return self._handle_error_status(response)
        return decode_forecast(response.body)

    def _handle_error_status(self, response: TransportResponse) -> ForecastResponse:
        """Decode a non-2xx response, which may still carry a usable payload."""
        status = response.status_code
        logger.warning(f"One Call API returned HTTP {status}")

        if not _is_json(response.body):
            raise TransportError(
                f"HTTP {status}: service returned no JSON payload",
                status_code=status,
            )

        try:
            return decode_forecast(response.body)
        except DecodeError as e:
            message = _service_message(response.body)
            detail = message if message is not None else str(e)
            raise DecodeError(
                f"HTTP {status}: {detail}",
                stage=e.stage,
                cause=e,
                status_code=status,
            ) from e


def fetch_forecast(
    lat: Decimal | int | str | float,
    lon: Decimal | int | str | float,
    appid: str,
    *params: OptionalParameter,
    transport: Transport | None = None,
    base_url: str | None = None,
) -> ForecastResponse:
    """Fetch a forecast with a short-lived client.

    See ``OneCallClient.get_forecast`` for arguments and errors.
    """
    with OneCallClient(appid, transport=transport, base_url=base_url) as client:
        return client.get_forecast(lat, lon, *params)
