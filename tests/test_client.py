"""Tests for the One Call client and transport."""

import json
from decimal import Decimal

import httpx
import pytest

from conftest import APPID, FakeTransport
from onecall.core.exceptions import DecodeError, DecodeStage, InvalidLocationError, TransportError
from onecall.weather.client import OneCallClient, fetch_forecast
from onecall.weather.params import exclude_sections, language, metric_units
from onecall.weather.protocols import TransportResponse
from onecall.weather.request import BASE_URL
from onecall.weather.transport import HttpxTransport

LAT = Decimal("3.14")
LON = Decimal("5.67")
DEFAULT_URL = f"{BASE_URL}?lat=3.14&lon=5.67&appid={APPID}"
OPTIONS_URL = DEFAULT_URL + "&excludes=foo,bar&units=metric&lang=en"


class TestGetForecast:
    """End-to-end through a fake transport."""

    def test_default_parameters(self, ok_transport):
        client = OneCallClient(APPID, transport=ok_transport)
        result = client.get_forecast(LAT, LON)

        assert ok_transport.urls == [DEFAULT_URL]
        assert result.current.temp == Decimal("284.07")
        assert result.alerts[0].tags == ("Extreme temperature value",)

    def test_optional_parameters(self, ok_transport, sample_forecast):
        client = OneCallClient(APPID, transport=ok_transport)
        result = client.get_forecast(
            LAT, LON, exclude_sections(["foo", "bar"]), metric_units(), language("en")
        )

        assert ok_transport.urls == [OPTIONS_URL]
        assert result == sample_forecast

    def test_one_request_per_call(self, ok_transport):
        client = OneCallClient(APPID, transport=ok_transport)
        first = client.get_forecast(LAT, LON)
        second = client.get_forecast(LAT, LON)
        assert len(ok_transport.urls) == 2
        assert first == second
        assert first is not second

    def test_custom_base_url(self, ok_transport):
        client = OneCallClient(APPID, transport=ok_transport, base_url="http://localhost/onecall")
        client.get_forecast(LAT, LON)
        assert ok_transport.urls[0].startswith("http://localhost/onecall?lat=3.14")

    def test_injected_transport_not_closed(self, ok_transport):
        with OneCallClient(APPID, transport=ok_transport) as client:
            client.get_forecast(LAT, LON)
        assert ok_transport.closed is False

    def test_invalid_location_sends_nothing(self, ok_transport):
        client = OneCallClient(APPID, transport=ok_transport)
        with pytest.raises(InvalidLocationError):
            client.get_forecast(Decimal("NaN"), LON)
        assert ok_transport.urls == []


class TestFailures:
    """Transport and decode failures are distinguishable."""

    def test_transport_failure_propagates(self):
        cause = TransportError("connection refused")
        client = OneCallClient(APPID, transport=FakeTransport(error=cause))
        with pytest.raises(TransportError) as exc_info:
            client.get_forecast(LAT, LON)
        assert exc_info.value is cause

    def test_unexpected_transport_exception_wrapped(self):
        cause = ConnectionRefusedError("refused")
        client = OneCallClient(APPID, transport=FakeTransport(error=cause))
        with pytest.raises(TransportError) as exc_info:
            client.get_forecast(LAT, LON)
        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause

    def test_malformed_body_is_decode_error(self, sample_body):
        transport = FakeTransport(TransportResponse(200, sample_body[:50]))
        client = OneCallClient(APPID, transport=transport)
        with pytest.raises(DecodeError) as exc_info:
            client.get_forecast(LAT, LON)
        assert not isinstance(exc_info.value, TransportError)
        assert exc_info.value.stage is DecodeStage.SYNTAX

    def test_error_status_with_forecast_body_still_decodes(self, sample_body):
        transport = FakeTransport(TransportResponse(404, sample_body))
        result = OneCallClient(APPID, transport=transport).get_forecast(LAT, LON)
        assert result.current.temp == Decimal("284.07")

    def test_error_status_with_service_message(self):
        body = json.dumps({"cod": 401, "message": "Invalid API key."}).encode()
        transport = FakeTransport(TransportResponse(401, body))
        with pytest.raises(DecodeError) as exc_info:
            OneCallClient(APPID, transport=transport).get_forecast(LAT, LON)
        error = exc_info.value
        assert error.status_code == 401
        assert error.stage is DecodeStage.MISSING_FIELD
        assert "Invalid API key." in str(error)
        assert isinstance(error.cause, DecodeError)

    def test_error_status_without_json_is_transport_error(self):
        transport = FakeTransport(TransportResponse(502, b"<html>Bad Gateway</html>"))
        with pytest.raises(TransportError) as exc_info:
            OneCallClient(APPID, transport=transport).get_forecast(LAT, LON)
        assert exc_info.value.status_code == 502


class TestHttpxTransport:
    """The httpx transport against a mock HTTP layer."""

    def test_exact_url_requested(self, sample_body):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, content=sample_body)

        http = httpx.Client(transport=httpx.MockTransport(handler))
        result = fetch_forecast(
            LAT, LON, APPID,
            exclude_sections(["foo", "bar"]), metric_units(), language("en"),
            transport=HttpxTransport(http),
        )

        assert seen == [OPTIONS_URL]
        assert result.current.rain == {"1h": Decimal("0.21")}

    def test_returns_status_and_body(self):
        http = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(404, content=b"{}")))
        response = HttpxTransport(http).get("https://example.test/x")
        assert response == TransportResponse(404, b"{}")
        assert not response.is_success

    def test_connection_error_wrapped(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        transport = HttpxTransport(httpx.Client(transport=httpx.MockTransport(handler)))
        with pytest.raises(TransportError) as exc_info:
            transport.get("https://example.test/x")
        assert isinstance(exc_info.value.cause, httpx.ConnectError)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_invalid_url_wrapped(self):
        http = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        client = OneCallClient(APPID, transport=HttpxTransport(http), base_url="http://[::1")
        with pytest.raises(TransportError) as exc_info:
            client.get_forecast(LAT, LON)
        assert isinstance(exc_info.value.cause, httpx.InvalidURL)

    def test_timeout_wrapped(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = OneCallClient(
            APPID, transport=HttpxTransport(httpx.Client(transport=httpx.MockTransport(handler)))
        )
        with pytest.raises(TransportError):
            client.get_forecast(LAT, LON)

    def test_injected_client_not_closed(self):
        http = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        transport = HttpxTransport(http)
        transport.close()
        assert not http.is_closed

    def test_owned_client_closed(self):
        transport = HttpxTransport(timeout=5.0)
        http = transport._get_client()
        assert http.timeout.read == 5.0
        transport.close()
        assert http.is_closed
