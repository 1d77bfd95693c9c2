"""Pytest fixtures for onecall tests."""

import json
from decimal import Decimal
from pathlib import Path

import pytest

from onecall.weather.decoder import decode_forecast
from onecall.weather.models import ForecastResponse
from onecall.weather.protocols import TransportResponse

FIXTURES = Path(__file__).parent / "fixtures"

APPID = "c8b58ab0-1360-4a3a-9f70-3742e48ad2fe"


class FakeTransport:
    """Transport returning a canned response and recording requested URLs."""

    def __init__(self, response: TransportResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.urls: list[str] = []
        self.closed = False

    def get(self, url: str) -> TransportResponse:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def sample_body() -> bytes:
    """Canned One Call response body (Tulsa area, light rain, heat advisory)."""
    return (FIXTURES / "sample.json").read_bytes()


@pytest.fixture
def sample_data(sample_body: bytes) -> dict:
    """Sample body parsed with exact decimals, for building variants."""
    return json.loads(sample_body, parse_float=Decimal)


@pytest.fixture
def sample_forecast(sample_body: bytes) -> ForecastResponse:
    return decode_forecast(sample_body)


@pytest.fixture
def ok_transport(sample_body: bytes) -> FakeTransport:
    return FakeTransport(TransportResponse(200, sample_body))


def dump(data: object) -> str:
    """Serialize a test document; Decimals become numeric strings."""
    return json.dumps(data, default=str)
