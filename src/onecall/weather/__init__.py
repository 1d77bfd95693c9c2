"""One Call request building, response decoding and HTTP client."""

from onecall.weather.client import OneCallClient, fetch_forecast
from onecall.weather.models import ForecastResponse

__all__ = ["OneCallClient", "ForecastResponse", "fetch_forecast"]
