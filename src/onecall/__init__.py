"""onecall - typed client for the OpenWeatherMap One Call forecast endpoint."""

__version__ = "0.1.0"

from onecall.core.exceptions import (
    ConfigError,
    DecodeError,
    DecodeStage,
    InvalidLocationError,
    OneCallError,
    TransportError,
)
from onecall.weather.client import OneCallClient, fetch_forecast
from onecall.weather.decoder import decode_forecast, encode_forecast
from onecall.weather.models import (
    Alert,
    CurrentConditions,
    DailyPoint,
    DayFeelsLike,
    DayTemperature,
    ForecastResponse,
    HourlyPoint,
    MinutelyPoint,
    WeatherCondition,
)
from onecall.weather.params import (
    OptionalParameter,
    Units,
    exclude_sections,
    imperial_units,
    language,
    metric_units,
    standard_units,
    units,
)
from onecall.weather.request import build_url

__all__ = [
    "__version__",
    "fetch_forecast",
    "OneCallClient",
    "build_url",
    "decode_forecast",
    "encode_forecast",
    "OptionalParameter",
    "Units",
    "exclude_sections",
    "units",
    "standard_units",
    "metric_units",
    "imperial_units",
    "language",
    "ForecastResponse",
    "CurrentConditions",
    "MinutelyPoint",
    "HourlyPoint",
    "DailyPoint",
    "DayTemperature",
    "DayFeelsLike",
    "WeatherCondition",
    "Alert",
    "OneCallError",
    "ConfigError",
    "InvalidLocationError",
    "TransportError",
    "DecodeError",
    "DecodeStage",
]
