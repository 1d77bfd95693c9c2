"""Forecast data models.

Every physical quantity is a ``Decimal`` so values survive decode and
re-encode exactly as the service sent them. Integer fields are strict: a
fractional or boolean value is a decode error rather than a silent coercion.
Optional quantities default to ``None`` so a missing field never reads as zero.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from onecall.core.utils import from_timestamp

Int64 = Annotated[StrictInt, Field(ge=-(2**63), le=2**63 - 1)]
Timestamp = Int64


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


def _null_as_empty(value: object) -> object:
    """Treat a JSON null sequence like an omitted one."""
    return () if value is None else value


class WeatherCondition(_Frozen):
    """A weather condition entry (code, group, description, icon)."""

    id: Int64 = Field(description="Condition code")
    main: str = Field(description="Condition group, e.g. 'Rain'")
    description: str = Field(description="Human readable condition")
    icon: str = Field(description="Icon identifier, e.g. '10d'")


class _HasWeather(_Frozen):
    weather: tuple[WeatherCondition, ...] = ()

    @field_validator("weather", mode="before")
    @classmethod
    def weather_null_as_empty(cls, value: object) -> object:
        return _null_as_empty(value)

    @property
    def condition(self) -> WeatherCondition | None:
        """First weather condition, if any."""
        return self.weather[0] if self.weather else None


class CurrentConditions(_HasWeather):
    """Current weather at the requested location."""

    dt: Timestamp
    sunrise: Timestamp
    sunset: Timestamp
    temp: Decimal
    feels_like: Decimal
    pressure: Int64 = Field(description="Sea level pressure, hPa")
    humidity: Int64 = Field(description="Relative humidity, %")
    dew_point: Decimal
    uvi: Decimal
    clouds: Int64 = Field(description="Cloud cover, %")
    visibility: Int64 = Field(description="Visibility, metres")
    wind_speed: Decimal
    wind_deg: Decimal
    wind_gust: Decimal | None = None
    rain: dict[str, Decimal] | None = Field(
        default=None, description="Precipitation by duration label, e.g. '1h'"
    )
    snow: dict[str, Decimal] | None = None


class MinutelyPoint(_Frozen):
    """Precipitation for one minute."""

    dt: Timestamp
    precipitation: Decimal


class HourlyPoint(_HasWeather):
    """Forecast for one hour."""

    dt: Timestamp
    temp: Decimal
    feels_like: Decimal
    pressure: Int64
    humidity: Int64
    dew_point: Decimal
    uvi: Decimal
    clouds: Int64
    visibility: Int64
    wind_speed: Decimal
    wind_deg: Decimal
    wind_gust: Decimal | None = None
    pop: Decimal = Field(description="Probability of precipitation, 0..1")
    rain: dict[str, Decimal] | None = None
    snow: dict[str, Decimal] | None = None


class DayTemperature(_Frozen):
    day: Decimal
    min: Decimal
    max: Decimal
    night: Decimal
    eve: Decimal
    morn: Decimal


class DayFeelsLike(_Frozen):
    day: Decimal
    night: Decimal
    eve: Decimal
    morn: Decimal


class DailyPoint(_HasWeather):
    """Forecast for one day."""

    dt: Timestamp
    sunrise: Timestamp
    sunset: Timestamp
    moonrise: Timestamp
    moonset: Timestamp
    moon_phase: Decimal = Field(description="0 and 1 are new moon, 0.5 full moon")
    temp: DayTemperature
    feels_like: DayFeelsLike
    pressure: Int64
    humidity: Int64
    dew_point: Decimal
    wind_speed: Decimal
    wind_deg: Decimal
    wind_gust: Decimal | None = None
    clouds: Int64
    pop: Decimal
    rain: Decimal | None = None
    snow: Decimal | None = None
    uvi: Decimal


class Alert(_Frozen):
    """A weather alert from a national warning system."""

    sender_name: str
    event: str
    start: Timestamp
    end: Timestamp
    description: str
    tags: tuple[str, ...] = ()

    @field_validator("tags", mode="before")
    @classmethod
    def tags_null_as_empty(cls, value: object) -> object:
        return _null_as_empty(value)

    @property
    def starts_at(self) -> datetime:
        return datetime.fromtimestamp(self.start, timezone.utc)

    @property
    def ends_at(self) -> datetime:
        return datetime.fromtimestamp(self.end, timezone.utc)


class ForecastResponse(_Frozen):
    """Complete decoded forecast for one coordinate query."""

    lat: Decimal
    lon: Decimal
    timezone: str
    timezone_offset: Int64 = Field(description="Shift from UTC in seconds")
    current: CurrentConditions
    minutely: tuple[MinutelyPoint, ...] = ()
    hourly: tuple[HourlyPoint, ...] = ()
    daily: tuple[DailyPoint, ...] = ()
    alerts: tuple[Alert, ...] = ()

    @field_validator("minutely", "hourly", "daily", "alerts", mode="before")
    @classmethod
    def sections_null_as_empty(cls, value: object) -> object:
        return _null_as_empty(value)

    def local_time(self, ts: int) -> datetime:
        """Convert a Unix timestamp to local time at the forecast location."""
        return from_timestamp(ts, self.timezone_offset)
