"""Formatting utilities for display."""

from datetime import datetime
from decimal import Decimal

from onecall.weather.params import Units

_TEMPERATURE_SUFFIX = {
    Units.STANDARD: "K",
    Units.METRIC: "°C",
    Units.IMPERIAL: "°F",
}

_SPEED_SUFFIX = {
    Units.STANDARD: "m/s",
    Units.METRIC: "m/s",
    Units.IMPERIAL: "mph",
}


def format_timestamp(dt: datetime, include_date: bool = True) -> str:
    """Format datetime for display.

    Args:
        dt: Datetime to format
        include_date: Whether to include date

    Returns:
        Formatted string
    """
    if include_date:
        return dt.strftime("%Y-%m-%d %H:%M")
    return dt.strftime("%H:%M")


def format_date_short(dt: datetime) -> str:
    """Format date in short form (Mon 15th).

    Args:
        dt: Datetime to format

    Returns:
        Formatted string
    """
    day = dt.day
    suffix = "th" if 11 <= day <= 13 else {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return dt.strftime(f"%a {day}{suffix}")


def format_coordinates(lat: Decimal, lon: Decimal) -> str:
    """Format coordinates for display.

    Args:
        lat: Latitude
        lon: Longitude

    Returns:
        Formatted string like "33.44°N, 94.04°W"
    """
    lat_dir = "N" if lat >= 0 else "S"
    lon_dir = "E" if lon >= 0 else "W"
    return f"{abs(lat):.2f}°{lat_dir}, {abs(lon):.2f}°{lon_dir}"


def format_temperature(temp: Decimal, units: Units = Units.STANDARD) -> str:
    """Format temperature with the unit symbol of the units system."""
    return f"{temp:.1f}{_TEMPERATURE_SUFFIX[units]}"


def format_wind(
    speed: Decimal,
    direction: Decimal | None = None,
    units: Units = Units.STANDARD,
) -> str:
    """Format wind speed and direction.

    Args:
        speed: Wind speed in the units system's speed unit
        direction: Wind direction in degrees (optional)
        units: Units system the speed is expressed in

    Returns:
        Formatted string
    """
    text = f"{speed:.1f} {_SPEED_SUFFIX[units]}"
    if direction is not None:
        text += f" {get_wind_direction_name(direction)}"
    return text


def get_wind_direction_name(degrees: Decimal) -> str:
    """Get cardinal direction from degrees.

    Args:
        degrees: Wind direction in degrees (0=N, 90=E)

    Returns:
        Cardinal direction string (N, NE, E, etc.)
    """
    directions = ["N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
                  "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"]
    idx = round(degrees / Decimal("22.5")) % 16
    return directions[idx]


def format_percentage(value: int | Decimal) -> str:
    """Format a 0-100 percentage value."""
    return f"{value:.0f}%"


def format_probability(value: Decimal) -> str:
    """Format a 0..1 probability as a percentage."""
    return format_percentage(value * 100)


def format_precipitation(amounts: dict[str, Decimal] | Decimal | None) -> str:
    """Format a precipitation amount or a per-duration mapping.

    Absent data is shown as a dash, distinct from a measured zero.
    """
    if amounts is None:
        return "-"
    if isinstance(amounts, dict):
        return ", ".join(f"{amount} mm/{label}" for label, amount in amounts.items()) or "-"
    return f"{amounts} mm"


def format_moon_phase(phase: Decimal) -> str:
    """Format a 0..1 moon phase with emoji.

    Args:
        phase: 0 and 1 are new moon, 0.25 first quarter, 0.5 full moon

    Returns:
        Formatted string with emoji
    """
    if phase in (0, 1):
        return "🌑 New moon"
    elif phase < Decimal("0.25"):
        return "🌒 Waxing crescent"
    elif phase == Decimal("0.25"):
        return "🌓 First quarter"
    elif phase < Decimal("0.5"):
        return "🌔 Waxing gibbous"
    elif phase == Decimal("0.5"):
        return "🌕 Full moon"
    elif phase < Decimal("0.75"):
        return "🌖 Waning gibbous"
    elif phase == Decimal("0.75"):
        return "🌗 Last quarter"
    else:
        return "🌘 Waning crescent"
