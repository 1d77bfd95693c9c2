"""Request URL construction."""

from decimal import Decimal
from urllib.parse import quote

from onecall.core.exceptions import InvalidLocationError
from onecall.core.utils import format_decimal, to_decimal
from onecall.weather.params import OptionalParameter

BASE_URL = "https://api.openweathermap.org/data/2.5/onecall"

# Commas separate excluded sections and are kept literal.
_SAFE_VALUE_CHARS = ","


def build_url(
    lat: Decimal | int | str | float,
    lon: Decimal | int | str | float,
    appid: str,
    *params: OptionalParameter,
    base_url: str = BASE_URL,
) -> str:
    """Build the GET URL for a forecast query.

    Required parameters come first (``lat``, ``lon``, ``appid``), followed by
    the optional parameters in the order given.

    Args:
        lat: Latitude
        lon: Longitude
        appid: Access token, appended verbatim
        *params: Optional parameters from ``onecall.weather.params``
        base_url: Endpoint to query

    Returns:
        Fully formed URL

    Raises:
        InvalidLocationError: If a coordinate is not a finite number
    """
    try:
        lat_dec = to_decimal(lat)
        lon_dec = to_decimal(lon)
    except ValueError as e:
        raise InvalidLocationError(lat, lon) from e

    query = [
        ("lat", format_decimal(lat_dec)),
        ("lon", format_decimal(lon_dec)),
        ("appid", appid),
    ]
    query.extend((p.name, p.value) for p in params)

    encoded = "&".join(
        f"{quote(name, safe='')}={quote(value, safe=_SAFE_VALUE_CHARS)}"
        for name, value in query
    )
    return f"{base_url}?{encoded}"
