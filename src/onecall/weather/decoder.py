"""Response body decoding."""

import json
import logging
from decimal import Decimal
from typing import IO

from pydantic import ValidationError

from onecall.core.exceptions import DecodeError, DecodeStage
from onecall.weather.models import ForecastResponse

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> None:
    raise ValueError(f"Non-numeric constant {name} is not allowed")


def _load_json(body: bytes | str) -> object:
    """Parse JSON keeping every fractional number as an exact Decimal."""
    return json.loads(body, parse_float=Decimal, parse_constant=_reject_constant)


def _classify(error: ValidationError) -> DecodeStage:
    if any(e["type"] == "missing" for e in error.errors()):
        return DecodeStage.MISSING_FIELD
    return DecodeStage.WRONG_TYPE


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    more = error.error_count() - 1
    suffix = f" (and {more} more)" if more > 0 else ""
    return f"{location}: {first['msg']}{suffix}"


def decode_forecast(source: bytes | str | IO) -> ForecastResponse:
    """Decode a JSON document into a ForecastResponse.

    Args:
        source: Response body as bytes, text, or a readable stream

    Returns:
        The decoded forecast

    Raises:
        DecodeError: If the body is not valid JSON or does not match the schema.
            ``stage`` tells which.
    """
    body = source.read() if hasattr(source, "read") else source

    try:
        data = _load_json(body)
    except (ValueError, TypeError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors;
        # RecursionError comes from pathologically deep nesting
        raise DecodeError(
            f"Malformed JSON: {e}", stage=DecodeStage.SYNTAX, cause=e
        ) from e

    try:
        forecast = ForecastResponse.model_validate(data)
    except ValidationError as e:
        stage = _classify(e)
        logger.debug(f"Forecast decode failed at {stage.value}: {e}")
        raise DecodeError(
            f"Unexpected forecast payload: {_describe(e)}", stage=stage, cause=e
        ) from e

    logger.debug(
        f"Decoded forecast: {len(forecast.minutely)} minutely, "
        f"{len(forecast.hourly)} hourly, {len(forecast.daily)} daily, "
        f"{len(forecast.alerts)} alerts"
    )
    return forecast


def encode_forecast(forecast: ForecastResponse, indent: int | None = None) -> str:
    """Serialize a forecast back to JSON.

    Decimals are written as their exact string form and absent optional
    fields are omitted, so ``decode_forecast`` restores an equal value.
    """
    return forecast.model_dump_json(exclude_none=True, indent=indent)
