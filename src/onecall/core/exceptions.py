"""Custom exception hierarchy for onecall."""

from enum import Enum


class OneCallError(Exception):
    """Base exception for all onecall errors."""

    def __init__(self, message: str, cause: BaseException | None = None):
        self.cause = cause
        super().__init__(message)


class ConfigError(OneCallError):
    """Configuration-related errors."""

    pass


class InvalidLocationError(OneCallError):
    """Coordinates that cannot be rendered into a request."""

    def __init__(self, lat: object = None, lon: object = None):
        self.lat = lat
        self.lon = lon
        message = "Invalid coordinates"
        if lat is not None:
            message += f" (latitude: {lat})"
        if lon is not None:
            message += f" (longitude: {lon})"
        super().__init__(message)


class TransportError(OneCallError):
    """The request could not be sent or no usable response was received."""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        status_code: int | None = None,
    ):
        self.status_code = status_code
        super().__init__(message, cause)


class DecodeStage(str, Enum):
    """Which part of decoding rejected the response body."""

    SYNTAX = "syntax"
    MISSING_FIELD = "missing_field"
    WRONG_TYPE = "wrong_type"


class DecodeError(OneCallError):
    """A response body was received but does not match the forecast schema."""

    def __init__(
        self,
        message: str,
        stage: DecodeStage,
        cause: BaseException | None = None,
        status_code: int | None = None,
    ):
        self.stage = stage
        self.status_code = status_code
        super().__init__(message, cause)
