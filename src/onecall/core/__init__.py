"""Core utilities and exceptions."""

from onecall.core.exceptions import (
    ConfigError,
    DecodeError,
    DecodeStage,
    InvalidLocationError,
    OneCallError,
    TransportError,
)

__all__ = [
    "OneCallError",
    "ConfigError",
    "InvalidLocationError",
    "TransportError",
    "DecodeError",
    "DecodeStage",
]
