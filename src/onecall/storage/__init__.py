"""Persistent user configuration."""

from onecall.storage.config import ConfigManager

__all__ = ["ConfigManager"]
