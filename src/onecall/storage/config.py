"""Configuration management using TOML."""

import sys
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

from onecall.core.exceptions import ConfigError
from onecall.weather.params import Units
from onecall.weather.request import BASE_URL


class ConfigManager:
    """Manages user configuration stored in ~/.onecall/."""

    DEFAULT_DIR = Path.home() / ".onecall"
    CONFIG_FILENAME = "config.toml"

    # Settings that may be changed from the CLI, with their value types
    SETTINGS: dict[str, type] = {
        "appid": str,
        "units": str,
        "lang": str,
        "base_url": str,
        "timeout": float,
    }

    def __init__(self, config_dir: Path | None = None):
        """Initialize config manager.

        Args:
            config_dir: Custom config directory (default: ~/.onecall/)
        """
        self.config_dir = config_dir or self.DEFAULT_DIR
        self.config_file = self.config_dir / self.CONFIG_FILENAME
        self._config: dict[str, Any] = {}
        self._ensure_config_exists()
        self._load_config()

    def _ensure_config_exists(self) -> None:
        """Create config directory and default config if needed."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigError(f"Failed to create config directory: {e}", cause=e) from e

        if not self.config_file.exists():
            default_config = {
                "settings": {
                    "units": Units.STANDARD.value,
                    "base_url": BASE_URL,
                    "timeout": 30.0,
                },
            }
            self._write_config(default_config)

    def _load_config(self) -> None:
        """Load configuration from file."""
        try:
            with open(self.config_file, "rb") as f:
                self._config = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to load config: {e}", cause=e) from e

    def _write_config(self, config: dict[str, Any] | None = None) -> None:
        """Write configuration to file."""
        if config is not None:
            self._config = config
        try:
            with open(self.config_file, "wb") as f:
                tomli_w.dump(self._config, f)
        except (OSError, TypeError) as e:
            raise ConfigError(f"Failed to write config: {e}", cause=e) from e

    # Settings
    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting value."""
        return self._config.get("settings", {}).get(key, default)

    def set_setting(self, key: str, value: Any) -> None:
        """Set a setting value, converting it to the setting's type.

        Raises:
            ConfigError: If the key is unknown or the value is invalid
        """
        if key not in self.SETTINGS:
            known = ", ".join(self.SETTINGS)
            raise ConfigError(f"Unknown setting '{key}' (known: {known})")
        try:
            value = self.SETTINGS[key](value)
            if key == "units":
                value = Units(value).value
        except ValueError as e:
            raise ConfigError(f"Invalid value for '{key}': {value}", cause=e) from e

        if "settings" not in self._config:
            self._config["settings"] = {}
        self._config["settings"][key] = value
        self._write_config()

    @property
    def appid(self) -> str | None:
        """Get the API access token."""
        return self.get_setting("appid")

    @property
    def units(self) -> str | None:
        """Get the default units system."""
        return self.get_setting("units")

    @property
    def lang(self) -> str | None:
        """Get the default description language."""
        return self.get_setting("lang")

    @property
    def base_url(self) -> str:
        """Get the endpoint URL."""
        return self.get_setting("base_url", BASE_URL)

    @property
    def timeout(self) -> float:
        """Get the request timeout in seconds."""
        return float(self.get_setting("timeout", 30.0))
