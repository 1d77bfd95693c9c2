"""CLI context management."""

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from onecall.core.exceptions import ConfigError
from onecall.display.renderer import DisplayRenderer
from onecall.storage.config import ConfigManager
from onecall.weather.client import OneCallClient
from onecall.weather.protocols import Transport


@dataclass
class CliContext:
    """Context object passed to all CLI commands."""

    config: ConfigManager
    console: Console
    renderer: DisplayRenderer
    verbose: bool = False

    # Injected by tests; the client builds its own httpx transport otherwise
    transport: Transport | None = None

    @classmethod
    def create(
        cls,
        config_dir: Path | None = None,
        verbose: bool = False,
        transport: Transport | None = None,
    ) -> "CliContext":
        """Create a new CLI context.

        Args:
            config_dir: Custom config directory
            verbose: Enable verbose output
            transport: Optional transport for the forecast client

        Returns:
            Initialized CliContext
        """
        config = ConfigManager(config_dir)
        console = Console()
        renderer = DisplayRenderer(console)

        return cls(
            config=config,
            console=console,
            renderer=renderer,
            verbose=verbose,
            transport=transport,
        )

    def get_client(self) -> OneCallClient:
        """Create a forecast client from the configured settings.

        Raises:
            ConfigError: If no access token is configured
        """
        appid = self.config.appid
        if not appid:
            raise ConfigError(
                "No API key configured. Use 'onecall config set appid <key>' first."
            )
        return OneCallClient(
            appid,
            transport=self.transport,
            base_url=self.config.base_url,
            timeout=self.config.timeout,
        )
