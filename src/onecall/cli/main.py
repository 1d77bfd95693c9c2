"""Main CLI entry point."""

import logging
from pathlib import Path

import click
from rich.console import Console

from onecall import __version__
from onecall.cli.context import CliContext
from onecall.core.exceptions import OneCallError


@click.group()
@click.option(
    "--config-dir",
    type=click.Path(path_type=Path),
    help="Custom configuration directory",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(version=__version__, prog_name="onecall")
@click.pass_context
def cli(ctx: click.Context, config_dir: Path | None, verbose: bool) -> None:
    """onecall - OpenWeatherMap One Call forecast CLI.

    Fetch current conditions, forecasts and weather alerts for a location.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    if ctx.obj is None:
        ctx.obj = CliContext.create(config_dir=config_dir, verbose=verbose)


# Import and register commands
from onecall.cli.commands import config, forecast

cli.add_command(config.config)
cli.add_command(forecast.forecast)


def main() -> None:
    """Main entry point."""
    try:
        cli()
    except OneCallError as e:
        console = Console()
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)
    except KeyboardInterrupt:
        raise SystemExit(0)


if __name__ == "__main__":
    main()
