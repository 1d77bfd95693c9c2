"""Configuration command."""

import click
from rich.table import Table

from onecall.cli.context import CliContext
from onecall.core.exceptions import ConfigError
from onecall.storage.config import ConfigManager


pass_context = click.make_pass_decorator(CliContext)


@click.group()
def config() -> None:
    """Manage configuration."""
    pass


@config.command("set")
@click.argument("key", type=click.Choice(list(ConfigManager.SETTINGS)))
@click.argument("value")
@pass_context
def set_setting(ctx: CliContext, key: str, value: str) -> None:
    """Set a configuration value.

    Example: onecall config set units metric
    """
    try:
        ctx.config.set_setting(key, value)
    except ConfigError as e:
        ctx.renderer.print_error(str(e))
        raise SystemExit(1)
    ctx.renderer.print_success(f"Set '{key}'")


@config.command("show")
@pass_context
def show_config(ctx: CliContext) -> None:
    """Show current configuration."""
    ctx.console.print(f"[bold]Configuration File:[/bold] {ctx.config.config_file}")
    ctx.console.print()

    table = Table(title="Settings")
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key in ctx.config.SETTINGS:
        value = ctx.config.get_setting(key)
        if value is None:
            shown = "[dim]not set[/dim]"
        elif key == "appid":
            shown = "********"
        else:
            shown = str(value)
        table.add_row(key, shown)

    ctx.console.print(table)
