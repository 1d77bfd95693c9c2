"""Forecast command."""

import click

from onecall.cli.context import CliContext
from onecall.core.exceptions import ConfigError, OneCallError
from onecall.weather.decoder import encode_forecast
from onecall.weather.params import OptionalParameter, Units, exclude_sections, language, units


pass_context = click.make_pass_decorator(CliContext)


@click.command()
@click.option("--lat", type=str, required=True, help="Latitude in degrees")
@click.option("--lon", type=str, required=True, help="Longitude in degrees")
@click.option(
    "--exclude", "-x",
    type=str,
    help="Comma-separated sections to leave out (current,minutely,hourly,daily,alerts)",
)
@click.option(
    "--units", "-u", "units_name",
    type=click.Choice([u.value for u in Units]),
    help="Units system (default: from config)",
)
@click.option("--lang", type=str, help="Description language (default: from config)")
@click.option(
    "--hours", "-h",
    type=int,
    default=12,
    help="Number of hourly rows to show (default: 12)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the decoded forecast as JSON")
@pass_context
def forecast(
    ctx: CliContext,
    lat: str,
    lon: str,
    exclude: str | None,
    units_name: str | None,
    lang: str | None,
    hours: int,
    as_json: bool,
) -> None:
    """Show the forecast for a location.

    Coordinates are passed through as exact decimals.

    Examples:
        onecall forecast --lat 33.44 --lon -94.04
        onecall forecast --lat 33.44 --lon -94.04 --exclude minutely,alerts -u metric
        onecall forecast --lat 33.44 --lon -94.04 --json
    """
    units_name = units_name or ctx.config.units or Units.STANDARD.value
    lang = lang or ctx.config.lang

    try:
        try:
            unit_system = Units(units_name)
        except ValueError as e:
            raise ConfigError(f"Invalid units in config: {units_name}", cause=e) from e

        params: list[OptionalParameter] = []
        if exclude:
            params.append(exclude_sections(s.strip() for s in exclude.split(",") if s.strip()))
        params.append(units(unit_system))
        if lang:
            params.append(language(lang))

        with ctx.get_client() as client:
            if as_json:
                result = client.get_forecast(lat, lon, *params)
            else:
                with ctx.console.status("Fetching forecast..."):
                    result = client.get_forecast(lat, lon, *params)
    except OneCallError as e:
        ctx.renderer.print_error(str(e))
        raise SystemExit(1)

    if as_json:
        click.echo(encode_forecast(result, indent=2))
        return

    ctx.renderer.render_forecast(result, units=unit_system, hours=hours)
