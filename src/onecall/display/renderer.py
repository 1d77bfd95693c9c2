"""Rich-based display renderer."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from onecall.display.formatters import (
    format_coordinates,
    format_date_short,
    format_moon_phase,
    format_percentage,
    format_precipitation,
    format_probability,
    format_temperature,
    format_timestamp,
    format_wind,
)
from onecall.weather.models import ForecastResponse
from onecall.weather.params import Units


class DisplayRenderer:
    """Renders forecast data to the terminal using Rich."""

    def __init__(self, console: Console | None = None):
        """Initialize renderer.

        Args:
            console: Rich console (creates one if not provided)
        """
        self.console = console or Console()

    def render_forecast(
        self,
        forecast: ForecastResponse,
        units: Units = Units.STANDARD,
        hours: int = 12,
    ) -> None:
        """Render a complete forecast.

        Args:
            forecast: Decoded forecast
            units: Units system the values are expressed in
            hours: Maximum number of hourly rows
        """
        self._render_current(forecast, units)
        if forecast.hourly:
            self._render_hourly(forecast, units, hours)
        if forecast.daily:
            self._render_daily(forecast, units)
        self._render_alerts(forecast)

    def _render_current(self, forecast: ForecastResponse, units: Units) -> None:
        """Render current conditions."""
        c = forecast.current
        condition = c.condition

        lines = [
            f"{format_coordinates(forecast.lat, forecast.lon)} ({escape(forecast.timezone)})",
            format_timestamp(forecast.local_time(c.dt)),
        ]
        if condition:
            lines.append(
                f"[bold]{escape(condition.main)}[/bold] - {escape(condition.description)}"
            )

        self.console.print(Panel("\n".join(lines), title="Current Conditions", style="blue"))

        table = Table(show_header=False, box=None)
        table.add_column("Label", style="dim")
        table.add_column("Value")

        table.add_row(
            "├─ Temperature:",
            f"{format_temperature(c.temp, units)} "
            f"(feels like {format_temperature(c.feels_like, units)})",
        )
        table.add_row("├─ Dew point:", format_temperature(c.dew_point, units))
        wind = format_wind(c.wind_speed, c.wind_deg, units)
        if c.wind_gust is not None:
            wind += f", gusts {format_wind(c.wind_gust, units=units)}"
        table.add_row("├─ Wind:", wind)
        table.add_row("├─ Humidity:", format_percentage(c.humidity))
        table.add_row("├─ Clouds:", format_percentage(c.clouds))
        table.add_row("├─ Pressure:", f"{c.pressure} hPa")
        table.add_row("├─ Visibility:", f"{c.visibility} m")
        table.add_row("├─ UV index:", str(c.uvi))
        table.add_row("├─ Rain:", format_precipitation(c.rain))
        table.add_row("└─ Snow:", format_precipitation(c.snow))

        self.console.print(table)
        self.console.print()

    def _render_hourly(self, forecast: ForecastResponse, units: Units, hours: int) -> None:
        """Render hourly forecast table."""
        table = Table(title="Hourly Forecast")
        table.add_column("Time", style="cyan")
        table.add_column("Temp", justify="right")
        table.add_column("Conditions")
        table.add_column("Wind")
        table.add_column("Precip.", justify="right")

        for h in forecast.hourly[:hours]:
            condition = h.condition
            table.add_row(
                format_timestamp(forecast.local_time(h.dt), include_date=False),
                format_temperature(h.temp, units),
                escape(condition.description) if condition else "",
                format_wind(h.wind_speed, h.wind_deg, units),
                format_probability(h.pop),
            )

        self.console.print(table)
        self.console.print()

    def _render_daily(self, forecast: ForecastResponse, units: Units) -> None:
        """Render daily forecast table."""
        table = Table(title="Daily Forecast")
        table.add_column("Day", style="cyan")
        table.add_column("Min / Max", justify="right")
        table.add_column("Conditions")
        table.add_column("Precip.", justify="right")
        table.add_column("Rain", justify="right")
        table.add_column("Moon")

        for d in forecast.daily:
            condition = d.condition
            table.add_row(
                format_date_short(forecast.local_time(d.dt)),
                f"{format_temperature(d.temp.min, units)} / "
                f"{format_temperature(d.temp.max, units)}",
                escape(condition.description) if condition else "",
                format_probability(d.pop),
                format_precipitation(d.rain),
                format_moon_phase(d.moon_phase),
            )

        self.console.print(table)
        self.console.print()

    def _render_alerts(self, forecast: ForecastResponse) -> None:
        """Render active weather alerts."""
        if not forecast.alerts:
            self.console.print("[green]No active alerts[/green]")
            return

        for alert in forecast.alerts:
            start = format_timestamp(forecast.local_time(alert.start))
            end = format_timestamp(forecast.local_time(alert.end))
            header = f"[bold]{escape(alert.event)}[/bold] ({start} - {end})"
            if alert.tags:
                header += f"\n[dim]{escape(', '.join(alert.tags))}[/dim]"
            self.console.print(
                Panel(
                    f"{header}\n\n{escape(alert.description)}",
                    title=escape(alert.sender_name),
                    border_style="red",
                )
            )

    def print_error(self, message: str) -> None:
        """Print error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self.console.print(f"[green]✓[/green] {message}")
