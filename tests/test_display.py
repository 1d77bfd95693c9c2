"""Tests for the Rich renderer."""

import io

from rich.console import Console

from conftest import dump
from onecall.display.renderer import DisplayRenderer
from onecall.weather.decoder import decode_forecast
from onecall.weather.params import Units


def _render(forecast) -> str:
    console = Console(file=io.StringIO(), width=120)
    DisplayRenderer(console).render_forecast(forecast, units=Units.METRIC)
    return console.file.getvalue()


class TestRenderer:
    def test_renders_all_sections(self, sample_forecast):
        output = _render(sample_forecast)
        assert "Current Conditions" in output
        assert "Hourly Forecast" in output
        assert "Daily Forecast" in output
        assert "NWS Tulsa" in output

    def test_service_text_shown_literally(self, sample_data):
        """Square brackets in service text are not treated as Rich markup."""
        sample_data["timezone"] = "Zone[/b]"
        sample_data["current"]["weather"][0]["main"] = "[bold]Rain"
        sample_data["current"]["weather"][0]["description"] = "light [/x] rain"
        sample_data["hourly"][0]["weather"][0]["description"] = "few [/y] clouds"
        sample_data["daily"][0]["weather"][0]["description"] = "[red]showers"
        sample_data["alerts"][0]["sender_name"] = "NWS [/z] Tulsa"

        output = _render(decode_forecast(dump(sample_data)))

        assert "Zone[/b]" in output
        assert "[bold]Rain" in output
        assert "light [/x] rain" in output
        assert "few [/y] clouds" in output
        assert "[red]showers" in output
        assert "NWS [/z] Tulsa" in output
