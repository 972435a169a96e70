"""Tests for weather output formatters."""

import json
from dataclasses import replace

from weatherdash.config.schema import DashboardConfig
from weatherdash.models.weather import ErrorKind, Failure
from weatherdash.reporting.formatters import (
    format_failure,
    format_weather_json,
    format_weather_text,
)


class TestFormatWeatherText:
    def test_full_card(self, london_record):
        text = format_weather_text(london_record, DashboardConfig())
        assert "=== London, GB ===" in text
        assert "Broken clouds" in text
        assert "Temperature: 14°C (feels like 14°C)" in text
        assert "Humidity: 78%" in text
        assert "Pressure: 1012 hPa" in text
        assert "Wind: 4.6 m/s" in text
        assert "Visibility: 10.0 km" in text
        assert "Cloudiness: 75%" in text
        assert "Sunrise:" in text and "Sunset:" in text
        assert "04d@2x.png" in text

    def test_optional_lines_omitted(self, london_record):
        record = replace(
            london_record, visibility=None, cloudiness=None, sunrise=None, country=""
        )
        text = format_weather_text(record, DashboardConfig())
        assert text.startswith("=== London ===")
        assert "Visibility" not in text
        assert "Cloudiness" not in text
        assert "Sunrise" not in text

    def test_condition_name_from_table(self, london_record):
        record = replace(london_record, condition_id=741, description="fog")
        assert "\nFog\n" in format_weather_text(record, DashboardConfig())

    def test_unknown_condition_uses_description(self, london_record):
        record = replace(london_record, condition_id=0, description="strange sky")
        assert "\nStrange sky\n" in format_weather_text(record, DashboardConfig())

    def test_imperial_symbols(self, london_record):
        record = replace(london_record, units="imperial", temperature=57.6, wind_speed=10.4)
        text = format_weather_text(record, DashboardConfig())
        assert "58°F" in text
        assert "10.4 mph" in text


class TestOtherFormats:
    def test_json(self, london_record):
        data = json.loads(format_weather_json(london_record))
        assert data["location"] == "London"
        assert data["temperature"] == 14.2
        assert data["units"] == "metric"

    def test_failure(self):
        f = Failure(kind=ErrorKind.TIMEOUT, message="Request timed out. Please try again.")
        assert format_failure(f) == "Error: Request timed out. Please try again."
