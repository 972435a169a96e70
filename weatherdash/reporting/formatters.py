"""Output formatters for weather records and fetch failures."""

import json
from dataclasses import asdict

from weatherdash.config.loader import condition_description, icon_url
from weatherdash.config.schema import DashboardConfig
from weatherdash.config.units import (
    format_pressure,
    format_temperature,
    format_time,
    format_wind_speed,
)
from weatherdash.models.weather import Failure, WeatherRecord


def format_weather_text(r: WeatherRecord, config: DashboardConfig) -> str:
    """Plain text card for the terminal."""
    place = f"{r.location}, {r.country}" if r.country else r.location
    lines = [
        f"=== {place} ===",
        condition_description(r.condition_id, r.description.capitalize()),
        f"Temperature: {format_temperature(r.temperature, r.units)} "
        f"(feels like {format_temperature(r.feels_like, r.units)})",
        f"Humidity: {r.humidity:.0f}%",
        f"Pressure: {format_pressure(r.pressure)}",
        f"Wind: {format_wind_speed(r.wind_speed, r.units)}",
    ]
    if r.visibility is not None:
        lines.append(f"Visibility: {r.visibility / 1000:.1f} km")
    if r.cloudiness is not None:
        lines.append(f"Cloudiness: {r.cloudiness}%")
    if r.sunrise is not None and r.sunset is not None:
        lines.append(
            f"Sunrise: {format_time(r.sunrise, r.timezone_offset)} | "
            f"Sunset: {format_time(r.sunset, r.timezone_offset)}"
        )
    if r.icon:
        lines.append(f"Icon: {icon_url(config, r.icon)}")
    return "\n".join(lines)


def format_weather_json(r: WeatherRecord) -> str:
    """JSON record for programmatic consumption."""
    return json.dumps(asdict(r), indent=2)


def format_failure(f: Failure) -> str:
    return f"Error: {f.message}"
