"""Unit conversion and display formatting helpers."""

from datetime import UTC, datetime, timedelta, timezone

from weatherdash.config.defaults import (
    PRESSURE_SYMBOLS,
    SPEED_SYMBOLS,
    TEMPERATURE_SYMBOLS,
)

MS_PER_MPH = 0.44704
HPA_TO_INHG = 0.02953
HPA_TO_MMHG = 0.75006


def convert_temperature(temp: float, from_unit: str, to_unit: str) -> float:
    """Convert between 'celsius', 'fahrenheit' and 'kelvin'."""
    if from_unit == to_unit:
        return temp

    celsius = temp
    if from_unit == "fahrenheit":
        celsius = (temp - 32) * 5 / 9
    elif from_unit == "kelvin":
        celsius = temp - 273.15

    if to_unit == "fahrenheit":
        return celsius * 9 / 5 + 32
    if to_unit == "kelvin":
        return celsius + 273.15
    return celsius


def convert_wind_speed(speed: float, from_unit: str, to_unit: str) -> float:
    """Convert between 'ms', 'mph' and 'kmh'."""
    if from_unit == to_unit:
        return speed

    ms = speed
    if from_unit == "mph":
        ms = speed * MS_PER_MPH
    elif from_unit == "kmh":
        ms = speed / 3.6

    if to_unit == "mph":
        return ms / MS_PER_MPH
    if to_unit == "kmh":
        return ms * 3.6
    return ms


def format_temperature(temp: float, units: str = "metric", decimals: int = 0) -> str:
    symbol = TEMPERATURE_SYMBOLS.get(units, TEMPERATURE_SYMBOLS["metric"])
    return f"{temp:.{decimals}f}{symbol}"


def format_wind_speed(speed: float, units: str = "metric", decimals: int = 1) -> str:
    symbol = SPEED_SYMBOLS.get(units, SPEED_SYMBOLS["metric"])
    return f"{speed:.{decimals}f} {symbol}"


def format_pressure(pressure_hpa: float, unit: str = "hpa", decimals: int = 0) -> str:
    """Format a pressure given in hPa, optionally converted to inHg or mmHg.

    inHg is always shown with two decimals.
    """
    value = pressure_hpa
    if unit == "inhg":
        value = pressure_hpa * HPA_TO_INHG
        decimals = 2
    elif unit == "mmhg":
        value = pressure_hpa * HPA_TO_MMHG
    else:
        unit = "hpa"
    return f"{value:.{decimals}f} {PRESSURE_SYMBOLS[unit]}"


def format_time(timestamp: int, tz_offset_seconds: int | None = None) -> str:
    """Format a unix timestamp (seconds) as 'HH:MM AM/PM'.

    Uses UTC unless a provider timezone offset is given.
    """
    tz = UTC if tz_offset_seconds is None else timezone(timedelta(seconds=tz_offset_seconds))
    return datetime.fromtimestamp(timestamp, tz).strftime("%I:%M %p")
