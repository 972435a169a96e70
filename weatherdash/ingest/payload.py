"""Validation and normalization of OpenWeatherMap current-weather payloads."""

import logging
from typing import Any

from weatherdash.models.weather import WeatherRecord

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ("name", "main", "weather", "wind", "sys")
REQUIRED_MAIN_FIELDS = ("temp", "feels_like", "humidity", "pressure")


class MalformedPayload(ValueError):
    """Raised when a provider payload breaks the WeatherRecord invariant."""

    def __init__(self, problems: list[str]):
        super().__init__("Invalid weather data: " + ", ".join(problems))
        self.problems = problems


def find_problems(raw: Any) -> list[str]:
    """Return a list of human-readable problems; empty means valid."""
    if not isinstance(raw, dict):
        return ["payload is not an object"]

    problems = [f"missing {s}" for s in REQUIRED_SECTIONS if not raw.get(s)]
    if problems:
        return problems

    if not isinstance(raw["name"], str) or not raw["name"].strip():
        problems.append("empty name")

    weather = raw["weather"]
    first = weather[0] if isinstance(weather, list) and weather else None
    if not isinstance(first, dict) or not first.get("description"):
        problems.append("missing weather[0].description")

    main = raw["main"]
    if not isinstance(main, dict):
        problems.append("main is not an object")
    else:
        problems.extend(
            f"main.{f} is not numeric"
            for f in REQUIRED_MAIN_FIELDS
            if not _is_number(main.get(f))
        )

    wind = raw["wind"]
    if not isinstance(wind, dict) or not _is_number(wind.get("speed")):
        problems.append("wind.speed is not numeric")

    if not isinstance(raw["sys"], dict):
        problems.append("sys is not an object")

    return problems


def normalize(raw: dict, units: str) -> WeatherRecord:
    """Build a WeatherRecord from a provider payload.

    Raises MalformedPayload if the payload fails validation.
    """
    problems = find_problems(raw)
    if problems:
        raise MalformedPayload(problems)

    main = raw["main"]
    sys_ = raw["sys"]
    condition = raw["weather"][0]
    clouds = raw.get("clouds")

    return WeatherRecord(
        location=raw["name"].strip(),
        country=str(sys_.get("country") or ""),
        condition_id=_int_or_none(condition.get("id")) or 0,
        description=str(condition["description"]),
        icon=str(condition.get("icon", "")),
        temperature=float(main["temp"]),
        feels_like=float(main["feels_like"]),
        humidity=float(main["humidity"]),
        pressure=float(main["pressure"]),
        wind_speed=float(raw["wind"]["speed"]),
        visibility=_int_or_none(raw.get("visibility")),
        cloudiness=_int_or_none(clouds.get("all")) if isinstance(clouds, dict) else None,
        sunrise=_int_or_none(sys_.get("sunrise")),
        sunset=_int_or_none(sys_.get("sunset")),
        timezone_offset=_int_or_none(raw.get("timezone")),
        units=units,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _int_or_none(value: Any) -> int | None:
    if not _is_number(value):
        return None
    return int(value)
