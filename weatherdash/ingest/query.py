"""Query parsing, validation and cache-key derivation."""

import math
import re
from collections.abc import Mapping
from typing import Any

from weatherdash.models.weather import CoordinateQuery, PlaceQuery, Query

MAX_PLACE_NAME_LENGTH = 100

# Letters, whitespace, hyphen, apostrophe, comma, period, extended Latin
_PLACE_NAME_RE = re.compile(r"^[a-zA-Z\s\-',.\u00C0-\u017F]+$")


class InvalidQuery(ValueError):
    """Raised when a query cannot be sent to the weather provider."""


def parse_query(raw: Any) -> Query:
    """Turn caller input into a validated Query.

    Accepts a PlaceQuery/CoordinateQuery, a place-name string, a (lat, lon)
    pair or a mapping with 'lat' and 'lon' keys.
    """
    if isinstance(raw, PlaceQuery):
        validate_place_name(raw.name)
        return raw
    if isinstance(raw, CoordinateQuery):
        validate_coordinates(raw.lat, raw.lon)
        return raw
    if isinstance(raw, str):
        validate_place_name(raw)
        return PlaceQuery(raw)
    if isinstance(raw, Mapping):
        if "lat" not in raw or "lon" not in raw:
            raise InvalidQuery("Coordinate query needs 'lat' and 'lon'")
        return _coordinates(raw["lat"], raw["lon"])
    if isinstance(raw, (tuple, list)) and len(raw) == 2:
        return _coordinates(raw[0], raw[1])
    raise InvalidQuery(f"Unsupported query type: {type(raw).__name__}")


def validate_place_name(name: str) -> None:
    trimmed = name.strip() if isinstance(name, str) else ""
    if not trimmed:
        raise InvalidQuery("Place name is empty")
    if len(trimmed) > MAX_PLACE_NAME_LENGTH:
        raise InvalidQuery("Place name is too long")
    if not _PLACE_NAME_RE.match(trimmed):
        raise InvalidQuery(f"Place name has disallowed characters: {trimmed!r}")


def validate_coordinates(lat: float, lon: float) -> None:
    for label, value, bound in (("latitude", lat, 90), ("longitude", lon, 180)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidQuery(f"{label} must be a number")
        if not math.isfinite(value) or not -bound <= value <= bound:
            raise InvalidQuery(f"{label} out of range: {value}")


def cache_key(name: str) -> str:
    """Normalize a place name for cache lookups: '  London ' -> 'london'."""
    return name.strip().lower()


def request_params(query: Query) -> dict[str, str]:
    """Location part of the provider query string."""
    if isinstance(query, PlaceQuery):
        return {"q": query.name.strip()}
    return {"lat": str(query.lat), "lon": str(query.lon)}


def describe(query: Query) -> str:
    if isinstance(query, PlaceQuery):
        return query.name.strip()
    return f"{query.lat},{query.lon}"


def _coordinates(lat: Any, lon: Any) -> CoordinateQuery:
    validate_coordinates(lat, lon)
    return CoordinateQuery(float(lat), float(lon))
