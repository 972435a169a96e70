"""Weather lookup data models: queries, normalized records and fetch outcomes."""

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    SERVER_UNAVAILABLE = "server_unavailable"
    UPSTREAM_ERROR = "upstream_error"
    TIMEOUT = "timeout"
    NETWORK_UNAVAILABLE = "network_unavailable"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class PlaceQuery:
    name: str  # as typed by the caller, untrimmed


@dataclass(frozen=True)
class CoordinateQuery:
    lat: float
    lon: float


Query = PlaceQuery | CoordinateQuery


@dataclass(frozen=True)
class WeatherRecord:
    location: str
    country: str
    condition_id: int
    description: str
    icon: str
    temperature: float
    feels_like: float
    humidity: float
    pressure: float
    wind_speed: float
    visibility: int | None  # metres
    cloudiness: int | None  # percent
    sunrise: int | None  # unix seconds
    sunset: int | None
    timezone_offset: int | None  # seconds east of UTC
    units: str


@dataclass(frozen=True)
class Success:
    record: WeatherRecord
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return False


FetchOutcome = Success | Failure
