"""Maps HTTP status codes and failure kinds to user-facing failures."""

from weatherdash.config.loader import error_message
from weatherdash.config.schema import DashboardConfig
from weatherdash.models.weather import ErrorKind, Failure

STATUS_KINDS: dict[int, ErrorKind] = {
    401: ErrorKind.UNAUTHORIZED,
    404: ErrorKind.NOT_FOUND,
    429: ErrorKind.RATE_LIMITED,
    500: ErrorKind.SERVER_UNAVAILABLE,
    502: ErrorKind.SERVER_UNAVAILABLE,
    503: ErrorKind.SERVER_UNAVAILABLE,
}

# Worth another attempt by a retrying caller
TRANSIENT_KINDS = frozenset({
    ErrorKind.TIMEOUT,
    ErrorKind.NETWORK_UNAVAILABLE,
    ErrorKind.SERVER_UNAVAILABLE,
    ErrorKind.RATE_LIMITED,
})


def classify_status(status_code: int) -> ErrorKind:
    """Classify a non-2xx status code."""
    return STATUS_KINDS.get(status_code, ErrorKind.UPSTREAM_ERROR)


def failure(
    config: DashboardConfig, kind: ErrorKind, status_code: int | None = None
) -> Failure:
    message = error_message(config, kind.value, status_code=status_code)
    return Failure(kind=kind, message=message, status_code=status_code)


def status_failure(config: DashboardConfig, status_code: int) -> Failure:
    return failure(config, classify_status(status_code), status_code)
