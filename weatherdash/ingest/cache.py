"""In-memory, time-boxed cache of normalized weather records."""

import logging
from dataclasses import dataclass

from weatherdash.models.common import Clock, monotonic_now
from weatherdash.models.weather import WeatherRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    key: str
    payload: WeatherRecord
    captured_at: float


class WeatherCache:
    """Process-scoped cache keyed by normalized place name.

    Entries are fresh while ``now - captured_at < duration_seconds``. Stale
    entries are dropped on the next lookup; there is no background sweep.
    When ``enabled`` is false every lookup misses and writes are ignored.

    Not thread-safe: it is owned by a single event loop.
    """

    def __init__(
        self,
        duration_seconds: float,
        enabled: bool = True,
        clock: Clock = monotonic_now,
    ):
        self.duration_seconds = duration_seconds
        self.enabled = enabled
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> WeatherRecord | None:
        if not self.enabled:
            return None
        entry = self._entries.get(key)
        if entry is None:
            return None
        age = self._clock() - entry.captured_at
        if age < self.duration_seconds:
            return entry.payload
        del self._entries[key]
        logger.debug("Cache entry %r expired after %.1fs", key, age)
        return None

    def put(self, key: str, record: WeatherRecord) -> None:
        if not self.enabled:
            return
        self._entries[key] = CacheEntry(key, record, self._clock())

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()
        logger.debug("Cache cleared")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
