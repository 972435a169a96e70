"""Fetch pipeline: cache lookup, timed provider call, classification, caching.

Each fetch_weather call makes at most one round trip to the provider and
always resolves to a FetchOutcome; classified failures are never raised.
"""

import asyncio
import logging
from typing import Any

import httpx

from weatherdash.config.loader import is_feature_enabled
from weatherdash.config.schema import DashboardConfig
from weatherdash.ingest.cache import WeatherCache
from weatherdash.ingest.openweather_client import OpenWeatherClient
from weatherdash.ingest.payload import MalformedPayload, normalize
from weatherdash.ingest.query import (
    InvalidQuery,
    cache_key,
    describe,
    parse_query,
    request_params,
)
from weatherdash.models.weather import (
    ErrorKind,
    FetchOutcome,
    PlaceQuery,
    Query,
    Success,
    WeatherRecord,
)
from weatherdash.pipeline.errors import failure, status_failure

logger = logging.getLogger(__name__)


class FetchPipeline:
    def __init__(
        self,
        config: DashboardConfig,
        client: OpenWeatherClient | None = None,
        cache: WeatherCache | None = None,
        http: httpx.AsyncClient | None = None,
    ):
        self.config = config
        self.client = client if client is not None else OpenWeatherClient(
            config.api, http=http, timeout=config.app.request_timeout_seconds
        )
        self.cache = cache if cache is not None else WeatherCache(
            duration_seconds=config.app.cache_duration_seconds,
            enabled=is_feature_enabled(config, "cache"),
        )
        self._last_record: WeatherRecord | None = None

    async def __aenter__(self) -> "FetchPipeline":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.client.aclose()

    @property
    def caching(self) -> bool:
        return is_feature_enabled(self.config, "cache") and self.cache.enabled

    @property
    def last_record(self) -> WeatherRecord | None:
        """Most recent record handed back by a successful fetch."""
        return self._last_record

    async def fetch_weather(self, raw_query: Any) -> FetchOutcome:
        try:
            query = parse_query(raw_query)
        except InvalidQuery as e:
            logger.info("Rejected query %r: %s", raw_query, e)
            return failure(self.config, ErrorKind.INVALID_INPUT)

        key = cache_key(query.name) if isinstance(query, PlaceQuery) else None

        if key is not None and self.caching:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Cache hit for %r", key)
                self._last_record = cached
                return Success(cached, from_cache=True)
            logger.debug("Cache miss for %r", key)

        outcome = await self._fetch_remote(query)

        # The timeout race has resolved by now, so a cancelled call can't get here
        if isinstance(outcome, Success):
            if key is not None and self.caching:
                self.cache.put(key, outcome.record)
            self._last_record = outcome.record
        return outcome

    async def refresh(self, raw_query: Any) -> FetchOutcome:
        """Drop any cached entry for the query, then fetch it again."""
        if isinstance(raw_query, str):
            self.cache.invalidate(cache_key(raw_query))
        elif isinstance(raw_query, PlaceQuery):
            self.cache.invalidate(cache_key(raw_query.name))
        return await self.fetch_weather(raw_query)

    def clear_cache(self) -> None:
        self.cache.clear()

    async def _fetch_remote(self, query: Query) -> FetchOutcome:
        label = describe(query)
        timeout = self.config.app.request_timeout_seconds
        try:
            resp = await asyncio.wait_for(
                self.client.get_current(request_params(query)), timeout=timeout
            )
        except (TimeoutError, httpx.TimeoutException):
            logger.warning("Weather request for %s timed out after %.1fs", label, timeout)
            return failure(self.config, ErrorKind.TIMEOUT)
        except httpx.RequestError as e:
            logger.warning("Weather request for %s failed: %s", label, e)
            return failure(self.config, ErrorKind.NETWORK_UNAVAILABLE)

        if not resp.is_success:
            outcome = status_failure(self.config, resp.status_code)
            logger.warning(
                "Weather API returned %d for %s (%s)",
                resp.status_code, label, outcome.kind,
            )
            return outcome

        try:
            record = normalize(resp.json(), str(self.config.api.units))
        except MalformedPayload as e:
            logger.warning("Malformed weather payload for %s: %s", label, e.problems)
            return failure(self.config, ErrorKind.MALFORMED_RESPONSE)
        except ValueError as e:
            logger.warning("Weather payload for %s is not JSON: %s", label, e)
            return failure(self.config, ErrorKind.MALFORMED_RESPONSE)

        logger.info("Fetched weather for %s", label)
        return Success(record)
