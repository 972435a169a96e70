"""Retry wrapper around FetchPipeline with exponential backoff."""

import asyncio
import logging
from typing import Any

from weatherdash.models.weather import FetchOutcome, Success
from weatherdash.pipeline.errors import TRANSIENT_KINDS
from weatherdash.pipeline.fetch_pipeline import FetchPipeline

logger = logging.getLogger(__name__)


async def fetch_with_retries(
    pipeline: FetchPipeline,
    query: Any,
    attempts: int | None = None,
    base_delay: float | None = None,
) -> FetchOutcome:
    """Call fetch_weather until it succeeds or fails non-transiently.

    Sleeps base_delay * 2**n between attempts. Defaults come from
    app.retry_attempts and app.retry_delay_ms.
    """
    app = pipeline.config.app
    if attempts is None:
        attempts = app.retry_attempts
    if base_delay is None:
        base_delay = app.retry_delay_ms / 1000

    outcome = await pipeline.fetch_weather(query)
    for attempt in range(1, attempts):
        if isinstance(outcome, Success) or outcome.kind not in TRANSIENT_KINDS:
            return outcome
        delay = base_delay * (2 ** (attempt - 1))
        logger.warning(
            "Weather fetch failed (%s), retrying in %.1fs (attempt %d/%d)",
            outcome.kind, delay, attempt + 1, attempts,
        )
        await asyncio.sleep(delay)
        outcome = await pipeline.fetch_weather(query)
    return outcome
