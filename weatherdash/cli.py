"""CLI entry point for the weather dashboard."""

import argparse
import asyncio
import logging
from pathlib import Path

from weatherdash.config.loader import (
    default_config,
    error_message,
    is_valid_api_key,
    load_config,
    set_config_value,
)
from weatherdash.config.schema import DashboardConfig
from weatherdash.models.weather import CoordinateQuery, FetchOutcome, Success
from weatherdash.pipeline.fetch_pipeline import FetchPipeline
from weatherdash.pipeline.retry import fetch_with_retries
from weatherdash.reporting.formatters import (
    format_failure,
    format_weather_json,
    format_weather_text,
)

DEFAULT_CONFIG = "weatherdash.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Current weather for a city or coordinates",
    )
    parser.add_argument("city", nargs="?", help="City name (default: app.default_city)")
    parser.add_argument("--lat", type=float, help="Latitude")
    parser.add_argument("--lon", type=float, help="Longitude")
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "--units", choices=["metric", "imperial", "standard"], help="Override api.units"
    )
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    parser.add_argument(
        "--retry", action="store_true", help="Retry transient failures with backoff"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _load(args.config)
    if args.units:
        config = set_config_value(config, "api.units", args.units)

    if not is_valid_api_key(config):
        print(error_message(config, "api_key_missing"))
        return 2

    if args.lat is not None:
        query: str | CoordinateQuery = CoordinateQuery(args.lat, args.lon)
    else:
        query = args.city or config.app.default_city

    outcome = asyncio.run(_run(config, query, args.retry))

    if isinstance(outcome, Success):
        if args.json:
            print(format_weather_json(outcome.record))
        else:
            print(format_weather_text(outcome.record, config))
        return 0

    print(format_failure(outcome))
    return 1


def _load(path: str) -> DashboardConfig:
    # A missing config file is fine; env vars and defaults cover it
    if Path(path).exists():
        return load_config(path)
    return default_config()


async def _run(
    config: DashboardConfig, query: str | CoordinateQuery, retry: bool
) -> FetchOutcome:
    async with FetchPipeline(config) as pipeline:
        if retry:
            return await fetch_with_retries(pipeline, query)
        return await pipeline.fetch_weather(query)
