"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from weatherdash.config.schema import ApiConfig, AppConfig, DashboardConfig
from weatherdash.ingest.payload import normalize
from weatherdash.models.weather import WeatherRecord

TEST_BASE_URL = "https://test-owm.example.com/data/2.5/weather"
FIXTURE_DIR = Path(__file__).parent / "fixtures"


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def config() -> DashboardConfig:
    return DashboardConfig(
        api=ApiConfig(key="test-key", base_url=TEST_BASE_URL),
        app=AppConfig(cache_duration_ms=600_000, request_timeout_ms=2000),
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def london_payload() -> dict:
    with open(FIXTURE_DIR / "openweather_london.json") as f:
        return json.load(f)


@pytest.fixture
def london_record(london_payload: dict) -> WeatherRecord:
    return normalize(london_payload, "metric")
