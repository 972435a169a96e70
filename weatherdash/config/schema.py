"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from weatherdash.config.defaults import DEFAULT_ERROR_MESSAGES

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
OPENWEATHER_ICON_BASE_URL = "https://openweathermap.org/img/wn"


class Units(StrEnum):
    METRIC = "metric"      # Celsius, m/s
    IMPERIAL = "imperial"  # Fahrenheit, mph
    STANDARD = "standard"  # Kelvin, m/s


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    key: str = ""
    base_url: str = OPENWEATHER_BASE_URL
    icon_base_url: str = OPENWEATHER_ICON_BASE_URL
    units: Units = Units.METRIC
    language: str = Field(default="en", min_length=2)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_city: str = "London"
    cache_duration_ms: int = Field(default=10 * 60 * 1000, ge=0)
    request_timeout_ms: int = Field(default=8000, gt=0)
    retry_attempts: int = Field(default=3, ge=1)
    retry_delay_ms: int = Field(default=1000, ge=0)

    @property
    def cache_duration_seconds(self) -> float:
        return self.cache_duration_ms / 1000

    @property
    def request_timeout_seconds(self) -> float:
        return self.request_timeout_ms / 1000


class FeaturesConfig(BaseModel):
    model_config = {"extra": "forbid"}

    cache: bool = True
    geolocation: bool = True
    unit_toggle: bool = True
    offline_mode: bool = False
    dark_mode: bool = False
    favorites: bool = False


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    app: AppConfig = AppConfig()
    features: FeaturesConfig = FeaturesConfig()
    errors: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_ERROR_MESSAGES))
