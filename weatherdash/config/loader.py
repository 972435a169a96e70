"""YAML config loader plus read-only lookups used by the fetch pipeline."""

import json
import os
from pathlib import Path
from typing import Any

import yaml

from weatherdash.config.defaults import DEFAULT_ERROR_MESSAGES, WEATHER_CONDITIONS
from weatherdash.config.schema import ApiConfig, DashboardConfig

API_KEY_ENV = "OPENWEATHER_API_KEY"


class ConfigError(KeyError):
    """Raised for config files or keys that cannot be resolved."""


def load_config(path: str | Path) -> DashboardConfig:
    """Load and validate config from a YAML file.

    An empty file yields the defaults. When no API key is present in the
    file, OPENWEATHER_API_KEY is used. Error messages given in the file are
    merged over the built-in table.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")

    api = raw.setdefault("api", {})
    if not api.get("key"):
        api["key"] = os.environ.get(API_KEY_ENV, "")

    raw["errors"] = {**DEFAULT_ERROR_MESSAGES, **(raw.get("errors") or {})}

    return DashboardConfig(**raw)


def default_config() -> DashboardConfig:
    """Built-in defaults with the API key taken from OPENWEATHER_API_KEY."""
    return DashboardConfig(api=ApiConfig(key=os.environ.get(API_KEY_ENV, "")))


def get_config_value(config: DashboardConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'app.cache_duration_ms'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, dict) and part in obj:
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise ConfigError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(
    config: DashboardConfig, dotted_key: str, value: Any
) -> DashboardConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new DashboardConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if part not in target:
            raise ConfigError(f"Config key not found: {dotted_key}")
        target = target[part]
    old_value = target.get(parts[-1])
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    target[parts[-1]] = value
    return DashboardConfig(**data)


def is_valid_api_key(config: DashboardConfig) -> bool:
    return bool(config.api.key.strip())


def is_feature_enabled(config: DashboardConfig, name: str) -> bool:
    return getattr(config.features, name, False) is True


def error_message(config: DashboardConfig, kind: str, **fields: Any) -> str:
    """Look up the user-facing message for an error kind.

    Unknown kinds fall back to the generic message. Placeholders such as
    {status_code} are filled from ``fields``.
    """
    template = config.errors.get(kind) or config.errors.get(
        "generic", DEFAULT_ERROR_MESSAGES["generic"]
    )
    try:
        return template.format(**fields)
    except (KeyError, IndexError):
        return template


def icon_url(config: DashboardConfig, icon: str, size: str = "2x") -> str:
    return f"{config.api.icon_base_url}/{icon}@{size}.png"


def condition_description(
    code: int, fallback: str = "Unknown weather condition"
) -> str:
    return WEATHER_CONDITIONS.get(code, fallback)
