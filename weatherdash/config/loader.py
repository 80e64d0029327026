"""YAML config loader with environment fallback and runtime get/set."""

import json
import os
from pathlib import Path
from typing import Any

import yaml

from weatherdash.config.defaults import API_KEY_ENV_VAR, DEFAULT_CITIES
from weatherdash.config.schema import DashboardConfig


def load_config(path: str | Path) -> DashboardConfig:
    """Load and validate config from a YAML file.

    If no default cities are specified in the YAML, injects DEFAULT_CITIES.
    An empty api.api_key is filled from the OPENWEATHER_API_KEY variable.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not raw.get("default_cities"):
        raw["default_cities"] = list(DEFAULT_CITIES)

    api = raw.setdefault("api", {}) or {}
    raw["api"] = api
    if not api.get("api_key"):
        api["api_key"] = os.environ.get(API_KEY_ENV_VAR, "")

    return DashboardConfig(**raw)


def default_config() -> DashboardConfig:
    """Config used when no YAML file is available."""
    return DashboardConfig(
        default_cities=list(DEFAULT_CITIES),
        api={"api_key": os.environ.get(API_KEY_ENV_VAR, "")},
    )


def redacted_json(config: DashboardConfig) -> str:
    """Config as indented JSON with the API key masked."""
    data = json.loads(config.model_dump_json())
    if data["api"]["api_key"]:
        data["api"]["api_key"] = "***"
    return json.dumps(data, indent=2)


def get_config_value(config: DashboardConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'server.port'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
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
        target = target[part]
    old_value = target.get(parts[-1])
    if isinstance(value, str):
        if isinstance(old_value, bool):
            value = value.strip().lower() in ("1", "true", "yes", "on")
        elif isinstance(old_value, int):
            value = int(value)
        elif isinstance(old_value, float):
            value = float(value)
        elif isinstance(old_value, list):
            value = [v.strip() for v in value.split(",") if v.strip()]
    target[parts[-1]] = value
    return DashboardConfig(**data)
