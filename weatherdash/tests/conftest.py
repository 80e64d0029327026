"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherdash.config.defaults import DEFAULT_CITIES
from weatherdash.config.schema import DashboardConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def london_payload() -> dict:
    with open(FIXTURE_DIR / "openweather_london.json") as f:
        return json.load(f)


@pytest.fixture
def tokyo_payload() -> dict:
    with open(FIXTURE_DIR / "openweather_tokyo.json") as f:
        return json.load(f)


@pytest.fixture
def default_config() -> DashboardConfig:
    """Return DashboardConfig with default cities and a test API key."""
    return DashboardConfig(
        default_cities=list(DEFAULT_CITIES), api={"api_key": "test-key"}
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"api_key": "yaml-key", "timeout_seconds": 5.0},
        "server": {"port": 9000},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
