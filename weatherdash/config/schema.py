"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class Units(StrEnum):
    METRIC = "metric"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.openweathermap.org"
    api_key: str = ""
    units: Units = Units.METRIC  # records are always stored in Celsius
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    use_celsius: bool = True


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    display: DisplayConfig = DisplayConfig()
    server: ServerConfig = ServerConfig()
    default_cities: list[str] = []
