"""Test doubles and builders shared across test modules."""

from datetime import UTC, datetime

from weatherdash.errors import FetchFailure
from weatherdash.models.weather import WeatherRecord


def make_record(
    city: str,
    record_id: int,
    temp: float = 10.0,
    description: str = "clear sky",
    last_updated: datetime | None = None,
) -> WeatherRecord:
    return WeatherRecord(
        id=record_id,
        city=city,
        temperature_celsius=temp,
        feels_like_celsius=temp - 1.0,
        description=description,
        humidity_percent=50,
        wind_speed_mps=3.5,
        icon_code="01d",
        last_updated=last_updated or datetime(2026, 10, 17, 15, 7, tzinfo=UTC),
    )


class FakeFetcher:
    """Stands in for WeatherFetcher; results are keyed by query string.

    A value may be a WeatherRecord, an exception instance to raise, or a list
    of those consumed one per call.
    """

    def __init__(self, results: dict):
        self.results = results
        self.calls: list[str] = []

    async def fetch(self, city_query: str) -> WeatherRecord:
        self.calls.append(city_query)
        result = self.results.get(city_query, FetchFailure(city_query))
        if isinstance(result, list):
            result = result.pop(0)
        if isinstance(result, Exception):
            raise result
        return result
