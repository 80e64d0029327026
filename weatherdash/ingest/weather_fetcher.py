"""Weather fetcher: resolves a city name into a normalized WeatherRecord."""

import logging
import math
from datetime import datetime

import httpx

from weatherdash.errors import FetchFailure
from weatherdash.ingest.openweather_client import OpenWeatherClient
from weatherdash.models.common import utc_now
from weatherdash.models.weather import WeatherRecord

logger = logging.getLogger(__name__)


class WeatherFetcher:
    def __init__(self, client: OpenWeatherClient):
        self.client = client

    async def fetch(self, city_query: str) -> WeatherRecord:
        """Fetch current conditions for a city.

        Every failure mode (transport error, non-2xx status, malformed
        body) is reported as FetchFailure. Nothing is cached or retried.
        """
        try:
            raw = await self.client.get_current_weather(city_query)
            fetched_at = utc_now()
            return _extract_record(raw, fetched_at)
        except (
            httpx.HTTPError, ValueError, KeyError, IndexError, TypeError, OverflowError
        ) as e:
            logger.warning("Error fetching weather for %s: %s", city_query, e)
            raise FetchFailure(city_query) from e


def _extract_record(raw: dict, fetched_at: datetime) -> WeatherRecord:
    """Map an OpenWeather current-weather body into a WeatherRecord."""
    main = raw["main"]
    condition = raw["weather"][0]
    name = raw["name"]
    if not isinstance(name, str):
        raise TypeError(f"city name is not a string: {name!r}")

    raw_humidity = main["humidity"]
    humidity = int(raw_humidity)
    if humidity != raw_humidity:
        raise ValueError(f"humidity is not a whole percentage: {raw_humidity}")
    if not 0 <= humidity <= 100:
        raise ValueError(f"humidity out of range: {humidity}")

    temp = _finite(main["temp"], "temp")
    feels_like = _finite(main["feels_like"], "feels_like")
    wind_speed = _finite(raw["wind"]["speed"], "wind speed")
    if wind_speed < 0:
        raise ValueError(f"negative wind speed: {wind_speed}")

    return WeatherRecord(
        id=int(raw["id"]),
        city=name,
        temperature_celsius=temp,
        feels_like_celsius=feels_like,
        description=str(condition["description"]),
        humidity_percent=humidity,
        wind_speed_mps=wind_speed,
        icon_code=str(condition["icon"]),
        last_updated=fetched_at,
    )


def _finite(value, field: str) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{field} is not finite: {value}")
    return number
