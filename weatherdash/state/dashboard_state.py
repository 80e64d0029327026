"""Dashboard state: the ordered record collection and the view flags around it."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from weatherdash.config.schema import DashboardConfig
from weatherdash.errors import DashboardBusy, FetchFailure, SearchError
from weatherdash.ingest.openweather_client import OpenWeatherClient
from weatherdash.ingest.weather_fetcher import WeatherFetcher
from weatherdash.models.weather import WeatherRecord

logger = logging.getLogger(__name__)

CITY_NOT_FOUND_MESSAGE = "City not found. Please try again."
FETCH_FAILED_MESSAGE = "Failed to fetch weather data. Please try again."


@dataclass(frozen=True)
class DashboardView:
    records: tuple[WeatherRecord, ...]
    loading: bool
    refreshing: bool
    error: str | None
    use_celsius: bool


class DashboardState:
    """Single owner of the dashboard's record collection.

    The collection is reassigned to a new list on every change, never edited
    in place. Searches and refreshes are each limited to one in
    flight, but a search and a refresh may race; whichever finishes last wins
    for a record they both touch.
    """

    def __init__(self, fetcher: WeatherFetcher, use_celsius: bool = True):
        self.fetcher = fetcher
        self.use_celsius = use_celsius
        self.loading = False
        self.refreshing = False
        self.error: str | None = None
        self._records: list[WeatherRecord] = []

    @property
    def records(self) -> tuple[WeatherRecord, ...]:
        return tuple(self._records)

    def snapshot(self) -> DashboardView:
        return DashboardView(
            records=self.records,
            loading=self.loading,
            refreshing=self.refreshing,
            error=self.error,
            use_celsius=self.use_celsius,
        )

    async def initialize(self, default_cities: Sequence[str]) -> None:
        """Fetch every default city concurrently and keep the ones that resolve.

        Failed cities are dropped without surfacing an error.
        """
        self.loading = True
        try:
            results = await asyncio.gather(
                *(self.fetcher.fetch(city) for city in default_cities),
                return_exceptions=True,
            )
            loaded: list[WeatherRecord] = []
            for city, result in zip(default_cities, results):
                if isinstance(result, WeatherRecord):
                    if any(r.id == result.id for r in loaded):
                        logger.info(
                            "Dropping %s, already loaded as %s", city, result.city
                        )
                        continue
                    loaded.append(result)
                elif isinstance(result, FetchFailure):
                    logger.info("Dropping %s from initial load", city)
                else:
                    logger.error(
                        "Unexpected error loading %s", city, exc_info=result
                    )
            self._records = loaded
            logger.info(
                "Loaded %d of %d default cities", len(loaded), len(default_cities)
            )
        finally:
            self.loading = False

    async def search(self, city_query: str) -> WeatherRecord | None:
        """Fetch a city and put it at the front of the collection.

        Blank queries are ignored and return None. On failure the collection
        is left alone, ``error`` is set and SearchError is raised.
        """
        if not city_query.strip():
            return None
        if self.loading:
            raise DashboardBusy("search")

        self.loading = True
        self.error = None
        try:
            record = await self.fetcher.fetch(city_query)
        except FetchFailure as e:
            self.error = CITY_NOT_FOUND_MESSAGE
            raise SearchError(self.error) from e
        except Exception as e:
            logger.exception("Search for %s failed unexpectedly", city_query)
            self.error = FETCH_FAILED_MESSAGE
            raise SearchError(self.error) from e
        finally:
            self.loading = False

        kept = [
            r for r in self._records if r.city != record.city and r.id != record.id
        ]
        self._records = [record, *kept]
        logger.info(
            "Search for %r resolved to %s (id=%d)", city_query, record.city, record.id
        )
        return record

    async def refresh(self, record_id: int) -> WeatherRecord | None:
        """Re-fetch one record's city and swap it in at the same position.

        Unknown ids and failed fetches are silent no-ops returning None.
        """
        if self.refreshing:
            raise DashboardBusy("refresh")

        current = next((r for r in self._records if r.id == record_id), None)
        if current is None:
            return None

        self.refreshing = True
        try:
            updated = await self.fetcher.fetch(current.city)
        except FetchFailure:
            return None
        finally:
            self.refreshing = False

        # The record may have been evicted by a search while we were waiting.
        if not any(r.id == record_id for r in self._records):
            return updated
        # Another card already holding the new id is dropped to keep ids unique.
        self._records = [
            updated if r.id == record_id else r
            for r in self._records
            if r.id == record_id or r.id != updated.id
        ]
        return updated

    def toggle_unit(self) -> bool:
        self.use_celsius = not self.use_celsius
        return self.use_celsius


def build_state(config: DashboardConfig) -> DashboardState:
    """Wire an OpenWeather-backed DashboardState from config."""
    client = OpenWeatherClient(
        api_key=config.api.api_key,
        base_url=config.api.base_url,
        units=config.api.units.value,
        timeout=config.api.timeout_seconds,
    )
    return DashboardState(
        WeatherFetcher(client), use_celsius=config.display.use_celsius
    )
