"""OpenWeather Current Weather API client."""

import logging

import httpx

logger = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org"
CURRENT_WEATHER_PATH = "/data/2.5/weather"


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        units: str = "metric",
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.timeout = timeout

    async def get_current_weather(self, city: str) -> dict:
        """Fetch current conditions for a free-text city name.

        Raises httpx.HTTPStatusError on non-2xx (404 for unknown cities)
        and httpx.RequestError on transport failures. No retries.
        """
        url = f"{self.base_url}{CURRENT_WEATHER_PATH}"
        params = {"q": city, "appid": self.api_key, "units": self.units}
        logger.debug("GET %s q=%s units=%s", url, city, self.units)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(url, params=params)
        resp.raise_for_status()
        return resp.json()
