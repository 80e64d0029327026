"""Current-conditions data model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class WeatherRecord:
    """One city's normalized current-weather snapshot.

    Replaced wholesale on update. Temperatures are always Celsius.
    """

    id: int  # OpenWeather city id
    city: str  # name as returned by the API, not the query
    temperature_celsius: float
    feels_like_celsius: float
    description: str
    humidity_percent: int
    wind_speed_mps: float
    icon_code: str
    last_updated: datetime
