"""Display formatters for weather records.

Temperatures are stored in Celsius; conversion happens only here, at render
time.
"""

import math
import string
from datetime import datetime, tzinfo

from weatherdash.models.weather import WeatherRecord

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{code}@2x.png"


def convert_temp(celsius: float, use_celsius: bool) -> float:
    return celsius if use_celsius else celsius * 9 / 5 + 32


def display_temp(celsius: float, use_celsius: bool) -> str:
    """Rounded temperature with unit suffix, e.g. '21°C' or '70°F'.

    Halves round up (2.5 -> 3, -2.5 -> -2) rather than to even.
    """
    value = math.floor(convert_temp(celsius, use_celsius) + 0.5)
    return f"{value}°{'C' if use_celsius else 'F'}"


def unit_toggle_label(use_celsius: bool) -> str:
    return f"Switch to {'°F' if use_celsius else '°C'}"


def format_time(dt: datetime, tz: tzinfo | None = None) -> str:
    """12-hour clock time such as '3:07 PM', in local time unless tz is given."""
    local = dt.astimezone(tz)
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d} {suffix}"


def format_wind(speed_mps: float) -> str:
    return f"Wind Speed: {speed_mps:g} m/s"


def format_humidity(percent: int) -> str:
    return f"Humidity: {percent}%"


def icon_url(code: str) -> str:
    return ICON_URL_TEMPLATE.format(code=code)


def format_card(
    record: WeatherRecord, use_celsius: bool, tz: tzinfo | None = None
) -> str:
    """Plain text card for terminal output."""
    lines = [
        f"=== {record.city} ===",
        string.capwords(record.description),
        f"{display_temp(record.temperature_celsius, use_celsius)} "
        f"(feels like {display_temp(record.feels_like_celsius, use_celsius)})",
        format_wind(record.wind_speed_mps),
        format_humidity(record.humidity_percent),
        f"Last updated: {format_time(record.last_updated, tz)}",
    ]
    return "\n".join(lines)


def card_dict(
    record: WeatherRecord, use_celsius: bool, tz: tzinfo | None = None
) -> dict:
    """JSON-ready card for the web dashboard."""
    return {
        "id": record.id,
        "city": record.city,
        "description": record.description,
        "temperature": display_temp(record.temperature_celsius, use_celsius),
        "feels_like": display_temp(record.feels_like_celsius, use_celsius),
        "temperature_celsius": record.temperature_celsius,
        "feels_like_celsius": record.feels_like_celsius,
        "wind": format_wind(record.wind_speed_mps),
        "humidity": format_humidity(record.humidity_percent),
        "icon_url": icon_url(record.icon_code),
        "last_updated": record.last_updated.isoformat(),
        "last_updated_display": format_time(record.last_updated, tz),
    }
