"""Tests for display formatters."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from weatherdash.reporting.formatters import (
    card_dict,
    convert_temp,
    display_temp,
    format_card,
    format_humidity,
    format_time,
    format_wind,
    icon_url,
    unit_toggle_label,
)
from weatherdash.tests.helpers import make_record


class TestDisplayTemp:
    def test_freezing_point(self):
        assert display_temp(0, True) == "0°C"
        assert display_temp(0, False) == "32°F"

    def test_boiling_point(self):
        assert display_temp(100, False) == "212°F"
        assert display_temp(100, True) == "100°C"

    def test_minus_forty_matches(self):
        assert display_temp(-40, True) == "-40°C"
        assert display_temp(-40, False) == "-40°F"

    @pytest.mark.parametrize(
        "celsius, expected",
        [(14.6, "15°C"), (14.4, "14°C"), (2.5, "3°C"), (-2.5, "-2°C"), (-0.4, "0°C")],
    )
    def test_rounding(self, celsius: float, expected: str):
        assert display_temp(celsius, True) == expected

    def test_fahrenheit_rounding(self):
        # 21.3°C = 70.34°F
        assert display_temp(21.3, False) == "70°F"

    def test_idempotent(self):
        assert display_temp(18.7, False) == display_temp(18.7, False)


class TestConvertTemp:
    def test_celsius_passthrough(self):
        assert convert_temp(21.5, True) == 21.5

    def test_fahrenheit(self):
        assert convert_temp(37.0, False) == pytest.approx(98.6)


class TestFormatTime:
    @pytest.mark.parametrize(
        "hour, minute, expected",
        [(0, 5, "12:05 AM"), (9, 30, "9:30 AM"), (12, 0, "12:00 PM"), (15, 7, "3:07 PM")],
    )
    def test_twelve_hour_clock(self, hour: int, minute: int, expected: str):
        dt = datetime(2026, 10, 17, hour, minute, tzinfo=UTC)
        assert format_time(dt, UTC) == expected

    def test_converts_to_given_zone(self):
        dt = datetime(2026, 10, 17, 15, 7, tzinfo=UTC)
        tokyo = timezone(timedelta(hours=9))
        assert format_time(dt, tokyo) == "12:07 AM"


class TestSmallFormatters:
    def test_wind_drops_trailing_zero(self):
        assert format_wind(5.0) == "Wind Speed: 5 m/s"
        assert format_wind(4.12) == "Wind Speed: 4.12 m/s"

    def test_humidity(self):
        assert format_humidity(81) == "Humidity: 81%"

    def test_unit_toggle_label(self):
        assert unit_toggle_label(True) == "Switch to °F"
        assert unit_toggle_label(False) == "Switch to °C"

    def test_icon_url(self):
        assert icon_url("04d") == "https://openweathermap.org/img/wn/04d@2x.png"


class TestFormatCard:
    def test_celsius_card(self):
        record = make_record("London", 1, temp=14.6, description="broken clouds")
        text = format_card(record, True, UTC)
        assert text.splitlines() == [
            "=== London ===",
            "Broken Clouds",
            "15°C (feels like 14°C)",
            "Wind Speed: 3.5 m/s",
            "Humidity: 50%",
            "Last updated: 3:07 PM",
        ]

    def test_fahrenheit_card(self):
        record = make_record("Paris", 2, temp=0.0)
        text = format_card(record, False, UTC)
        assert "32°F (feels like 30°F)" in text


class TestCardDict:
    def test_fields(self):
        record = make_record("Tokyo", 1850147, temp=19.0)
        card = card_dict(record, False, UTC)
        assert card["id"] == 1850147
        assert card["city"] == "Tokyo"
        assert card["temperature"] == "66°F"
        assert card["temperature_celsius"] == 19.0
        assert card["icon_url"].endswith("01d@2x.png")
        assert card["last_updated"] == "2026-10-17T15:07:00+00:00"
        assert card["last_updated_display"] == "3:07 PM"
