from __future__ import annotations

from typing import Any, Dict, Optional

import pytest

from weather_core.config import WeatherConfig


ONECALL_URL = "https://onecall.test/data/3.0/onecall"
FREE_URL = "https://free.test/data/2.5"
# 2024-01-01T00:00:00Z
START = 1704067200


def _condition(description: str = "few clouds", icon: str = "02d") -> list:
    return [{"id": 801, "main": "Clouds", "description": description, "icon": icon}]


def make_onecall_body(lat: float = 25.7617, lon: float = -80.1918, temp: float = 84.6) -> Dict[str, Any]:
    return {
        "lat": lat,
        "lon": lon,
        "timezone": "America/New_York",
        "timezone_offset": -18000,
        "current": {
            "dt": START,
            "sunrise": START - 6 * 3600,
            "sunset": START + 5 * 3600,
            "temp": temp,
            "feels_like": 90.2,
            "pressure": 1014,
            "humidity": 70,
            "dew_point": 73.4,
            "uvi": 7.6,
            "clouds": 20,
            "visibility": 16090,
            "wind_speed": 9.2,
            "wind_gust": 14.5,
            "wind_deg": 120,
            "weather": _condition(),
        },
        "minutely": [{"dt": START + i * 60, "precipitation": 0.1 * i} for i in range(3)],
        "hourly": [
            {
                "dt": START + i * 3600,
                "temp": 80.4 + i,
                "feels_like": 83.0 + i,
                "pressure": 1014,
                "humidity": 65,
                "dew_point": 70.1,
                "uvi": 5.2,
                "clouds": 10,
                "visibility": 10000,
                "wind_speed": 7.7,
                "wind_deg": 90,
                "pop": 0.2,
                "weather": _condition("clear sky", "01d"),
            }
            for i in range(3)
        ],
        "daily": [
            {
                "dt": START + i * 86400,
                "sunrise": START + i * 86400 + 6 * 3600,
                "sunset": START + i * 86400 + 17 * 3600,
                "moonrise": START + i * 86400 + 20 * 3600,
                "moonset": START + i * 86400 + 9 * 3600,
                "moon_phase": 0.25,
                "summary": "Expect a day of partly cloudy with rain",
                "temp": {"day": 84.2, "min": 72.5, "max": 86.1, "night": 75.0, "eve": 80.3, "morn": 73.9},
                "feels_like": {"day": 88.0, "night": 76.4, "eve": 82.0, "morn": 74.1},
                "pressure": 1015,
                "humidity": 68,
                "dew_point": 71.2,
                "wind_speed": 11.4,
                "wind_gust": 18.2,
                "wind_deg": 110,
                "clouds": 40,
                "pop": 0.45,
                "rain": 1.3,
                "uvi": 8.1,
                "weather": _condition("light rain", "10d"),
            }
            for i in range(2)
        ],
        "alerts": [
            {
                "sender_name": "NWS Miami",
                "event": "Heat Advisory",
                "start": START,
                "end": START + 12 * 3600,
                "description": "Heat index values up to 108 expected.",
                "tags": ["Extreme temperature value"],
            }
        ],
    }


def make_free_current_body(lat: float = 40.7128, lon: float = -74.006, temp: float = 71.6) -> Dict[str, Any]:
    return {
        "coord": {"lat": lat, "lon": lon},
        "weather": _condition("scattered clouds", "03d"),
        "main": {"temp": temp, "feels_like": 71.2, "pressure": 1016, "humidity": 60},
        "visibility": 8045,
        "wind": {"speed": 5.75, "deg": 250, "gust": 9.1},
        "clouds": {"all": 40},
        "dt": START,
        "sys": {"country": "US", "sunrise": START - 5 * 3600, "sunset": START + 4 * 3600},
        "timezone": -18000,
        "name": "New York",
    }


def make_free_forecast_body(count: int = 16, start: int = START, offset: Optional[int] = 0) -> Dict[str, Any]:
    items = []
    for i in range(count):
        item = {
            "dt": start + i * 3 * 3600,
            "main": {"temp": 40.0 + i, "feels_like": 37.0 + i, "pressure": 1010 + i, "humidity": 50 + i},
            "weather": _condition("light rain", "10n"),
            "clouds": {"all": 75},
            "wind": {"speed": 4.4, "deg": 200},
            "visibility": 10000,
            "pop": round(0.05 * i, 2),
        }
        if i % 4 == 0:
            item["rain"] = {"3h": 0.5}
        items.append(item)
    body: Dict[str, Any] = {"cod": "200", "cnt": count, "list": items}
    if offset is not None:
        body["city"] = {"name": "New York", "timezone": offset}
    return body


@pytest.fixture()
def onecall_body():
    return make_onecall_body


@pytest.fixture()
def free_current_body():
    return make_free_current_body


@pytest.fixture()
def free_forecast_body():
    return make_free_forecast_body


@pytest.fixture()
def keyed_config() -> WeatherConfig:
    return WeatherConfig(api_key="test", onecall_url=ONECALL_URL, free_url=FREE_URL, timeout=2.0)
