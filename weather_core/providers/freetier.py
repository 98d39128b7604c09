"""Legacy tier: the free OpenWeather 2.5 current weather and 5 day / 3 hour forecast."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .base import WeatherProvider


@dataclass(frozen=True)
class FreeTierPayload:
    """Raw bodies of the two legacy calls; either may be missing."""

    current: Optional[Dict[str, Any]] = None
    forecast: Optional[Dict[str, Any]] = None


class FreeTierClient(WeatherProvider):
    name = "free"
    base_url = "https://api.openweathermap.org/data/2.5"

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(api_key=api_key, **kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")

    def current(self, latitude: float, longitude: float) -> Optional[Dict[str, Any]]:
        return self._get_json(
            f"{self.base_url}/weather",
            {"lat": latitude, "lon": longitude, "units": "imperial"},
            required=("main", "weather", "coord", "sys"),
        )

    def forecast(self, latitude: float, longitude: float) -> Optional[Dict[str, Any]]:
        return self._get_json(
            f"{self.base_url}/forecast",
            {"lat": latitude, "lon": longitude, "units": "imperial"},
            required=("list",),
        )


__all__ = ["FreeTierClient", "FreeTierPayload"]
