"""Primary tier: OpenWeather One Call 3.0."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .base import WeatherProvider


@dataclass(frozen=True)
class OneCallPayload:
    """Raw One Call response: current, minutely, hourly, daily and alerts in one body."""

    data: Dict[str, Any]


class OneCallClient(WeatherProvider):
    name = "onecall"
    base_url = "https://api.openweathermap.org/data/3.0/onecall"

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(api_key=api_key, **kwargs)
        self.base_url = base_url or self.base_url

    def fetch(self, latitude: float, longitude: float) -> Optional[OneCallPayload]:
        params = {"lat": latitude, "lon": longitude, "units": "imperial"}
        data = self._get_json(self.base_url, params, required=("current",))
        if data is None:
            return None
        return OneCallPayload(data=data)


__all__ = ["OneCallClient", "OneCallPayload"]
