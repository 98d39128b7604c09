"""Runtime configuration for the weather pipeline.

Values come from Django settings (which read them from the environment at
startup), so the domain layer itself never touches ``os.environ``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .bucketing import BucketingRules
from .providers.freetier import FreeTierClient
from .providers.onecall import OneCallClient


@dataclass(frozen=True)
class WeatherConfig:
    api_key: str = ""
    onecall_url: str = OneCallClient.base_url
    free_url: str = FreeTierClient.base_url
    timeout: float = 10.0
    max_concurrency: int = 8
    panel_size: int = 8
    bucketing: BucketingRules = field(default_factory=BucketingRules)

    @classmethod
    def from_settings(cls, settings: Any) -> "WeatherConfig":
        defaults = cls()
        return cls(
            api_key=getattr(settings, "OPENWEATHER_API_KEY", "") or "",
            onecall_url=getattr(settings, "WEATHER_ONECALL_URL", defaults.onecall_url),
            free_url=getattr(settings, "WEATHER_FREE_URL", defaults.free_url),
            timeout=float(getattr(settings, "WEATHER_HTTP_TIMEOUT", defaults.timeout)),
            max_concurrency=max(1, int(getattr(settings, "WEATHER_MAX_CONCURRENCY", defaults.max_concurrency))),
            panel_size=int(getattr(settings, "WEATHER_PANEL_SIZE", defaults.panel_size)),
            bucketing=BucketingRules.from_mapping(getattr(settings, "WEATHER_BUCKETING", None)),
        )


__all__ = ["WeatherConfig"]
