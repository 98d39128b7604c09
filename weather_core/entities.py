from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional, Tuple

from .units import fahrenheit_to_celsius


def _attach_celsius(record: Any, names: Iterable[str]) -> None:
    # Celsius is always derived here, never taken from an upstream payload.
    for name in names:
        object.__setattr__(record, f"{name}_celsius", fahrenheit_to_celsius(getattr(record, name)))


class QueryType(str, Enum):
    CURRENT = "current"
    FULL = "full"
    HOURLY = "hourly"
    DAILY = "daily"
    ALERTS = "alerts"
    MULTI = "multi"

    @classmethod
    def parse(cls, value: Optional[str]) -> "QueryType":
        """Map a raw ``type`` parameter to a query, honouring the legacy aliases."""
        value = (value or cls.CURRENT.value).strip().lower()
        aliases = {"onecall": cls.FULL, "forecast": cls.DAILY}
        if value in aliases:
            return aliases[value]
        try:
            return cls(value)
        except ValueError:
            return cls.CURRENT


@dataclass(frozen=True)
class Point:
    """A single geographic query target."""

    name: str
    state: str
    latitude: float
    longitude: float
    country: str = "US"


@dataclass(frozen=True)
class CurrentConditions:
    """Normalized current conditions.

    Temperatures are Fahrenheit with a derived Celsius twin, pressure is hPa,
    wind speed is mph, visibility is miles and sunrise/sunset are epoch seconds.
    """

    city: str
    state: str
    country: str
    lat: float
    lon: float
    temperature: int
    feels_like: int
    humidity: int
    pressure: int
    wind_speed: int
    wind_direction: int
    description: str
    icon: str
    visibility: int
    clouds: int
    sunrise: int
    sunset: int
    timezone: str
    timezone_offset: int
    uv_index: int
    dew_point: int
    wind_gust: Optional[int] = None
    temperature_celsius: int = field(init=False)
    feels_like_celsius: int = field(init=False)
    dew_point_celsius: int = field(init=False)

    def __post_init__(self) -> None:
        _attach_celsius(self, ("temperature", "feels_like", "dew_point"))


@dataclass(frozen=True)
class MinutelyPrecipitation:
    dt: int
    precipitation: float


@dataclass(frozen=True)
class HourlyForecastSample:
    dt: int
    temp: int
    feels_like: int
    humidity: int
    pressure: int
    wind_speed: int
    wind_direction: int
    description: str
    icon: str
    clouds: int
    visibility: int
    pop: float
    uv_index: int
    wind_gust: Optional[int] = None
    rain: float = 0.0
    snow: float = 0.0
    temp_celsius: int = field(init=False)
    feels_like_celsius: int = field(init=False)

    def __post_init__(self) -> None:
        _attach_celsius(self, ("temp", "feels_like"))


@dataclass(frozen=True)
class DailyForecastSummary:
    dt: int
    temp_day: int
    temp_min: int
    temp_max: int
    temp_night: int
    temp_morning: int
    temp_evening: int
    feels_like_day: int
    feels_like_night: int
    humidity: int
    pressure: int
    wind_speed: int
    wind_direction: int
    description: str
    icon: str
    clouds: int
    pop: float
    uv_index: int
    rain: float = 0.0
    snow: float = 0.0
    wind_gust: Optional[int] = None
    sunrise: Optional[int] = None
    sunset: Optional[int] = None
    moonrise: Optional[int] = None
    moonset: Optional[int] = None
    moon_phase: Optional[float] = None
    summary: Optional[str] = None
    temp_day_celsius: int = field(init=False)
    temp_min_celsius: int = field(init=False)
    temp_max_celsius: int = field(init=False)
    temp_night_celsius: int = field(init=False)
    temp_morning_celsius: int = field(init=False)
    temp_evening_celsius: int = field(init=False)
    feels_like_day_celsius: int = field(init=False)
    feels_like_night_celsius: int = field(init=False)

    def __post_init__(self) -> None:
        _attach_celsius(
            self,
            (
                "temp_day",
                "temp_min",
                "temp_max",
                "temp_night",
                "temp_morning",
                "temp_evening",
                "feels_like_day",
                "feels_like_night",
            ),
        )


@dataclass(frozen=True)
class WeatherAdvisory:
    sender_name: str
    event: str
    start: int
    end: int
    description: str
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class WeatherBundle:
    """Everything a tier knows about one point (the ``full`` query shape)."""

    current: CurrentConditions
    minutely: Tuple[MinutelyPrecipitation, ...] = ()
    hourly: Tuple[HourlyForecastSample, ...] = ()
    daily: Tuple[DailyForecastSummary, ...] = ()
    alerts: Tuple[WeatherAdvisory, ...] = ()


@dataclass(frozen=True)
class ResolvedWeatherResult:
    """Normalized data plus the name of the tier that served it."""

    data: Any
    source: str


__all__ = [
    "CurrentConditions",
    "DailyForecastSummary",
    "HourlyForecastSample",
    "MinutelyPrecipitation",
    "Point",
    "QueryType",
    "ResolvedWeatherResult",
    "WeatherAdvisory",
    "WeatherBundle",
]
