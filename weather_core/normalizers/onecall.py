from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from ..entities import (
    CurrentConditions,
    DailyForecastSummary,
    HourlyForecastSample,
    MinutelyPrecipitation,
    Point,
    WeatherAdvisory,
    WeatherBundle,
)
from ..providers.onecall import OneCallPayload
from ..units import meters_to_miles, round_half_away


def _optional_round(value: Optional[float]) -> Optional[int]:
    if value is None:
        return None
    return round_half_away(value)


def normalize_current(data: Dict[str, Any], point: Point) -> CurrentConditions:
    current = data["current"]
    condition = current["weather"][0]
    return CurrentConditions(
        city=point.name,
        state=point.state,
        country=point.country,
        lat=data.get("lat", point.latitude),
        lon=data.get("lon", point.longitude),
        temperature=round_half_away(current["temp"]),
        feels_like=round_half_away(current["feels_like"]),
        humidity=current["humidity"],
        pressure=current["pressure"],
        wind_speed=round_half_away(current.get("wind_speed", 0)),
        wind_gust=_optional_round(current.get("wind_gust")),
        wind_direction=current.get("wind_deg", 0),
        description=condition["description"],
        icon=condition["icon"],
        visibility=meters_to_miles(current.get("visibility")),
        clouds=current.get("clouds", 0),
        sunrise=current.get("sunrise", 0),
        sunset=current.get("sunset", 0),
        timezone=data.get("timezone", "UTC"),
        timezone_offset=data.get("timezone_offset", 0),
        uv_index=round_half_away(current.get("uvi", 0)),
        dew_point=round_half_away(current["dew_point"]),
    )


def normalize_minutely(data: Dict[str, Any]) -> Tuple[MinutelyPrecipitation, ...]:
    return tuple(
        MinutelyPrecipitation(dt=item["dt"], precipitation=item.get("precipitation", 0.0))
        for item in data.get("minutely") or []
    )


def normalize_hourly(data: Dict[str, Any]) -> Tuple[HourlyForecastSample, ...]:
    samples = []
    for item in data.get("hourly") or []:
        condition = item["weather"][0]
        samples.append(
            HourlyForecastSample(
                dt=item["dt"],
                temp=round_half_away(item["temp"]),
                feels_like=round_half_away(item["feels_like"]),
                humidity=item["humidity"],
                pressure=item["pressure"],
                wind_speed=round_half_away(item.get("wind_speed", 0)),
                wind_gust=_optional_round(item.get("wind_gust")),
                wind_direction=item.get("wind_deg", 0),
                description=condition["description"],
                icon=condition["icon"],
                clouds=item.get("clouds", 0),
                visibility=meters_to_miles(item.get("visibility")),
                pop=item.get("pop", 0),
                uv_index=round_half_away(item.get("uvi", 0)),
                rain=(item.get("rain") or {}).get("1h", 0.0),
                snow=(item.get("snow") or {}).get("1h", 0.0),
            )
        )
    return tuple(samples)


def normalize_daily(data: Dict[str, Any]) -> Tuple[DailyForecastSummary, ...]:
    summaries = []
    for item in data.get("daily") or []:
        temp = item["temp"]
        feels_like = item["feels_like"]
        condition = item["weather"][0]
        summaries.append(
            DailyForecastSummary(
                dt=item["dt"],
                sunrise=item.get("sunrise"),
                sunset=item.get("sunset"),
                moonrise=item.get("moonrise"),
                moonset=item.get("moonset"),
                moon_phase=item.get("moon_phase"),
                summary=item.get("summary"),
                temp_day=round_half_away(temp["day"]),
                temp_min=round_half_away(temp["min"]),
                temp_max=round_half_away(temp["max"]),
                temp_night=round_half_away(temp["night"]),
                temp_morning=round_half_away(temp["morn"]),
                temp_evening=round_half_away(temp["eve"]),
                feels_like_day=round_half_away(feels_like["day"]),
                feels_like_night=round_half_away(feels_like["night"]),
                humidity=item["humidity"],
                pressure=item["pressure"],
                wind_speed=round_half_away(item.get("wind_speed", 0)),
                wind_gust=_optional_round(item.get("wind_gust")),
                wind_direction=item.get("wind_deg", 0),
                description=condition["description"],
                icon=condition["icon"],
                clouds=item.get("clouds", 0),
                pop=item.get("pop", 0),
                rain=item.get("rain", 0.0),
                snow=item.get("snow", 0.0),
                uv_index=round_half_away(item.get("uvi", 0)),
            )
        )
    return tuple(summaries)


def normalize_alerts(data: Dict[str, Any]) -> Tuple[WeatherAdvisory, ...]:
    return tuple(
        WeatherAdvisory(
            sender_name=item.get("sender_name", ""),
            event=item["event"],
            start=item["start"],
            end=item["end"],
            description=item.get("description", ""),
            tags=tuple(item.get("tags") or ()),
        )
        for item in data.get("alerts") or []
    )


def normalize_onecall(payload: OneCallPayload, point: Point) -> WeatherBundle:
    data = payload.data
    return WeatherBundle(
        current=normalize_current(data, point),
        minutely=normalize_minutely(data),
        hourly=normalize_hourly(data),
        daily=normalize_daily(data),
        alerts=normalize_alerts(data),
    )


__all__ = [
    "normalize_alerts",
    "normalize_current",
    "normalize_daily",
    "normalize_hourly",
    "normalize_minutely",
    "normalize_onecall",
]
