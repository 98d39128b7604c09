"""Normalizers for the free 2.5 endpoints.

The free tier has no UV index, no alerts, no dew point and no daily section;
UV defaults to 0, dew point is approximated from humidity and daily
summaries come from :func:`weather_core.bucketing.bucket_daily`.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..bucketing import BucketingRules, bucket_daily
from ..entities import CurrentConditions, DailyForecastSummary, HourlyForecastSample, Point
from ..units import meters_to_miles, round_half_away


def _gust(wind: Dict[str, Any]) -> Optional[int]:
    gust = wind.get("gust")
    if gust is None:
        return None
    return round_half_away(gust)


def timezone_label(offset: int) -> str:
    hours = offset / 3600
    text = str(int(hours)) if hours.is_integer() else str(hours)
    return f"UTC{'+' if offset >= 0 else ''}{text}"


def normalize_free_current(data: Dict[str, Any], point: Point) -> CurrentConditions:
    main = data["main"]
    wind = data.get("wind") or {}
    condition = data["weather"][0]
    temperature = round_half_away(main["temp"])
    offset = data.get("timezone", 0)
    return CurrentConditions(
        city=point.name,
        state=point.state,
        country=point.country,
        lat=data["coord"]["lat"],
        lon=data["coord"]["lon"],
        temperature=temperature,
        feels_like=round_half_away(main["feels_like"]),
        humidity=main["humidity"],
        pressure=main["pressure"],
        wind_speed=round_half_away(wind.get("speed", 0)),
        wind_gust=_gust(wind),
        wind_direction=wind.get("deg", 0),
        description=condition["description"],
        icon=condition["icon"],
        visibility=meters_to_miles(data.get("visibility")),
        clouds=(data.get("clouds") or {}).get("all", 0),
        sunrise=data["sys"].get("sunrise", 0),
        sunset=data["sys"].get("sunset", 0),
        timezone=timezone_label(offset),
        timezone_offset=offset,
        uv_index=0,
        # rough approximation, the free endpoint has no dew point
        dew_point=temperature - round_half_away((100 - main["humidity"]) / 5),
    )


def normalize_free_hourly(data: Dict[str, Any]) -> List[HourlyForecastSample]:
    samples = []
    for item in data["list"]:
        main = item["main"]
        wind = item.get("wind") or {}
        condition = item["weather"][0]
        samples.append(
            HourlyForecastSample(
                dt=item["dt"],
                temp=round_half_away(main["temp"]),
                feels_like=round_half_away(main["feels_like"]),
                humidity=main["humidity"],
                pressure=main["pressure"],
                wind_speed=round_half_away(wind.get("speed", 0)),
                wind_gust=_gust(wind),
                wind_direction=wind.get("deg", 0),
                description=condition["description"],
                icon=condition["icon"],
                clouds=(item.get("clouds") or {}).get("all", 0),
                visibility=meters_to_miles(item.get("visibility")),
                pop=item.get("pop", 0),
                uv_index=0,
                rain=(item.get("rain") or {}).get("3h", 0.0),
                snow=(item.get("snow") or {}).get("3h", 0.0),
            )
        )
    return samples


def normalize_free_daily(
    data: Dict[str, Any], rules: Optional[BucketingRules] = None
) -> List[DailyForecastSummary]:
    utc_offset = (data.get("city") or {}).get("timezone")
    return bucket_daily(normalize_free_hourly(data), utc_offset=utc_offset, rules=rules)


__all__ = ["normalize_free_current", "normalize_free_daily", "normalize_free_hourly", "timezone_label"]
