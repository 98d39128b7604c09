from __future__ import annotations

from typing import Tuple

from ..entities import CurrentConditions, DailyForecastSummary, HourlyForecastSample, WeatherBundle
from ..providers.synthetic import MOCK_DESCRIPTION, SyntheticPayload


HOUR = 3600
DAY = 24 * HOUR


def synthetic_current(payload: SyntheticPayload) -> CurrentConditions:
    point = payload.point
    return CurrentConditions(
        city=point.name,
        state=point.state or "USA",
        country=point.country,
        lat=point.latitude,
        lon=point.longitude,
        temperature=32,
        feels_like=28,
        humidity=50,
        pressure=1015,
        wind_speed=10,
        wind_gust=15,
        wind_direction=180,
        description=MOCK_DESCRIPTION,
        icon="01d",
        visibility=10,
        clouds=25,
        sunrise=payload.as_of - 6 * HOUR,
        sunset=payload.as_of + 6 * HOUR,
        timezone="America/New_York",
        timezone_offset=-5 * HOUR,
        uv_index=3,
        dew_point=25,
    )


def synthetic_hourly(payload: SyntheticPayload) -> Tuple[HourlyForecastSample, ...]:
    samples = []
    for index in range(payload.hours):
        temp = 32 + index % 10
        samples.append(
            HourlyForecastSample(
                dt=payload.as_of + index * HOUR,
                temp=temp,
                feels_like=temp - 4,
                humidity=50,
                pressure=1015,
                wind_speed=10,
                wind_direction=180,
                description=MOCK_DESCRIPTION,
                icon="01d",
                clouds=25,
                visibility=10,
                pop=0.1,
                uv_index=3,
            )
        )
    return tuple(samples)


def synthetic_daily(payload: SyntheticPayload) -> Tuple[DailyForecastSummary, ...]:
    summaries = []
    for index in range(payload.days):
        anchor = payload.as_of + index * DAY
        temp_day = 35 + index * 2
        temp_night = temp_day - 10
        summaries.append(
            DailyForecastSummary(
                dt=anchor,
                sunrise=anchor + 6 * HOUR,
                sunset=anchor + 18 * HOUR,
                moonrise=anchor + 8 * HOUR,
                moonset=anchor + 20 * HOUR,
                moon_phase=0.5,
                summary=MOCK_DESCRIPTION,
                temp_day=temp_day,
                temp_min=temp_day - 8,
                temp_max=temp_day + 5,
                temp_night=temp_night,
                temp_morning=temp_day - 5,
                temp_evening=temp_day + 2,
                feels_like_day=temp_day - 3,
                feels_like_night=temp_night - 5,
                humidity=50,
                pressure=1015,
                wind_speed=10,
                wind_direction=180,
                description=MOCK_DESCRIPTION,
                icon="01d",
                clouds=25,
                pop=0.1,
                uv_index=3,
            )
        )
    return tuple(summaries)


def normalize_synthetic(payload: SyntheticPayload) -> WeatherBundle:
    return WeatherBundle(
        current=synthetic_current(payload),
        hourly=synthetic_hourly(payload),
        daily=synthetic_daily(payload),
    )


__all__ = ["normalize_synthetic", "synthetic_current", "synthetic_daily", "synthetic_hourly"]
