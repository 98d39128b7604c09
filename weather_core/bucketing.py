"""Group short-interval forecast samples into per-day summaries.

Only the legacy tier needs this: its forecast endpoint returns 3-hour slots
and no daily section. The reference hours used to pick morning, noon,
evening and night figures are approximations, so they live in
:class:`BucketingRules` where they can be tuned from settings.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Mapping, Optional, Sequence

from .entities import DailyForecastSummary, HourlyForecastSample
from .units import round_half_away


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BucketingRules:
    morning_hour: int = 9
    noon_hour: int = 12
    evening_hour: int = 18
    night_hour: int = 21
    # Used when the day has no sample at ``night_hour``.
    night_cooling: int = 10
    night_feels_offset: int = 2

    @classmethod
    def from_mapping(cls, overrides: Optional[Mapping[str, int]]) -> "BucketingRules":
        if not overrides:
            return cls()
        known = {name: int(value) for name, value in overrides.items() if name in cls.__dataclass_fields__}
        unknown = set(overrides) - set(known)
        if unknown:
            logger.warning("Ignoring unknown bucketing rules: %s", ", ".join(sorted(unknown)))
        return cls(**known)


def local_datetime(epoch: int, utc_offset: Optional[int] = None) -> datetime:
    """Convert an epoch to wall-clock time at the point.

    Without a provider-reported offset the process timezone is used.
    """
    if utc_offset is None:
        return datetime.fromtimestamp(epoch).astimezone()
    return datetime.fromtimestamp(epoch, tz=timezone(timedelta(seconds=utc_offset)))


def group_by_local_date(
    samples: Sequence[HourlyForecastSample], utc_offset: Optional[int] = None
) -> Dict[date, List[HourlyForecastSample]]:
    groups: Dict[date, List[HourlyForecastSample]] = {}
    for sample in samples:
        groups.setdefault(local_datetime(sample.dt, utc_offset).date(), []).append(sample)
    return groups


def bucket_daily(
    samples: Sequence[HourlyForecastSample],
    *,
    utc_offset: Optional[int] = None,
    rules: Optional[BucketingRules] = None,
) -> List[DailyForecastSummary]:
    rules = rules or BucketingRules()
    return [
        _summarize(group, utc_offset, rules)
        for group in group_by_local_date(samples, utc_offset).values()
    ]


def _summarize(
    group: List[HourlyForecastSample], utc_offset: Optional[int], rules: BucketingRules
) -> DailyForecastSummary:
    def at_hour(hour: int) -> Optional[HourlyForecastSample]:
        for sample in group:
            if local_datetime(sample.dt, utc_offset).hour == hour:
                return sample
        return None

    temps = [sample.temp for sample in group]
    temp_day = round_half_away(sum(temps) / len(temps))

    morning = at_hour(rules.morning_hour)
    evening = at_hour(rules.evening_hour)
    night = at_hour(rules.night_hour)
    midday = at_hour(rules.noon_hour) or group[0]

    temp_night = night.temp if night is not None else temp_day - rules.night_cooling
    # Derived from temp_night even when the night slot has its own feels_like.
    feels_like_night = temp_night - rules.night_feels_offset

    return DailyForecastSummary(
        dt=group[0].dt,
        temp_day=temp_day,
        temp_min=min(temps),
        temp_max=max(temps),
        temp_night=temp_night,
        temp_morning=morning.temp if morning is not None else temp_day,
        temp_evening=evening.temp if evening is not None else temp_day,
        feels_like_day=midday.feels_like,
        feels_like_night=feels_like_night,
        humidity=midday.humidity,
        pressure=midday.pressure,
        wind_speed=midday.wind_speed,
        wind_gust=midday.wind_gust,
        wind_direction=midday.wind_direction,
        description=midday.description,
        icon=midday.icon,
        clouds=midday.clouds,
        pop=max(sample.pop for sample in group),
        rain=round(sum(sample.rain for sample in group), 2),
        snow=round(sum(sample.snow for sample in group), 2),
        uv_index=max(sample.uv_index for sample in group),
    )


__all__ = ["BucketingRules", "bucket_daily", "group_by_local_date", "local_datetime"]
