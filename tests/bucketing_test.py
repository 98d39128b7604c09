from __future__ import annotations

from datetime import datetime, timezone

import pytest

from weather_core.bucketing import BucketingRules, bucket_daily, group_by_local_date
from weather_core.entities import HourlyForecastSample


def _epoch(year, month, day, hour) -> int:
    return int(datetime(year, month, day, hour, tzinfo=timezone.utc).timestamp())


def make_sample(dt: int, temp: int, feels_like=None, **overrides) -> HourlyForecastSample:
    values = dict(
        dt=dt,
        temp=temp,
        feels_like=temp - 3 if feels_like is None else feels_like,
        humidity=50,
        pressure=1012,
        wind_speed=5,
        wind_direction=180,
        description="clear sky",
        icon="01d",
        clouds=0,
        visibility=6,
        pop=0.0,
        uv_index=0,
    )
    values.update(overrides)
    return HourlyForecastSample(**values)


def three_hourly(start: int, temps) -> list:
    return [make_sample(start + i * 10800, temp) for i, temp in enumerate(temps)]


def test_samples_are_partitioned_by_calendar_date():
    samples = three_hourly(_epoch(2024, 1, 1, 0), range(40, 60))

    groups = group_by_local_date(samples, utc_offset=0)
    daily = bucket_daily(samples, utc_offset=0)

    assert len(groups) == 3
    assert sum(len(group) for group in groups.values()) == len(samples)
    assert len(daily) == len(groups)
    assert [summary.dt for summary in daily] == [group[0].dt for group in groups.values()]


def test_min_day_max_bounds_hold_per_day():
    temps = [51, 38, 47, 62, 55, 44, 70, 41, 33, 36, 58, 49]
    samples = three_hourly(_epoch(2024, 3, 5, 0), temps)

    for summary, group in zip(bucket_daily(samples, utc_offset=0), group_by_local_date(samples, 0).values()):
        assert summary.temp_min <= summary.temp_day <= summary.temp_max
        assert all(summary.temp_min <= sample.temp <= summary.temp_max for sample in group)


def test_reference_hours_pick_matching_samples():
    samples = three_hourly(_epoch(2024, 1, 1, 0), [40, 41, 42, 43, 44, 45, 46, 47])

    (day,) = bucket_daily(samples, utc_offset=0)

    assert day.temp_min == 40
    assert day.temp_max == 47
    assert day.temp_day == 44  # mean 43.5 rounds away from zero
    assert day.temp_morning == 43
    assert day.temp_evening == 46
    assert day.temp_night == 47
    assert day.feels_like_day == 41  # noon sample
    assert day.feels_like_night == 45
    assert day.temp_day_celsius == 7


def test_night_felt_temperature_ignores_night_sample_feels_like():
    start = _epoch(2024, 1, 1, 0)
    samples = three_hourly(start, [40, 41, 42, 43, 44, 45, 46])
    samples.append(make_sample(start + 7 * 10800, 47, feels_like=20))

    (day,) = bucket_daily(samples, utc_offset=0)

    assert day.temp_night == 47
    assert day.feels_like_night == 45


def test_missing_reference_hours_fall_back_to_day_temperature():
    samples = three_hourly(_epoch(2024, 1, 1, 0), [50, 54])

    (day,) = bucket_daily(samples, utc_offset=0)

    assert day.temp_day == 52
    assert day.temp_morning == 52
    assert day.temp_evening == 52
    assert day.temp_night == 42
    assert day.feels_like_night == 40
    assert day.feels_like_day == samples[0].feels_like
    assert day.humidity == samples[0].humidity


def test_pop_is_maximum_and_precipitation_is_summed():
    start = _epoch(2024, 1, 1, 0)
    samples = [
        make_sample(start, 40, pop=0.1, rain=0.5),
        make_sample(start + 10800, 41, pop=0.7, rain=1.25, snow=0.2),
        make_sample(start + 21600, 42, pop=0.3, snow=0.3),
    ]

    (day,) = bucket_daily(samples, utc_offset=0)

    assert day.pop == pytest.approx(0.7)
    assert day.rain == pytest.approx(1.75)
    assert day.snow == pytest.approx(0.5)


def test_utc_offset_moves_samples_to_local_dates():
    # 02:00Z on Jan 2nd is still Jan 1st 21:00 in UTC-5.
    samples = [make_sample(_epoch(2024, 1, 1, 23), 30), make_sample(_epoch(2024, 1, 2, 2), 25)]

    assert len(bucket_daily(samples, utc_offset=0)) == 2
    (local,) = bucket_daily(samples, utc_offset=-18000)
    assert local.temp_night == 25


def test_rules_can_be_overridden():
    rules = BucketingRules.from_mapping({"night_hour": 0, "night_cooling": 5, "bogus": 1})
    samples = three_hourly(_epoch(2024, 1, 1, 3), [40, 44])

    assert rules.night_hour == 0
    (day,) = bucket_daily(samples, utc_offset=0, rules=rules)
    assert day.temp_night == 37


def test_empty_input_gives_no_days():
    assert bucket_daily([], utc_offset=0) == []
