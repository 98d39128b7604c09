from __future__ import annotations

import pytest

from weather_core.units import fahrenheit_to_celsius, meters_to_miles, round_half_away


@pytest.mark.parametrize(
    "fahrenheit, celsius",
    [
        (32, 0),
        (212, 100),
        (-40, -40),
        (85, 29),
        (0, -18),
        (36.5, 3),  # exactly 2.5
        (27.5, -3),  # exactly -2.5, rounds away from zero
    ],
)
def test_fahrenheit_to_celsius(fahrenheit, celsius):
    assert fahrenheit_to_celsius(fahrenheit) == celsius


def test_conversion_always_returns_int():
    for value in range(-60, 131):
        result = fahrenheit_to_celsius(value + 0.3)
        assert isinstance(result, int)
        assert abs(result - (value + 0.3 - 32) * 5 / 9) <= 0.5


def test_round_half_away_from_zero():
    assert round_half_away(0.5) == 1
    assert round_half_away(1.5) == 2
    assert round_half_away(2.5) == 3
    assert round_half_away(-0.5) == -1
    assert round_half_away(2.49) == 2


def test_meters_to_miles_defaults_to_ten_km():
    assert meters_to_miles(16090) == 10
    assert meters_to_miles(None) == 6
    assert meters_to_miles(0) == 0
