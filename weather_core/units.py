from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional


METERS_PER_MILE = 1609


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(Decimal(repr(float(value))).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def fahrenheit_to_celsius(fahrenheit: float) -> int:
    return round_half_away((fahrenheit - 32) * 5 / 9)


def meters_to_miles(meters: Optional[float], default: float = 10000) -> int:
    if meters is None:
        meters = default
    return round_half_away(meters / METERS_PER_MILE)


__all__ = ["METERS_PER_MILE", "fahrenheit_to_celsius", "meters_to_miles", "round_half_away"]
