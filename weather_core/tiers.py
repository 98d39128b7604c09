"""A tier pairs one provider with its normalizer.

Every tier answers ``answer(point, query, as_of)`` with normalized data for
the query, or ``None`` when it cannot serve it. The resolver only ever sees
the normalized output.
"""
from __future__ import annotations

from typing import Any, Optional, Protocol

from .bucketing import BucketingRules
from .entities import Point, QueryType, WeatherBundle
from .normalizers.freetier import normalize_free_current, normalize_free_daily, normalize_free_hourly
from .normalizers.onecall import normalize_onecall
from .normalizers.synthetic import normalize_synthetic
from .providers.freetier import FreeTierClient, FreeTierPayload
from .providers.onecall import OneCallClient
from .providers.synthetic import SyntheticProvider


class Tier(Protocol):
    name: str

    def answer(self, point: Point, query: QueryType, as_of: int) -> Optional[Any]:
        ...

    def close(self) -> None:
        ...


def select(bundle: WeatherBundle, query: QueryType) -> Any:
    if query is QueryType.FULL:
        return bundle
    if query is QueryType.HOURLY:
        return list(bundle.hourly)
    if query is QueryType.DAILY:
        return list(bundle.daily)
    if query is QueryType.ALERTS:
        return list(bundle.alerts)
    return bundle.current


class PrimaryTier:
    def __init__(self, client: OneCallClient) -> None:
        self.client = client
        self.name = client.name

    def answer(self, point: Point, query: QueryType, as_of: int) -> Optional[Any]:
        payload = self.client.fetch(point.latitude, point.longitude)
        if payload is None:
            return None
        return select(normalize_onecall(payload, point), query)

    def close(self) -> None:
        self.client.close()


class LegacyTier:
    """Free 2.5 endpoints; only the calls a query needs are issued."""

    def __init__(self, client: FreeTierClient, rules: Optional[BucketingRules] = None) -> None:
        self.client = client
        self.rules = rules or BucketingRules()
        self.name = client.name

    def fetch(self, point: Point, query: QueryType) -> Optional[FreeTierPayload]:
        lat, lon = point.latitude, point.longitude
        current = forecast = None
        if query in (QueryType.CURRENT, QueryType.FULL, QueryType.ALERTS):
            current = self.client.current(lat, lon)
            if current is None:
                return None
        if query in (QueryType.HOURLY, QueryType.DAILY, QueryType.FULL):
            forecast = self.client.forecast(lat, lon)
            if forecast is None:
                return None
        return FreeTierPayload(current=current, forecast=forecast)

    def answer(self, point: Point, query: QueryType, as_of: int) -> Optional[Any]:
        payload = self.fetch(point, query)
        if payload is None:
            return None
        if query is QueryType.ALERTS:
            return []
        if query is QueryType.HOURLY:
            return normalize_free_hourly(payload.forecast)
        if query is QueryType.DAILY:
            return normalize_free_daily(payload.forecast, self.rules)
        current = normalize_free_current(payload.current, point)
        if query is QueryType.FULL:
            return WeatherBundle(
                current=current,
                hourly=tuple(normalize_free_hourly(payload.forecast)),
                daily=tuple(normalize_free_daily(payload.forecast, self.rules)),
            )
        return current

    def close(self) -> None:
        self.client.close()


class SyntheticTier:
    def __init__(self, provider: Optional[SyntheticProvider] = None) -> None:
        self.provider = provider or SyntheticProvider()
        self.name = self.provider.name

    def answer(self, point: Point, query: QueryType, as_of: int) -> Any:
        return select(normalize_synthetic(self.provider.fetch(point, as_of)), query)

    def close(self) -> None:
        pass


__all__ = ["LegacyTier", "PrimaryTier", "SyntheticTier", "Tier", "select"]
