"""Network-free placeholder tier used when no real upstream answered."""
from __future__ import annotations

from dataclasses import dataclass

from ..entities import Point


MOCK_DESCRIPTION = "Mock data - weather provider unavailable"


@dataclass(frozen=True)
class SyntheticPayload:
    point: Point
    as_of: int
    hours: int = 48
    days: int = 8


class SyntheticProvider:
    name = "mock"

    def __init__(self, hours: int = 48, days: int = 8) -> None:
        self.hours = hours
        self.days = days

    def fetch(self, point: Point, as_of: int) -> SyntheticPayload:
        return SyntheticPayload(point=point, as_of=int(as_of), hours=self.hours, days=self.days)


__all__ = ["MOCK_DESCRIPTION", "SyntheticPayload", "SyntheticProvider"]
