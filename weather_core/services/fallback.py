from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..entities import Point, QueryType, ResolvedWeatherResult
from ..tiers import Tier


# Raised by normalizers when a successful response is missing a field or
# carries an unparseable value. Anything else is a bug and propagates.
NORMALIZATION_ERRORS = (KeyError, IndexError, ValueError)


class FallbackResolver:
    """Try each tier once, in order, then fall back to the synthetic tier.

    A tier that answers ``None`` or hands back a payload that cannot be
    normalized is skipped; the fallback tier always answers.
    """

    def __init__(
        self,
        tiers: Sequence[Tier],
        fallback: Tier,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.tiers = list(tiers)
        self.fallback = fallback
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def resolve(self, point: Point, query: QueryType, as_of: int) -> ResolvedWeatherResult:
        for tier in self.tiers:
            try:
                data = tier.answer(point, query, as_of)
            except NORMALIZATION_ERRORS as exc:
                self._log.error("Tier %s sent an unusable payload for %s: %r", tier.name, point.name, exc)
                continue
            if data is None:
                self._log.info("Tier %s unavailable for %s (%s)", tier.name, point.name, query.value)
                continue
            return ResolvedWeatherResult(data=data, source=tier.name)

        if self.tiers:
            self._log.warning("All weather tiers failed for %s, serving %s data", point.name, self.fallback.name)
        return ResolvedWeatherResult(data=self.fallback.answer(point, query, as_of), source=self.fallback.name)

    def close(self) -> None:
        for tier in (*self.tiers, self.fallback):
            tier.close()


__all__ = ["FallbackResolver", "NORMALIZATION_ERRORS"]
