from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Sequence

from ..entities import Point, QueryType, ResolvedWeatherResult
from .fallback import FallbackResolver


logger = logging.getLogger(__name__)


class PanelAggregator:
    """Resolve many points concurrently, keeping the input order.

    Every point gets a resolver of its own from ``resolver_factory`` so no
    client or HTTP session is shared between workers. Each resolver is closed
    once its point is answered.
    """

    def __init__(self, resolver_factory: Callable[[], FallbackResolver], max_workers: int = 8) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.resolver_factory = resolver_factory
        self.max_workers = max_workers

    def resolve_all(
        self, points: Sequence[Point], query: QueryType, as_of: int
    ) -> List[ResolvedWeatherResult]:
        if not points:
            return []
        workers = min(self.max_workers, len(points))
        logger.debug("Resolving %d points with %d workers", len(points), workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(self._resolve_one, point, query, as_of) for point in points]
            return [future.result() for future in futures]

    def _resolve_one(self, point: Point, query: QueryType, as_of: int) -> ResolvedWeatherResult:
        resolver = self.resolver_factory()
        try:
            return resolver.resolve(point, query, as_of)
        finally:
            resolver.close()


__all__ = ["PanelAggregator"]
