from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Sequence

import requests

from ..config import WeatherConfig
from ..entities import Point, QueryType, ResolvedWeatherResult
from ..gazetteer import default_panel
from ..providers.base import RequestConfig
from ..providers.freetier import FreeTierClient
from ..providers.onecall import OneCallClient
from ..tiers import LegacyTier, PrimaryTier, SyntheticTier
from .fallback import FallbackResolver
from .panel import PanelAggregator


class WeatherService:
    """Entry point used by the API layer.

    Builds a fresh :class:`FallbackResolver` (and fresh HTTP sessions) for
    every point it resolves and closes it afterwards; nothing is cached
    between requests.
    """

    def __init__(
        self,
        config: WeatherConfig,
        *,
        session_factory: Callable[[], requests.Session] = requests.Session,
        time_func: Callable[[], float] = time.time,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self._session_factory = session_factory
        self._time_func = time_func
        self._log = logger or logging.getLogger(self.__class__.__name__)
        self.panel = PanelAggregator(self.build_resolver, max_workers=config.max_concurrency)

    def build_resolver(self) -> FallbackResolver:
        tiers = []
        if self.config.api_key:
            request_config = RequestConfig(timeout=self.config.timeout)
            tiers = [
                PrimaryTier(
                    OneCallClient(
                        api_key=self.config.api_key,
                        base_url=self.config.onecall_url,
                        session=self._session_factory(),
                        request_config=request_config,
                    )
                ),
                LegacyTier(
                    FreeTierClient(
                        api_key=self.config.api_key,
                        base_url=self.config.free_url,
                        session=self._session_factory(),
                        request_config=request_config,
                    ),
                    rules=self.config.bucketing,
                ),
            ]
        return FallbackResolver(tiers, SyntheticTier(), logger=self._log)

    @contextmanager
    def resolver_scope(self) -> Iterator[FallbackResolver]:
        resolver = self.build_resolver()
        try:
            yield resolver
        finally:
            resolver.close()

    # Public API ---------------------------------------------------------
    def get(self, query: QueryType, point: Point, as_of: Optional[int] = None) -> ResolvedWeatherResult:
        if query is QueryType.MULTI:
            results = self.get_panel(as_of=as_of)
            source = results[0].source if results else SyntheticTier().name
            return ResolvedWeatherResult(data=results, source=source)
        if not self.config.api_key:
            self._log.warning("OPENWEATHER_API_KEY not set, using mock data")
        with self.resolver_scope() as resolver:
            return resolver.resolve(point, query, self._as_of(as_of))

    def get_panel(
        self, points: Optional[Sequence[Point]] = None, as_of: Optional[int] = None
    ) -> List[ResolvedWeatherResult]:
        if points is None:
            points = default_panel(self.config.panel_size)
        if not self.config.api_key:
            self._log.warning("OPENWEATHER_API_KEY not set, panel will use mock data")
        return self.panel.resolve_all(points, QueryType.CURRENT, self._as_of(as_of))

    # Helpers ------------------------------------------------------------
    def _as_of(self, as_of: Optional[int]) -> int:
        return int(self._time_func()) if as_of is None else int(as_of)


__all__ = ["WeatherService"]
