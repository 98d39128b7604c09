"""REST API views for weather information."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weather_core import gazetteer
from weather_core.config import WeatherConfig
from weather_core.entities import QueryType, ResolvedWeatherResult
from weather_core.providers.freetier import FreeTierClient
from weather_core.providers.synthetic import SyntheticProvider
from weather_core.serialization import to_payload
from weather_core.services.weather import WeatherService


logger = logging.getLogger(__name__)

LOOKUP_TYPES = ("search", "states", "cities")
MOCK_WARNING = "Weather provider unavailable or OPENWEATHER_API_KEY not configured. Showing mock data."
ALERTS_MESSAGE = "Alerts require One Call API 3.0 subscription"


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherService:
    return WeatherService(WeatherConfig.from_settings(settings))


def build_envelope(result: ResolvedWeatherResult, query: QueryType) -> Dict[str, Any]:
    envelope: Dict[str, Any] = {"success": True, "data": to_payload(result.data), "source": result.source}
    if result.source == SyntheticProvider.name and query is not QueryType.MULTI:
        envelope["warning"] = MOCK_WARNING
    if query is QueryType.ALERTS and result.source == FreeTierClient.name:
        envelope["message"] = ALERTS_MESSAGE
    return envelope


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


class WeatherView(APIView):
    """Normalized weather data for a point, a panel of cities or a lookup."""

    authentication_classes: list = []
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the weather envelope for the requested ``type``."""
        params = request.query_params
        kind = (params.get("type") or QueryType.CURRENT.value).strip().lower()
        if kind in LOOKUP_TYPES:
            return self._lookup(kind, params.get("search"))

        try:
            latitude = _optional_float(params.get("lat"))
            longitude = _optional_float(params.get("lon"))
        except ValueError:
            return Response(
                {"success": False, "error": "lat and lon must be valid floating point numbers"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        point = gazetteer.resolve_point(params.get("city"), params.get("state"), latitude, longitude)
        query = QueryType.parse(kind)
        try:
            result = get_weather_service().get(query, point)
            payload = build_envelope(result, query)
        except Exception:  # noqa: BLE001
            logger.exception("Weather API error for %s (%s)", point.name, query.value)
            return Response(
                {"success": False, "error": "Failed to fetch weather data"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(payload, status=status.HTTP_200_OK)

    def _lookup(self, kind: str, term: Optional[str]) -> Response:
        if kind == "states":
            return Response({"success": True, "data": to_payload(gazetteer.STATES)})
        if kind == "cities":
            return Response({"success": True, "data": to_payload(gazetteer.CITIES)})
        if not term:
            return Response(
                {"success": False, "error": "search parameter is required"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response({"success": True, "data": to_payload(gazetteer.search(term))})
