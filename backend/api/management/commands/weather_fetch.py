"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import build_envelope, get_weather_service
from weather_core import gazetteer
from weather_core.entities import QueryType


class Command(BaseCommand):
    help = "Fetch weather for the provided coordinates or city and print the API envelope"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument(
            "--type",
            default=QueryType.CURRENT.value,
            help="current, full, hourly, daily, alerts or multi",
        )
        parser.add_argument("--lat", type=float, help="Latitude")
        parser.add_argument("--lon", type=float, help="Longitude")
        parser.add_argument("--city", type=str, help="City name or state abbreviation")
        parser.add_argument("--state", type=str, help="State label used with --lat/--lon")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = options.get("city")
        latitude = options.get("lat")
        longitude = options.get("lon")

        if (latitude is None) != (longitude is None):
            raise CommandError("--lat and --lon must be given together")
        if city and gazetteer.find_city(city) is None and latitude is None:
            raise CommandError(f"Unknown city {city!r}; pass --lat and --lon")

        query = QueryType.parse(options.get("type"))
        point = gazetteer.resolve_point(city, options.get("state"), latitude, longitude)
        result = get_weather_service().get(query, point)
        self.stdout.write(json.dumps(build_envelope(result, query)))
