from __future__ import annotations

import os

from django.apps import AppConfig


class WeatherApiConfig(AppConfig):
    name = "backend.api"
    label = "weather_api"
    # backend.api is a namespace package, so Django cannot infer the path.
    path = os.path.dirname(os.path.abspath(__file__))
