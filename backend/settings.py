"""Base Django settings for the weather service."""
from __future__ import annotations

import json
import os

from django.core.exceptions import ImproperlyConfigured


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


SECRET_KEY = env("DJANGO_SECRET_KEY")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "backend.api.apps.WeatherApiConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "backend.urls"

WSGI_APPLICATION = "backend.wsgi.application"

# Weather data is never persisted, so no database is configured.
DATABASES: dict = {}

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
}

# -- Weather pipeline --------------------------------------------------------
# An empty key routes every request straight to the mock tier.
OPENWEATHER_API_KEY = os.environ.get("OPENWEATHER_API_KEY", "")
WEATHER_ONECALL_URL = os.environ.get("WEATHER_ONECALL_URL", "https://api.openweathermap.org/data/3.0/onecall")
WEATHER_FREE_URL = os.environ.get("WEATHER_FREE_URL", "https://api.openweathermap.org/data/2.5")
WEATHER_HTTP_TIMEOUT = float(os.environ.get("WEATHER_HTTP_TIMEOUT", "10"))
WEATHER_MAX_CONCURRENCY = int(os.environ.get("WEATHER_MAX_CONCURRENCY", "8"))
WEATHER_PANEL_SIZE = int(os.environ.get("WEATHER_PANEL_SIZE", "8"))
# JSON object overriding BucketingRules fields, e.g. {"night_hour": 0}
WEATHER_BUCKETING = json.loads(os.environ.get("WEATHER_BUCKETING", "{}"))

LOG_LEVEL = os.environ.get("WEATHER_LOG_LEVEL", "INFO").upper()
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True
