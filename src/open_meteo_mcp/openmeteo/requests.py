"""
Request builders for the Open-Meteo forecast and geocoding APIs.

Every builder is a pure function: validated arguments in, URL string out.
"""

from __future__ import annotations

import urllib.parse
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from open_meteo_mcp.tools.weather.args import (
        CurrentWeatherArgs,
        ForecastArgs,
        GeocodeArgs,
    )

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"

DAILY_VARIABLES = [
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "wind_speed_10m_max",
    "weather_code",
]

CURRENT_VARIABLES = [
    "temperature_2m",
    "relative_humidity_2m",
    "precipitation",
    "wind_speed_10m",
    "wind_direction_10m",
    "weather_code",
]

GEOCODING_RESULT_COUNT = 5
GEOCODING_LANGUAGE = "en"


def _build_url(base_url: str, params: list[tuple[str, str]]) -> str:
    return f"{base_url}?{urllib.parse.urlencode(params)}"


def build_forecast_url(args: "ForecastArgs", base_url: str = FORECAST_URL) -> str:
    """Build the daily forecast URL for a coordinate pair."""
    return _build_url(base_url, [
        ("latitude", str(args.latitude)),
        ("longitude", str(args.longitude)),
        ("daily", ",".join(DAILY_VARIABLES)),
        ("forecast_days", str(args.forecast_days)),
        ("timezone", "auto"),
    ])


def build_current_weather_url(args: "CurrentWeatherArgs", base_url: str = FORECAST_URL) -> str:
    """Build the current conditions URL for a coordinate pair."""
    return _build_url(base_url, [
        ("latitude", str(args.latitude)),
        ("longitude", str(args.longitude)),
        ("current", ",".join(CURRENT_VARIABLES)),
    ])


def build_geocode_url(args: "GeocodeArgs", base_url: str = GEOCODING_URL) -> str:
    """Build the place-name search URL."""
    return _build_url(base_url, [
        ("name", args.location),
        ("count", str(GEOCODING_RESULT_COUNT)),
        ("language", GEOCODING_LANGUAGE),
        ("format", "json"),
    ])
