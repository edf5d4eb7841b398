"""
Open-Meteo request builders, response models, formatters and HTTP client.
"""

from open_meteo_mcp.openmeteo.requests import (
    FORECAST_URL,
    GEOCODING_URL,
    build_current_weather_url,
    build_forecast_url,
    build_geocode_url,
)
from open_meteo_mcp.openmeteo.responses import (
    CurrentWeatherResponse,
    ForecastResponse,
    GeocodingResponse,
    parse_payload,
)
from open_meteo_mcp.openmeteo.formatters import (
    format_current_weather,
    format_forecast,
    format_geocode,
)
from open_meteo_mcp.openmeteo.client import OpenMeteoClient

__all__ = [
    # Requests
    "FORECAST_URL",
    "GEOCODING_URL",
    "build_forecast_url",
    "build_current_weather_url",
    "build_geocode_url",
    # Responses
    "ForecastResponse",
    "CurrentWeatherResponse",
    "GeocodingResponse",
    "parse_payload",
    # Formatters
    "format_forecast",
    "format_current_weather",
    "format_geocode",
    # Client
    "OpenMeteoClient",
]
