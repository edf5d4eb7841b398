"""
Weather tools - forecast, current conditions and geocoding via Open-Meteo.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from open_meteo_mcp.openmeteo.formatters import (
    format_current_weather,
    format_forecast,
    format_geocode,
)
from open_meteo_mcp.tools._registry import registry
from open_meteo_mcp.tools.weather.args import (
    CurrentWeatherArgs,
    ForecastArgs,
    GeocodeArgs,
)

if TYPE_CHECKING:
    from open_meteo_mcp.openmeteo.client import OpenMeteoClient


@registry.register(
    args_model=ForecastArgs,
    description=(
        "Get weather forecast for a location using Open Meteo API. Provides daily "
        "forecasts including temperature, precipitation, and wind speed."
    ),
)
async def get_forecast(args: ForecastArgs, client: OpenMeteoClient) -> str:
    """Daily forecast for a coordinate pair.

    Args:
        args: Validated latitude, longitude and forecast_days (default 7).
        client: Shared Open-Meteo client.

    Returns:
        A header line followed by one block per day:

            Date: 2024-01-01
              Temperature: 5.1°C max, -1.2°C min
              Precipitation: 0.4 mm
              Wind Speed: 14.3 km/h max
              Weather Code: 3
    """
    data = await client.get_forecast(args)
    return format_forecast(data, describe_codes=client.config.get("weather_code_descriptions"))


@registry.register(
    args_model=CurrentWeatherArgs,
    description=(
        "Get current weather conditions for a location using Open Meteo API. Provides "
        "real-time temperature, humidity, precipitation, and wind information."
    ),
)
async def get_current_weather(args: CurrentWeatherArgs, client: OpenMeteoClient) -> str:
    """Current conditions for a coordinate pair."""
    data = await client.get_current_weather(args)
    return format_current_weather(data, describe_codes=client.config.get("weather_code_descriptions"))


@registry.register(
    args_model=GeocodeArgs,
    description=(
        "Convert a location name to geographic coordinates using Open Meteo Geocoding "
        "API. Returns latitude, longitude, and other location details."
    ),
)
async def geocode(args: GeocodeArgs, client: OpenMeteoClient) -> str:
    """Up to five candidate places for a free-text location name."""
    data = await client.geocode(args)
    return format_geocode(args.location, data)
