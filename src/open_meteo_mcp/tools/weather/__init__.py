"""
Weather tool implementation.
"""

from open_meteo_mcp.tools.weather.args import (
    CurrentWeatherArgs,
    ForecastArgs,
    GeocodeArgs,
)
from open_meteo_mcp.tools.weather.core import (
    geocode,
    get_current_weather,
    get_forecast,
)

__all__ = [
    "ForecastArgs",
    "CurrentWeatherArgs",
    "GeocodeArgs",
    "get_forecast",
    "get_current_weather",
    "geocode",
]
