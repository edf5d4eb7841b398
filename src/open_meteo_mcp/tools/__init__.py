"""
Tools and shared registry for the open_meteo_mcp package.

Importing this package registers the weather tools on ``registry``.
"""

# Import registry first
from open_meteo_mcp.tools._registry import registry

from open_meteo_mcp.tools.weather import (
    geocode,
    get_current_weather,
    get_forecast,
)

__all__ = [
    # Registry
    "registry",
    # Tools
    "get_forecast",
    "get_current_weather",
    "geocode",
]
