"""
open_meteo_mcp - Open-Meteo weather tools for MCP hosts

Exposes three tools to an AI assistant over the Model Context Protocol:
get_forecast, get_current_weather and geocode. Each call validates its
arguments, makes one request to Open-Meteo and returns a plain-text report.

Example usage:
    from open_meteo_mcp import OpenMeteoClient
    from open_meteo_mcp.tools import registry

    async with OpenMeteoClient() as client:
        result = await registry.execute("geocode", {"location": "Berlin"}, client)
        print(result.text)

Run as a server:
    open-meteo-mcp
"""

__version__ = "1.0.0"

# Core exports
from open_meteo_mcp.core import (
    MalformedResponseError,
    TextContent,
    ToolEntry,
    ToolError,
    ToolNotFoundError,
    ToolRegistry,
    ToolResult,
    ToolValidationError,
    UpstreamError,
)
from open_meteo_mcp.config import Config, ConfigManager
from open_meteo_mcp.openmeteo import OpenMeteoClient


# Tools registry (lazy import to avoid circular imports)
def __getattr__(name):
    if name == "registry":
        from open_meteo_mcp.tools import registry
        return registry
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",
    # Core
    "ToolRegistry",
    "ToolEntry",
    "ToolResult",
    "TextContent",
    "ToolError",
    "ToolNotFoundError",
    "ToolValidationError",
    "UpstreamError",
    "MalformedResponseError",
    # Config
    "Config",
    "ConfigManager",
    # Client
    "OpenMeteoClient",
    # Tools (lazy loaded)
    "registry",
]
