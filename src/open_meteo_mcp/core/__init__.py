"""
Core module for the open_meteo_mcp package.

Provides the Tool Registry, its models and the error taxonomy.
"""

from open_meteo_mcp.core.exceptions import (
    MalformedResponseError,
    ToolError,
    ToolNotFoundError,
    ToolValidationError,
    UpstreamError,
)
from open_meteo_mcp.core.datamodels import TextContent, ToolEntry, ToolResult
from open_meteo_mcp.core.registry import ToolRegistry

__all__ = [
    # Registry
    "ToolRegistry",
    # Models
    "TextContent",
    "ToolEntry",
    "ToolResult",
    # Exceptions
    "ToolError",
    "ToolNotFoundError",
    "ToolValidationError",
    "UpstreamError",
    "MalformedResponseError",
]
