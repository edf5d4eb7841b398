"""
Shared registry instance for the built-in tools.
"""

from open_meteo_mcp.core import ToolRegistry

registry = ToolRegistry()
