"""
CLI module for the open_meteo_mcp package.
"""

from open_meteo_mcp.cli.mcp_server import main

__all__ = ["main"]
