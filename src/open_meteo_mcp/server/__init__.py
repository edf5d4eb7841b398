"""MCP server module."""
from __future__ import annotations

from open_meteo_mcp.server.server import MCPServer, create_mcp_server
from open_meteo_mcp.server.logging import (
    close_logging,
    configure_logging,
    log_tool_exception,
)

__all__ = [
    "MCPServer",
    "create_mcp_server",
    "configure_logging",
    "close_logging",
    "log_tool_exception",
]
