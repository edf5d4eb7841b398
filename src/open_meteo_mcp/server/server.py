"""MCP Server - exposes the weather tools over the Model Context Protocol."""
from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from open_meteo_mcp.config import Config
from open_meteo_mcp.core.exceptions import ToolError
from open_meteo_mcp.openmeteo.client import OpenMeteoClient
from open_meteo_mcp.server.logging import log_tool_exception

if TYPE_CHECKING:
    from open_meteo_mcp.core.registry import ToolRegistry

logger = logging.getLogger(__name__)

SERVER_NAME = "open-meteo-server"
SERVER_VERSION = "1.0.0"


class MCPServer:
    """MCP Server that exposes the registry's tools on stdio.

    Only tools/list and tools/call are handled. A failing call is reported
    to the host as an error result; the server keeps running.

    Usage:
        from open_meteo_mcp.tools import registry
        server = MCPServer(registry, config)
        server.run()
    """

    def __init__(
        self,
        registry: "ToolRegistry",
        config: Optional[Config] = None,
        client: Optional[OpenMeteoClient] = None,
        name: str = SERVER_NAME,
        version: str = SERVER_VERSION,
    ):
        self.registry = registry
        self.config = config or Config()
        self.name = name
        self.version = version
        self._client = client

    @property
    def client(self) -> OpenMeteoClient:
        """The shared upstream client, created on first use."""
        if self._client is None:
            self._client = OpenMeteoClient(self.config)
        return self._client

    async def list_tools(self) -> list[types.Tool]:
        """Describe every registered tool."""
        return [types.Tool(**spec) for spec in self.registry.list_tools()]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        """Run one tool call; ToolError propagates to become an error result."""
        logger.debug(f"tools/call {name} {arguments!r}")
        try:
            result = await self.registry.execute(name, arguments, self.client)
        except ToolError as e:
            log_tool_exception(e, f"Tool '{name}' failed", include_traceback=False)
            raise
        except Exception as e:
            log_tool_exception(e, f"Unexpected error in tool '{name}'")
            raise

        return [types.TextContent(type="text", text=block.text) for block in result.content]

    def _create_server(self) -> Server:
        """Create the low-level MCP server and bind the two handlers."""
        server = Server(self.name, version=self.version)

        @server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            return await self.list_tools()

        # The registry's argument models are the authoritative validator
        @server.call_tool(validate_input=False)
        async def handle_call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
            return await self.call_tool(name, arguments)

        return server

    async def run_stdio(self) -> None:
        """Serve on stdin/stdout until the host disconnects."""
        server = self._create_server()

        async with self.client:
            async with stdio_server() as (read_stream, write_stream):
                logger.info("Open Meteo MCP Server running on stdio")
                await server.run(
                    read_stream,
                    write_stream,
                    server.create_initialization_options(),
                )

    def run(self) -> None:
        """Run the MCP server on stdio."""
        logger.info(f"Starting MCP server '{self.name}' with {len(self.registry)} tools")
        asyncio.run(self.run_stdio())


def create_mcp_server(
    registry: Optional["ToolRegistry"] = None,
    config: Optional[Config] = None,
) -> MCPServer:
    """Create an MCP server with the given or default registry.

    Args:
        registry: Tool registry to expose (uses the built-in tools if None)
        config: Settings for the upstream client

    Returns:
        MCPServer instance
    """
    if registry is None:
        from open_meteo_mcp.tools import registry as default_registry
        registry = default_registry

    return MCPServer(registry, config=config)
