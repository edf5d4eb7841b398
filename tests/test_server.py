#!/usr/bin/env python3
"""
Tests for the MCP server, its logging helpers and the CLI entry point.
"""

import io
import json
import logging
import pytest
from unittest.mock import MagicMock, patch

import mcp.types as types

from open_meteo_mcp.cli import main
from open_meteo_mcp.cli.mcp_server import build_parser
from open_meteo_mcp.config import Config, ConfigManager
from open_meteo_mcp.core import ToolNotFoundError, ToolValidationError, UpstreamError
from open_meteo_mcp.server import (
    MCPServer,
    close_logging,
    configure_logging,
    create_mcp_server,
    log_tool_exception,
)
from open_meteo_mcp.server.logging import LOGGER_NAME
from open_meteo_mcp.tools import registry


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove any stderr handler a test installed."""
    yield
    close_logging()


# ============================================================================
# MCPServer Tests
# ============================================================================

class TestMCPServer:
    """Tests for MCPServer."""

    def test_defaults(self):
        """Test server identity and default config."""
        server = create_mcp_server()
        assert server.name == "open-meteo-server"
        assert server.version == "1.0.0"
        assert server.registry is registry
        assert server.config == Config()

    def test_client_created_lazily(self):
        """Test the upstream client is built from the server config."""
        server = MCPServer(registry, Config(timeout=2.0))
        assert server._client is None
        assert server.client is server.client
        assert server.client.config.timeout == 2.0

    @pytest.mark.asyncio
    async def test_list_tools(self):
        """Test tools/list returns the three tool descriptors."""
        server = MCPServer(registry)
        tools = await server.list_tools()

        assert [tool.name for tool in tools] == ["get_forecast", "get_current_weather", "geocode"]
        assert all(isinstance(tool, types.Tool) for tool in tools)
        required = {tool.name: tool.inputSchema["required"] for tool in tools}
        assert required == {
            "get_forecast": ["latitude", "longitude"],
            "get_current_weather": ["latitude", "longitude"],
            "geocode": ["location"],
        }

    @pytest.mark.asyncio
    async def test_call_tool_success(self, upstream, geocode_payload):
        """Test tools/call returns one text block."""
        mock = upstream(json=geocode_payload)
        server = MCPServer(registry, client=mock.client())

        content = await server.call_tool("geocode", {"location": "Berlin"})

        assert len(content) == 1
        assert content[0].type == "text"
        assert content[0].text.startswith('Geocoding results for "Berlin":\n\n')

    @pytest.mark.asyncio
    async def test_call_unknown_tool(self, upstream, caplog):
        """Test an unknown tool raises and is logged without a traceback."""
        server = MCPServer(registry, client=upstream(json={}).client())

        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            with pytest.raises(ToolNotFoundError, match="Unknown tool: weather"):
                await server.call_tool("weather", {})

        assert "Tool 'weather' failed" in caplog.text
        assert "Traceback" not in caplog.text

    @pytest.mark.asyncio
    async def test_call_invalid_arguments(self, upstream):
        """Test validation failures surface as ToolValidationError."""
        mock = upstream(json={})
        server = MCPServer(registry, client=mock.client())

        with pytest.raises(ToolValidationError, match="latitude: must be ≤ 90"):
            await server.call_tool("get_current_weather", {"latitude": 95, "longitude": 0})
        assert mock.requests == []

    @pytest.mark.asyncio
    async def test_call_upstream_failure(self, upstream):
        """Test upstream failures surface as UpstreamError."""
        server = MCPServer(registry, client=upstream(status_code=500, json={}).client())

        with pytest.raises(UpstreamError, match="Open Meteo API error: Internal Server Error"):
            await server.call_tool("get_forecast", {"latitude": 0, "longitude": 0})

    @pytest.mark.asyncio
    async def test_unexpected_error_logged_with_traceback(self, caplog):
        """Test non-tool exceptions are logged at error level."""
        server = MCPServer(registry, client=MagicMock())

        with patch.object(registry, "execute", side_effect=RuntimeError("boom")):
            with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
                with pytest.raises(RuntimeError):
                    await server.call_tool("geocode", {"location": "x"})

        assert "Unexpected error in tool 'geocode'" in caplog.text
        assert "Traceback" in caplog.text

    def test_create_server_registers_handlers(self):
        """Test only tools/list and tools/call are bound."""
        lowlevel = MCPServer(registry)._create_server()

        assert lowlevel.name == "open-meteo-server"
        assert types.ListToolsRequest in lowlevel.request_handlers
        assert types.CallToolRequest in lowlevel.request_handlers
        assert types.ListResourcesRequest not in lowlevel.request_handlers

    @pytest.mark.asyncio
    async def test_protocol_error_result(self, upstream):
        """Test a failing call becomes an isError result, not a success."""
        server = MCPServer(registry, client=upstream(json={}).client())
        lowlevel = server._create_server()
        handler = lowlevel.request_handlers[types.CallToolRequest]

        request = types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="geocode", arguments={"location": ""}),
        )
        result = (await handler(request)).root

        assert result.isError is True
        assert len(result.content) == 1
        assert "location: must not be empty" in result.content[0].text

    @pytest.mark.asyncio
    async def test_protocol_success_result(self, upstream):
        """Test a successful call carries the report text."""
        server = MCPServer(registry, client=upstream(json={"results": []}).client())
        handler = server._create_server().request_handlers[types.CallToolRequest]

        request = types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="geocode", arguments={"location": "Nowhere123"}),
        )
        result = (await handler(request)).root

        assert not result.isError
        assert result.content[0].text == 'No results found for location: "Nowhere123"'


# ============================================================================
# Logging Tests
# ============================================================================

class TestLogging:
    """Tests for stderr logging helpers."""

    def test_configure_logging_writes_to_stream(self):
        """Test records reach the configured stream."""
        stream = io.StringIO()
        configure_logging("info", stream=stream)

        logging.getLogger(f"{LOGGER_NAME}.test").info("hello")
        assert "[INFO] open_meteo_mcp.test: hello" in stream.getvalue()

    def test_configure_logging_replaces_handler(self):
        """Test calling twice leaves a single handler."""
        first = configure_logging(logging.INFO, stream=io.StringIO())
        second = configure_logging(logging.DEBUG, stream=io.StringIO())

        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert first not in handlers
        assert second in handlers
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        """Test an unrecognized level name is treated as INFO."""
        handler = configure_logging("chatty", stream=io.StringIO())
        assert handler.level == logging.INFO

    def test_close_logging(self):
        """Test close_logging detaches the handler."""
        handler = configure_logging(stream=io.StringIO())
        close_logging()
        assert handler not in logging.getLogger(LOGGER_NAME).handlers

    def test_log_tool_exception_message(self):
        """Test the returned user message."""
        assert log_tool_exception(ValueError("bad"), "Tool 'x' failed", include_traceback=False) == "Tool 'x' failed: bad"
        assert log_tool_exception(ValueError("bad"), include_traceback=False) == "ValueError: bad"


# ============================================================================
# CLI Tests
# ============================================================================

class TestCLI:
    """Tests for the open-meteo-mcp command."""

    @pytest.fixture
    def no_user_config(self, tmp_path):
        """Point the default config file at an empty directory."""
        with patch.object(ConfigManager, 'CONFIG_FILE', tmp_path / "config.json"):
            yield

    def test_parser_defaults(self):
        """Test flags default to "use the config file"."""
        args = build_parser().parse_args([])
        assert args.config is None
        assert args.timeout is None
        assert args.describe_weather_codes is False
        assert args.list_tools is False
        assert args.verbose is False

    def test_list_tools(self, no_user_config, capsys):
        """Test --list-tools prints every tool and exits."""
        main(["--list-tools"])

        out = capsys.readouterr().out
        assert out.startswith("Available tools:\n")
        for name in ("get_forecast", "get_current_weather", "geocode"):
            assert f"  {name}\n" in out

    def test_runs_server_with_overrides(self, no_user_config):
        """Test CLI flags are applied on top of the config file."""
        with patch("open_meteo_mcp.server.create_mcp_server") as mock_create:
            main(["--timeout", "5", "--describe-weather-codes"])

        mock_create.assert_called_once()
        config = mock_create.call_args.kwargs["config"]
        assert config.get("timeout") == 5.0
        assert config.get("weather_code_descriptions") is True
        mock_create.return_value.run.assert_called_once_with()

    def test_explicit_config_file(self, tmp_path):
        """Test --config loads the given file."""
        config_file = tmp_path / "weather.json"
        config_file.write_text(json.dumps({"timeout": 3}))

        with patch("open_meteo_mcp.server.create_mcp_server") as mock_create:
            main(["--config", str(config_file)])

        assert mock_create.call_args.kwargs["config"].timeout == 3.0

    def test_bad_config_exits_non_zero(self, tmp_path, capsys):
        """Test a broken config file is a startup failure."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(config_file)])

        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error: Invalid JSON")

    def test_keyboard_interrupt_exits_quietly(self, no_user_config, capsys):
        """Test Ctrl-C stops the server without a diagnostic."""
        with patch("open_meteo_mcp.server.create_mcp_server") as mock_create:
            mock_create.return_value.run.side_effect = KeyboardInterrupt
            main([])

        assert "Error" not in capsys.readouterr().err

    def test_verbose_logs_overrides(self, no_user_config, capsys):
        """Test --verbose reports the settings that differ from defaults."""
        main(["--list-tools", "--verbose", "--timeout", "3"])

        err = capsys.readouterr().err
        assert "[DEBUG] open_meteo_mcp.cli.mcp_server" in err
        assert "Settings overriding defaults: {'timeout': 3.0}" in err
