#!/usr/bin/env python3
"""CLI entry point for the Open-Meteo MCP server (open-meteo-mcp command).

Exposes get_forecast, get_current_weather and geocode to MCP clients
like Claude Desktop over stdio.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="open-meteo-mcp",
        description="Run the Open-Meteo weather tools as an MCP server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    open-meteo-mcp                      # Run with stdio transport
    open-meteo-mcp --list-tools         # List available tools
    open-meteo-mcp --timeout 5          # Fail upstream requests after 5 seconds

To use with Claude Desktop, add to your MCP settings:
    {
      "mcpServers": {
        "open-meteo": {
          "command": "open-meteo-mcp"
        }
      }
    }
        """,
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to a JSON config file (default: ~/.open-meteo-mcp/config.json)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Upstream request timeout in seconds (default: 10)"
    )
    parser.add_argument(
        "--describe-weather-codes",
        action="store_true",
        help="Append WMO descriptions to weather code lines"
    )
    parser.add_argument(
        "--list-tools", "-l",
        action="store_true",
        help="Print the tool names and descriptions, then exit"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log at DEBUG level regardless of log_level"
    )
    return parser


def main(argv: list[str] | None = None):
    """Main entry point for the open-meteo-mcp CLI."""
    args = build_parser().parse_args(argv)

    try:
        # Deferred so --help does not import pydantic, httpx or mcp
        from open_meteo_mcp.config import ConfigManager
        from open_meteo_mcp.server import configure_logging, create_mcp_server
        from open_meteo_mcp.tools import registry

        config = ConfigManager(args.config).config
        if args.timeout is not None:
            config = config.model_copy(update={"timeout": args.timeout})
        if args.describe_weather_codes:
            config = config.model_copy(update={"weather_code_descriptions": True})

        configure_logging("DEBUG" if args.verbose else config.get("log_level"))
        logger.debug(f"Settings overriding defaults: {config.overrides() or 'none'}")

        if args.list_tools:
            print("Available tools:")
            for entry in registry:
                print(f"  {entry.name}")
                print(f"    {entry.get_description()}")
            return

        server = create_mcp_server(registry=registry, config=config)
        server.run()

    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
