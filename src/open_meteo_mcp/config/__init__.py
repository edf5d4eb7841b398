"""Configuration management for open-meteo-mcp."""

from open_meteo_mcp.config.config import (
    DEFAULTS,
    Config,
    ConfigError,
    ConfigManager,
)

__all__ = [
    "DEFAULTS",
    "Config",
    "ConfigError",
    "ConfigManager",
]
