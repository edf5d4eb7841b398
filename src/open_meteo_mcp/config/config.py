"""
Configuration management for open-meteo-mcp.

Settings are read from ~/.open-meteo-mcp/config.json, or from a file passed
on the command line. A missing file means "use the defaults".
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError


class ConfigError(Exception):
    """Configuration file could not be loaded."""


# Default values - single source of truth
DEFAULTS = {
    "timeout": 10.0,
    "user_agent": "open-meteo-mcp/1.0.0",
    "log_level": "INFO",
    "weather_code_descriptions": False,
}


class Config(BaseModel):
    """Configuration settings for open-meteo-mcp.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    # Upstream settings
    timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Upstream request timeout in seconds"
    )
    forecast_url: Optional[str] = Field(
        default=None,
        description="Base URL of the forecast endpoint (default: Open-Meteo)"
    )
    geocoding_url: Optional[str] = Field(
        default=None,
        description="Base URL of the geocoding endpoint (default: Open-Meteo)"
    )
    user_agent: Optional[str] = Field(
        default=None,
        description="User-Agent header sent upstream"
    )

    # Output settings
    log_level: Optional[str] = Field(
        default=None,
        description="Logging level for stderr output"
    )
    weather_code_descriptions: Optional[bool] = Field(
        default=None,
        description="Append WMO descriptions to weather code lines"
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Return the configured value, else the DEFAULTS entry, else ``default``."""
        value = getattr(self, key, None)
        return DEFAULTS.get(key, default) if value is None else value

    def overrides(self) -> dict[str, Any]:
        """Settings given explicitly whose value differs from DEFAULTS."""
        return {
            key: value
            for key, value in self.model_dump(exclude_none=True).items()
            if DEFAULTS.get(key) != value
        }


class ConfigManager:
    """Reads the JSON config file once and keeps the parsed Config."""

    CONFIG_DIR = Path.home() / ".open-meteo-mcp"
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self, config_file: Path | None = None):
        self.config_file = config_file or self.CONFIG_FILE
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """The parsed config; the file is read on first access."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> Config:
        """Parse the config file.

        Returns:
            Config with the file's settings, or an empty Config if there is no file.

        Raises:
            ConfigError: If the file exists but is not a valid configuration.
        """
        if not self.config_file.exists():
            return Config()

        try:
            data = json.loads(self.config_file.read_text())
            return Config.model_validate(data)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {self.config_file}: {e}") from e
        except ValidationError as e:
            raise ConfigError(f"Invalid config file {self.config_file}: {e}") from e
