"""Async client for the Open-Meteo forecast and geocoding APIs."""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from open_meteo_mcp.config import Config
from open_meteo_mcp.core.exceptions import UpstreamError
from open_meteo_mcp.openmeteo.requests import (
    FORECAST_URL,
    GEOCODING_URL,
    build_current_weather_url,
    build_forecast_url,
    build_geocode_url,
)
from open_meteo_mcp.openmeteo.responses import (
    CurrentWeatherResponse,
    ForecastResponse,
    GeocodingResponse,
    parse_payload,
)
from open_meteo_mcp.tools.weather.args import (
    CurrentWeatherArgs,
    ForecastArgs,
    GeocodeArgs,
)

logger = logging.getLogger(__name__)

FORECAST_SOURCE = "Open Meteo API"
GEOCODING_SOURCE = "Geocoding API"


class OpenMeteoClient:
    """One long-lived HTTP client shared by every tool call.

    Each method issues exactly one GET request; there are no retries.

    Usage:
        async with OpenMeteoClient(config) as client:
            forecast = await client.get_forecast(ForecastArgs(latitude=52.52, longitude=13.41))
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or Config()
        self.forecast_url = self.config.get("forecast_url", FORECAST_URL)
        self.geocoding_url = self.config.get("geocoding_url", GEOCODING_URL)
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(
            timeout=self.config.get("timeout"),
            headers={"User-Agent": self.config.get("user_agent")},
            follow_redirects=True,
        )

    async def __aenter__(self) -> OpenMeteoClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    async def _get_json(self, url: str, source: str) -> Any:
        """GET a URL once and decode its JSON body."""
        logger.debug(f"GET {url}")
        try:
            response = await self._http.get(url)
        except httpx.HTTPError as e:
            raise UpstreamError(f"{source} error: {e.__class__.__name__}: {e}") from e

        if not response.is_success:
            logger.warning(f"{source} returned HTTP {response.status_code} for {url}")
            raise UpstreamError(
                f"{source} error: {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"{source} error: response body is not valid JSON") from e

    async def get_forecast(self, args: ForecastArgs) -> ForecastResponse:
        """Fetch the daily forecast for a coordinate pair."""
        url = build_forecast_url(args, self.forecast_url)
        data = await self._get_json(url, FORECAST_SOURCE)
        return parse_payload(ForecastResponse, data, FORECAST_SOURCE)

    async def get_current_weather(self, args: CurrentWeatherArgs) -> CurrentWeatherResponse:
        """Fetch current conditions for a coordinate pair."""
        url = build_current_weather_url(args, self.forecast_url)
        data = await self._get_json(url, FORECAST_SOURCE)
        return parse_payload(CurrentWeatherResponse, data, FORECAST_SOURCE)

    async def geocode(self, args: GeocodeArgs) -> GeocodingResponse:
        """Resolve a place name to candidate locations."""
        url = build_geocode_url(args, self.geocoding_url)
        data = await self._get_json(url, GEOCODING_SOURCE)
        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise UpstreamError(f"{GEOCODING_SOURCE} error: response did not include a results list")
        return parse_payload(GeocodingResponse, data, GEOCODING_SOURCE)
