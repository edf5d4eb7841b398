"""
Plain-text reports for the weather tools.

The layouts are fixed; hosts and tests compare them line for line.
"""

from __future__ import annotations

from typing import Optional, Union

from open_meteo_mcp.openmeteo.responses import (
    CurrentWeatherResponse,
    ForecastResponse,
    GeocodingResponse,
)
from open_meteo_mcp.openmeteo.weather_codes import describe_weather_code


def _value(value: Optional[Union[int, float, str]]) -> str:
    return "N/A" if value is None else str(value)


def _weather_code(code: Optional[int], describe: bool) -> str:
    if describe and code is not None:
        return f"{code} ({describe_weather_code(code)})"
    return _value(code)


def format_forecast(data: ForecastResponse, describe_codes: bool = False) -> str:
    """Render a daily forecast, one block per day in upstream order."""
    daily = data.daily
    result = f"Weather Forecast for coordinates ({data.latitude}, {data.longitude})\n\n"

    for i in range(len(daily)):
        result += f"Date: {daily.time[i]}\n"
        result += (
            f"  Temperature: {_value(daily.temperature_2m_max[i])}°C max, "
            f"{_value(daily.temperature_2m_min[i])}°C min\n"
        )
        result += f"  Precipitation: {_value(daily.precipitation_sum[i])} mm\n"
        result += f"  Wind Speed: {_value(daily.wind_speed_10m_max[i])} km/h max\n"
        result += f"  Weather Code: {_weather_code(daily.weather_code[i], describe_codes)}\n\n"

    return result


def format_current_weather(data: CurrentWeatherResponse, describe_codes: bool = False) -> str:
    """Render current conditions as one line per measurement."""
    current = data.current
    lines = [
        f"Current Weather for coordinates ({data.latitude}, {data.longitude})",
        "",
        f"Time: {current.time}",
        f"Temperature: {_value(current.temperature_2m)}°C",
        f"Relative Humidity: {_value(current.relative_humidity_2m)}%",
        f"Precipitation: {_value(current.precipitation)} mm",
        f"Wind Speed: {_value(current.wind_speed_10m)} km/h",
        f"Wind Direction: {_value(current.wind_direction_10m)}°",
        f"Weather Code: {_weather_code(current.weather_code, describe_codes)}",
    ]
    return "\n".join(lines) + "\n"


def format_geocode(location: str, data: GeocodingResponse) -> str:
    """Render geocoding candidates, or a single line when there are none."""
    if not data.results:
        return f'No results found for location: "{location}"'

    result = f'Geocoding results for "{location}":\n\n'
    for place in data.results:
        result += place.name
        if place.admin1:
            result += f", {place.admin1}"
        if place.country:
            result += f", {place.country}"
        result += f"\n  Coordinates: {place.latitude}, {place.longitude}\n"
        # Zero elevation is treated as "no elevation data"
        if place.elevation:
            result += f"  Elevation: {place.elevation}m\n"
        result += "\n"

    return result
