"""
Argument models for the weather tools.

Each model is the sole validation gate for its tool: an instance exists only
if every field is present (or defaulted), correctly typed and within bounds.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MIN_LATITUDE, MAX_LATITUDE = -90, 90
MIN_LONGITUDE, MAX_LONGITUDE = -180, 180
MIN_FORECAST_DAYS, MAX_FORECAST_DAYS = 1, 16
DEFAULT_FORECAST_DAYS = 7


class _Args(BaseModel):
    # Strict: "52.5" and True are type errors, not coerced values
    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")


class CurrentWeatherArgs(_Args):
    latitude: float = Field(
        ge=MIN_LATITUDE,
        le=MAX_LATITUDE,
        allow_inf_nan=False,
        description="Latitude coordinate (-90 to 90)",
    )
    longitude: float = Field(
        ge=MIN_LONGITUDE,
        le=MAX_LONGITUDE,
        allow_inf_nan=False,
        description="Longitude coordinate (-180 to 180)",
    )


class ForecastArgs(CurrentWeatherArgs):
    forecast_days: int = Field(
        default=DEFAULT_FORECAST_DAYS,
        ge=MIN_FORECAST_DAYS,
        le=MAX_FORECAST_DAYS,
        description="Number of forecast days (1-16, default: 7)",
    )


class GeocodeArgs(_Args):
    location: str = Field(
        min_length=1,
        description="Location name (e.g., 'London', 'New York', 'Tokyo')",
    )
