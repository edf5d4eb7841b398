"""
Typed views of the Open-Meteo JSON payloads.

Payloads are parsed into these models as soon as they arrive, so the
formatters never see a missing field.
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from open_meteo_mcp.core.exceptions import MalformedResponseError
from open_meteo_mcp.core.helpers import validation_errors

# int | float keeps the number exactly as upstream wrote it (13 stays 13)
Number = Union[int, float]

_DAILY_SERIES = (
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "wind_speed_10m_max",
    "weather_code",
)

T = TypeVar("T", bound=BaseModel)


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class DailySeries(_Payload):
    """Parallel per-day arrays, one entry per date in ``time``."""
    time: list[str]
    temperature_2m_max: list[Optional[Number]]
    temperature_2m_min: list[Optional[Number]]
    precipitation_sum: list[Optional[Number]]
    wind_speed_10m_max: list[Optional[Number]]
    weather_code: list[Optional[int]]

    @model_validator(mode="after")
    def _check_lengths(self) -> "DailySeries":
        expected = len(self.time)
        for name in _DAILY_SERIES:
            actual = len(getattr(self, name))
            if actual != expected:
                raise ValueError(f"{name} has {actual} values, expected {expected}")
        return self

    def __len__(self) -> int:
        return len(self.time)


class ForecastResponse(_Payload):
    latitude: Number
    longitude: Number
    daily: DailySeries


class CurrentConditions(_Payload):
    time: str
    temperature_2m: Optional[Number]
    relative_humidity_2m: Optional[Number]
    precipitation: Optional[Number]
    wind_speed_10m: Optional[Number]
    wind_direction_10m: Optional[Number]
    weather_code: Optional[int]


class CurrentWeatherResponse(_Payload):
    latitude: Number
    longitude: Number
    current: CurrentConditions


class Place(_Payload):
    name: str
    latitude: Number
    longitude: Number
    admin1: Optional[str] = None
    country: Optional[str] = None
    elevation: Optional[Number] = None


class GeocodingResponse(_Payload):
    results: list[Place]


def parse_payload(model: type[T], data: Any, source: str) -> T:
    """Validate an upstream payload, raising MalformedResponseError on mismatch."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        detail = ", ".join(f"{path}: {reason}" for path, reason in validation_errors(e, root="response"))
        raise MalformedResponseError(f"{source} returned an unexpected response: {detail}") from e
