"""
Shared fixtures: canned Open-Meteo payloads and a recording fake upstream.
"""

import httpx
import pytest

from open_meteo_mcp.openmeteo.client import OpenMeteoClient


class MockUpstream:
    """httpx.MockTransport handler that records every request it serves."""

    def __init__(self, status_code=200, json=None, content=None, exc=None):
        self.status_code = status_code
        self.json = json
        self.content = content
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    def client(self, config=None) -> OpenMeteoClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(self))
        return OpenMeteoClient(config, http=http)


@pytest.fixture
def forecast_payload():
    return {
        "latitude": 52.52,
        "longitude": 13.419998,
        "timezone": "Europe/Berlin",
        "daily": {
            "time": ["2024-01-01", "2024-01-02"],
            "temperature_2m_max": [5.1, 6.3],
            "temperature_2m_min": [-1.2, 0.4],
            "precipitation_sum": [0.0, 2.5],
            "wind_speed_10m_max": [14.3, 20.1],
            "weather_code": [3, 61],
        },
    }


@pytest.fixture
def current_payload():
    return {
        "latitude": 52.52,
        "longitude": 13.42,
        "current": {
            "time": "2024-01-01T12:00",
            "interval": 900,
            "temperature_2m": 4.2,
            "relative_humidity_2m": 81,
            "precipitation": 0.1,
            "wind_speed_10m": 11.5,
            "wind_direction_10m": 240,
            "weather_code": 2,
        },
    }


@pytest.fixture
def geocode_payload():
    return {
        "results": [
            {
                "id": 2950159,
                "name": "Berlin",
                "latitude": 52.52437,
                "longitude": 13.41053,
                "elevation": 74.0,
                "country": "Germany",
                "admin1": "State of Berlin",
            },
            {
                "id": 4500771,
                "name": "Berlin",
                "latitude": 39.79,
                "longitude": -74.93,
                "elevation": 0,
                "country": "United States",
            },
        ],
        "generationtime_ms": 0.9,
    }


@pytest.fixture
def upstream():
    """Factory for MockUpstream instances."""
    return MockUpstream
