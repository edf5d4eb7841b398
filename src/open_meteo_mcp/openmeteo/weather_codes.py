"""
WMO weather interpretation codes used by Open-Meteo.
"""

_CODES = {
    0: "clear sky", 1: "mainly clear", 2: "partly cloudy", 3: "overcast",
    45: "foggy", 48: "depositing rime fog",
    51: "light drizzle", 53: "moderate drizzle", 55: "dense drizzle",
    56: "light freezing drizzle", 57: "dense freezing drizzle",
    61: "slight rain", 63: "moderate rain", 65: "heavy rain",
    66: "light freezing rain", 67: "heavy freezing rain",
    71: "slight snow", 73: "moderate snow", 75: "heavy snow", 77: "snow grains",
    80: "slight rain showers", 81: "moderate rain showers", 82: "violent rain showers",
    85: "slight snow showers", 86: "heavy snow showers",
    95: "thunderstorm", 96: "thunderstorm with slight hail", 99: "thunderstorm with heavy hail",
}


def describe_weather_code(code: int | None) -> str:
    """Convert WMO weather code to human-readable description.

    Args:
        code: WMO weather code integer.

    Returns:
        Human-readable weather condition string. Returns "unknown" for
        unrecognized codes.

    Example:
        >>> describe_weather_code(0)
        'clear sky'
        >>> describe_weather_code(63)
        'moderate rain'
    """
    return _CODES.get(code, "unknown")
