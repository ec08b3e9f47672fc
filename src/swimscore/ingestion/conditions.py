"""
Map one hour of an Open-Meteo hourly forecast onto `SwimInputs`.

Open-Meteo's land forecast does not carry every series the scorer needs (sea surface
temperature, 24h precipitation, an AQI). Missing or short series fall back to the
same defaults the web client uses, so a score can always be computed.
"""

from __future__ import annotations

from typing import Any, Mapping

from swimscore.domain.models import SwimInputs

# input field -> (hourly series name, fallback value)
HOURLY_SERIES: dict[str, tuple[str, float]] = {
    "wind_speed": ("windspeed_10m", 0),
    "wind_gust": ("windgusts_10m", 0),
    "wind_direction": ("winddirection_10m", 0),
    "precip_amount": ("precipitation", 0),
    "precip_last_24h": ("precipitation_sum", 0),
    "visibility": ("visibility", 10000),
    # PM10 stands in for an air quality index.
    "air_quality_index": ("pm10", 0),
    "uv_index": ("uv_index", 0),
    "cloud_cover": ("cloudcover", 0),
    "apparent_temp": ("apparent_temperature", 0),
    "sst": ("sea_surface_temperature", 27),
}


def _pick(hourly: Mapping[str, Any], series: str, index: int, fallback: float) -> Any:
    values = hourly.get(series)
    if not isinstance(values, list) or not 0 <= index < len(values):
        return fallback
    value = values[index]
    return fallback if value is None else value


def inputs_from_hourly(hourly: Mapping[str, Any], index: int = 0) -> SwimInputs:
    """Build `SwimInputs` from element `index` of each hourly series."""
    values = {field: _pick(hourly, series, index, fallback) for field, (series, fallback) in HOURLY_SERIES.items()}
    code = _pick(hourly, "weathercode", index, 0)
    weather_code = str(int(code)) if isinstance(code, (int, float)) else str(code)
    return SwimInputs(weather_code=weather_code, **values)
