"""
Forecast ingestion client (Open-Meteo).

Fetches the hourly forecast for a coordinate. The payload is passed through to the
web client as-is (it drives the charts and the hour slider) and is also the source
for `swimscore.ingestion.conditions.inputs_from_hourly`.
"""

from __future__ import annotations

import logging
from typing import Any

from swimscore.config.settings import Settings
from swimscore.core.cache import FileCache
from swimscore.core.http import get_json
from swimscore.domain.errors import InvalidInputError, UpstreamError
from swimscore.domain.models import GeoPoint

logger = logging.getLogger(__name__)

# Series the web client cannot work without.
REQUIRED_HOURLY_SERIES = ("cloudcover", "precipitation", "temperature_2m")


def _is_number_list(value: Any) -> bool:
    return isinstance(value, list) and all(
        isinstance(x, (int, float)) and not isinstance(x, bool) for x in value
    )


def is_open_meteo_response(payload: Any) -> bool:
    """Shape check for the hourly forecast payload."""
    if not isinstance(payload, dict):
        return False
    hourly = payload.get("hourly")
    if not isinstance(hourly, dict):
        return False
    return all(_is_number_list(hourly.get(name)) for name in REQUIRED_HOURLY_SERIES)


def parse_coordinates(lat: Any, lon: Any) -> GeoPoint:
    """Turn raw query values into a validated `GeoPoint`.

    Raises:
        InvalidInputError: If either value is missing, not numeric, or out of range.
    """
    if lat is None or lon is None or str(lat).strip() == "" or str(lon).strip() == "":
        raise InvalidInputError("Missing latitude or longitude")
    try:
        latitude = float(lat)
        longitude = float(lon)
    except (TypeError, ValueError) as e:
        raise InvalidInputError("Invalid coordinates") from e
    if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
        raise InvalidInputError("Invalid coordinates")
    return GeoPoint(lat=latitude, lon=longitude)


class ForecastClient:
    """Fetches and caches Open-Meteo forecast payloads."""

    def __init__(self, settings: Settings, cache: FileCache):
        self._settings = settings
        self._cache = cache

    def _get(self, params: dict[str, Any]) -> Any:
        cfg = self._settings.ingestion
        return get_json(
            cfg.forecast.base_url,
            params=params,
            headers={"User-Agent": cfg.user_agent},
            timeout_seconds=self._settings.app.http_timeout_seconds,
        )

    def get_hourly(self, point: GeoPoint) -> dict[str, Any]:
        """Return the hourly forecast for `point`.

        Raises:
            UpstreamError: On transport failure or an unexpected response shape.
        """
        cfg = self._settings.ingestion.forecast
        params = {
            "latitude": point.lat,
            "longitude": point.lon,
            "hourly": ",".join(cfg.hourly_fields),
            "timezone": cfg.timezone,
        }

        def builder() -> Any:
            logger.info("Fetching hourly forecast for lat=%.4f lon=%.4f", point.lat, point.lon)
            payload = self._get(params)
            # Checked before caching so a malformed body is never stored.
            if not is_open_meteo_response(payload):
                raise UpstreamError("Unexpected Open-Meteo response format")
            return payload

        try:
            return self._cache.get_or_set(
                "forecast",
                f"hourly:{point.lat:.4f}:{point.lon:.4f}",
                builder,
                ttl_seconds=cfg.cache_ttl_seconds,
                stale_if_error=True,
            )
        except UpstreamError:
            raise
        except Exception as e:
            logger.error("Open-Meteo forecast fetch failed: %s", e)
            raise UpstreamError("Failed to fetch weather data") from e

    def get_current_wind(self, point: GeoPoint) -> dict[str, Any]:
        """Return the raw `current` block (wind speed/direction) for `point`.

        Not cached: it is only used as the marine fallback, which must reflect now.
        """
        cfg = self._settings.ingestion.forecast
        payload = self._get(
            {
                "latitude": point.lat,
                "longitude": point.lon,
                "current": ",".join(cfg.current_fields),
                "timezone": cfg.timezone,
            }
        )
        current = payload.get("current") if isinstance(payload, dict) else None
        return current if isinstance(current, dict) else {}
