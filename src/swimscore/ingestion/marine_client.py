"""
Marine ingestion client (Open-Meteo Marine, with a wind-based fallback).

Wave data is informational (it is shown next to the swim score but does not feed it).
Lookup order:
1) Open-Meteo Marine `current` block (wave + swell)
2) on any failure: current wind from the forecast API, turned into an estimated sea state
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Literal

from swimscore.config.settings import Settings, WaveEstimateSettings
from swimscore.core.cache import FileCache
from swimscore.core.http import get_json
from swimscore.domain.errors import UpstreamError
from swimscore.domain.models import GeoPoint, WaveData
from swimscore.ingestion.forecast_client import ForecastClient

logger = logging.getLogger(__name__)

MARINE_MESSAGE = "Marine data from Open-Meteo"
ESTIMATE_MESSAGE = "Wave data estimated from wind conditions"


@dataclass(frozen=True)
class WaveEstimate:
    wave_height: float
    wave_direction: float
    wave_period: float


@dataclass(frozen=True)
class WaveResult:
    data: WaveData
    source: Literal["marine", "estimate"]
    message: str


def estimate_waves_from_wind(
    wind_speed: float, wind_direction: float, cfg: WaveEstimateSettings | None = None
) -> WaveEstimate:
    """Rough sea state from wind speed (km/h) using a simplified Beaufort relation."""
    cfg = cfg or WaveEstimateSettings()
    height = max(0.0, (wind_speed / cfg.reference_wind_kmh) ** cfg.height_exponent * cfg.height_factor)
    period = max(cfg.min_period_seconds, math.sqrt(height * 9.81) * cfg.period_factor)
    return WaveEstimate(
        wave_height=round(height, 2),
        wave_direction=wind_direction,
        wave_period=round(period, 1),
    )


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class MarineClient:
    """Fetches current wave conditions, falling back to a wind-based estimate."""

    def __init__(self, settings: Settings, cache: FileCache, forecast_client: ForecastClient | None = None):
        self._settings = settings
        self._cache = cache
        self._forecast = forecast_client or ForecastClient(settings, cache)

    def _fetch_marine(self, point: GeoPoint) -> WaveData:
        cfg = self._settings.ingestion.marine
        params = {
            "latitude": point.lat,
            "longitude": point.lon,
            "current": ",".join(cfg.current_fields),
            "timezone": cfg.timezone,
        }

        def builder() -> dict[str, Any]:
            payload = get_json(
                cfg.base_url,
                params=params,
                headers={"User-Agent": self._settings.ingestion.user_agent},
                timeout_seconds=self._settings.app.http_timeout_seconds,
            )
            current = payload.get("current") if isinstance(payload, dict) else None
            if not isinstance(current, dict):
                raise UpstreamError("Unexpected Open-Meteo Marine response format")
            return current

        current: dict[str, Any] = self._cache.get_or_set(
            "marine",
            f"current:{point.lat:.4f}:{point.lon:.4f}",
            builder,
            ttl_seconds=cfg.cache_ttl_seconds,
        )
        return WaveData(
            wave_height=current.get("wave_height") or 0,
            wave_direction=current.get("wave_direction") or 0,
            wave_period=current.get("wave_period") or 0,
            swell_height=current.get("swell_wave_height") or None,
            swell_direction=current.get("swell_wave_direction") or None,
            swell_period=current.get("swell_wave_period") or None,
            timestamp=current.get("time") or _now_iso(),
            location=point,
        )

    def _estimate_from_wind(self, point: GeoPoint) -> WaveData:
        current = self._forecast.get_current_wind(point)
        wind_speed = current.get("wind_speed_10m")
        if isinstance(wind_speed, bool) or not isinstance(wind_speed, (int, float)):
            raise UpstreamError("No wind data available for wave estimation")
        estimate = estimate_waves_from_wind(
            float(wind_speed),
            float(current.get("wind_direction_10m") or 0),
            self._settings.ingestion.wave_estimate,
        )
        return WaveData(
            wave_height=estimate.wave_height,
            wave_direction=estimate.wave_direction,
            wave_period=estimate.wave_period,
            timestamp=current.get("time") or _now_iso(),
            location=point,
        )

    def get_wave_data(self, point: GeoPoint) -> WaveResult:
        """Return current wave data for `point`.

        Raises:
            UpstreamError: If both the marine API and the wind fallback fail.
        """
        try:
            return WaveResult(data=self._fetch_marine(point), source="marine", message=MARINE_MESSAGE)
        except Exception as marine_error:
            logger.info("Marine API failed, estimating waves from wind: %s", marine_error)

        try:
            data = self._estimate_from_wind(point)
        except UpstreamError:
            raise
        except Exception as e:
            raise UpstreamError(f"Weather API error: {e}") from e
        return WaveResult(data=data, source="estimate", message=ESTIMATE_MESSAGE)
