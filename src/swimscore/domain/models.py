"""
Domain models (Pydantic).

These types are the stable contract between layers:
- scoring input (`SwimInputs`), one snapshot of current conditions
- scoring output (`SwimScoreOutput`), the explainable assessment
- ingestion output (`WaveData`) for the marine endpoint

Python attributes are snake_case; the JSON wire names are the camelCase aliases
used by the web client, and responses are always serialized by alias.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SwimInputs(BaseModel):
    """The twelve current-condition measurements a swim score is computed from."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    wind_speed: float = Field(..., alias="windSpeed", description="km/h")
    wind_gust: float = Field(..., alias="windGust", description="km/h")
    # Carried for context only; no scorer consults it.
    wind_direction: float = Field(..., alias="windDirection", description="degrees")
    weather_code: str = Field(..., alias="weatherCode")
    precip_amount: float = Field(..., alias="precipAmount", description="mm, current period")
    precip_last_24h: float = Field(..., alias="precipLast24h", description="mm, trailing 24h")
    visibility: float = Field(..., description="meters")
    air_quality_index: float = Field(..., alias="airQualityIndex")
    uv_index: float = Field(..., alias="uvIndex")
    cloud_cover: float = Field(..., alias="cloudCover", description="percent")
    apparent_temp: float = Field(..., alias="apparentTemp", description="°C feels-like")
    sst: float = Field(..., description="sea surface temperature, °C")


class ScoreBreakdown(BaseModel):
    """The three independent sub-scores."""

    model_config = ConfigDict(frozen=True)

    safety: int = Field(..., ge=0, le=100)
    comfort: int = Field(..., ge=0, le=100)
    performance: int = Field(..., ge=0, le=100)


class SwimScoreOutput(BaseModel):
    """Full swim assessment returned by `compute_swim_score`."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    total_score: int = Field(..., alias="totalScore", ge=0, le=100)
    breakdown: ScoreBreakdown
    explanation: list[str] = Field(..., min_length=1)
    recommendation: str
    best_time_to_swim: str = Field(..., alias="bestTimeToSwim")


class GeoPoint(BaseModel):
    """A geographic point in decimal degrees."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class WaveData(BaseModel):
    """Current sea state for a coordinate (measured or estimated from wind)."""

    model_config = ConfigDict(populate_by_name=True)

    wave_height: float = Field(..., alias="waveHeight", description="meters")
    wave_direction: float = Field(..., alias="waveDirection", description="degrees")
    wave_period: float = Field(..., alias="wavePeriod", description="seconds")
    swell_height: float | None = Field(default=None, alias="swellHeight")
    swell_direction: float | None = Field(default=None, alias="swellDirection")
    swell_period: float | None = Field(default=None, alias="swellPeriod")
    timestamp: str
    location: GeoPoint
