"""
Application settings (Pydantic).

Settings are loaded from `src/swimscore/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `SWIMSCORE_CONFIG_PATH` (replaces the packaged defaults)
- a small whitelist of environment variables (e.g., `SWIMSCORE_LOG_LEVEL`)

Design rule:
- Transport and ingestion knobs live in YAML.
- Scoring thresholds do NOT: they are immutable tables next to each scorer so the
  score stays a pure function of the twelve inputs.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from swimscore.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `swimscore.config`."""
    text = resources.files("swimscore.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "SwimScore"
    log_level: str = "INFO"
    http_timeout_seconds: float = 15


class CacheSettings(BaseModel):
    enabled: bool = True
    dir: str = ".cache/swimscore"
    default_ttl_seconds: int = 60 * 60


class ApiSettings(BaseModel):
    cors_origins: list[str] = Field(default_factory=list)
    cors_allow_local: bool = True


class ForecastSettings(BaseModel):
    base_url: str = "https://api.open-meteo.com/v1/forecast"
    timezone: str = "auto"
    cache_ttl_seconds: int = 15 * 60
    hourly_fields: list[str] = Field(
        default_factory=lambda: ["cloudcover", "precipitation", "temperature_2m"]
    )
    current_fields: list[str] = Field(
        default_factory=lambda: ["wind_speed_10m", "wind_direction_10m"]
    )


class MarineSettings(BaseModel):
    base_url: str = "https://marine-api.open-meteo.com/v1/marine"
    timezone: str = "auto"
    cache_ttl_seconds: int = 15 * 60
    current_fields: list[str] = Field(
        default_factory=lambda: [
            "wave_height",
            "wave_direction",
            "wave_period",
            "swell_wave_height",
            "swell_wave_direction",
            "swell_wave_period",
        ]
    )


class WaveEstimateSettings(BaseModel):
    """Constants for the wind-driven wave estimate (simplified Beaufort relation)."""

    reference_wind_kmh: float = Field(10, gt=0)
    height_exponent: float = 1.5
    height_factor: float = 0.5
    min_period_seconds: float = Field(2, ge=0)
    period_factor: float = 1.5


class IngestionSettings(BaseModel):
    user_agent: str = "swimscore/0.1.0 (+https://local)"
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)
    marine: MarineSettings = Field(default_factory=MarineSettings)
    wave_estimate: WaveEstimateSettings = Field(default_factory=WaveEstimateSettings)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)


_TRUTHY = {"1", "true", "yes", "y", "on"}


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Note: We intentionally keep this whitelist small; everything else goes through YAML.
    """
    data = dict(data)

    log_level = os.getenv("SWIMSCORE_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    cache_dir = os.getenv("SWIMSCORE_CACHE_DIR")
    if cache_dir:
        data.setdefault("cache", {})["dir"] = cache_dir

    cache_enabled = os.getenv("SWIMSCORE_CACHE_ENABLED")
    if cache_enabled:
        data.setdefault("cache", {})["enabled"] = cache_enabled.strip().lower() in _TRUTHY

    cors_origins = os.getenv("SWIMSCORE_CORS_ORIGINS")
    if cors_origins:
        data.setdefault("api", {})["cors_origins"] = [
            s.strip() for s in cors_origins.split(",") if s.strip()
        ]

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("SWIMSCORE_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
