"""
API routes.

Endpoints:
- POST `/api/swimscore`: score one snapshot of conditions.
- GET  `/api/forecast`: Open-Meteo hourly forecast for a coordinate (pass-through).
- GET  `/api/wave-data`: current sea state (marine API, or estimated from wind).
- GET  `/api/health`: liveness probe.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from swimscore import __version__
from swimscore.config.settings import get_settings
from swimscore.core.cache import FileCache
from swimscore.core.env import resolve_project_path
from swimscore.domain.errors import InvalidInputError, UpstreamError
from swimscore.domain.models import SwimScoreOutput
from swimscore.ingestion.forecast_client import ForecastClient, parse_coordinates
from swimscore.ingestion.marine_client import MarineClient
from swimscore.scoring.swim import compute_swim_score
from swimscore.scoring.validate import parse_inputs

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache
def _cache() -> FileCache:
    settings = get_settings()
    return FileCache(
        resolve_project_path(settings.cache.dir),
        enabled=settings.cache.enabled,
        default_ttl_seconds=settings.cache.default_ttl_seconds,
    )


@lru_cache
def _clients() -> tuple[ForecastClient, MarineClient]:
    settings = get_settings()
    forecast = ForecastClient(settings, _cache())
    return forecast, MarineClient(settings, _cache(), forecast_client=forecast)


def _invalid_input(message: str) -> HTTPException:
    return HTTPException(status_code=400, detail={"code": "INVALID_INPUT", "message": message})


@router.get("/api/health")
def get_health() -> dict:
    return {"status": "ok", "version": __version__}


@router.post("/api/swimscore", response_model=SwimScoreOutput)
async def post_swimscore(request: Request) -> SwimScoreOutput:
    """Validate the raw JSON body, then score it."""
    try:
        payload: Any = await request.json()
    except ValueError as e:
        raise _invalid_input("Invalid input data") from e

    try:
        inputs = parse_inputs(payload)
    except InvalidInputError as e:
        raise _invalid_input(str(e)) from e

    try:
        return compute_swim_score(inputs)
    except Exception as e:
        logger.exception("SwimScore API error")
        raise HTTPException(
            status_code=500,
            detail={"code": "INTERNAL_ERROR", "message": "Internal server error"},
        ) from e


@router.get("/api/forecast")
def get_forecast(lat: str | None = None, lon: str | None = None) -> dict:
    """Return the Open-Meteo hourly forecast for a coordinate."""
    try:
        point = parse_coordinates(lat, lon)
    except InvalidInputError as e:
        raise _invalid_input(str(e)) from e

    forecast_client, _ = _clients()
    try:
        return forecast_client.get_hourly(point)
    except UpstreamError as e:
        raise HTTPException(
            status_code=502,
            detail={"code": "UPSTREAM_ERROR", "message": str(e)},
        ) from e


@router.get("/api/wave-data")
def get_wave_data(lat: str | None = None, lon: str | None = None) -> dict:
    """Return current wave data; `message` says whether it was measured or estimated."""
    if not lat or not lon:
        raise _invalid_input("Missing latitude or longitude parameters")
    try:
        point = parse_coordinates(lat, lon)
    except InvalidInputError as e:
        raise _invalid_input("Invalid coordinates") from e

    _, marine_client = _clients()
    try:
        result = marine_client.get_wave_data(point)
    except Exception as e:
        logger.error("Wave data fetch error: %s", e)
        raise HTTPException(
            status_code=500,
            detail={"code": "INTERNAL_ERROR", "message": str(e) or "Failed to fetch wave data"},
        ) from e
    return {
        "success": True,
        "data": result.data.model_dump(mode="json", by_alias=True),
        "message": result.message,
    }
