"""
FastAPI application wiring.

This file creates the `FastAPI` instance and its middleware.
Business logic lives in `swimscore.scoring`; routes live in `swimscore.api.routes`.

Run locally with: `uvicorn swimscore.api.app:app --reload`
"""

from __future__ import annotations

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from swimscore import __version__
from swimscore.config.settings import get_settings
from swimscore.core.logging import configure_logging

from .routes import router

configure_logging()

app = FastAPI(title="SwimScore API", version=__version__)

# CORS: allow the map frontend to call this API.
# - api.cors_origins (or SWIMSCORE_CORS_ORIGINS="http://localhost:3000,...") lists origins
# - api.cors_allow_local=false disables the default localhost allowance
_api = get_settings().api
cors_origin_regex = (
    r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$" if _api.cors_allow_local and not _api.cors_origins else ""
)
if _api.cors_origins or cors_origin_regex:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_api.cors_origins,
        allow_origin_regex=cors_origin_regex or None,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

app.include_router(router)
