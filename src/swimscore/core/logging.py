"""
Logging configuration.

We use a YAML logging config (`src/swimscore/config/logging.yaml`) and then apply
runtime overrides from settings (e.g., `SWIMSCORE_LOG_LEVEL`).
"""

from __future__ import annotations

import logging.config

from swimscore.config.settings import get_logging_config, get_settings


def configure_logging() -> None:
    """Configure the Python logging system based on packaged YAML config + settings."""
    settings = get_settings()
    # Copy so the cached config is never mutated between calls.
    config = dict(get_logging_config())

    level = settings.app.log_level.upper()
    config["root"] = {**config.get("root", {}), "level": level}
    loggers = {name: dict(cfg) for name, cfg in config.get("loggers", {}).items()}
    if "swimscore" in loggers:
        loggers["swimscore"]["level"] = level
    config["loggers"] = loggers
    config["handlers"] = {
        name: {**handler, "level": level} if "level" in handler else dict(handler)
        for name, handler in config.get("handlers", {}).items()
    }

    logging.config.dictConfig(config)
