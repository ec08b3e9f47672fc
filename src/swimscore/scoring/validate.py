"""
Input validation.

`validate_inputs` is a pure predicate over an untyped JSON payload: it never raises,
the HTTP/CLI boundary turns a False into a client-input error.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from swimscore.domain.errors import InvalidInputError
from swimscore.domain.models import SwimInputs

NUMERIC_FIELDS: tuple[str, ...] = (
    "windSpeed",
    "windGust",
    "windDirection",
    "precipAmount",
    "precipLast24h",
    "visibility",
    "airQualityIndex",
    "uvIndex",
    "cloudCover",
    "apparentTemp",
    "sst",
)
STRING_FIELDS: tuple[str, ...] = ("weatherCode",)
REQUIRED_FIELDS: tuple[str, ...] = NUMERIC_FIELDS + STRING_FIELDS


def _is_number(value: Any) -> bool:
    # JSON true/false decode to bool, which is an int subclass in Python.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # Integers too large to become a float.
        return False


def validate_inputs(payload: Any) -> bool:
    """Return True when `payload` carries all twelve fields with the right kinds."""
    if not isinstance(payload, Mapping):
        return False
    if any(name not in payload or not _is_number(payload[name]) for name in NUMERIC_FIELDS):
        return False
    return all(name in payload and isinstance(payload[name], str) for name in STRING_FIELDS)


def parse_inputs(payload: Any) -> SwimInputs:
    """Validate `payload` and build `SwimInputs`; extra keys are dropped.

    Raises:
        InvalidInputError: If the payload fails `validate_inputs`.
    """
    if not validate_inputs(payload):
        raise InvalidInputError("Invalid input data")
    return SwimInputs.model_validate({name: payload[name] for name in REQUIRED_FIELDS})
