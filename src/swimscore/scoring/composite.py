"""
Composite aggregation and shared scoring helpers.

- `clamp_score`: keep sub-scores within 0..100
- `ComponentResult`: one sub-score plus its explainability payload
- `aggregate`: weighted total with the safety override
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

logger = logging.getLogger(__name__)

SCORE_MIN = 0
SCORE_MAX = 100

COMPOSITE_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {"safety": 0.5, "comfort": 0.3, "performance": 0.2}
)

# A safety sub-score at or below this value IS the total score.
SAFETY_OVERRIDE_MAX = 10

# Total-score thresholds shared by the explanation banner and the recommendation.
IDEAL_MIN_TOTAL = 80
CAUTION_MIN_TOTAL = 50


def clamp_score(value: float) -> int:
    """Clamp a raw score into [0, 100] and return it as an int."""
    if value > SCORE_MAX:
        logger.warning("Score %s exceeded %s and was clamped", value, SCORE_MAX)
        return SCORE_MAX
    return int(max(SCORE_MIN, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (53.5 -> 54)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class ComponentResult:
    """A sub-score plus explainability payload."""

    score: int
    details: dict[str, Any]
    reasons: list[str]


def aggregate(safety: int, comfort: int, performance: int) -> int:
    """Combine the sub-scores into the total score.

    A critically low safety score overrides the weighted formula entirely.
    """
    if safety <= SAFETY_OVERRIDE_MAX:
        return safety
    weighted = (
        safety * COMPOSITE_WEIGHTS["safety"]
        + comfort * COMPOSITE_WEIGHTS["comfort"]
        + performance * COMPOSITE_WEIGHTS["performance"]
    )
    return clamp_score(round_half_up(weighted))
