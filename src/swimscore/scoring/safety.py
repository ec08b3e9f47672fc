"""
Safety sub-score.

Two stages:
1) Hazard guards, in priority order. A storm or extreme wind is unsafe no matter how
   good everything else is, so the first matching guard IS the score.
2) Otherwise, a base of 60 minus one penalty band per hazard category.
"""

from __future__ import annotations

from swimscore.domain.models import SwimInputs
from swimscore.scoring.composite import ComponentResult
from swimscore.scoring.rules import (
    Category,
    Rule,
    ScoreTable,
    above,
    at_least,
    band,
    below,
    evaluate_table,
    first_match,
    is_thunderstorm,
    when,
)

SAFETY_GUARDS: tuple[Rule[int], ...] = (
    Rule("thunderstorm", is_thunderstorm, 5),
    Rule("extreme_wind", lambda i: i.wind_speed >= 50 or i.wind_gust >= 60, 8),
    Rule("severe_wind", lambda i: i.wind_speed >= 40 or i.wind_gust >= 50, 12),
)

SAFETY_TABLE = ScoreTable(
    name="safety",
    base=60,
    categories=(
        Category(
            "wind",
            (
                band(-20, when("wind_speed", at_least(30))),
                band(-15, when("wind_speed", at_least(25))),
                band(-10, when("wind_speed", at_least(20))),
                band(-5, when("wind_speed", at_least(15))),
            ),
        ),
        Category(
            "precipitation",
            (
                band(-15, when("precip_amount", at_least(15)), when("precip_last_24h", at_least(50))),
                band(-10, when("precip_amount", at_least(10)), when("precip_last_24h", at_least(30))),
                band(-5, when("precip_amount", at_least(5)), when("precip_last_24h", at_least(15))),
            ),
        ),
        Category(
            "visibility",
            (
                band(-15, when("visibility", below(500))),
                band(-10, when("visibility", below(1000))),
                band(-5, when("visibility", below(3000))),
            ),
        ),
        Category(
            "water_temperature",
            (
                band(-20, when("sst", below(15))),
                band(-15, when("sst", below(18))),
                band(-10, when("sst", above(32))),
                band(-5, when("sst", above(30))),
            ),
        ),
        Category(
            "air_quality",
            (
                band(-10, when("air_quality_index", at_least(150))),
                band(-5, when("air_quality_index", at_least(100))),
            ),
        ),
    ),
)


def score_safety(inputs: SwimInputs) -> ComponentResult:
    guard = first_match(SAFETY_GUARDS, inputs)
    if guard is not None:
        return ComponentResult(
            score=guard.result,
            details={"guard": guard.name},
            reasons=[f"{guard.name.replace('_', ' ')} caps safety at {guard.result}"],
        )
    return evaluate_table(SAFETY_TABLE, inputs)
