"""Comfort sub-score: air and water temperature, sun, cloud, rain and wind."""

from __future__ import annotations

from swimscore.domain.models import SwimInputs
from swimscore.scoring.composite import ComponentResult
from swimscore.scoring.rules import (
    Category,
    ScoreTable,
    above,
    at_least,
    band,
    below,
    between,
    evaluate_table,
    when,
)

COMFORT_TABLE = ScoreTable(
    name="comfort",
    base=35,
    categories=(
        Category(
            "air_temperature",
            (
                band(-15, when("apparent_temp", above(42))),
                band(-10, when("apparent_temp", above(38))),
                band(-5, when("apparent_temp", above(35))),
                band(5, when("apparent_temp", between(24, 32))),
                band(-15, when("apparent_temp", below(18))),
                band(-8, when("apparent_temp", below(22))),
            ),
        ),
        Category(
            "uv",
            (
                band(-12, when("uv_index", at_least(11))),
                band(-8, when("uv_index", at_least(9))),
                band(-5, when("uv_index", at_least(7))),
                band(2, when("uv_index", between(3, 6))),
            ),
        ),
        Category(
            "cloud_cover",
            (
                band(3, when("cloud_cover", between(20, 70))),
                band(-5, when("cloud_cover", above(95))),
                band(-2, when("cloud_cover", below(10))),
            ),
        ),
        Category(
            "water_temperature",
            (
                band(8, when("sst", between(24, 28))),
                band(3, when("sst", between(22, 30))),
                band(-8, when("sst", below(20), above(31))),
            ),
        ),
        Category("rain", (band(-5, when("precip_amount", above(5))),)),
        Category(
            "wind",
            (
                band(-5, when("wind_speed", above(25))),
                band(-3, when("wind_speed", above(20))),
            ),
        ),
    ),
)


def score_comfort(inputs: SwimInputs) -> ComponentResult:
    return evaluate_table(COMFORT_TABLE, inputs)
