"""Performance sub-score: how well the conditions suit actually swimming hard."""

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
    from_until,
    when,
)

PERFORMANCE_TABLE = ScoreTable(
    name="performance",
    base=25,
    categories=(
        Category(
            "wind",
            (
                band(2, when("wind_speed", below(5))),
                band(-3, when("wind_speed", from_until(10, 15))),
                band(-5, when("wind_speed", from_until(15, 20))),
                band(-8, when("wind_speed", from_until(20, 25))),
                band(-12, when("wind_speed", at_least(25))),
            ),
        ),
        Category(
            "water_temperature",
            (
                band(5, when("sst", between(22, 26))),
                band(2, when("sst", between(20, 28))),
                band(-8, when("sst", below(18), above(30))),
                band(-4, when("sst", below(20), above(28))),
            ),
        ),
        Category(
            "air_quality",
            (
                band(2, when("air_quality_index", below(25))),
                band(-2, when("air_quality_index", from_until(50, 100))),
                band(-6, when("air_quality_index", from_until(100, 150))),
                band(-10, when("air_quality_index", at_least(150))),
            ),
        ),
        Category(
            "air_temperature",
            (
                band(3, when("apparent_temp", between(26, 30))),
                band(-6, when("apparent_temp", above(35))),
                band(-4, when("apparent_temp", below(20))),
            ),
        ),
        Category(
            "visibility",
            (
                band(-10, when("visibility", below(2000))),
                band(-5, when("visibility", below(5000))),
            ),
        ),
        # Some cloud keeps swimmers from overheating.
        Category("cloud_cover", (band(2, when("cloud_cover", between(30, 70))),)),
    ),
)


def score_performance(inputs: SwimInputs) -> ComponentResult:
    return evaluate_table(PERFORMANCE_TABLE, inputs)
