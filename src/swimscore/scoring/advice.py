"""
Recommendation and best-time advisors.

The recommendation is an ordered guard list: the input hazards mirror the safety
guards, so a storm always yields the danger message even when the weighted total
alone would read milder.
"""

from __future__ import annotations

from dataclasses import dataclass

from swimscore.domain.models import SwimInputs
from swimscore.scoring.composite import CAUTION_MIN_TOTAL, IDEAL_MIN_TOTAL
from swimscore.scoring.rules import Rule, first_match, is_thunderstorm

REC_THUNDERSTORM = "DANGER: Do not swim - thunderstorm activity detected!"
REC_EXTREME_WIND = "Unsafe: Extreme wind conditions - avoid swimming."
REC_COLD_WATER = "Unsafe: Water temperature too cold - risk of hypothermia."
REC_GO = "Go ahead! Enjoy your swim."
REC_CAUTION = "Consider caution: check current conditions."
REC_NOT_RECOMMENDED = "Not recommended: unsafe to swim."

BEST_TIME_RAINY = "Rainy – No best time."
BEST_TIME_AFTERNOON = "Afternoon (2 PM – 4 PM)"


@dataclass(frozen=True)
class AdviceContext:
    inputs: SwimInputs
    total: int


RECOMMENDATION_RULES: tuple[Rule[str], ...] = (
    Rule("thunderstorm", lambda c: is_thunderstorm(c.inputs), REC_THUNDERSTORM),
    Rule("extreme_wind", lambda c: c.inputs.wind_speed >= 40, REC_EXTREME_WIND),
    Rule("cold_water", lambda c: c.inputs.sst < 15, REC_COLD_WATER),
    Rule("ideal", lambda c: c.total >= IDEAL_MIN_TOTAL, REC_GO),
    Rule("caution", lambda c: c.total >= CAUTION_MIN_TOTAL, REC_CAUTION),
)


def get_recommendation(total: int, inputs: SwimInputs) -> str:
    rule = first_match(RECOMMENDATION_RULES, AdviceContext(inputs=inputs, total=total))
    return rule.result if rule is not None else REC_NOT_RECOMMENDED


def get_best_time_to_swim(inputs: SwimInputs) -> str:
    # TODO: pick a real window once hourly series are passed in instead of a single snapshot.
    if inputs.precip_amount > 0:
        return BEST_TIME_RAINY
    return BEST_TIME_AFTERNOON
