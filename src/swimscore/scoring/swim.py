"""
Swim score orchestration.

validate (caller) -> safety/comfort/performance -> aggregate -> explanation,
recommendation, best time -> `SwimScoreOutput`.

Every step is a pure function of the inputs, so concurrent requests need no coordination.
"""

from __future__ import annotations

import logging

from swimscore.domain.errors import InternalFaultError
from swimscore.domain.models import ScoreBreakdown, SwimInputs, SwimScoreOutput
from swimscore.scoring.advice import get_best_time_to_swim, get_recommendation
from swimscore.scoring.comfort import score_comfort
from swimscore.scoring.composite import aggregate
from swimscore.scoring.explain import build_explanation
from swimscore.scoring.performance import score_performance
from swimscore.scoring.safety import score_safety

logger = logging.getLogger(__name__)


def compute_swim_score(inputs: SwimInputs) -> SwimScoreOutput:
    """Score one snapshot of conditions.

    Raises:
        InternalFaultError: If any scoring step fails unexpectedly.
    """
    try:
        return _score(inputs)
    except Exception as e:
        raise InternalFaultError("Swim score computation failed") from e


def _score(inputs: SwimInputs) -> SwimScoreOutput:
    safety = score_safety(inputs)
    comfort = score_comfort(inputs)
    performance = score_performance(inputs)

    total = aggregate(safety.score, comfort.score, performance.score)
    logger.debug(
        "swim score total=%s safety=%s %s comfort=%s %s performance=%s %s",
        total,
        safety.score,
        safety.details,
        comfort.score,
        comfort.details,
        performance.score,
        performance.details,
    )

    return SwimScoreOutput(
        total_score=total,
        breakdown=ScoreBreakdown(
            safety=safety.score, comfort=comfort.score, performance=performance.score
        ),
        explanation=build_explanation(
            safety=safety.score,
            comfort=comfort.score,
            performance=performance.score,
            inputs=inputs,
            total=total,
        ),
        recommendation=get_recommendation(total, inputs),
        best_time_to_swim=get_best_time_to_swim(inputs),
    )
