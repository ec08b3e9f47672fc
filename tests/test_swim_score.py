import itertools

import pytest

from swimscore.domain.errors import InternalFaultError
from swimscore.scoring import advice, explain
from swimscore.scoring.swim import compute_swim_score
from swimscore.scoring.validate import parse_inputs


def test_storm_scenario(payload):
    payload["weatherCode"] = "95"
    out = compute_swim_score(parse_inputs(payload))
    assert out.breakdown.safety == 5
    assert out.total_score == 5
    assert out.recommendation == advice.REC_THUNDERSTORM
    assert out.explanation == [
        explain.BANNER_NOT_RECOMMENDED,
        "⚠️ Safety score is critically low (5/100)",
        explain.MSG_THUNDERSTORM,
    ]


def test_ideal_day_scenario(payload):
    out = compute_swim_score(parse_inputs(payload))
    assert (out.breakdown.safety, out.breakdown.comfort, out.breakdown.performance) == (60, 53, 37)
    # round(30 + 15.9 + 7.4) = round(53.3)
    assert out.total_score == 53
    assert out.explanation[0] == explain.BANNER_CAUTION
    assert out.recommendation == advice.REC_CAUTION
    assert out.best_time_to_swim == advice.BEST_TIME_AFTERNOON


def test_cold_water_scenario(payload):
    payload.update({"sst": 12, "windSpeed": 5})
    out = compute_swim_score(parse_inputs(payload))
    # Cold water is a deduction, not a hard floor.
    assert out.breakdown.safety == 40
    assert out.breakdown.comfort == 37
    assert out.breakdown.performance == 24
    assert out.total_score == 36
    assert out.recommendation == advice.REC_COLD_WATER
    assert out.explanation == [explain.BANNER_NOT_RECOMMENDED, explain.MSG_COLD_WATER]


def test_wind_direction_is_never_consulted(payload):
    baseline = compute_swim_score(parse_inputs(payload))
    payload["windDirection"] = 359
    assert compute_swim_score(parse_inputs(payload)) == baseline


def test_scoring_is_idempotent(payload):
    inputs = parse_inputs(payload)
    assert compute_swim_score(inputs).model_dump_json() == compute_swim_score(inputs).model_dump_json()


def test_output_serializes_with_wire_names(payload):
    data = compute_swim_score(parse_inputs(payload)).model_dump(by_alias=True)
    assert set(data) == {"totalScore", "breakdown", "explanation", "recommendation", "bestTimeToSwim"}
    assert set(data["breakdown"]) == {"safety", "comfort", "performance"}


def test_invariants_hold_across_a_condition_grid(make_inputs):
    grid = itertools.product(
        ["0", "95", "3"],  # weather code
        [0, 12, 22, 45, 55],  # wind speed
        [0, 8, 40],  # precipitation
        [300, 2500, 10000],  # visibility
        [10, 16, 25, 33],  # sst
        [10, 30, 40],  # apparent temperature
        [20, 120, 200],  # AQI
    )
    for code, wind, rain, vis, sst, temp, aqi in grid:
        inputs = make_inputs(
            weather_code=code,
            wind_speed=wind,
            wind_gust=wind * 1.2,
            precip_amount=rain,
            precip_last_24h=rain * 3,
            visibility=vis,
            sst=sst,
            apparent_temp=temp,
            air_quality_index=aqi,
        )
        out = compute_swim_score(inputs)
        b = out.breakdown
        for score in (b.safety, b.comfort, b.performance, out.total_score):
            assert 0 <= score <= 100
        if b.safety <= 10:
            assert out.total_score == b.safety
        assert out.explanation and out.explanation[0] in explain.BANNERS


def test_unexpected_scorer_failure_becomes_internal_fault(monkeypatch, make_inputs):
    import swimscore.scoring.swim as swim

    def boom(_inputs):
        raise ZeroDivisionError("broken table")

    monkeypatch.setattr(swim, "score_comfort", boom)
    with pytest.raises(InternalFaultError) as excinfo:
        compute_swim_score(make_inputs())
    assert isinstance(excinfo.value.__cause__, ZeroDivisionError)
