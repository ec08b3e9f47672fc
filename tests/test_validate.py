import math

import pytest

from swimscore.domain.errors import InvalidInputError
from swimscore.domain.models import SwimInputs
from swimscore.scoring.validate import REQUIRED_FIELDS, parse_inputs, validate_inputs


def test_validate_accepts_complete_payload(payload):
    assert validate_inputs(payload) is True


def test_validate_ignores_extra_keys(payload):
    payload["beachName"] = "Waikiki"
    assert validate_inputs(payload) is True


def test_required_fields_are_the_twelve_wire_names():
    assert len(REQUIRED_FIELDS) == 12
    assert set(REQUIRED_FIELDS) == {f.alias or name for name, f in SwimInputs.model_fields.items()}


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_validate_rejects_missing_field(payload, field):
    del payload[field]
    assert validate_inputs(payload) is False


def test_validate_rejects_numeric_weather_code(payload):
    payload["weatherCode"] = 95
    assert validate_inputs(payload) is False


@pytest.mark.parametrize("bad", ["8", None, True, [8], {"v": 8}, math.nan, math.inf])
def test_validate_rejects_non_numeric_measurements(payload, bad):
    payload["windSpeed"] = bad
    assert validate_inputs(payload) is False


@pytest.mark.parametrize("bad", [None, [], "windSpeed=8", 42])
def test_validate_rejects_non_object_payloads(bad):
    assert validate_inputs(bad) is False


def test_parse_inputs_maps_wire_names_to_attributes(payload):
    inputs = parse_inputs(payload)
    assert inputs.wind_speed == 8
    assert inputs.precip_last_24h == 0
    assert inputs.weather_code == "0"
    assert inputs.sst == 26


def test_parse_inputs_raises_invalid_input(payload):
    del payload["sst"]
    with pytest.raises(InvalidInputError, match="Invalid input data"):
        parse_inputs(payload)


def test_validate_rejects_integers_too_large_for_a_float(payload):
    payload["windSpeed"] = 10**400
    assert validate_inputs(payload) is False
    with pytest.raises(InvalidInputError):
        parse_inputs(payload)
