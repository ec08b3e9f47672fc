import os

# Keep tests offline and side-effect free: no on-disk cache unless a test builds one.
os.environ.setdefault("SWIMSCORE_CACHE_ENABLED", "0")

import pytest

from swimscore.domain.models import SwimInputs

# A calm, warm day: no safety deductions, total 53.
BASELINE_PAYLOAD = {
    "windSpeed": 8,
    "windGust": 10,
    "windDirection": 180,
    "weatherCode": "0",
    "precipAmount": 0,
    "precipLast24h": 0,
    "visibility": 10000,
    "airQualityIndex": 20,
    "uvIndex": 5,
    "cloudCover": 40,
    "apparentTemp": 27,
    "sst": 26,
}


@pytest.fixture
def payload() -> dict:
    return dict(BASELINE_PAYLOAD)


@pytest.fixture
def make_inputs():
    """Build `SwimInputs` from the baseline with snake_case overrides."""

    def _make(**overrides) -> SwimInputs:
        base = SwimInputs.model_validate(BASELINE_PAYLOAD)
        return base.model_copy(update=overrides)

    return _make
