from starlette.testclient import TestClient

from swimscore.api.app import app
from swimscore.domain.errors import UpstreamError
from swimscore.domain.models import GeoPoint, WaveData
from swimscore.ingestion.marine_client import ESTIMATE_MESSAGE, WaveResult


class _StubForecastClient:
    def __init__(self, fail: bool = False):
        self._fail = fail

    def get_hourly(self, point: GeoPoint):
        if self._fail:
            raise UpstreamError("Failed to fetch weather data")
        return {"latitude": point.lat, "hourly": {"cloudcover": [10], "precipitation": [0], "temperature_2m": [25]}}


class _StubMarineClient:
    def get_wave_data(self, point: GeoPoint) -> WaveResult:
        data = WaveData(
            wave_height=0.5,
            wave_direction=90,
            wave_period=3.3,
            timestamp="2026-06-01T14:00",
            location=point,
        )
        return WaveResult(data=data, source="estimate", message=ESTIMATE_MESSAGE)


def _patch_clients(monkeypatch, *, forecast_fails: bool = False):
    import swimscore.api.routes as routes

    monkeypatch.setattr(
        routes, "_clients", lambda: (_StubForecastClient(fail=forecast_fails), _StubMarineClient())
    )


def test_forecast_passes_payload_through(monkeypatch):
    _patch_clients(monkeypatch)
    with TestClient(app) as c:
        resp = c.get("/api/forecast", params={"lat": "21.28", "lon": "-157.83"})
    assert resp.status_code == 200
    assert resp.json()["hourly"]["cloudcover"] == [10]


def test_forecast_requires_coordinates(monkeypatch):
    _patch_clients(monkeypatch)
    with TestClient(app) as c:
        resp = c.get("/api/forecast", params={"lat": "21.28"})
    assert resp.status_code == 400
    assert resp.json()["detail"]["message"] == "Missing latitude or longitude"


def test_forecast_upstream_failure_is_bad_gateway(monkeypatch):
    _patch_clients(monkeypatch, forecast_fails=True)
    with TestClient(app) as c:
        resp = c.get("/api/forecast", params={"lat": "21.28", "lon": "-157.83"})
    assert resp.status_code == 502
    assert resp.json()["detail"]["code"] == "UPSTREAM_ERROR"


def test_wave_data_success(monkeypatch):
    _patch_clients(monkeypatch)
    with TestClient(app) as c:
        resp = c.get("/api/wave-data", params={"lat": "21.28", "lon": "-157.83"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == ESTIMATE_MESSAGE
    assert body["data"]["waveHeight"] == 0.5
    assert body["data"]["swellHeight"] is None
    assert body["data"]["location"] == {"lat": 21.28, "lon": -157.83}


def test_wave_data_missing_coordinates(monkeypatch):
    _patch_clients(monkeypatch)
    with TestClient(app) as c:
        resp = c.get("/api/wave-data", params={"lon": "-157.83"})
    assert resp.status_code == 400
    assert resp.json()["detail"]["message"] == "Missing latitude or longitude parameters"


def test_wave_data_invalid_coordinates(monkeypatch):
    _patch_clients(monkeypatch)
    with TestClient(app) as c:
        resp = c.get("/api/wave-data", params={"lat": "200", "lon": "abc"})
    assert resp.status_code == 400
    assert resp.json()["detail"]["message"] == "Invalid coordinates"
