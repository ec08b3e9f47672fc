import json

from starlette.testclient import TestClient

from swimscore.api.app import app


def test_post_swimscore_returns_wire_format(payload):
    with TestClient(app) as c:
        resp = c.post("/api/swimscore", json=payload)
    assert resp.status_code == 200
    data = resp.json()
    assert data["totalScore"] == 53
    assert data["breakdown"] == {"safety": 60, "comfort": 53, "performance": 37}
    assert data["explanation"][0] == "🤔 Moderate conditions; swim with caution."
    assert data["recommendation"] == "Consider caution: check current conditions."
    assert data["bestTimeToSwim"] == "Afternoon (2 PM – 4 PM)"


def test_get_swimscore_is_not_allowed():
    with TestClient(app) as c:
        resp = c.get("/api/swimscore")
    assert resp.status_code == 405


def test_missing_field_is_a_client_error(payload):
    del payload["windGust"]
    with TestClient(app) as c:
        resp = c.post("/api/swimscore", json=payload)
    assert resp.status_code == 400
    assert resp.json()["detail"] == {"code": "INVALID_INPUT", "message": "Invalid input data"}


def test_numeric_weather_code_is_a_client_error(payload):
    payload["weatherCode"] = 95
    with TestClient(app) as c:
        resp = c.post("/api/swimscore", json=payload)
    assert resp.status_code == 400


def test_malformed_json_is_a_client_error():
    with TestClient(app) as c:
        resp = c.post(
            "/api/swimscore", content=b"{not json", headers={"Content-Type": "application/json"}
        )
    assert resp.status_code == 400


def test_unexpected_fault_is_reported_generically(monkeypatch, payload):
    import swimscore.api.routes as routes

    def boom(_inputs):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(routes, "compute_swim_score", boom)
    with TestClient(app) as c:
        resp = c.post("/api/swimscore", json=payload)
    assert resp.status_code == 500
    assert resp.json()["detail"] == {"code": "INTERNAL_ERROR", "message": "Internal server error"}
    assert "secret" not in resp.text


def test_health():
    with TestClient(app) as c:
        resp = c.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_oversized_integer_is_a_client_error(payload):
    body = json.dumps(payload).replace('"windSpeed": 8', '"windSpeed": 1' + "0" * 400)
    with TestClient(app) as c:
        resp = c.post("/api/swimscore", content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "INVALID_INPUT"
