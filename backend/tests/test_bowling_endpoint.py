import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from app.main import app
import app.main as main_module


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


def _new_game(client):
    resp = client.post("/api/v0/bowling/games")
    assert resp.status_code == 201
    body = resp.json()
    assert body["rolls"] == []
    return body["id"]


def _roll(client, game_id, pins):
    return client.post(f"/api/v0/bowling/games/{game_id}/rolls", json={"pins": pins})


def test_full_game_flow(client):
    game_id = _new_game(client)
    for _ in range(5):
        for pins in (10, 3, 7):
            assert _roll(client, game_id, pins).status_code == 200
    resp = _roll(client, game_id, 10)
    assert resp.json()["rolls"][-1] == 10

    resp = client.get(f"/api/v0/bowling/games/{game_id}/score")
    assert resp.status_code == 200
    assert resp.json() == {"id": game_id, "total": 200}

    resp = client.get(f"/api/v0/bowling/games/{game_id}")
    data = resp.json()
    assert data["complete"] is True
    assert data["total"] == 200
    assert len(data["frames"]) == 10
    assert data["frames"][0]["kind"] == "strike"
    assert data["frames"][1]["kind"] == "spare"


def test_score_of_incomplete_game_is_conflict(client):
    game_id = _new_game(client)
    _roll(client, game_id, 10)

    resp = client.get(f"/api/v0/bowling/games/{game_id}/score")
    assert resp.status_code == 409
    assert resp.headers["content-type"].startswith("application/problem+json")
    assert resp.json()["code"] == "game_incomplete"

    resp = client.get(f"/api/v0/bowling/games/{game_id}")
    assert resp.status_code == 200
    assert resp.json()["total"] is None
    assert resp.json()["frames"] == []


@pytest.mark.parametrize("payload", [{"pins": 11}, {"pins": -1}, {"pins": True}, {"pins": 3, "x": 1}, {}])
def test_roll_payload_is_validated(client, payload):
    game_id = _new_game(client)
    resp = client.post(f"/api/v0/bowling/games/{game_id}/rolls", json=payload)
    assert resp.status_code == 422


def test_events_endpoint(client):
    game_id = _new_game(client)
    resp = client.post(
        f"/api/v0/bowling/games/{game_id}/events", json={"type": "ROLL", "pins": 4}
    )
    assert resp.status_code == 200
    assert resp.json()["rolls"] == [4]

    resp = client.post(f"/api/v0/bowling/games/{game_id}/events", json={"type": "ROLL"})
    assert resp.status_code == 400
    assert resp.json()["code"] == "bowling_event_invalid"


@pytest.mark.parametrize("pins", [True, "7", 7.0])
def test_events_endpoint_rejects_non_integer_pins(client, pins):
    game_id = _new_game(client)
    resp = client.post(
        f"/api/v0/bowling/games/{game_id}/events", json={"type": "ROLL", "pins": pins}
    )
    assert resp.status_code == 422
    assert client.get(f"/api/v0/bowling/games/{game_id}").json()["rolls"] == []


def test_events_endpoint_rejects_out_of_range_pins(client):
    game_id = _new_game(client)
    resp = client.post(
        f"/api/v0/bowling/games/{game_id}/events", json={"type": "ROLL", "pins": 11}
    )
    assert resp.status_code == 400
    assert client.get(f"/api/v0/bowling/games/{game_id}").json()["rolls"] == []


def test_unknown_game_returns_problem(client):
    resp = client.get("/api/v0/bowling/games/nope")
    assert resp.status_code == 404
    body = resp.json()
    assert body["code"] == "game_not_found"
    assert body["title"] == "Game not found"


def test_delete_game(client):
    game_id = _new_game(client)
    resp = client.delete(f"/api/v0/bowling/games/{game_id}")
    assert resp.status_code == 204
    resp = client.get(f"/api/v0/bowling/games/{game_id}")
    assert resp.status_code == 404


def test_health_checks(client):
    assert client.get("/healthz").json() == {"status": "ok"}
    assert client.get("/api/healthz").json() == {"status": "ok"}


def test_sentry_test_requires_dsn(client):
    resp = client.post("/api/sentry-test")
    assert resp.status_code == 400
    assert resp.json()["code"] == "http_400"


def test_sentry_test_sends_message(client, monkeypatch):
    sent = []

    def fake_capture_message(message, level=None):
        sent.append((message, level))
        return "evt-123"

    monkeypatch.setattr(main_module, "SENTRY_DSN", "https://key@example.invalid/1")
    monkeypatch.setattr(main_module.sentry_sdk, "capture_message", fake_capture_message)

    resp = client.post("/api/sentry-test")
    assert resp.status_code == 200
    assert resp.json() == {"status": "sent", "eventId": "evt-123"}
    assert sent == [("Sentry self-test trigger", "info")]
