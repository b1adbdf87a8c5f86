import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from mind_it.main import MindItApp
from mind_it.services.database import LocalStore
from mind_it.services.ticker import SessionTicker
from mind_it.web.app import create_app

@pytest.fixture
def test_client(mock_proxy):
    """Create a test client backed by in-memory state"""
    def factory():
        return MindItApp(
            store=LocalStore(":memory:"),
            proxy=mock_proxy,
            ticker=SessionTicker(interval_seconds=3600)
        )

    with TestClient(create_app(factory)) as client:
        yield client

def _login(client):
    client.post("/api/navigate", json={"action": "login"})
    response = client.post("/api/navigate", json={
        "action": "submit",
        "form": {"email": "a@b.c", "password": "secret"}
    })
    assert response.status_code == 200
    return response.json()

def test_landing_page(test_client):
    response = test_client.get("/")
    assert response.status_code == 200
    assert "Rest &bull; Reset &bull; Report" in response.text

def test_initial_state(test_client):
    data = test_client.get("/api/state").json()
    assert data["screen"] == "LANDING"
    assert data["chat_available"] is False
    assert data["report"]["total_time"] == "0h 0m"

def test_activities(test_client):
    data = test_client.get("/api/activities").json()
    assert [a["name"] for a in data][:2] == ["Reading", "Gaming"]

def test_assessment_flow(test_client):
    """Test that continue is refused until every question is answered"""
    test_client.post("/api/navigate", json={"action": "get_started"})
    for question_id in (1, 2):
        test_client.post("/api/assessment/answer", json={"question_id": question_id, "option": "Yes"})

    response = test_client.post("/api/navigate", json={"action": "continue"})
    assert response.status_code == 400

    test_client.post("/api/assessment/answer", json={"question_id": 3, "option": "No"})
    response = test_client.post("/api/navigate", json={"action": "continue"})
    assert response.status_code == 200
    assert response.json()["screen"] == "JOURNALIST_INTRO"

def test_session_round_trip(test_client):
    _login(test_client)
    response = test_client.post("/api/sessions/start", json={"activity": "Music"})
    assert response.status_code == 200
    assert response.json()["screen"] == "SESSION"
    assert response.json()["session"]["is_running"] is True

    page = test_client.get("/")
    assert "Stop Session" in page.text

    response = test_client.post("/api/sessions/stop")
    data = response.json()
    assert data["record"]["activity"] == "Music"
    assert data["record"]["duration_seconds"] == 0
    assert data["state"]["screen"] == "REPORT"

    report = test_client.get("/api/report").json()
    assert report["session_count"] == 1
    assert report["chart"] == [{"name": "Music", "seconds": 0, "color": "#f59e0b"}]

def test_stop_without_session(test_client):
    response = test_client.post("/api/sessions/stop")
    assert response.status_code == 409

def test_invalid_activity(test_client):
    _login(test_client)
    response = test_client.post("/api/sessions/start", json={"activity": "Sleeping"})
    assert response.status_code == 422

def test_chat_endpoints(test_client, mock_proxy):
    _login(test_client)
    assert test_client.post("/api/chat/open").status_code == 200

    response = test_client.post("/api/chat", json={"text": "Hello", "mode": "fast"})
    assert response.status_code == 200
    data = response.json()
    assert data["reply"]["text"] == "Take a slow, deep breath."
    assert data["chat"]["mode"] == "fast"
    assert len(data["chat"]["messages"]) == 3

    cleared = test_client.delete("/api/chat").json()
    assert len(cleared["messages"]) == 1

def test_blank_chat_rejected(test_client):
    response = test_client.post("/api/chat", json={"text": "  "})
    assert response.status_code == 409

def test_chat_hidden_on_landing(test_client):
    assert test_client.post("/api/chat/open").status_code == 409

def test_unknown_route(test_client):
    response = test_client.get("/api/nothing")
    assert response.status_code == 404
    assert response.json()["detail"] == "Not found"

def test_unexpected_error_returns_json(mock_proxy):
    """Test that an unhandled failure answers 500 JSON instead of plain text"""
    def factory():
        return MindItApp(
            store=LocalStore(":memory:"),
            proxy=mock_proxy,
            ticker=SessionTicker(interval_seconds=3600)
        )

    with patch.object(MindItApp, 'report', side_effect=RuntimeError("Test error")):
        with TestClient(create_app(factory), raise_server_exceptions=False) as client:
            response = client.get("/api/report")

    assert response.status_code == 500
    assert response.headers["content-type"] == "application/json"
    assert response.json()["detail"] == "Test error"
