
import logging

import httpx
import pytest
from fastapi.testclient import TestClient

from writewise.interfaces.http import endpoint
from writewise.interfaces.http.endpoint import app
from writewise.settings import reset_settings

A1_TEXT = "I am Tom. I am ten. I can run and jump. It is a big dog. I like my dog."


@pytest.fixture
def client(monkeypatch):
    """Create test client for the FastAPI app."""
    monkeypatch.delenv("SCORING_PROFILE", raising=False)
    monkeypatch.delenv("MIN_SUBMISSION_CHARS", raising=False)
    reset_settings()
    with TestClient(app) as test_client:
        yield test_client
    reset_settings()


def test_health_endpoint(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["scoring_profile"] == "corrected"
    assert set(data) == {"status", "message", "scoring_profile"}


def test_lifespan_applies_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    reset_settings()
    package_logger = logging.getLogger("writewise")
    try:
        with TestClient(app):
            assert package_logger.level == logging.DEBUG
    finally:
        package_logger.setLevel(logging.NOTSET)
        reset_settings()


def test_app_documents_run_command():
    assert "uvicorn writewise.interfaces.http.endpoint:app" in endpoint.__doc__


def test_root_endpoint(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_assess_plain_text(client):
    response = client.post(
        "/assessments/writing",
        json={"text": A1_TEXT, "user_id": "student-1", "day_id": "day-1", "time_spent": 120},
    )
    assert response.status_code == 200
    data = response.json()

    assessment = data["assessment"]
    assert assessment["score"] == 56
    assert assessment["cefrLevel"] == "A1"
    assert assessment["confidenceLevel"] == 0.9
    assert assessment["wordCount"] == 20
    assert assessment["sublevels"]["taskAchievement"] == 30

    # (55 + 75 + 68 + 40) / 4 = 59.5
    assert data["display"]["averageScore"] == 60
    assert data["display"]["passed"] is True
    assert data["display"]["displayLevel"] == "A1"

    submission = data["submission"]
    assert submission["userId"] == "student-1"
    assert submission["timeSpent"] == 120
    assert submission["feedback"] == "Your writing demonstrates A1 level proficiency. Keep practicing!"


def test_assess_html_content(client):
    html = "<p>My friends are at the park.</p><p>They is happy today.</p>"
    response = client.post("/assessments/writing", json={"html_content": html})
    assert response.status_code == 200
    data = response.json()

    assert data["assessment"]["grammarErrors"] == ["Subject-verb agreement errors"]
    assert data["submission"]["htmlContent"] == html
    assert "<p>" not in data["submission"]["content"]


def test_short_submission_rejected(client):
    # Markup does not count towards the minimum
    response = client.post("/assessments/writing", json={"html_content": "<p>Too short</p>  "})
    assert response.status_code == 400

    response = client.post("/assessments/writing", json={"text": "   Hi   "})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please write at least 10 characters to submit."


def test_empty_submission_rejected(client):
    response = client.post("/assessments/writing", json={})
    assert response.status_code == 400


def test_negative_time_spent_is_invalid(client):
    response = client.post("/assessments/writing", json={"text": A1_TEXT, "time_spent": -1})
    assert response.status_code == 422


def test_legacy_profile_from_settings(client, monkeypatch):
    monkeypatch.setenv("SCORING_PROFILE", "legacy")
    reset_settings()

    response = client.post("/assessments/writing", json={"text": A1_TEXT})
    assert response.status_code == 200
    assessment = response.json()["assessment"]
    assert assessment["score"] == 55
    assert assessment["cefrLevel"] == "A2"
    assert assessment["confidenceLevel"] is None

    profiles = client.get("/assessments/profiles").json()
    assert profiles["active"] == "legacy"


def test_list_profiles(client):
    response = client.get("/assessments/profiles")
    assert response.status_code == 200
    data = response.json()

    assert data["active"] == "corrected"
    names = [profile["name"] for profile in data["profiles"]]
    assert names == ["corrected", "legacy"]
    corrected = data["profiles"][0]
    assert corrected["thresholds"]["B2"] == 74
    assert corrected["weights"]["taskAchievement"] == 0.2


def test_get_known_assignment(client):
    response = client.get("/assignments/example-course/day-2/writing-assignment-1")
    assert response.status_code == 200
    data = response.json()

    assert data["title"] == "Opinion Essay"
    assert data["timeLimit"] == 30
    assert data["timeLimitSeconds"] == 1800
    assert data["found"] is True


def test_get_unknown_assignment_returns_default(client):
    response = client.get("/assignments/example-course/day-42/writing-assignment-1")
    assert response.status_code == 200
    data = response.json()

    assert data["title"] == "Writing Assessment"
    assert data["timeLimitSeconds"] is None
    assert data["found"] is False


@pytest.mark.asyncio
async def test_concurrent_assessments_async():
    """Async client against the ASGI app"""
    reset_settings()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as async_client:
        first = await async_client.post("/assessments/writing", json={"text": A1_TEXT})
        second = await async_client.post("/assessments/writing", json={"text": A1_TEXT})

    assert first.status_code == 200
    assert first.json()["assessment"] == second.json()["assessment"]
    assert first.json()["submission"]["id"] != second.json()["submission"]["id"]
