"""
Tests for the career coach API.
"""

import json

import pytest
from fastapi.testclient import TestClient

from career_coach import fallbacks
from career_coach.api.app import app
from career_coach.api.dependencies import install
from career_coach.errors import QuotaExceededError
from career_coach.repositories import InMemoryCacheRepository

PROFILE = {
    "user_id": "user-1",
    "name": "Ada",
    "industry": "Data Science",
    "experience": 3,
    "skills": ["Python", "SQL"],
    "bio": "Analytics at a retailer",
}


@pytest.fixture
def client(make_generator):
    """Create a test client with generation unavailable (quota exhausted)."""
    with TestClient(app) as client:
        install(app, cache=InMemoryCacheRepository(ttl=60), generator=make_generator(QuotaExceededError("429 quota")))
        yield client


@pytest.fixture
def live_client(make_generator):
    """Create a test client whose generator returns a valid quiz."""
    with TestClient(app) as client:
        install(app, cache=InMemoryCacheRepository(ttl=60), generator=make_generator(json.dumps(fallbacks.quiz())))
        yield client


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Career Coach API"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "cache_healthy": True, "generator_available": None}


def test_cover_letter_fallback(client):
    response = client.post(
        "/cover-letters",
        json={"profile": PROFILE, "job_title": "Data Analyst", "company_name": "Acme"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["is_fallback"] is True
    assert data["source"] == "fallback"
    assert "Data Analyst position at Acme" in data["data"]


def test_quiz_live_then_cached(live_client):
    first = live_client.post("/interview/quiz", json={"profile": PROFILE}).json()
    second = live_client.post("/interview/quiz", json={"profile": PROFILE}).json()

    assert first["source"] == "live"
    assert second["source"] == "cache"
    assert first["is_fallback"] is False
    assert len(second["data"]["questions"]) == 10


def test_quiz_results(client):
    questions = fallbacks.quiz()["questions"][:2]
    response = client.post(
        "/interview/quiz/results",
        json={"profile": PROFILE, "questions": questions, "answers": [questions[0]["correctAnswer"], "nope"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["quiz_score"] == 50.0
    assert data["improvement_tip"] is None
    assert data["questions"][1]["isCorrect"] is False


def test_job_questions(client):
    response = client.post("/interview/job-questions", json={"profile": PROFILE})
    assert response.status_code == 200
    assert len(response.json()["data"]["questions"]) == 8


def test_industry_insights(client):
    response = client.get("/insights/Finance")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["industry"] == "Finance"
    assert "nextUpdate" in data


def test_roadmap_without_targets_is_bad_request(client):
    response = client.post("/roadmaps", json={"profile": PROFILE, "target_skills": []})
    assert response.status_code == 400
    assert response.json()["detail"] == "Industry insights not found. Please set your industry first."


def test_roadmap(client):
    response = client.post(
        "/roadmaps",
        json={"profile": PROFILE, "target_skills": ["Python", "Docker", "Kubernetes"]},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["skillsToLearn"] == ["Docker", "Kubernetes"]
    assert data["overallProgress"] == 33


def test_roadmap_progress(client):
    response = client.post(
        "/roadmaps/progress",
        json={"current_skills": ["Python"], "completed_skills": ["Docker"], "target_skills": ["Docker", "Go"]},
    )
    assert response.json() == {"skills": ["Python", "Docker"], "overall_progress": 50}


def test_coding_challenges(client):
    response = client.post("/coding-challenges", json={"language": "Python", "difficulty": "Medium"})
    assert response.status_code == 200
    challenges = response.json()["data"]["challenges"]
    assert [c["difficulty"] for c in challenges] == ["Medium", "Medium"]


def test_coding_challenges_rejects_unknown_difficulty(client):
    response = client.post("/coding-challenges", json={"difficulty": "Impossible"})
    assert response.status_code == 422


def test_challenge_stats_and_submission(client):
    stats = client.post(
        "/coding-challenges/stats",
        json={"challenges": [{"difficulty": "Easy", "language": "Python", "status": "solved", "submissions": 1}]},
    ).json()
    assert stats["solved"] == 1

    submission = client.post(
        "/coding-challenges/submissions",
        json={
            "challenge": {"title": "Two Sum", "submissions": 0, "passed": 0},
            "code": "def two_sum(): ...",
            "test_results": [{"passed": True}, {"passed": True}],
        },
    ).json()
    assert submission["status"] == "solved"
    assert submission["userCode"] == "def two_sum(): ..."


def test_question_bank(client):
    response = client.get("/questions", params={"company": "Google", "limit": 3})
    assert response.status_code == 200
    questions = response.json()["data"]["questions"]
    assert len(questions) == 3
    assert questions[0]["frequency"] == 60


def test_analytics(client):
    response = client.post(
        "/analytics",
        json={"assessments": [{"quizScore": 70, "category": "Technical"}, {"quizScore": 90, "category": "Technical"}]},
    )
    data = response.json()
    assert data["totalAssessments"] == 2
    assert data["avgScore"] == 80.0


def test_cache_stats_and_clear(live_client):
    live_client.post("/interview/quiz", json={"profile": PROFILE})

    stats = live_client.get("/cache/stats").json()
    assert stats["cache"]["count"] == 1
    assert stats["generation"]["live_successes"] == 1
    assert stats["model"] == "fake-model"

    cleared = live_client.delete("/cache").json()
    assert cleared["deleted_count"] == 1
    assert live_client.get("/cache/stats").json()["cache"]["count"] == 0
