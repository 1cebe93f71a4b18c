"""
Tests for the pure progress and analytics calculations.
"""

import pytest

from career_coach.services import progress

QUESTIONS = [
    {"question": "Q1", "correctAnswer": "a", "explanation": "e1"},
    {"question": "Q2", "correctAnswer": "b", "explanation": "e2"},
    {"question": "Q3", "correctAnswer": "c", "explanation": "e3"},
    {"question": "Q4", "correctAnswer": "d", "explanation": "e4"},
]


def test_score_quiz_all_correct():
    result = progress.score_quiz(QUESTIONS, ["a", "b", "c", "d"])
    assert result["score"] == 100.0
    assert result["wrongAnswers"] == []


def test_score_quiz_mixed():
    result = progress.score_quiz(QUESTIONS, ["a", "x", "c", "y"])
    assert result["score"] == 50.0
    assert [r["question"] for r in result["wrongAnswers"]] == ["Q2", "Q4"]
    assert result["questionResults"][1] == {
        "question": "Q2",
        "answer": "b",
        "userAnswer": "x",
        "isCorrect": False,
        "explanation": "e2",
    }


def test_score_quiz_missing_answers_are_wrong():
    result = progress.score_quiz(QUESTIONS, ["a"])
    assert result["score"] == 25.0
    assert result["questionResults"][3]["userAnswer"] is None


def test_summarize_assessments():
    assessments = [
        {"quizScore": 80, "category": "Technical", "createdAt": "2026-01-01T00:00:00"},
        {"quizScore": 65, "category": "Technical", "createdAt": "2026-01-03T00:00:00"},
        {"quizScore": 90, "category": "Behavioral", "createdAt": "2026-01-02T00:00:00"},
    ]
    summary = progress.summarize_assessments(assessments)

    assert summary["totalAssessments"] == 3
    assert summary["avgScore"] == 78.3
    technical = next(c for c in summary["categoryData"] if c["category"] == "Technical")
    assert technical["avgScore"] == 72.5
    assert technical["count"] == 2
    assert [a["quizScore"] for a in summary["recentAssessments"]] == [65, 90, 80]


def test_summarize_assessments_keeps_five_most_recent():
    assessments = [
        {"quizScore": i * 10, "category": "Technical", "createdAt": f"2026-01-0{i}"} for i in range(1, 8)
    ]
    recent = progress.summarize_assessments(assessments)["recentAssessments"]
    assert [a["createdAt"] for a in recent] == [f"2026-01-0{i}" for i in (7, 6, 5, 4, 3)]


def test_summarize_no_assessments():
    summary = progress.summarize_assessments([])
    assert summary == {"totalAssessments": 0, "avgScore": 0.0, "categoryData": [], "recentAssessments": []}


def test_skills_to_learn_keeps_target_order():
    assert progress.skills_to_learn(["Python"], ["SQL", "Python", "Docker"]) == ["SQL", "Docker"]


@pytest.mark.parametrize(
    ("current", "target", "expected"),
    [
        ([], ["a", "b"], 0),
        (["a"], ["a", "b"], 50),
        (["a", "b", "z"], ["a", "b"], 100),
        (["a"], ["a", "b", "c"], 33),
        (["a", "b"], ["a", "b", "c"], 67),
        (["a"], [], 0),
    ],
)
def test_roadmap_progress(current, target, expected):
    assert progress.roadmap_progress(current, target) == expected


def test_roadmap_progress_rounds_halves_up():
    target = [str(i) for i in range(8)]
    assert progress.roadmap_progress(["0"], target) == 13  # 12.5%


def test_merge_skills_deduplicates_in_order():
    assert progress.merge_skills(["Python", "SQL"], ["Docker", "Python"]) == ["Python", "SQL", "Docker"]


def test_challenge_stats():
    challenges = [
        {"difficulty": "Easy", "language": "Python", "status": "solved", "submissions": 2},
        {"difficulty": "Easy", "language": "JavaScript", "status": "attempted", "submissions": 1},
        {"difficulty": "Medium", "language": "Python"},
    ]
    stats = progress.challenge_stats(challenges)
    assert stats == {
        "total": 3,
        "solved": 1,
        "attempted": 1,
        "notStarted": 1,
        "byDifficulty": {"easy": 2, "medium": 1, "hard": 0},
        "byLanguage": {"Python": 2, "JavaScript": 1},
        "totalSubmissions": 3,
    }


def test_evaluate_submission_all_passed():
    challenge = {"title": "Two Sum", "submissions": 1, "passed": 0, "status": "attempted"}
    updated = progress.evaluate_submission(challenge, [{"passed": True}, {"passed": True}])

    assert updated["status"] == "solved"
    assert updated["submissions"] == 2
    assert updated["passed"] == 1
    assert updated["passedTests"] == 2
    assert updated["allPassed"] is True
    assert challenge["submissions"] == 1  # input untouched


def test_evaluate_submission_partial():
    updated = progress.evaluate_submission({"title": "Two Sum"}, [{"passed": True}, {"passed": False}])
    assert updated["status"] == "attempted"
    assert updated["submissions"] == 1
    assert updated["passed"] == 0
    assert updated["totalTests"] == 2
