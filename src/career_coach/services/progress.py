"""Pure progress and analytics calculations.

Nothing here touches the cache or the generator; inputs are plain dicts as
stored alongside generated payloads (camelCase keys).
"""

import math
from collections.abc import Iterable, Sequence
from typing import Any

CHALLENGE_DIFFICULTIES = ("Easy", "Medium", "Hard")
RECENT_ASSESSMENTS = 5


def _percent(part: int, whole: int) -> int:
    """Integer percentage, halves rounded up."""
    if whole <= 0:
        return 0
    return math.floor(part / whole * 100 + 0.5)


def _one_decimal(scores: Sequence[float]) -> float:
    return round(sum(scores) / len(scores), 1) if scores else 0.0


def score_quiz(questions: Sequence[dict], answers: Sequence[str | None]) -> dict[str, Any]:
    """Compare answers with each question's correct answer.

    Missing answers count as wrong.

    Args:
        questions: Quiz questions with ``question``, ``correctAnswer`` and ``explanation``
        answers: The user's answers, by question position

    Returns:
        Dict with ``questionResults``, ``wrongAnswers`` and percentage ``score``
    """
    results = []
    for index, q in enumerate(questions):
        user_answer = answers[index] if index < len(answers) else None
        results.append(
            {
                "question": q["question"],
                "answer": q["correctAnswer"],
                "userAnswer": user_answer,
                "isCorrect": q["correctAnswer"] == user_answer,
                "explanation": q.get("explanation", ""),
            }
        )

    correct = sum(1 for r in results if r["isCorrect"])
    score = correct / len(results) * 100 if results else 0.0
    return {
        "questionResults": results,
        "wrongAnswers": [r for r in results if not r["isCorrect"]],
        "score": score,
    }


def summarize_assessments(assessments: Iterable[dict]) -> dict[str, Any]:
    """Aggregate quiz assessments for the dashboard.

    Args:
        assessments: Dicts with ``quizScore``, ``category`` and optional ``createdAt``

    Returns:
        Totals, average score (1 decimal), per-category breakdown and the
        five most recent assessments
    """
    ordered = sorted(assessments, key=lambda a: str(a.get("createdAt") or ""), reverse=True)
    scores = [float(a["quizScore"]) for a in ordered]

    by_category: dict[str, list[float]] = {}
    for a in ordered:
        by_category.setdefault(a.get("category") or "Technical", []).append(float(a["quizScore"]))

    return {
        "totalAssessments": len(ordered),
        "avgScore": _one_decimal(scores),
        "categoryData": [
            {
                "category": category,
                "avgScore": _one_decimal(category_scores),
                "count": len(category_scores),
                "scores": category_scores,
            }
            for category, category_scores in by_category.items()
        ],
        "recentAssessments": ordered[:RECENT_ASSESSMENTS],
    }


def skills_to_learn(current_skills: Iterable[str], target_skills: Iterable[str]) -> list[str]:
    """Target skills the user does not have yet, in target order."""
    held = set(current_skills)
    return [skill for skill in target_skills if skill not in held]


def roadmap_progress(current_skills: Iterable[str], target_skills: Sequence[str]) -> int:
    """Percentage of target skills already held, 0 when there are no targets."""
    held = set(current_skills)
    completed = sum(1 for skill in target_skills if skill in held)
    return _percent(completed, len(target_skills))


def merge_skills(current: Iterable[str], completed: Iterable[str]) -> list[str]:
    """Union of both lists keeping first-seen order."""
    return list(dict.fromkeys([*current, *completed]))


def challenge_stats(challenges: Iterable[dict]) -> dict[str, Any]:
    """Count challenges by status, difficulty and language.

    Args:
        challenges: Challenge dicts; ``status`` defaults to ``not-started``
            and ``submissions`` to 0

    Returns:
        Stats dict in the dashboard's camelCase layout
    """
    challenges = list(challenges)
    statuses = [c.get("status", "not-started") for c in challenges]

    by_language: dict[str, int] = {}
    for c in challenges:
        language = c.get("language") or "JavaScript"
        by_language[language] = by_language.get(language, 0) + 1

    return {
        "total": len(challenges),
        "solved": statuses.count("solved"),
        "attempted": statuses.count("attempted"),
        "notStarted": statuses.count("not-started"),
        "byDifficulty": {
            level.lower(): sum(1 for c in challenges if c.get("difficulty") == level)
            for level in CHALLENGE_DIFFICULTIES
        },
        "byLanguage": by_language,
        "totalSubmissions": sum(int(c.get("submissions", 0)) for c in challenges),
    }


def evaluate_submission(challenge: dict, test_results: Sequence[dict]) -> dict[str, Any]:
    """Apply a code submission's test results to a challenge.

    Args:
        challenge: The challenge with its ``submissions`` and ``passed`` counters
        test_results: One dict per test case with a boolean ``passed``

    Returns:
        A new challenge dict with updated counters and status, plus
        ``allPassed``, ``passedTests`` and ``totalTests``
    """
    passed_tests = sum(1 for r in test_results if r.get("passed"))
    all_passed = passed_tests == len(test_results)

    updated = dict(challenge)
    updated["submissions"] = int(challenge.get("submissions", 0)) + 1
    updated["passed"] = int(challenge.get("passed", 0)) + (1 if all_passed else 0)
    updated["status"] = "solved" if all_passed else "attempted"
    updated["testResults"] = list(test_results)
    updated["allPassed"] = all_passed
    updated["passedTests"] = passed_tests
    updated["totalTests"] = len(test_results)
    return updated
