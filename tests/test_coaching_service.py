"""
Tests for the coaching features built on the generation orchestrator.
"""

import asyncio
import json
from datetime import datetime

import pytest

from career_coach import fallbacks
from career_coach.entities import PayloadSource, UserProfile
from career_coach.errors import GenerationError, MissingInsightsError, QuotaExceededError
from career_coach.services import CoachingService, GenerationService
from career_coach.utils import derive_cache_key

PROFILE = UserProfile(
    user_id="user-1",
    name="Ada",
    industry="Data Science",
    experience=3,
    skills=("Python", "SQL"),
    bio="Analytics at a retailer",
)


def make_coaching(cache, generator, clock):
    return CoachingService(GenerationService(cache=cache, generator=generator, single_flight=False), clock=clock)


def test_cover_letter_live_and_cached(memory_cache, make_generator, clock):
    generator = make_generator("# Cover Letter\n\nDear Hiring Manager,")
    coaching = make_coaching(memory_cache, generator, clock)

    first = asyncio.run(coaching.cover_letter(PROFILE, "Data Analyst", "Acme", "SQL heavy role"))
    second = asyncio.run(coaching.cover_letter(PROFILE, "Data Analyst", "Acme", "A different description"))

    assert first.payload.startswith("# Cover Letter")
    assert second.source is PayloadSource.CACHE
    assert generator.calls == 1
    assert "SQL heavy role" in generator.prompts[0]
    assert memory_cache.get(derive_cache_key("coverLetter", "Data Analyst", "Acme", "Data Science")) is not None


def test_cover_letter_fallback(memory_cache, make_generator, clock):
    coaching = make_coaching(memory_cache, make_generator(QuotaExceededError("quota")), clock)
    resolution = asyncio.run(coaching.cover_letter(PROFILE, "Data Analyst", "Acme"))

    assert resolution.was_fallback
    assert resolution.payload == fallbacks.cover_letter("Data Analyst", "Acme", PROFILE)


def test_quiz_fallback_is_static_quiz(memory_cache, make_generator, clock):
    coaching = make_coaching(memory_cache, make_generator(GenerationError("down")), clock)
    resolution = asyncio.run(coaching.quiz(PROFILE))
    assert resolution.payload == fallbacks.quiz()


def test_job_questions_fallback_mentions_skills(memory_cache, make_generator, clock):
    coaching = make_coaching(memory_cache, make_generator("not json"), clock)
    resolution = asyncio.run(coaching.job_questions(PROFILE, "Build dashboards"))
    assert resolution.was_fallback
    assert "Python, SQL" in resolution.payload["questions"][1]["question"]


def test_industry_insights_next_update(memory_cache, make_generator, clock):
    coaching = make_coaching(memory_cache, make_generator(QuotaExceededError("quota")), clock)
    resolution = asyncio.run(coaching.industry_insights("Finance"))

    payload = resolution.payload
    assert payload["industry"] == "Finance"
    assert payload["topSkills"] == fallbacks.INDUSTRY_SKILLS["Finance"]["topSkills"]
    next_update = datetime.fromisoformat(payload["nextUpdate"])
    assert next_update.timestamp() == pytest.approx(clock.now + 7 * 24 * 3600)


def test_industry_insights_cache_holds_generated_payload_only(memory_cache, make_generator, clock):
    insights = fallbacks.industry_insights("Finance")
    coaching = make_coaching(memory_cache, make_generator(json.dumps(insights)), clock)

    asyncio.run(coaching.industry_insights("Finance"))
    cached = memory_cache.get(derive_cache_key("industryInsights", "Finance"))

    assert "nextUpdate" not in cached
    assert cached["growthRate"] == 12


def test_skill_roadmap_requires_target_skills(memory_cache, make_generator, clock):
    generator = make_generator("unused")
    coaching = make_coaching(memory_cache, generator, clock)

    with pytest.raises(MissingInsightsError):
        asyncio.run(coaching.skill_roadmap(PROFILE, []))
    assert generator.calls == 0


def test_skill_roadmap_fallback(memory_cache, make_generator, clock):
    coaching = make_coaching(memory_cache, make_generator(QuotaExceededError("quota")), clock)
    target = ["Python", "Machine Learning", "TensorFlow", "SQL", "Statistics"]

    resolution = asyncio.run(coaching.skill_roadmap(PROFILE, target))
    payload = resolution.payload

    assert resolution.was_fallback
    assert payload["skillsToLearn"] == ["Machine Learning", "TensorFlow", "Statistics"]
    assert [p["skills"] for p in payload["phases"]] == [["Machine Learning", "TensorFlow"], ["Statistics"], []]
    assert payload["overallProgress"] == 40
    assert payload["estimatedDuration"] == "3-6 months"


def test_skill_roadmap_key_is_per_user(memory_cache, make_generator, clock):
    roadmap = json.dumps(fallbacks.roadmap(["Docker"]))
    generator = make_generator(roadmap)
    coaching = make_coaching(memory_cache, generator, clock)

    asyncio.run(coaching.skill_roadmap(PROFILE, ["Docker"]))
    asyncio.run(coaching.skill_roadmap(UserProfile(user_id="user-2"), ["Docker"]))

    assert generator.calls == 2


def test_coding_challenges_fallback(memory_cache, make_generator, clock):
    coaching = make_coaching(memory_cache, make_generator(GenerationError("down")), clock)
    resolution = asyncio.run(coaching.coding_challenges("Python", "Easy"))
    assert len(resolution.payload["challenges"]) == 3
    assert resolution.payload["challenges"][0]["language"] == "Python"


def test_question_bank_live_payload_is_filtered(memory_cache, make_generator, clock):
    bank = {"questions": fallbacks.QUESTION_BANK}
    coaching = make_coaching(memory_cache, make_generator(json.dumps(bank)), clock)

    resolution = asyncio.run(coaching.question_bank(company="Google", category="DSA", limit=2))

    questions = resolution.payload["questions"]
    assert resolution.source is PayloadSource.LIVE
    assert [q["frequency"] for q in questions] == [60, 50]


def test_quiz_result_all_correct_skips_tip(memory_cache, make_generator, clock):
    generator = make_generator("Practice more.")
    coaching = make_coaching(memory_cache, generator, clock)
    questions = fallbacks.quiz()["questions"][:2]

    assessment = asyncio.run(
        coaching.quiz_result(PROFILE, questions, [q["correctAnswer"] for q in questions])
    )

    assert assessment["quizScore"] == 100.0
    assert assessment["improvementTip"] is None
    assert generator.calls == 0


def test_quiz_result_wrong_answer_requests_uncached_tip(memory_cache, make_generator, clock):
    generator = make_generator("Review indexing strategies.")
    coaching = make_coaching(memory_cache, generator, clock)
    questions = fallbacks.quiz()["questions"][:2]

    assessment = asyncio.run(coaching.quiz_result(PROFILE, questions, [questions[0]["correctAnswer"], "wrong"]))

    assert assessment["quizScore"] == 50.0
    assert assessment["improvementTip"] == "Review indexing strategies."
    assert "Data Science technical interview questions wrong" in generator.prompts[0]
    assert memory_cache.stats()["count"] == 0


def test_quiz_result_tip_failure_omits_tip(memory_cache, make_generator, clock):
    coaching = make_coaching(memory_cache, make_generator(QuotaExceededError("quota")), clock)
    questions = fallbacks.quiz()["questions"][:1]

    assessment = asyncio.run(coaching.quiz_result(PROFILE, questions, ["wrong"]))

    assert assessment["quizScore"] == 0.0
    assert assessment["improvementTip"] is None
