"""Career-coaching features built on the generation orchestrator.

Each method assembles a GenerationRequest (prompt, cache key, payload shape
and fallback) for one feature and hands it to GenerationService. The
fallbacks are bound with ``functools.partial`` so they capture the request
parameters without running until the orchestrator needs them.
"""

import time
from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from functools import partial

from career_coach import fallbacks, prompts
from career_coach.dto.payloads import (
    CodingChallengesPayload,
    IndustryInsightsPayload,
    JobQuestionsPayload,
    QuestionBankPayload,
    QuizPayload,
    RoadmapPayload,
)
from career_coach.entities import GenerationRequest, Resolution, UserProfile
from career_coach.errors import MissingInsightsError
from career_coach.logging import get_logger
from career_coach.parsing import JsonShape, TextShape
from career_coach.services import progress
from career_coach.services.generation_service import GenerationService
from career_coach.utils import derive_cache_key

logger = get_logger("coaching")

INSIGHTS_REFRESH = timedelta(days=7)
ROADMAP_DURATION = "3-6 months"

TEXT = TextShape()
QUIZ = JsonShape(QuizPayload, name="quiz")
JOB_QUESTIONS = JsonShape(JobQuestionsPayload, name="job_questions")
INDUSTRY_INSIGHTS = JsonShape(IndustryInsightsPayload, name="industry_insights")
ROADMAP = JsonShape(RoadmapPayload, name="skill_roadmap")
CODING_CHALLENGES = JsonShape(CodingChallengesPayload, name="coding_challenges")
QUESTION_BANK = JsonShape(QuestionBankPayload, name="question_bank")


def _no_tip() -> None:
    return None


class CoachingService:
    """Generative career-coaching features.

    Every feature method returns a Resolution, so callers can tell live or
    cached content from fallback content through ``was_fallback``.

    Example:
        ```python
        coaching = CoachingService(generation_service)
        resolution = await coaching.quiz(profile)
        questions = resolution.payload["questions"]
        ```
    """

    def __init__(
        self,
        generation_service: GenerationService,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the coaching service.

        Args:
            generation_service: Orchestrator used for every generative call.
            clock: Time source for insight refresh dates (seconds since epoch).
        """
        self._generation = generation_service
        self._clock = clock

    @property
    def generation(self) -> GenerationService:
        return self._generation

    async def cover_letter(
        self,
        profile: UserProfile,
        job_title: str,
        company_name: str,
        job_description: str = "",
    ) -> Resolution:
        """Markdown cover letter for a job application.

        The job description shapes the prompt but is not part of the cache
        key, so repeat requests for the same role and company share a letter.
        """
        return await self._generation.resolve_with_source(
            GenerationRequest(
                operation="cover_letter",
                prompt=prompts.cover_letter(job_title, company_name, job_description, profile),
                shape=TEXT,
                cache_key=derive_cache_key("coverLetter", job_title, company_name, profile.industry),
                fallback=partial(fallbacks.cover_letter, job_title, company_name, profile),
            )
        )

    async def quiz(self, profile: UserProfile) -> Resolution:
        """Ten multiple-choice questions for the user's industry and skills."""
        return await self._generation.resolve_with_source(
            GenerationRequest(
                operation="quiz",
                prompt=prompts.quiz(profile.industry, profile.skills),
                shape=QUIZ,
                cache_key=derive_cache_key("quiz", profile.industry, profile.skills),
                fallback=fallbacks.quiz,
            )
        )

    async def job_questions(self, profile: UserProfile, job_description: str = "") -> Resolution:
        """Interview questions targeted at a job description."""
        skills_text = ", ".join(profile.skills)
        return await self._generation.resolve_with_source(
            GenerationRequest(
                operation="job_questions",
                prompt=prompts.job_questions(profile.skills, job_description),
                shape=JOB_QUESTIONS,
                cache_key=derive_cache_key("jobQuestions", profile.skills, job_description),
                fallback=partial(fallbacks.job_questions, skills_text),
            )
        )

    async def industry_insights(self, industry: str) -> Resolution:
        """Market insights for an industry with the date they should be refreshed.

        Returns:
            Resolution whose payload is the insights plus ``industry`` and
            an ISO-8601 ``nextUpdate`` seven days from now
        """
        resolution = await self._generation.resolve_with_source(
            GenerationRequest(
                operation="industry_insights",
                prompt=prompts.industry_insights(industry),
                shape=INDUSTRY_INSIGHTS,
                cache_key=derive_cache_key("industryInsights", industry),
                fallback=partial(fallbacks.industry_insights, industry),
            )
        )
        now = datetime.fromtimestamp(self._clock(), tz=timezone.utc)
        return replace(
            resolution,
            payload={
                "industry": industry,
                **resolution.payload,
                "nextUpdate": (now + INSIGHTS_REFRESH).isoformat(),
            },
        )

    async def skill_roadmap(self, profile: UserProfile, target_skills: Sequence[str]) -> Resolution:
        """Three-phase plan to learn the target skills the user lacks.

        Args:
            profile: The user; ``user_id`` scopes the cache key
            target_skills: Industry top (or recommended) skills

        Returns:
            Resolution whose payload holds the phases plus skill lists,
            overall progress and estimated duration

        Raises:
            MissingInsightsError: If there are no target skills
        """
        if not target_skills:
            raise MissingInsightsError()

        to_learn = progress.skills_to_learn(profile.skills, target_skills)
        resolution = await self._generation.resolve_with_source(
            GenerationRequest(
                operation="skill_roadmap",
                prompt=prompts.skill_roadmap(profile, to_learn),
                shape=ROADMAP,
                cache_key=derive_cache_key("skillRoadmap", profile.user_id, to_learn),
                fallback=partial(fallbacks.roadmap, to_learn),
            )
        )
        return replace(
            resolution,
            payload={
                "userId": profile.user_id,
                "currentSkills": list(profile.skills),
                "targetSkills": list(target_skills),
                "skillsToLearn": to_learn,
                "phases": resolution.payload["phases"],
                "overallProgress": progress.roadmap_progress(profile.skills, target_skills),
                "estimatedDuration": ROADMAP_DURATION,
            },
        )

    async def coding_challenges(self, language: str = "JavaScript", difficulty: str | None = None) -> Resolution:
        return await self._generation.resolve_with_source(
            GenerationRequest(
                operation="coding_challenges",
                prompt=prompts.coding_challenges(language, difficulty),
                shape=CODING_CHALLENGES,
                cache_key=derive_cache_key("codingChallenges", language, difficulty),
                fallback=partial(fallbacks.coding_challenges, language, difficulty),
            )
        )

    async def question_bank(
        self,
        company: str | None = None,
        category: str | None = None,
        difficulty: str | None = None,
        role: str | None = None,
        limit: int = 20,
    ) -> Resolution:
        """Frequently asked interview questions matching the filters.

        Generated banks are filtered and limited the same way as the static
        one, since the model does not always respect the requested filters.
        """
        resolution = await self._generation.resolve_with_source(
            GenerationRequest(
                operation="question_bank",
                prompt=prompts.question_bank(company, category, difficulty, role, limit),
                shape=QUESTION_BANK,
                cache_key=derive_cache_key("questionBank", company, category, difficulty, role, limit),
                fallback=partial(fallbacks.question_bank, company, category, difficulty, role, limit),
            )
        )
        if resolution.was_fallback:
            return resolution
        questions = fallbacks.filter_questions(
            resolution.payload["questions"], company, category, difficulty, role, limit
        )
        return replace(resolution, payload={"questions": questions})

    async def improvement_tip(self, profile: UserProfile, wrong_answers: list[dict]) -> Resolution:
        """One-off encouragement tip; never cached, ``None`` on failure."""
        return await self._generation.resolve_with_source(
            GenerationRequest(
                operation="improvement_tip",
                prompt=prompts.improvement_tip(profile.industry, wrong_answers),
                shape=TEXT,
                cache_key=None,
                fallback=_no_tip,
            )
        )

    async def quiz_result(
        self,
        profile: UserProfile,
        questions: Sequence[dict],
        answers: Sequence[str | None],
        category: str = "Technical",
    ) -> dict:
        """Score a finished quiz and attach an improvement tip when needed.

        The tip is only requested when at least one answer is wrong.

        Returns:
            Assessment dict with ``quizScore``, ``questions``, ``category``
            and ``improvementTip``
        """
        scored = progress.score_quiz(questions, answers)

        tip = None
        if scored["wrongAnswers"]:
            tip = (await self.improvement_tip(profile, scored["wrongAnswers"])).payload
        else:
            logger.debug("improvement_tip_skipped", user_id=profile.user_id)

        return {
            "userId": profile.user_id,
            "quizScore": scored["score"],
            "questions": scored["questionResults"],
            "category": category,
            "improvementTip": tip,
        }
