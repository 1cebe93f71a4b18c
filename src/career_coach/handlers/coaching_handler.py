"""HTTP handlers for coaching features.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

from fastapi import HTTPException, status

from career_coach.dto import (
    AnalyticsRequest,
    ChallengeStatsRequest,
    CodingChallengesRequest,
    CoverLetterRequest,
    GeneratedResponse,
    JobQuestionsRequest,
    ProfileRequest,
    QuizRequest,
    QuizResultRequest,
    QuizResultResponse,
    RoadmapProgressRequest,
    RoadmapProgressResponse,
    RoadmapRequest,
    SubmissionRequest,
)
from career_coach.entities import Resolution, UserProfile
from career_coach.errors import MissingInsightsError
from career_coach.services import CoachingService, progress


def to_profile(request: ProfileRequest) -> UserProfile:
    """Convert a profile DTO into the domain entity."""
    return UserProfile(
        user_id=request.user_id,
        name=request.name,
        industry=request.industry,
        experience=request.experience,
        skills=tuple(request.skills),
        bio=request.bio,
    )


def to_response(resolution: Resolution) -> GeneratedResponse:
    return GeneratedResponse(
        data=resolution.payload,
        source=resolution.source.value,
        is_fallback=resolution.was_fallback,
    )


def _failed(action: str, e: Exception) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}: {e}",
    )


class CoachingHandler:
    """HTTP handlers for coaching features.

    This handler delegates business logic to CoachingService and the pure
    progress functions, and handles HTTP-specific concerns like:
    - Converting DTOs to entities and resolutions to DTOs
    - Setting appropriate status codes
    - Error handling and responses

    Generation failures never reach this layer: they resolve to fallback
    content with ``is_fallback`` set.

    Example:
        ```python
        handler = CoachingHandler(coaching_service=coaching)

        @app.post("/interview/quiz", response_model=GeneratedResponse)
        async def quiz(request: QuizRequest):
            return await handler.quiz(request)
        ```
    """

    def __init__(self, coaching_service: CoachingService) -> None:
        """Initialize the coaching handler.

        Args:
            coaching_service: The coaching service for business logic (required).
        """
        self._coaching = coaching_service

    async def cover_letter(self, request: CoverLetterRequest) -> GeneratedResponse:
        """Handle POST /cover-letters requests."""
        try:
            resolution = await self._coaching.cover_letter(
                to_profile(request.profile),
                job_title=request.job_title,
                company_name=request.company_name,
                job_description=request.job_description,
            )
        except Exception as e:
            raise _failed("generate cover letter", e) from e
        return to_response(resolution)

    async def quiz(self, request: QuizRequest) -> GeneratedResponse:
        """Handle POST /interview/quiz requests."""
        try:
            resolution = await self._coaching.quiz(to_profile(request.profile))
        except Exception as e:
            raise _failed("generate quiz", e) from e
        return to_response(resolution)

    async def quiz_result(self, request: QuizResultRequest) -> QuizResultResponse:
        """Handle POST /interview/quiz/results requests.

        Args:
            request: The quiz questions with the user's answers

        Returns:
            QuizResultResponse with score, per-question results and optional tip
        """
        questions = [q.model_dump(by_alias=True) for q in request.questions]
        try:
            assessment = await self._coaching.quiz_result(
                to_profile(request.profile),
                questions,
                request.answers,
                category=request.category,
            )
        except Exception as e:
            raise _failed("save quiz result", e) from e

        return QuizResultResponse(
            quiz_score=assessment["quizScore"],
            questions=assessment["questions"],
            category=assessment["category"],
            improvement_tip=assessment["improvementTip"],
        )

    async def job_questions(self, request: JobQuestionsRequest) -> GeneratedResponse:
        """Handle POST /interview/job-questions requests."""
        try:
            resolution = await self._coaching.job_questions(
                to_profile(request.profile), request.job_description
            )
        except Exception as e:
            raise _failed("generate interview questions", e) from e
        return to_response(resolution)

    async def industry_insights(self, industry: str) -> GeneratedResponse:
        """Handle GET /insights/{industry} requests."""
        try:
            resolution = await self._coaching.industry_insights(industry)
        except Exception as e:
            raise _failed("generate industry insights", e) from e
        return to_response(resolution)

    async def skill_roadmap(self, request: RoadmapRequest) -> GeneratedResponse:
        """Handle POST /roadmaps requests.

        Raises:
            HTTPException: 400 if there are no target skills, 500 on other errors
        """
        try:
            resolution = await self._coaching.skill_roadmap(
                to_profile(request.profile), request.target_skills
            )
        except MissingInsightsError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.detail) from e
        except Exception as e:
            raise _failed("generate skill roadmap", e) from e
        return to_response(resolution)

    async def roadmap_progress(self, request: RoadmapProgressRequest) -> RoadmapProgressResponse:
        """Handle POST /roadmaps/progress requests."""
        skills = progress.merge_skills(request.current_skills, request.completed_skills)
        return RoadmapProgressResponse(
            skills=skills,
            overall_progress=progress.roadmap_progress(skills, request.target_skills),
        )

    async def coding_challenges(self, request: CodingChallengesRequest) -> GeneratedResponse:
        """Handle POST /coding-challenges requests."""
        try:
            resolution = await self._coaching.coding_challenges(request.language, request.difficulty)
        except Exception as e:
            raise _failed("generate coding challenges", e) from e
        return to_response(resolution)

    async def challenge_stats(self, request: ChallengeStatsRequest) -> dict:
        """Handle POST /coding-challenges/stats requests."""
        return progress.challenge_stats(request.challenges)

    async def submit_challenge(self, request: SubmissionRequest) -> dict:
        """Handle POST /coding-challenges/submissions requests."""
        results = [r.model_dump() for r in request.test_results]
        updated = progress.evaluate_submission(request.challenge, results)
        updated["userCode"] = request.code
        return updated

    async def question_bank(
        self,
        company: str | None = None,
        category: str | None = None,
        difficulty: str | None = None,
        role: str | None = None,
        limit: int = 20,
    ) -> GeneratedResponse:
        """Handle GET /questions requests."""
        try:
            resolution = await self._coaching.question_bank(
                company=company,
                category=category,
                difficulty=difficulty,
                role=role,
                limit=limit,
            )
        except Exception as e:
            raise _failed("fetch interview questions", e) from e
        return to_response(resolution)

    async def analytics(self, request: AnalyticsRequest) -> dict:
        """Handle POST /analytics requests."""
        assessments = [a.model_dump(by_alias=True) for a in request.assessments]
        return progress.summarize_assessments(assessments)
