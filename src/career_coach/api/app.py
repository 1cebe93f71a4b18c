from typing import Any

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from career_coach.api.dependencies import CacheHandlerDep, CoachingHandlerDep, lifespan
from career_coach.config import settings
from career_coach.dto import (
    AnalyticsRequest,
    CacheStatsResponse,
    ChallengeStatsRequest,
    ClearCacheResponse,
    CodingChallengesRequest,
    CoverLetterRequest,
    GeneratedResponse,
    HealthCheckResponse,
    JobQuestionsRequest,
    QuizRequest,
    QuizResultRequest,
    QuizResultResponse,
    RoadmapProgressRequest,
    RoadmapProgressResponse,
    RoadmapRequest,
    SubmissionRequest,
)

app = FastAPI(
    title="Career Coach API",
    description="Generative career coaching with response caching and static fallbacks",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Career Coach API",
        "version": "0.1.0",
        "description": "Generative career coaching with response caching and static fallbacks",
        "endpoints": {
            "cover_letters": "/cover-letters",
            "interview": "/interview",
            "insights": "/insights/{industry}",
            "roadmaps": "/roadmaps",
            "coding_challenges": "/coding-challenges",
            "questions": "/questions",
            "analytics": "/analytics",
            "cache": "/cache",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: CacheHandlerDep, probe: bool = False) -> HealthCheckResponse:
    """Health check endpoint. ``probe=true`` also calls the text generator."""
    return await handler.health_check(probe_generator=probe)


@app.post("/cover-letters", response_model=GeneratedResponse)
async def cover_letter(request: CoverLetterRequest, handler: CoachingHandlerDep) -> GeneratedResponse:
    return await handler.cover_letter(request)


@app.post("/interview/quiz", response_model=GeneratedResponse)
async def quiz(request: QuizRequest, handler: CoachingHandlerDep) -> GeneratedResponse:
    return await handler.quiz(request)


@app.post("/interview/quiz/results", response_model=QuizResultResponse)
async def quiz_result(request: QuizResultRequest, handler: CoachingHandlerDep) -> QuizResultResponse:
    """Score a quiz; the improvement tip is only generated for wrong answers."""
    return await handler.quiz_result(request)


@app.post("/interview/job-questions", response_model=GeneratedResponse)
async def job_questions(request: JobQuestionsRequest, handler: CoachingHandlerDep) -> GeneratedResponse:
    return await handler.job_questions(request)


@app.get("/insights/{industry}", response_model=GeneratedResponse)
async def industry_insights(industry: str, handler: CoachingHandlerDep) -> GeneratedResponse:
    return await handler.industry_insights(industry)


@app.post("/roadmaps", response_model=GeneratedResponse)
async def skill_roadmap(request: RoadmapRequest, handler: CoachingHandlerDep) -> GeneratedResponse:
    return await handler.skill_roadmap(request)


@app.post("/roadmaps/progress", response_model=RoadmapProgressResponse)
async def roadmap_progress(
    request: RoadmapProgressRequest, handler: CoachingHandlerDep
) -> RoadmapProgressResponse:
    return await handler.roadmap_progress(request)


@app.post("/coding-challenges", response_model=GeneratedResponse)
async def coding_challenges(
    request: CodingChallengesRequest, handler: CoachingHandlerDep
) -> GeneratedResponse:
    return await handler.coding_challenges(request)


@app.post("/coding-challenges/stats", response_model=dict[str, Any])
async def challenge_stats(request: ChallengeStatsRequest, handler: CoachingHandlerDep) -> dict[str, Any]:
    return await handler.challenge_stats(request)


@app.post("/coding-challenges/submissions", response_model=dict[str, Any])
async def submit_challenge(request: SubmissionRequest, handler: CoachingHandlerDep) -> dict[str, Any]:
    return await handler.submit_challenge(request)


@app.get("/questions", response_model=GeneratedResponse)
async def question_bank(
    handler: CoachingHandlerDep,
    company: str | None = None,
    category: str | None = None,
    difficulty: str | None = None,
    role: str | None = None,
    limit: int = Query(20, ge=1, le=100),
) -> GeneratedResponse:
    return await handler.question_bank(
        company=company,
        category=category,
        difficulty=difficulty,
        role=role,
        limit=limit,
    )


@app.post("/analytics", response_model=dict[str, Any])
async def analytics(request: AnalyticsRequest, handler: CoachingHandlerDep) -> dict[str, Any]:
    return await handler.analytics(request)


@app.get("/cache/stats", response_model=CacheStatsResponse)
async def cache_stats(handler: CacheHandlerDep) -> CacheStatsResponse:
    return await handler.get_stats()


@app.delete("/cache", response_model=ClearCacheResponse)
async def clear_cache(handler: CacheHandlerDep) -> ClearCacheResponse:
    """Clear all cached payloads."""
    return await handler.clear_cache()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "career_coach.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
