"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import (
    AnalyticsRequest,
    AssessmentItem,
    ChallengeStatsRequest,
    CodingChallengesRequest,
    CoverLetterRequest,
    JobQuestionsRequest,
    ProfileRequest,
    QuizRequest,
    QuizResultRequest,
    RoadmapProgressRequest,
    RoadmapRequest,
    SubmissionRequest,
    SubmissionTestResult,
)
from .responses import (
    CacheStatsResponse,
    ClearCacheResponse,
    GeneratedResponse,
    HealthCheckResponse,
    QuizResultResponse,
    RoadmapProgressResponse,
)

__all__ = [
    "ProfileRequest",
    "CoverLetterRequest",
    "QuizRequest",
    "QuizResultRequest",
    "JobQuestionsRequest",
    "RoadmapRequest",
    "RoadmapProgressRequest",
    "CodingChallengesRequest",
    "ChallengeStatsRequest",
    "SubmissionTestResult",
    "SubmissionRequest",
    "AssessmentItem",
    "AnalyticsRequest",
    "GeneratedResponse",
    "QuizResultResponse",
    "RoadmapProgressResponse",
    "CacheStatsResponse",
    "ClearCacheResponse",
    "HealthCheckResponse",
]
