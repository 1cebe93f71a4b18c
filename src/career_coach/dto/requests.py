"""Request DTOs for API endpoints."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .payloads import QuizQuestion

Difficulty = Literal["Easy", "Medium", "Hard"]


class ProfileRequest(BaseModel):
    """The caller's profile, sent with every personalised request.

    The handler will convert this to a UserProfile entity for the service layer.
    """

    user_id: str = Field("", description="Stable user identifier (scopes per-user cache keys)")
    name: str | None = Field(None, description="Display name used to sign cover letters")
    industry: str | None = Field(None, description="Industry, e.g. 'Data Science'")
    experience: int | None = Field(None, description="Years of experience", ge=0)
    skills: list[str] = Field(default_factory=list, description="Skills the user already has")
    bio: str | None = Field(None, description="Professional background")


class CoverLetterRequest(BaseModel):
    profile: ProfileRequest
    job_title: str = Field(..., min_length=1)
    company_name: str = Field(..., min_length=1)
    job_description: str = ""


class QuizRequest(BaseModel):
    profile: ProfileRequest


class QuizResultRequest(BaseModel):
    """Request DTO for scoring a finished quiz."""

    profile: ProfileRequest
    questions: list[QuizQuestion] = Field(..., min_length=1)
    answers: list[str | None] = Field(..., description="User answers by question position")
    category: str = "Technical"


class JobQuestionsRequest(BaseModel):
    profile: ProfileRequest
    job_description: str = ""


class RoadmapRequest(BaseModel):
    profile: ProfileRequest
    target_skills: list[str] = Field(
        default_factory=list,
        description="Industry top or recommended skills; empty means insights are missing",
    )


class RoadmapProgressRequest(BaseModel):
    """Request DTO for recording newly learned skills."""

    current_skills: list[str] = Field(default_factory=list)
    completed_skills: list[str] = Field(default_factory=list)
    target_skills: list[str] = Field(default_factory=list)


class CodingChallengesRequest(BaseModel):
    language: str = "JavaScript"
    difficulty: Difficulty | None = None


class ChallengeStatsRequest(BaseModel):
    challenges: list[dict[str, Any]] = Field(default_factory=list)


class SubmissionTestResult(BaseModel):
    passed: bool
    input: str | None = None
    expected: str | None = None
    actual: str | None = None


class SubmissionRequest(BaseModel):
    """Request DTO for applying test results to a challenge."""

    challenge: dict[str, Any] = Field(..., description="Challenge with its submission counters")
    code: str = ""
    test_results: list[SubmissionTestResult] = Field(default_factory=list)


class AssessmentItem(BaseModel):
    quiz_score: float = Field(..., alias="quizScore")
    category: str = "Technical"
    created_at: str | None = Field(None, alias="createdAt")
    improvement_tip: str | None = Field(None, alias="improvementTip")

    model_config = ConfigDict(populate_by_name=True)


class AnalyticsRequest(BaseModel):
    assessments: list[AssessmentItem] = Field(default_factory=list)
