"""Structured payload schemas for generated content.

Field aliases keep the camelCase keys the prompts ask the model to emit,
so a validated payload dumps back to the same JSON the model produced.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class QuizQuestion(_Payload):
    """A multiple-choice technical question."""

    question: str = Field(..., min_length=1)
    options: list[str] = Field(..., min_length=2)
    correct_answer: str = Field(..., alias="correctAnswer")
    explanation: str = ""


class QuizPayload(_Payload):
    questions: list[QuizQuestion] = Field(..., min_length=1)


class JobQuestion(_Payload):
    """A targeted interview question with coaching notes."""

    question: str = Field(..., min_length=1)
    type: str = "technical"
    context: str = ""
    suggested_answer: str = Field("", alias="suggestedAnswer")
    tips: list[str] = Field(default_factory=list)


class JobQuestionsPayload(_Payload):
    questions: list[JobQuestion] = Field(..., min_length=1)


class SalaryRange(_Payload):
    role: str
    min: float
    max: float
    median: float
    location: str


class IndustryInsightsPayload(_Payload):
    """Market overview for a single industry."""

    salary_ranges: list[SalaryRange] = Field(..., alias="salaryRanges")
    growth_rate: float = Field(..., alias="growthRate")
    demand_level: Literal["High", "Medium", "Low"] = Field(..., alias="demandLevel")
    top_skills: list[str] = Field(..., alias="topSkills")
    market_outlook: Literal["Positive", "Neutral", "Negative"] = Field(..., alias="marketOutlook")
    key_trends: list[str] = Field(..., alias="keyTrends")
    recommended_skills: list[str] = Field(..., alias="recommendedSkills")


class RoadmapResource(_Payload):
    type: str
    title: str
    platform: str
    duration: str


class RoadmapPhase(_Payload):
    phase: int
    name: str
    duration: str
    skills: list[str] = Field(default_factory=list)
    resources: list[RoadmapResource] = Field(default_factory=list)
    milestone: str = ""
    tips: str = ""


class RoadmapPayload(_Payload):
    phases: list[RoadmapPhase] = Field(..., min_length=1)


class ChallengeTestCase(_Payload):
    input: str
    expected_output: str = Field(..., alias="expectedOutput")
    explanation: str = ""


class CodingChallenge(_Payload):
    """A practice problem with starter code, reference solution and tests."""

    title: str = Field(..., min_length=1)
    description: str
    difficulty: Literal["Easy", "Medium", "Hard"]
    language: str
    category: str
    starter_code: str = Field(..., alias="starterCode")
    solution: str
    test_cases: list[ChallengeTestCase] = Field(default_factory=list, alias="testCases")
    hints: list[str] = Field(default_factory=list)


class CodingChallengesPayload(_Payload):
    challenges: list[CodingChallenge] = Field(..., min_length=1)


class BankQuestion(_Payload):
    """An entry in the company interview question bank."""

    question: str = Field(..., min_length=1)
    answer: str
    explanation: str = ""
    company: str
    category: str
    difficulty: Literal["Easy", "Medium", "Hard"]
    role: str = "Software Engineer"
    tags: list[str] = Field(default_factory=list)
    frequency: int = 0
    most_asked_by: list[str] = Field(default_factory=list, alias="mostAskedBy")


class QuestionBankPayload(_Payload):
    questions: list[BankQuestion]
