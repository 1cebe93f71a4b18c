"""Response DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class GeneratedResponse(BaseModel):
    """Response DTO for any generated feature.

    ``is_fallback`` tells the client the content is substitute material
    produced while generation was unavailable.
    """

    data: Any = Field(..., description="Generated payload (markdown text or JSON object)")
    source: str = Field(..., description="Where the payload came from: cache, live or fallback")
    is_fallback: bool = Field(..., description="True if the payload is static fallback content")


class QuizResultResponse(BaseModel):
    """Response DTO for a scored quiz."""

    quiz_score: float = Field(..., description="Percentage of correct answers", ge=0.0, le=100.0)
    questions: list[dict[str, Any]] = Field(..., description="Per-question results")
    category: str
    improvement_tip: str | None = Field(None, description="Generated tip, only when answers were wrong")


class RoadmapProgressResponse(BaseModel):
    skills: list[str] = Field(..., description="Current skills merged with completed ones")
    overall_progress: int = Field(..., description="Percent of target skills held", ge=0, le=100)


class CacheStatsResponse(BaseModel):
    """Response DTO for cache and generation statistics."""

    cache: dict[str, Any] = Field(..., description="Backend statistics (entry count, keys, ttl)")
    generation: dict[str, Any] = Field(..., description="Resolution counters and hit rate")
    model: str = Field(..., description="Primary text-generation model")
    single_flight: bool = Field(..., description="Whether concurrent misses are coalesced")


class ClearCacheResponse(BaseModel):
    success: bool
    deleted_count: int = Field(..., ge=0)
    message: str


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
    generator_available: bool | None = Field(
        None,
        description="Whether the text generator answers (only probed on request)",
    )
