"""Career Coach - generative career coaching with caching and static fallbacks.

Every generative feature (cover letters, quizzes, interview questions,
industry insights, skill roadmaps, coding challenges, question banks) goes
through one orchestrator: fresh cached payload, else one live generation
call, else a static fallback. Callers always receive a usable payload.

Layers:
    - protocols: Interface contracts (CacheStore, TextGenerator, PayloadShape)
    - repositories: Cache backends and text-generation clients
    - services: Orchestration, coaching features and progress analytics
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts and payload schemas)
    - entities: Domain models (internal)

Usage:
    ```python
    from career_coach.repositories import GeminiTextGenerator, InMemoryCacheRepository
    from career_coach.services import CoachingService, GenerationService

    generation = GenerationService.create(
        cache=InMemoryCacheRepository.create(),
        generator=GeminiTextGenerator.create(),
    )
    coaching = CoachingService(generation)
    ```

For HTTP API:
    ```python
    from career_coach.api.app import app
    ```
"""

from career_coach.config import get_redis_client, settings
from career_coach.entities import (
    FailureKind,
    GenerationRequest,
    PayloadSource,
    Resolution,
    UserProfile,
)
from career_coach.errors import (
    CareerCoachError,
    GenerationError,
    MissingInsightsError,
    PayloadParseError,
    QuotaExceededError,
)
from career_coach.handlers import CacheHandler, CoachingHandler
from career_coach.protocols import CacheStore, PayloadShape, TextGenerator
from career_coach.repositories import (
    GeminiTextGenerator,
    InMemoryCacheRepository,
    OllamaTextGenerator,
    RedisCacheRepository,
)
from career_coach.services import CoachingService, GenerationService
from career_coach.utils import derive_cache_key

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CacheStore",
    "PayloadShape",
    "TextGenerator",
    # Services (business logic)
    "GenerationService",
    "CoachingService",
    # Handlers (HTTP)
    "CacheHandler",
    "CoachingHandler",
    # Repositories (data access)
    "InMemoryCacheRepository",
    "RedisCacheRepository",
    "GeminiTextGenerator",
    "OllamaTextGenerator",
    # Entities (domain models)
    "FailureKind",
    "GenerationRequest",
    "PayloadSource",
    "Resolution",
    "UserProfile",
    # Errors
    "CareerCoachError",
    "GenerationError",
    "QuotaExceededError",
    "PayloadParseError",
    "MissingInsightsError",
    # Keys
    "derive_cache_key",
]
