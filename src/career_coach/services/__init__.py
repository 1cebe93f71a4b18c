"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from career_coach.services import CoachingService, GenerationService

    generation = GenerationService.create(cache=cache, generator=generator)
    coaching = CoachingService(generation)
    resolution = await coaching.quiz(profile)
    ```
"""

from . import progress
from .generation_service import GenerationMetrics, GenerationService, classify_failure
from .coaching_service import CoachingService

__all__ = [
    "progress",
    "classify_failure",
    "GenerationMetrics",
    "GenerationService",
    "CoachingService",
]
