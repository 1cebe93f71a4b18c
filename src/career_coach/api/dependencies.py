"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from career_coach.config import settings
from career_coach.handlers import CacheHandler, CoachingHandler
from career_coach.logging import configure_logging
from career_coach.protocols import CacheStore, TextGenerator
from career_coach.repositories import (
    GeminiTextGenerator,
    InMemoryCacheRepository,
    OllamaTextGenerator,
    RedisCacheRepository,
)
from career_coach.services import CoachingService, GenerationService


def build_cache() -> CacheStore:
    """Create the cache backend selected by CACHE_BACKEND."""
    if settings.is_redis_backend:
        return RedisCacheRepository.create()
    return InMemoryCacheRepository.create()


def build_generator() -> TextGenerator:
    """Create the text generator selected by LLM_PROVIDER."""
    if settings.llm_provider.lower() == "ollama":
        return OllamaTextGenerator.create()
    return GeminiTextGenerator.create()


def _from_state(request: Request, name: str, label: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{label} not initialized. Check lifespan setup.")
    return value


def get_generation_service(request: Request) -> GenerationService:
    """Dependency injection for GenerationService from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The GenerationService instance from app.state

    Raises:
        RuntimeError: If service is not initialized
    """
    return _from_state(request, "generation_service", "GenerationService")


def get_cache_handler(request: Request) -> CacheHandler:
    """Dependency injection for CacheHandler from app.state."""
    return _from_state(request, "cache_handler", "CacheHandler")


def get_coaching_handler(request: Request) -> CoachingHandler:
    """Dependency injection for CoachingHandler from app.state."""
    return _from_state(request, "coaching_handler", "CoachingHandler")


def install(app: FastAPI, cache: CacheStore, generator: TextGenerator) -> GenerationService:
    """Wire services and handlers around a cache and generator into app.state.

    Args:
        app: The FastAPI application instance
        cache: Cache storage backend
        generator: Text-generation service

    Returns:
        The GenerationService stored in app.state
    """
    generation_service = GenerationService.create(cache=cache, generator=generator)
    coaching_service = CoachingService(generation_service)

    app.state.cache = cache
    app.state.generator = generator
    app.state.generation_service = generation_service
    app.state.coaching_service = coaching_service
    app.state.cache_handler = CacheHandler(generation_service=generation_service)
    app.state.coaching_handler = CoachingHandler(coaching_service=coaching_service)
    return generation_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repository (cache backend and text generator) - created from settings
    2. Services (business logic) - app.state.generation_service, app.state.coaching_service
    3. Handlers (HTTP endpoints) - app.state.cache_handler, app.state.coaching_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Closes the generator's HTTP client and removes services from app.state
    """
    configure_logging("career-coach", settings.log_level)

    generation_service = install(app, cache=build_cache(), generator=build_generator())

    print(f"✓ Cache backend: {settings.cache_backend} (ttl {settings.cache_ttl}s)")
    print(f"✓ Text generator: {settings.llm_provider} / {generation_service.generator.model_name}")
    print(f"✓ Health: {await generation_service.is_healthy()}")

    yield

    await generation_service.generator.close()

    # Cleanup - remove from app.state
    del app.state.coaching_handler
    del app.state.cache_handler
    del app.state.coaching_service
    del app.state.generation_service
    del app.state.generator
    del app.state.cache
    print("✓ Coaching service shut down")


# Type aliases for cleaner dependency injection
CacheHandlerDep = Annotated[CacheHandler, Depends(get_cache_handler)]
CoachingHandlerDep = Annotated[CoachingHandler, Depends(get_coaching_handler)]
GenerationServiceDep = Annotated[GenerationService, Depends(get_generation_service)]
