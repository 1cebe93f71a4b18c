"""Generation orchestrator: cache first, then live generation, then fallback.

Every generative feature goes through ``GenerationService.resolve``. The
caller always receives a usable payload; quota refusals, call failures and
unparseable output are all answered with the request's fallback, which is
never written to the cache.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any

from career_coach.config import settings
from career_coach.entities import FailureKind, GenerationRequest, PayloadSource, Resolution
from career_coach.errors import PayloadParseError, QuotaExceededError
from career_coach.logging import get_logger, log_event
from career_coach.protocols import CacheStore, TextGenerator

logger = get_logger("generation")

QUOTA_MARKERS = ("429", "quota", "resource_exhausted")


def classify_failure(error: BaseException) -> FailureKind:
    """Classify a failed generation for logs and metrics.

    Args:
        error: The exception raised while generating or parsing

    Returns:
        PARSE_ERROR for shape failures, QUOTA for quota/rate-limit signals
        (typed or recognised by message), CALL_ERROR otherwise
    """
    if isinstance(error, PayloadParseError):
        return FailureKind.PARSE_ERROR
    if isinstance(error, QuotaExceededError):
        return FailureKind.QUOTA

    message = str(error).lower()
    if any(marker in message for marker in QUOTA_MARKERS):
        return FailureKind.QUOTA
    return FailureKind.CALL_ERROR


@dataclass
class GenerationMetrics:
    """Track how requests were resolved."""

    resolutions: int = 0
    cache_hits: int = 0
    live_calls: int = 0
    live_successes: int = 0
    fallbacks: dict[str, int] = field(
        default_factory=lambda: {kind.value: 0 for kind in FailureKind}
    )

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        if self.resolutions == 0:
            return 0.0
        return self.cache_hits / self.resolutions

    @property
    def fallback_count(self) -> int:
        return sum(self.fallbacks.values())

    def record_fallback(self, kind: FailureKind) -> None:
        self.fallbacks[kind.value] += 1

    def to_dict(self) -> dict[str, Any]:
        """Convert metrics to dictionary."""
        return {
            "resolutions": self.resolutions,
            "cache_hits": self.cache_hits,
            "hit_rate": self.hit_rate,
            "live_calls": self.live_calls,
            "live_successes": self.live_successes,
            "fallbacks": dict(self.fallbacks),
            "fallback_count": self.fallback_count,
        }


class GenerationService:
    """Cache-and-fallback orchestrator around an unreliable text generator.

    This service depends on PROTOCOLS, not concrete implementations:
    - CacheStore: process memory or Redis
    - TextGenerator: Gemini, Ollama or a test double

    With ``single_flight`` enabled, concurrent misses for the same key share
    one in-flight generation instead of each calling the generator.

    Example:
        ```python
        from career_coach.repositories import GeminiTextGenerator, InMemoryCacheRepository
        from career_coach.services import GenerationService

        service = GenerationService.create(
            cache=InMemoryCacheRepository.create(),
            generator=GeminiTextGenerator.create(),
        )
        payload = await service.resolve(request)
        ```
    """

    def __init__(
        self,
        cache: CacheStore,
        generator: TextGenerator,
        single_flight: bool | None = None,
    ) -> None:
        """Initialize the generation service.

        Args:
            cache: Cache storage backend (required).
            generator: Text-generation service (required).
            single_flight: Coalesce concurrent misses per key. Defaults to settings.
        """
        self._cache = cache
        self._generator = generator
        self._single_flight = (
            settings.cache_single_flight if single_flight is None else single_flight
        )
        self._in_flight: dict[str, asyncio.Future[Resolution | None]] = {}
        self._metrics = GenerationMetrics()

    @classmethod
    def create(
        cls,
        cache: CacheStore,
        generator: TextGenerator,
        single_flight: bool | None = None,
    ) -> "GenerationService":
        """Factory method to create GenerationService with sensible defaults.

        Args:
            cache: Cache storage backend (required).
            generator: Text-generation service (required).
            single_flight: Coalesce concurrent misses. If None, uses settings.

        Returns:
            Configured GenerationService instance
        """
        return cls(cache=cache, generator=generator, single_flight=single_flight)

    async def resolve(self, request: GenerationRequest) -> Any:
        """Produce a payload for the request.

        Args:
            request: The call-site request

        Returns:
            The cached, live or fallback payload
        """
        resolution = await self.resolve_with_source(request)
        return resolution.payload

    async def resolve_with_source(self, request: GenerationRequest) -> Resolution:
        """Produce a payload and report where it came from.

        Business logic:
        1. Return the cached payload for the key if it is still fresh
        2. Otherwise call the generator once and parse with the request shape
        3. Cache and return a valid payload
        4. On any generation or parse failure return the fallback, uncached

        Args:
            request: The call-site request

        Returns:
            Resolution with payload, source and failure classification
        """
        self._metrics.resolutions += 1
        key = request.cache_key

        if key is not None:
            cached = self._cache.get(key)
            if cached is not None:
                self._metrics.cache_hits += 1
                logger.debug("generation_cache_hit", operation=request.operation)
                return Resolution(payload=cached, source=PayloadSource.CACHE)

            if self._single_flight:
                return await self._coalesced(key, request)

        return await self._generate(request)

    async def _coalesced(self, key: str, request: GenerationRequest) -> Resolution:
        pending = self._in_flight.get(key)
        if pending is not None:
            log_event(logger, "generation_coalesced", {"operation": request.operation})
            resolution = await asyncio.shield(pending)
            if resolution is None:
                # The leader was cancelled; take over the miss.
                return await self._coalesced(key, request)
            return resolution

        # None tells waiters the leader gave up without a result.
        future: asyncio.Future[Resolution | None] = asyncio.get_running_loop().create_future()
        self._in_flight[key] = future
        try:
            resolution = await self._generate(request)
        except asyncio.CancelledError:
            future.set_result(None)
            raise
        except Exception as e:
            future.set_exception(e)
            # Waiters re-raise it; mark retrieved so an unawaited future is not reported.
            future.exception()
            raise
        else:
            future.set_result(resolution)
            return resolution
        finally:
            self._in_flight.pop(key, None)

    async def _generate(self, request: GenerationRequest) -> Resolution:
        self._metrics.live_calls += 1
        try:
            raw = await self._generator.generate(request.prompt)
            payload = request.shape.parse(raw)
        except Exception as e:
            kind = classify_failure(e)
            logger.warning(
                "generation_fallback",
                operation=request.operation,
                failure=kind.value,
                error=str(e),
            )
            # Fallback errors are contract violations and propagate.
            payload = request.fallback()
            self._metrics.record_fallback(kind)
            return Resolution(payload=payload, source=PayloadSource.FALLBACK, failure=kind)

        if request.cache_key is not None:
            self._cache.set(request.cache_key, payload)
        self._metrics.live_successes += 1
        log_event(
            logger,
            "generation_live",
            {"operation": request.operation, "model": self._generator.model_name},
        )
        return Resolution(payload=payload, source=PayloadSource.LIVE)

    def clear(self) -> int:
        """Clear all cached payloads.

        Returns:
            Number of entries deleted
        """
        return self._cache.clear()

    def get_stats(self) -> dict:
        """Get cache and resolution statistics.

        Returns:
            Dictionary with cache stats, metrics and generator model
        """
        return {
            "cache": self._cache.stats(),
            "generation": self._metrics.to_dict(),
            "model": self._generator.model_name,
            "single_flight": self._single_flight,
        }

    async def is_healthy(self) -> bool:
        """Check if the cache is reachable.

        The generator is not probed: an unavailable generator is served by
        fallbacks and does not make the service unhealthy.
        """
        return self._cache.health_check()

    @property
    def cache(self) -> CacheStore:
        """Get the underlying cache store (for testing)."""
        return self._cache

    @property
    def generator(self) -> TextGenerator:
        """Get the underlying text generator (for testing)."""
        return self._generator

    @property
    def metrics(self) -> GenerationMetrics:
        return self._metrics
