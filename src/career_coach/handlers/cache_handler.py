"""HTTP handlers for cache operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

from fastapi import HTTPException, status

from career_coach.dto import CacheStatsResponse, ClearCacheResponse, HealthCheckResponse
from career_coach.services import GenerationService


class CacheHandler:
    """HTTP handlers for cache operations.

    This handler delegates business logic to GenerationService
    and handles HTTP-specific concerns like:
    - Converting stats to DTOs
    - Setting appropriate status codes
    - Error handling and responses

    Example:
        ```python
        handler = CacheHandler(generation_service=generation)

        @app.get("/cache/stats", response_model=CacheStatsResponse)
        async def get_stats():
            return await handler.get_stats()
        ```
    """

    def __init__(self, generation_service: GenerationService) -> None:
        """Initialize the cache handler.

        Args:
            generation_service: The orchestrator owning the cache (required).
        """
        self._generation = generation_service

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /cache/stats requests.

        Returns:
            CacheStatsResponse with cache and generation statistics

        Raises:
            HTTPException: If an error occurs while fetching stats
        """
        try:
            stats = self._generation.get_stats()

            return CacheStatsResponse(
                cache=stats["cache"],
                generation=stats["generation"],
                model=stats["model"],
                single_flight=stats["single_flight"],
            )

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to get stats: {e}",
            ) from e

    async def clear_cache(self) -> ClearCacheResponse:
        """Handle DELETE /cache requests.

        Returns:
            ClearCacheResponse with the number of deleted entries
        """
        try:
            count = self._generation.clear()

            return ClearCacheResponse(
                success=True,
                deleted_count=count,
                message="Cache cleared successfully",
            )

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to clear cache: {e}",
            ) from e

    async def health_check(self, probe_generator: bool = False) -> HealthCheckResponse:
        """Handle GET /health requests.

        Args:
            probe_generator: Also call the text generator once. Off by default
                because a probe spends quota.

        Returns:
            HealthCheckResponse with health status
        """
        is_healthy = await self._generation.is_healthy()
        generator_available = None
        if probe_generator:
            generator_available = await self._generation.generator.is_available()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_healthy=is_healthy,
            generator_available=generator_available,
        )
