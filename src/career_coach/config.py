import os
from dataclasses import dataclass, field
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> int | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


def _csv(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Cache
    cache_backend: str = os.getenv("CACHE_BACKEND", "memory")
    cache_ttl: int = int(os.getenv("CACHE_TTL", "86400"))  # 24 hours
    cache_max_entries: int | None = _optional_int("CACHE_MAX_ENTRIES")
    cache_single_flight: bool = os.getenv("CACHE_SINGLE_FLIGHT", "false").lower() == "true"
    cache_key_prefix: str = os.getenv("CACHE_KEY_PREFIX", "career_coach")

    # Redis (only used when CACHE_BACKEND=redis)
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Text generation
    llm_provider: str = os.getenv("LLM_PROVIDER", "gemini")
    llm_timeout: float = float(os.getenv("LLM_TIMEOUT", "60"))
    gemini_api_key: str | None = os.getenv("GEMINI_API_KEY")
    gemini_models: tuple[str, ...] = field(
        default_factory=lambda: _csv("GEMINI_MODELS", "gemini-2.0-flash")
    )
    gemini_base_url: str = os.getenv(
        "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com"
    )

    # Ollama
    ollama_base_url: str = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
    ollama_model: str = os.getenv("OLLAMA_MODEL", "llama3.1")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def is_redis_backend(self) -> bool:
        """Check if the cache should live in Redis instead of process memory.

        Returns:
            True if CACHE_BACKEND is "redis", False otherwise
        """
        return self.cache_backend.lower() == "redis"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_backend.lower() not in ("memory", "redis"):
            raise ValueError(f"CACHE_BACKEND must be 'memory' or 'redis', got {self.cache_backend!r}")

        if self.cache_ttl <= 0:
            raise ValueError("CACHE_TTL must be a positive number of seconds")

        if self.cache_max_entries is not None and self.cache_max_entries <= 0:
            raise ValueError("CACHE_MAX_ENTRIES must be positive when set")

        if self.llm_provider.lower() not in ("gemini", "ollama"):
            raise ValueError(f"LLM_PROVIDER must be 'gemini' or 'ollama', got {self.llm_provider!r}")

        if not self.gemini_models:
            raise ValueError("GEMINI_MODELS must name at least one model")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )
