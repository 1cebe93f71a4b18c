"""Repository layer for data access.

This layer abstracts external dependencies (process memory, Redis,
text-generation APIs) behind protocol-based interfaces. This enables:
- Easy swapping of implementations (memory → Redis, Gemini → Ollama, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from career_coach.protocols import CacheStore, TextGenerator

from .gemini_text_generator import GeminiTextGenerator
from .memory_repository import InMemoryCacheRepository
from .ollama_text_generator import OllamaTextGenerator
from .redis_repository import RedisCacheRepository

__all__ = [
    "CacheStore",
    "TextGenerator",
    "InMemoryCacheRepository",
    "RedisCacheRepository",
    "GeminiTextGenerator",
    "OllamaTextGenerator",
]
