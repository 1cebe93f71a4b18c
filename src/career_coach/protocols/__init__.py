"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (memory → Redis, Gemini → Ollama, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from career_coach.protocols import CacheStore, TextGenerator

    # Type hints work with any implementation
    store: CacheStore = InMemoryCacheRepository()  # works
    store: CacheStore = RedisCacheRepository()     # also works
    ```
"""

from .cache_store import CacheStore
from .payload_shape import PayloadShape
from .text_generator import TextGenerator

__all__ = [
    "CacheStore",
    "PayloadShape",
    "TextGenerator",
]
