"""Domain entities for internal representation.

These are pure dataclasses used internally by services and repositories.
They are NOT used for API contracts - use DTOs from the dto package for that.

Entities should have:
- No JSON serialization logic
- No Pydantic validation
- Pure domain logic only
"""

from .cache_entry import CacheEntryEntity
from .generation import FailureKind, GenerationRequest, PayloadSource, Resolution
from .profile import UserProfile

__all__ = [
    "CacheEntryEntity",
    "FailureKind",
    "GenerationRequest",
    "PayloadSource",
    "Resolution",
    "UserProfile",
]
