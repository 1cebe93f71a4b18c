"""Utility modules for the career coach package."""

from .cache_keys import derive_cache_key

__all__ = [
    "derive_cache_key",
]
