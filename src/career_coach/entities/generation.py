"""Generation request and resolution entities."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from career_coach.protocols import PayloadShape


class PayloadSource(str, Enum):
    """Where a resolved payload came from."""

    CACHE = "cache"
    LIVE = "live"
    FALLBACK = "fallback"


class FailureKind(str, Enum):
    """Why a live generation was replaced by the fallback.

    All kinds take the same fallback path; the kind only feeds logs and metrics.
    """

    QUOTA = "quota"
    CALL_ERROR = "call-error"
    PARSE_ERROR = "parse-error"


@dataclass(frozen=True)
class GenerationRequest:
    """A single call-site request to the generation orchestrator.

    Attributes:
        operation: Call-site name used in logs and metrics (e.g. "quiz")
        prompt: Prompt text sent to the text-generation service
        shape: Parser/validator for the generated text
        cache_key: Key from derive_cache_key, or None for an uncached call
        fallback: Zero-argument, pure, non-raising payload builder
    """

    operation: str
    prompt: str
    shape: PayloadShape
    cache_key: str | None
    fallback: Callable[[], Any]


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a GenerationRequest.

    Attributes:
        payload: The payload handed to the caller
        source: Cache hit, live generation or fallback
        failure: Failure classification when source is FALLBACK
    """

    payload: Any
    source: PayloadSource
    failure: FailureKind | None = None

    @property
    def was_fallback(self) -> bool:
        """True if the payload is substitute content rather than generated."""
        return self.source is PayloadSource.FALLBACK
