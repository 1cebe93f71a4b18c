"""
Shared fixtures: in-process fakes for the text generator and a manual clock.
"""

import asyncio

import pytest

from career_coach.errors import GenerationError
from career_coach.repositories import InMemoryCacheRepository


class FakeGenerator:
    """Scripted TextGenerator.

    Each call pops the next scripted reply; an exception instance is raised
    instead of returned. When the script runs out the last reply repeats.
    """

    def __init__(self, *replies, gate: asyncio.Event | None = None) -> None:
        self._replies = list(replies) or [GenerationError("no reply scripted")]
        self._gate = gate
        self.prompts: list[str] = []
        self.closed = False

    @property
    def model_name(self) -> str:
        return "fake-model"

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        reply = self._replies.pop(0) if len(self._replies) > 1 else self._replies[0]
        if self._gate is not None:
            await self._gate.wait()
        if isinstance(reply, BaseException):
            raise reply
        return reply

    async def is_available(self) -> bool:
        return not isinstance(self._replies[0], BaseException)

    async def close(self) -> None:
        self.closed = True


class ManualClock:
    """Clock returning a settable Unix timestamp."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def memory_cache(clock):
    """Memory cache with the production TTL and a manual clock."""
    return InMemoryCacheRepository(ttl=86400, clock=clock)


@pytest.fixture
def make_generator():
    """Factory for scripted generators."""
    return FakeGenerator
