"""
Tests for the cache-first, fallback-last generation orchestrator.
"""

import asyncio
import json

import pytest

from career_coach.dto.payloads import QuizPayload
from career_coach.entities import FailureKind, GenerationRequest, PayloadSource
from career_coach.errors import GenerationError, PayloadParseError, QuotaExceededError
from career_coach.parsing import JsonShape, TextShape
from career_coach.services import GenerationService, classify_failure
from career_coach.utils import derive_cache_key

QUIZ = JsonShape(QuizPayload, name="quiz")
FALLBACK_QUIZ = {"questions": [{"question": "static", "options": ["a", "b"], "correctAnswer": "a", "explanation": ""}]}
LIVE_QUIZ = {"questions": [{"question": "live", "options": ["x", "y"], "correctAnswer": "y", "explanation": "why"}]}
NEWER_QUIZ = {"questions": [{"question": "newer", "options": ["p", "q"], "correctAnswer": "p", "explanation": ""}]}


def quiz_request(key=derive_cache_key("quiz", "Finance", ["Excel"]), fallback=None):
    return GenerationRequest(
        operation="quiz",
        prompt="Generate 10 questions",
        shape=QUIZ,
        cache_key=key,
        fallback=fallback or (lambda: FALLBACK_QUIZ),
    )


def make_service(cache, generator, single_flight=False):
    return GenerationService(cache=cache, generator=generator, single_flight=single_flight)


def test_live_payload_is_cached_and_reused(memory_cache, make_generator):
    """A second call inside the TTL does not reach the generator."""
    generator = make_generator(json.dumps(LIVE_QUIZ))
    service = make_service(memory_cache, generator)

    first = asyncio.run(service.resolve_with_source(quiz_request()))
    second = asyncio.run(service.resolve_with_source(quiz_request()))

    assert first.source is PayloadSource.LIVE
    assert second.source is PayloadSource.CACHE
    assert first.payload == second.payload == LIVE_QUIZ
    assert generator.calls == 1


def test_resolve_returns_payload_only(memory_cache, make_generator):
    service = make_service(memory_cache, make_generator(json.dumps(LIVE_QUIZ)))
    assert asyncio.run(service.resolve(quiz_request())) == LIVE_QUIZ


def test_quota_failure_falls_back_without_caching(memory_cache, make_generator):
    generator = make_generator(QuotaExceededError("429 quota"))
    service = make_service(memory_cache, generator)

    resolution = asyncio.run(service.resolve_with_source(quiz_request()))

    assert resolution.was_fallback
    assert resolution.failure is FailureKind.QUOTA
    assert resolution.payload == FALLBACK_QUIZ
    assert memory_cache.stats()["count"] == 0


def test_fallback_is_retried_live_next_time(memory_cache, make_generator):
    """Scenario: quota exhausted, then recovered."""
    generator = make_generator(QuotaExceededError("quota"), json.dumps(LIVE_QUIZ))
    service = make_service(memory_cache, generator)

    first = asyncio.run(service.resolve_with_source(quiz_request()))
    second = asyncio.run(service.resolve_with_source(quiz_request()))

    assert first.was_fallback
    assert second.source is PayloadSource.LIVE
    assert generator.calls == 2


def test_call_error_falls_back(memory_cache, make_generator):
    service = make_service(memory_cache, make_generator(GenerationError("connection reset")))
    resolution = asyncio.run(service.resolve_with_source(quiz_request()))
    assert resolution.failure is FailureKind.CALL_ERROR
    assert resolution.payload == FALLBACK_QUIZ


def test_unparseable_output_falls_back(memory_cache, make_generator):
    service = make_service(memory_cache, make_generator("Sure! Here is your quiz."))
    resolution = asyncio.run(service.resolve_with_source(quiz_request()))
    assert resolution.failure is FailureKind.PARSE_ERROR
    assert memory_cache.stats()["count"] == 0


def test_expired_entry_triggers_new_generation(memory_cache, clock, make_generator):
    generator = make_generator(json.dumps(LIVE_QUIZ))
    service = make_service(memory_cache, generator)

    asyncio.run(service.resolve(quiz_request()))
    clock.advance(86401)
    resolution = asyncio.run(service.resolve_with_source(quiz_request()))

    assert resolution.source is PayloadSource.LIVE
    assert generator.calls == 2


def test_uncached_request_never_touches_cache(memory_cache, make_generator):
    generator = make_generator("Practice SQL joins.")
    service = make_service(memory_cache, generator)
    request = GenerationRequest("improvement_tip", "tip please", TextShape(), None, lambda: None)

    asyncio.run(service.resolve(request))
    asyncio.run(service.resolve(request))

    assert generator.calls == 2
    assert memory_cache.stats()["count"] == 0


def test_fallback_errors_propagate(memory_cache, make_generator):
    def broken():
        raise RuntimeError("broken fallback")

    service = make_service(memory_cache, make_generator(GenerationError("down")))
    with pytest.raises(RuntimeError, match="broken fallback"):
        asyncio.run(service.resolve(quiz_request(fallback=broken)))


def test_distinct_keys_generate_separately(memory_cache, make_generator):
    generator = make_generator(json.dumps(LIVE_QUIZ))
    service = make_service(memory_cache, generator)

    asyncio.run(service.resolve(quiz_request(key=derive_cache_key("quiz", "Finance", []))))
    asyncio.run(service.resolve(quiz_request(key=derive_cache_key("quiz", "Healthcare", []))))

    assert generator.calls == 2


def test_concurrent_misses_each_generate_without_single_flight(memory_cache, make_generator):
    """Without coalescing, both concurrent misses call the generator and the last write wins."""

    async def scenario():
        gate = asyncio.Event()
        generator = make_generator(json.dumps(LIVE_QUIZ), json.dumps(NEWER_QUIZ), gate=gate)
        service = make_service(memory_cache, generator, single_flight=False)
        tasks = [asyncio.create_task(service.resolve(quiz_request())) for _ in range(2)]
        await asyncio.sleep(0)
        gate.set()
        results = await asyncio.gather(*tasks)
        return generator, results

    generator, results = asyncio.run(scenario())
    assert generator.calls == 2
    assert results == [LIVE_QUIZ, NEWER_QUIZ]
    assert memory_cache.get(derive_cache_key("quiz", "Finance", ["Excel"])) == NEWER_QUIZ


def test_single_flight_coalesces_concurrent_misses(memory_cache, make_generator):
    async def scenario():
        gate = asyncio.Event()
        generator = make_generator(json.dumps(LIVE_QUIZ), gate=gate)
        service = make_service(memory_cache, generator, single_flight=True)
        tasks = [asyncio.create_task(service.resolve_with_source(quiz_request())) for _ in range(3)]
        await asyncio.sleep(0)
        gate.set()
        results = await asyncio.gather(*tasks)
        return generator, service, results

    generator, service, results = asyncio.run(scenario())
    assert generator.calls == 1
    assert all(r.payload == LIVE_QUIZ for r in results)
    assert service.metrics.live_calls == 1


def test_single_flight_shares_fallback(memory_cache, make_generator):
    async def scenario():
        gate = asyncio.Event()
        generator = make_generator(QuotaExceededError("quota"), gate=gate)
        service = make_service(memory_cache, generator, single_flight=True)
        tasks = [asyncio.create_task(service.resolve_with_source(quiz_request())) for _ in range(2)]
        await asyncio.sleep(0)
        gate.set()
        return generator, await asyncio.gather(*tasks)

    generator, results = asyncio.run(scenario())
    assert generator.calls == 1
    assert all(r.was_fallback for r in results)


def test_single_flight_waiter_survives_cancelled_leader(memory_cache, make_generator):
    """A waiter takes over the miss when the task it joined is cancelled."""

    async def scenario():
        gate = asyncio.Event()
        generator = make_generator(json.dumps(LIVE_QUIZ), gate=gate)
        service = make_service(memory_cache, generator, single_flight=True)
        leader = asyncio.create_task(service.resolve(quiz_request()))
        await asyncio.sleep(0)
        waiter = asyncio.create_task(service.resolve_with_source(quiz_request()))
        await asyncio.sleep(0)
        leader.cancel()
        gate.set()
        resolution = await waiter
        with pytest.raises(asyncio.CancelledError):
            await leader
        return generator, resolution

    generator, resolution = asyncio.run(scenario())
    assert resolution.source is PayloadSource.LIVE
    assert resolution.payload == LIVE_QUIZ
    assert generator.calls == 2
    assert memory_cache.get(derive_cache_key("quiz", "Finance", ["Excel"])) == LIVE_QUIZ


def test_metrics_and_stats(memory_cache, make_generator):
    generator = make_generator(json.dumps(LIVE_QUIZ), QuotaExceededError("quota"))
    service = make_service(memory_cache, generator)

    asyncio.run(service.resolve(quiz_request()))
    asyncio.run(service.resolve(quiz_request()))
    asyncio.run(service.resolve(quiz_request(key=derive_cache_key("quiz", "Other", []))))

    metrics = service.metrics
    assert metrics.resolutions == 3
    assert metrics.cache_hits == 1
    assert metrics.live_successes == 1
    assert metrics.fallbacks["quota"] == 1
    assert metrics.hit_rate == pytest.approx(1 / 3)

    stats = service.get_stats()
    assert stats["model"] == "fake-model"
    assert stats["cache"]["count"] == 1
    assert stats["generation"]["fallback_count"] == 1
    assert stats["single_flight"] is False


def test_clear_empties_cache(memory_cache, make_generator):
    service = make_service(memory_cache, make_generator(json.dumps(LIVE_QUIZ)))
    asyncio.run(service.resolve(quiz_request()))
    assert service.clear() == 1
    assert memory_cache.get(derive_cache_key("quiz", "Finance", ["Excel"])) is None


def test_is_healthy_reflects_cache(memory_cache, make_generator):
    service = make_service(memory_cache, make_generator(GenerationError("down")))
    assert asyncio.run(service.is_healthy()) is True


@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (QuotaExceededError("limit"), FailureKind.QUOTA),
        (GenerationError("[429 Too Many Requests]"), FailureKind.QUOTA),
        (RuntimeError("RESOURCE_EXHAUSTED: try later"), FailureKind.QUOTA),
        (RuntimeError("You exceeded your current quota"), FailureKind.QUOTA),
        (PayloadParseError("quiz: response is not valid JSON"), FailureKind.PARSE_ERROR),
        (GenerationError("connection refused"), FailureKind.CALL_ERROR),
        (ValueError("boom"), FailureKind.CALL_ERROR),
    ],
)
def test_classify_failure(error, kind):
    assert classify_failure(error) is kind
