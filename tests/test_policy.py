"""Tests for ResolutionPolicy."""

from collections.abc import Callable
from typing import Any

import pytest

from sollagarathi.data import SourceStatus
from sollagarathi.policy import ResolutionMode, ResolutionPolicy


async def test_local_adapters_run_first(make_adapter: Callable[..., Any]) -> None:
    external = make_adapter("Wiktionary", text="from the web")
    local = make_adapter("LocalStore", text="curated", is_local=True)
    policy = ResolutionPolicy([external, local])

    evaluation = await policy.evaluate("அறம்")

    assert [a.name for a in policy.adapters] == ["LocalStore", "Wiktionary"]
    assert evaluation.usable[0].source == "LocalStore"
    assert external.calls == []


async def test_first_match_stops_at_first_usable(make_adapter: Callable[..., Any]) -> None:
    first = make_adapter("A")
    second = make_adapter("B", text="found")
    third = make_adapter("C", text="never asked")
    policy = ResolutionPolicy([first, second, third])

    evaluation = await policy.evaluate("அறம்")

    assert [r.source for r in evaluation.results] == ["A", "B"]
    assert third.calls == []


async def test_first_match_falls_through_failing_adapter(
    make_adapter: Callable[..., Any],
) -> None:
    broken = make_adapter("A", error=RuntimeError("boom"))
    working = make_adapter("B", text="found")
    policy = ResolutionPolicy([broken, working])

    evaluation = await policy.evaluate("அறம்")

    assert evaluation.results[0].status is SourceStatus.FAILED
    assert evaluation.usable[0].source == "B"


async def test_aggregate_collects_all_usable_in_order(
    make_adapter: Callable[..., Any],
) -> None:
    adapters = [
        make_adapter("LocalStore", text="curated", is_local=True),
        make_adapter("Wiktionary", text="web"),
        make_adapter("TamilLexicon"),
        make_adapter("Agarathi", url="https://agarathi.com/word/x"),
    ]
    policy = ResolutionPolicy(adapters, mode=ResolutionMode.AGGREGATE)

    evaluation = await policy.evaluate("அறம்")

    assert len(evaluation.results) == 4
    assert [r.source for r in evaluation.usable] == ["LocalStore", "Wiktionary", "Agarathi"]
    assert [r.source for r in evaluation.external_hits] == ["Wiktionary", "Agarathi"]


async def test_aggregate_survives_erroring_adapter(make_adapter: Callable[..., Any]) -> None:
    adapters = [
        make_adapter("A", error=ConnectionError("down")),
        make_adapter("B", text="still here"),
    ]
    policy = ResolutionPolicy(adapters, mode=ResolutionMode.AGGREGATE)

    evaluation = await policy.evaluate("அறம்")

    assert [r.source for r in evaluation.usable] == ["B"]
    assert evaluation.results[0].failed


async def test_timeout_marks_adapter_failed_without_cancelling_siblings(
    make_adapter: Callable[..., Any],
) -> None:
    slow = make_adapter("Slow", text="too late", delay=1.0)
    fast = make_adapter("Fast", text="quick", delay=0.01)
    policy = ResolutionPolicy([slow, fast], mode=ResolutionMode.AGGREGATE, timeout=0.1)

    evaluation = await policy.evaluate("அறம்")

    slow_result, fast_result = evaluation.results
    assert slow_result.failed
    assert "timed out" in (slow_result.reason or "")
    assert fast_result.usable


async def test_timeout_in_first_match_falls_through(make_adapter: Callable[..., Any]) -> None:
    slow = make_adapter("Slow", text="too late", delay=1.0)
    fallback = make_adapter("Fallback", text="here")
    policy = ResolutionPolicy([slow, fallback], timeout=0.05)

    evaluation = await policy.evaluate("அறம்")

    assert evaluation.usable[0].source == "Fallback"


async def test_mode_override_per_call(make_adapter: Callable[..., Any]) -> None:
    a = make_adapter("A", text="one")
    b = make_adapter("B", text="two")
    policy = ResolutionPolicy([a, b])

    evaluation = await policy.evaluate("அறம்", mode=ResolutionMode.AGGREGATE)

    assert evaluation.mode is ResolutionMode.AGGREGATE
    assert len(evaluation.usable) == 2


async def test_plain_string_modes_are_accepted(make_adapter: Callable[..., Any]) -> None:
    adapters = [make_adapter("A", text="one"), make_adapter("B", text="two")]

    configured = await ResolutionPolicy(adapters, mode="aggregate").evaluate("அறம்")
    overridden = await ResolutionPolicy(adapters).evaluate("அறம்", mode="aggregate")

    for evaluation in (configured, overridden):
        assert evaluation.mode is ResolutionMode.AGGREGATE
        assert [r.source for r in evaluation.usable] == ["A", "B"]


def test_unknown_mode_is_rejected(make_adapter: Callable[..., Any]) -> None:
    with pytest.raises(ValueError):
        ResolutionPolicy([make_adapter("A")], mode="fastest")


async def test_local_failed_and_all_failed(make_adapter: Callable[..., Any]) -> None:
    policy = ResolutionPolicy(
        [
            make_adapter("LocalStore", failed_reason="db down", is_local=True),
            make_adapter("Wiktionary", failed_reason="unreachable"),
        ]
    )

    evaluation = await policy.evaluate("அறம்")

    assert evaluation.local_failed
    assert evaluation.all_failed
    assert evaluation.usable == []


async def test_absent_is_not_all_failed(make_adapter: Callable[..., Any]) -> None:
    policy = ResolutionPolicy(
        [
            make_adapter("LocalStore", failed_reason="db down", is_local=True),
            make_adapter("Wiktionary"),
        ]
    )

    evaluation = await policy.evaluate("அறம்")

    assert evaluation.local_failed
    assert not evaluation.all_failed
