"""Shared fixtures for Sollagarathi tests."""

import asyncio
from collections.abc import Callable

import pytest

from sollagarathi.data import SourceResult
from sollagarathi.store import InMemoryLexiconStore


class FakeAdapter:
    """Adapter returning a canned result, optionally after a delay or by raising."""

    def __init__(
        self,
        name: str,
        *,
        text: str | None = None,
        url: str | None = None,
        error: Exception | None = None,
        failed_reason: str | None = None,
        delay: float = 0.0,
        is_local: bool = False,
    ) -> None:
        self.name = name
        self.label = name
        self.is_local = is_local
        self._text = text
        self._url = url
        self._error = error
        self._failed_reason = failed_reason
        self._delay = delay
        self.calls: list[str] = []

    async def resolve(self, query: str) -> SourceResult:
        self.calls.append(query)
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        if self._failed_reason is not None:
            return SourceResult.failed_with(self.name, self._failed_reason)
        if self._text is not None:
            return SourceResult.inline(self.name, self._text)
        if self._url is not None:
            return SourceResult.link(self.name, self._url, description="see page")
        return SourceResult.absent(self.name)


class FakeSuggester:
    """Suggester returning a fixed list and remembering what it was asked."""

    def __init__(self, candidates: list[str] | None = None) -> None:
        self._candidates = candidates or []
        self.calls: list[str] = []

    async def suggest(self, text: str) -> list[str]:
        self.calls.append(text)
        return list(self._candidates)


@pytest.fixture
def make_adapter() -> Callable[..., FakeAdapter]:
    """Factory for fake source adapters."""
    return FakeAdapter


@pytest.fixture
def suggester() -> FakeSuggester:
    return FakeSuggester(["அறம்"])


@pytest.fixture
def store() -> InMemoryLexiconStore:
    """Store pre-seeded with a single curated entry."""
    return InMemoryLexiconStore([("அறம்", "virtue")])
