"""In-process lexicon store."""

import asyncio
from collections.abc import Iterable
from datetime import UTC, datetime

from sollagarathi.data import LexiconEntry, SearchEvent, TermFrequency


class InMemoryLexiconStore:
    """Dict-backed store with the same semantics as the SQLite store.

    Args:
        entries: Optional ``(lemma, body)`` pairs to seed the store with.
    """

    def __init__(self, entries: Iterable[tuple[str, str]] | None = None) -> None:
        self._entries: dict[str, LexiconEntry] = {}
        self._events: list[SearchEvent] = []
        self._lock = asyncio.Lock()
        for lemma, body in entries or ():
            self._entries[lemma] = LexiconEntry(lemma=lemma, body=body, created_at=_now())

    @property
    def events(self) -> list[SearchEvent]:
        return list(self._events)

    async def get(self, lemma: str) -> LexiconEntry | None:
        return self._entries.get(lemma)

    async def insert_if_absent(self, lemma: str, body: str) -> bool:
        async with self._lock:
            if lemma in self._entries:
                return False
            self._entries[lemma] = LexiconEntry(lemma=lemma, body=body, created_at=_now())
            return True

    async def upsert(self, lemma: str, body: str) -> LexiconEntry:
        async with self._lock:
            existing = self._entries.get(lemma)
            created_at = existing.created_at if existing else _now()
            entry = LexiconEntry(lemma=lemma, body=body, created_at=created_at)
            self._entries[lemma] = entry
            return entry

    async def append_event(self, term: str) -> None:
        async with self._lock:
            self._events.append(SearchEvent(term=term, timestamp=_now()))

    async def top_by_frequency(self, n: int = 1) -> list[TermFrequency]:
        counts: dict[str, int] = {}
        latest: dict[str, int] = {}
        for position, event in enumerate(self._events):
            counts[event.term] = counts.get(event.term, 0) + 1
            latest[event.term] = position
        ranked = sorted(counts, key=lambda term: (counts[term], latest[term]), reverse=True)
        return [TermFrequency(term=term, count=counts[term]) for term in ranked[:n]]

    async def close(self) -> None:
        return None


def _now() -> datetime:
    return datetime.now(tz=UTC)
