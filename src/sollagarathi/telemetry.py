"""Search-history recording and the word-of-the-day query."""

import logging

from sollagarathi.data import TermFrequency
from sollagarathi.store.base import LexiconStore, StoreWriteError

logger = logging.getLogger(__name__)


class TelemetryRecorder:
    """Records every Tamil-script query before any source is consulted.

    Recording is best-effort: a failed write is logged and resolution
    carries on.

    Args:
        store: The shared lexicon store.
    """

    def __init__(self, store: LexiconStore) -> None:
        self._store = store

    async def record(self, term: str) -> None:
        try:
            await self._store.append_event(term)
        except StoreWriteError as exc:
            logger.warning("Could not record search for %r: %s", term, exc)

    async def most_frequent(self, n: int = 1) -> list[TermFrequency]:
        """Return the ``n`` most searched terms (ties go to the most recent)."""
        return await self._store.top_by_frequency(n)

    async def word_of_the_day(self) -> TermFrequency | None:
        top = await self.most_frequent(1)
        return top[0] if top else None
