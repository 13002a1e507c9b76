"""Back-fill of externally confirmed words into the local store."""

import logging
from collections.abc import Sequence

from sollagarathi.data import ResultKind, SourceResult
from sollagarathi.store.base import LexiconStore, StoreWriteError

logger = logging.getLogger(__name__)


def render_cached_body(results: Sequence[SourceResult]) -> str:
    """Build the stored body from external results.

    The first inline definition wins. When the sources only confirmed the
    word by linking to their pages, the links are kept instead.
    """
    for result in results:
        if result.kind is ResultKind.INLINE_TEXT and result.payload:
            return result.payload

    lines = []
    for result in results:
        if result.kind is ResultKind.EXTERNAL_LINK and result.payload:
            label = result.label or result.source
            text = f"{label}: {result.payload}"
            if result.description:
                text += f" ({result.description})"
            lines.append(text)
    return "\n".join(lines)


class CacheWriter:
    """Persists words found outside the local lexicon, without overwriting.

    Uses insert-if-absent so that concurrent resolutions of the same word,
    or a hand-curated entry written in the meantime, are left untouched.

    Args:
        store: The shared lexicon store.
    """

    def __init__(self, store: LexiconStore) -> None:
        self._store = store

    async def persist(self, lemma: str, results: Sequence[SourceResult]) -> bool:
        """Insert ``lemma`` into the local store if it is not already there.

        Args:
            lemma: The query that external sources confirmed.
            results: The usable external results for the query.

        Returns:
            True if a new entry was written. Write failures are logged and
            reported as False.
        """
        body = render_cached_body(results)
        try:
            inserted = await self._store.insert_if_absent(lemma, body)
        except StoreWriteError as exc:
            logger.error("Cache-fill for %r failed: %s", lemma, exc)
            return False

        if inserted:
            logger.info("Cached %r into the local lexicon", lemma)
        else:
            logger.debug("%r already in the local lexicon; cache-fill skipped", lemma)
        return inserted
