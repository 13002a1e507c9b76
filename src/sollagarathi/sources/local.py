"""Lookup against the curated local lexicon."""

import logging

from sollagarathi.data import SourceResult
from sollagarathi.store.base import LexiconStore, StoreReadError

LOCAL_SOURCE_NAME = "LocalStore"
LOCAL_SOURCE_LABEL = "சொல் அகராதி (Master DB)"

logger = logging.getLogger(__name__)


class LocalStoreAdapter:
    """Resolve queries from the local store by exact lemma match.

    A read failure is reported as ``failed`` rather than ``absent`` so the
    resolver can tell "not in the lexicon" apart from "lexicon unreachable".

    Args:
        store: The shared lexicon store.
    """

    is_local = True

    def __init__(
        self,
        store: LexiconStore,
        *,
        name: str = LOCAL_SOURCE_NAME,
        label: str = LOCAL_SOURCE_LABEL,
    ) -> None:
        self._store = store
        self.name = name
        self.label = label

    async def resolve(self, query: str) -> SourceResult:
        try:
            entry = await self._store.get(query)
        except StoreReadError as exc:
            logger.error("Local store lookup failed for %r: %s", query, exc)
            return SourceResult.failed_with(self.name, str(exc), label=self.label)

        if entry is None:
            return SourceResult.absent(self.name, label=self.label)
        return SourceResult.inline(self.name, entry.body, label=self.label)
