from typing import Protocol

from sollagarathi.data import LexiconEntry, TermFrequency


class StoreError(Exception):
    """Base class for persistent store failures."""


class StoreReadError(StoreError):
    """A lookup could not be performed (distinct from "no such row")."""


class StoreWriteError(StoreError):
    """An insert, upsert or event append could not be performed."""


class LexiconStore(Protocol):
    """Interface for the persistent lexicon and search-history store."""

    async def get(self, lemma: str) -> LexiconEntry | None:
        """Look up an entry by its lemma.

        Returns:
            The entry, or None when no row exists.

        Raises:
            StoreReadError: If the store could not be queried.
        """
        ...

    async def insert_if_absent(self, lemma: str, body: str) -> bool:
        """Insert an entry unless one already exists for the lemma.

        Returns:
            True if a row was inserted, False if the lemma was already present.

        Raises:
            StoreWriteError: If the write could not be performed.
        """
        ...

    async def upsert(self, lemma: str, body: str) -> LexiconEntry:
        """Insert an entry or overwrite the body of the existing one.

        Raises:
            StoreWriteError: If the write could not be performed.
        """
        ...

    async def append_event(self, term: str) -> None:
        """Append a search event for the given term.

        Raises:
            StoreWriteError: If the write could not be performed.
        """
        ...

    async def top_by_frequency(self, n: int = 1) -> list[TermFrequency]:
        """Return the ``n`` most searched terms, most frequent first.

        Ties are ordered by the most recent search.

        Raises:
            StoreReadError: If the store could not be queried.
        """
        ...

    async def close(self) -> None:
        """Release any held connections."""
        ...
