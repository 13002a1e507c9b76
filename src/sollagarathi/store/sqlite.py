"""SQLite-backed lexicon store."""

import asyncio
import logging
import os
import sqlite3
import threading
from datetime import UTC, datetime

from sollagarathi.data import LexiconEntry, TermFrequency
from sollagarathi.store.base import StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS master_entries (
    lemma TEXT PRIMARY KEY,
    entry TEXT NOT NULL,
    created_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS search_history (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    term TEXT NOT NULL,
    searched_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_search_history_term ON search_history(term);
"""


class SQLiteLexiconStore:
    """Lexicon store persisted to a single SQLite file.

    One connection is opened for the lifetime of the store and shared by all
    resolutions; blocking calls run in a worker thread so the event loop is
    never held up by disk I/O.

    Args:
        db_path: Path to the database file (``":memory:"`` for a scratch DB).
    """

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path
        if db_path != ":memory:":
            directory = os.path.dirname(os.path.abspath(db_path))
            os.makedirs(directory, exist_ok=True)
        self._lock = threading.Lock()
        self._connection = sqlite3.connect(db_path, check_same_thread=False)
        try:
            self._connection.execute("PRAGMA journal_mode=WAL")
        except sqlite3.Error as exc:
            logger.warning("SQLite WAL mode unavailable: %s", exc)
        with self._connection:
            self._connection.executescript(_SCHEMA)
        logger.info("SQLite lexicon store opened at %s", db_path)

    async def get(self, lemma: str) -> LexiconEntry | None:
        def _get() -> LexiconEntry | None:
            with self._lock:
                row = self._connection.execute(
                    "SELECT lemma, entry, created_at FROM master_entries WHERE lemma = ?",
                    (lemma,),
                ).fetchone()
            if row is None:
                return None
            return LexiconEntry(
                lemma=row[0], body=row[1], created_at=datetime.fromisoformat(row[2])
            )

        try:
            return await asyncio.to_thread(_get)
        except sqlite3.Error as exc:
            raise StoreReadError(f"lookup of {lemma!r} failed: {exc}") from exc

    async def insert_if_absent(self, lemma: str, body: str) -> bool:
        def _insert() -> bool:
            with self._lock, self._connection:
                cursor = self._connection.execute(
                    "INSERT INTO master_entries (lemma, entry, created_at) VALUES (?, ?, ?) "
                    "ON CONFLICT(lemma) DO NOTHING",
                    (lemma, body, _now_iso()),
                )
            return cursor.rowcount > 0

        try:
            return await asyncio.to_thread(_insert)
        except sqlite3.Error as exc:
            raise StoreWriteError(f"insert of {lemma!r} failed: {exc}") from exc

    async def upsert(self, lemma: str, body: str) -> LexiconEntry:
        def _upsert() -> LexiconEntry:
            with self._lock, self._connection:
                self._connection.execute(
                    "INSERT INTO master_entries (lemma, entry, created_at) VALUES (?, ?, ?) "
                    "ON CONFLICT(lemma) DO UPDATE SET entry = excluded.entry",
                    (lemma, body, _now_iso()),
                )
                row = self._connection.execute(
                    "SELECT created_at FROM master_entries WHERE lemma = ?", (lemma,)
                ).fetchone()
            return LexiconEntry(
                lemma=lemma, body=body, created_at=datetime.fromisoformat(row[0])
            )

        try:
            return await asyncio.to_thread(_upsert)
        except sqlite3.Error as exc:
            raise StoreWriteError(f"upsert of {lemma!r} failed: {exc}") from exc

    async def append_event(self, term: str) -> None:
        def _append() -> None:
            with self._lock, self._connection:
                self._connection.execute(
                    "INSERT INTO search_history (term, searched_at) VALUES (?, ?)",
                    (term, _now_iso()),
                )

        try:
            await asyncio.to_thread(_append)
        except sqlite3.Error as exc:
            raise StoreWriteError(f"recording search for {term!r} failed: {exc}") from exc

    async def top_by_frequency(self, n: int = 1) -> list[TermFrequency]:
        def _top() -> list[TermFrequency]:
            with self._lock:
                rows = self._connection.execute(
                    "SELECT term, COUNT(*) AS hits FROM search_history "
                    "GROUP BY term ORDER BY hits DESC, MAX(id) DESC LIMIT ?",
                    (n,),
                ).fetchall()
            return [TermFrequency(term=row[0], count=row[1]) for row in rows]

        try:
            return await asyncio.to_thread(_top)
        except sqlite3.Error as exc:
            raise StoreReadError(f"frequency query failed: {exc}") from exc

    async def close(self) -> None:
        def _close() -> None:
            with self._lock:
                self._connection.close()

        await asyncio.to_thread(_close)


def _now_iso() -> str:
    return datetime.now(tz=UTC).isoformat()
