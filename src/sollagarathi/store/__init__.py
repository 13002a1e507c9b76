from sollagarathi.store.base import LexiconStore, StoreError, StoreReadError, StoreWriteError
from sollagarathi.store.memory import InMemoryLexiconStore
from sollagarathi.store.sqlite import SQLiteLexiconStore

__all__ = [
    "InMemoryLexiconStore",
    "LexiconStore",
    "SQLiteLexiconStore",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
]
