"""Sollagarathi: Tamil word resolution across a curated lexicon and web dictionaries."""

from sollagarathi.cache import CacheWriter, render_cached_body
from sollagarathi.config import SollagarathiConfig, create_from_config, load_config
from sollagarathi.data import (
    Aggregate,
    Choose,
    LexiconEntry,
    Outcome,
    Resolved,
    ResolutionFailed,
    ResultKind,
    SearchEvent,
    SourceResult,
    SourceStatus,
    TermFrequency,
)
from sollagarathi.finalize import EntryFinalizer, render_stub
from sollagarathi.policy import PolicyEvaluation, ResolutionMode, ResolutionPolicy
from sollagarathi.resolver import WordResolver
from sollagarathi.script import is_tamil
from sollagarathi.sources import (
    LocalStoreAdapter,
    ScrapedPageAdapter,
    SourceAdapter,
    WiktionaryAdapter,
)
from sollagarathi.store import (
    InMemoryLexiconStore,
    LexiconStore,
    SQLiteLexiconStore,
    StoreError,
    StoreReadError,
    StoreWriteError,
)
from sollagarathi.suggest import (
    ChainedSuggester,
    GoogleTransliterator,
    StaticConceptSuggester,
    Suggester,
)
from sollagarathi.telemetry import TelemetryRecorder
from sollagarathi.trace_logger import ResolutionLogger

__all__ = [
    # Models
    "Aggregate",
    "Choose",
    "LexiconEntry",
    "Outcome",
    "ResolutionFailed",
    "Resolved",
    "ResultKind",
    "SearchEvent",
    "SourceResult",
    "SourceStatus",
    "TermFrequency",
    # Protocols
    "LexiconStore",
    "SourceAdapter",
    "Suggester",
    # Stores
    "InMemoryLexiconStore",
    "SQLiteLexiconStore",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    # Sources
    "LocalStoreAdapter",
    "ScrapedPageAdapter",
    "WiktionaryAdapter",
    # Suggesters
    "ChainedSuggester",
    "GoogleTransliterator",
    "StaticConceptSuggester",
    # Resolution
    "CacheWriter",
    "EntryFinalizer",
    "PolicyEvaluation",
    "ResolutionMode",
    "ResolutionPolicy",
    "TelemetryRecorder",
    "WordResolver",
    # Functions
    "is_tamil",
    "render_cached_body",
    "render_stub",
    # Logging
    "ResolutionLogger",
    # Config
    "SollagarathiConfig",
    "create_from_config",
    "load_config",
]
