"""Factory functions to create components from configuration."""

import os
from pathlib import Path

from sollagarathi.config.models import (
    GoogleSuggesterConfig,
    MemoryStoreConfig,
    ScrapedSourceConfig,
    SollagarathiConfig,
    SourceConfig,
    SQLiteStoreConfig,
    StaticSuggesterConfig,
    StoreConfig,
    SuggesterConfig,
    WiktionarySourceConfig,
)
from sollagarathi.policy import ResolutionMode, ResolutionPolicy
from sollagarathi.resolver import WordResolver
from sollagarathi.sources.base import SourceAdapter
from sollagarathi.sources.local import LocalStoreAdapter
from sollagarathi.sources.scraped import ScrapedPageAdapter
from sollagarathi.sources.wiktionary import WiktionaryAdapter
from sollagarathi.store.base import LexiconStore
from sollagarathi.store.memory import InMemoryLexiconStore
from sollagarathi.store.sqlite import SQLiteLexiconStore
from sollagarathi.suggest.base import Suggester
from sollagarathi.suggest.chained import ChainedSuggester
from sollagarathi.suggest.google import GoogleTransliterator
from sollagarathi.suggest.static import StaticConceptSuggester
from sollagarathi.trace_logger import ResolutionLogger

DB_PATH_ENV_VAR = "SOLLAGARATHI_DB_PATH"


def create_store(config: StoreConfig) -> LexiconStore:
    """Create the lexicon store from config.

    The SQLite path may be overridden with the SOLLAGARATHI_DB_PATH env var.
    """
    if isinstance(config, MemoryStoreConfig):
        return InMemoryLexiconStore(config.entries.items())
    if isinstance(config, SQLiteStoreConfig):
        return SQLiteLexiconStore(os.environ.get(DB_PATH_ENV_VAR) or config.path)
    msg = f"Unknown store config type: {type(config)}"
    raise ValueError(msg)


def create_adapter(config: SourceConfig, *, timeout: float) -> SourceAdapter:
    """Create an external source adapter from config."""
    if isinstance(config, WiktionarySourceConfig):
        return WiktionaryAdapter(
            api_url=config.api_url,
            timeout=timeout,
            name=config.name,
            label=config.label,
        )
    if isinstance(config, ScrapedSourceConfig):
        return ScrapedPageAdapter(
            name=config.name,
            url_template=config.url_template,
            min_length=config.min_length,
            label=config.label,
            description=config.description,
            timeout=timeout,
        )
    msg = f"Unknown source config type: {type(config)}"
    raise ValueError(msg)


def create_suggester(config: SuggesterConfig, *, timeout: float) -> Suggester:
    """Create a spelling suggester from config."""
    if isinstance(config, StaticSuggesterConfig):
        return StaticConceptSuggester(config.concepts)
    if isinstance(config, GoogleSuggesterConfig):
        return GoogleTransliterator(
            num_candidates=config.num_candidates,
            input_tool=config.input_tool,
            timeout=timeout,
        )
    msg = f"Unknown suggester config type: {type(config)}"
    raise ValueError(msg)


def create_policy(
    config: SollagarathiConfig,
    store: LexiconStore,
    *,
    mode_override: ResolutionMode | None = None,
) -> ResolutionPolicy:
    """Create the resolution policy: the local store followed by configured sources."""
    timeout = config.resolver.timeout_seconds
    adapters: list[SourceAdapter] = [LocalStoreAdapter(store)]
    adapters.extend(create_adapter(s, timeout=timeout) for s in config.sources)
    return ResolutionPolicy(
        adapters,
        mode=mode_override or config.resolver.mode,
        timeout=timeout,
    )


def create_from_config(
    config: SollagarathiConfig,
    *,
    mode_override: ResolutionMode | None = None,
    trace_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[WordResolver, ResolutionLogger | None]:
    """Create a complete resolver from root config.

    Args:
        config: Root configuration.
        mode_override: Override the configured resolution mode.
        trace_override: Override the config's logging.trace_enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (resolver, resolution_logger).
        resolution_logger is None if tracing is disabled.
    """
    trace_enabled = (
        trace_override if trace_override is not None else config.logging.trace_enabled
    )
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    resolution_logger: ResolutionLogger | None = None
    if trace_enabled:
        resolution_logger = ResolutionLogger(log_dir=log_dir, enabled=True)

    store = create_store(config.store)
    policy = create_policy(config, store, mode_override=mode_override)
    timeout = config.resolver.timeout_seconds
    suggester = ChainedSuggester([create_suggester(s, timeout=timeout) for s in config.suggesters])

    resolver = WordResolver(store, policy, suggester, resolution_logger=resolution_logger)
    return (resolver, resolution_logger)
