"""Configuration module for Sollagarathi."""

from sollagarathi.config.factory import create_from_config
from sollagarathi.config.loader import get_default_config_path, load_config
from sollagarathi.config.models import (
    GoogleSuggesterConfig,
    LoggingConfig,
    MemoryStoreConfig,
    ResolverConfig,
    ScrapedSourceConfig,
    SollagarathiConfig,
    SourceConfig,
    SQLiteStoreConfig,
    StaticSuggesterConfig,
    StoreConfig,
    SuggesterConfig,
    WiktionarySourceConfig,
)

__all__ = [
    "GoogleSuggesterConfig",
    "LoggingConfig",
    "MemoryStoreConfig",
    "ResolverConfig",
    "SQLiteStoreConfig",
    "ScrapedSourceConfig",
    "SollagarathiConfig",
    "SourceConfig",
    "StaticSuggesterConfig",
    "StoreConfig",
    "SuggesterConfig",
    "WiktionarySourceConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
