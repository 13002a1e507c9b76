from sollagarathi.sources.base import SourceAdapter
from sollagarathi.sources.local import LOCAL_SOURCE_NAME, LocalStoreAdapter
from sollagarathi.sources.scraped import ScrapedPageAdapter
from sollagarathi.sources.wiktionary import WiktionaryAdapter

__all__ = [
    "LOCAL_SOURCE_NAME",
    "LocalStoreAdapter",
    "ScrapedPageAdapter",
    "SourceAdapter",
    "WiktionaryAdapter",
]
