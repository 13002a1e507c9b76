from sollagarathi.suggest.base import Suggester
from sollagarathi.suggest.chained import ChainedSuggester
from sollagarathi.suggest.google import GoogleTransliterator
from sollagarathi.suggest.static import DEFAULT_CONCEPTS, StaticConceptSuggester

__all__ = [
    "ChainedSuggester",
    "DEFAULT_CONCEPTS",
    "GoogleTransliterator",
    "StaticConceptSuggester",
    "Suggester",
]
