"""Data models for Sollagarathi."""

from sollagarathi.data.models import (
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

__all__ = [
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
]
