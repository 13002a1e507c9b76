"""Core data models for Sollagarathi."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any


class ResultKind(StrEnum):
    """Shape of the content a source produced for a query."""

    INLINE_TEXT = "inline-text"
    EXTERNAL_LINK = "external-link"
    ABSENT = "absent"


class SourceStatus(StrEnum):
    """Whether a source answered, missed cleanly, or could not be consulted."""

    USABLE = "usable"
    ABSENT = "absent"
    FAILED = "failed"


@dataclass(frozen=True)
class LexiconEntry:
    """A confirmed word held in the local store."""

    lemma: str
    body: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class SourceResult:
    """Normalized answer from a single source adapter.

    ``payload`` is the definition text for ``inline-text`` results and the
    page URL for ``external-link`` results. ``reason`` is only set when the
    adapter failed (transport error, timeout, malformed response, store
    read error).
    """

    source: str
    kind: ResultKind = ResultKind.ABSENT
    status: SourceStatus = SourceStatus.ABSENT
    payload: str | None = None
    description: str | None = None
    label: str | None = None
    reason: str | None = None

    @property
    def usable(self) -> bool:
        return self.status is SourceStatus.USABLE

    @property
    def failed(self) -> bool:
        return self.status is SourceStatus.FAILED

    @classmethod
    def inline(cls, source: str, text: str, *, label: str | None = None) -> "SourceResult":
        return cls(
            source=source,
            kind=ResultKind.INLINE_TEXT,
            status=SourceStatus.USABLE,
            payload=text,
            label=label,
        )

    @classmethod
    def link(
        cls,
        source: str,
        url: str,
        *,
        description: str | None = None,
        label: str | None = None,
    ) -> "SourceResult":
        return cls(
            source=source,
            kind=ResultKind.EXTERNAL_LINK,
            status=SourceStatus.USABLE,
            payload=url,
            description=description,
            label=label,
        )

    @classmethod
    def absent(cls, source: str, *, label: str | None = None) -> "SourceResult":
        return cls(source=source, label=label)

    @classmethod
    def failed_with(
        cls, source: str, reason: str, *, label: str | None = None
    ) -> "SourceResult":
        return cls(source=source, status=SourceStatus.FAILED, label=label, reason=reason)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "source": self.source,
            "kind": str(self.kind),
            "payload": self.payload,
        }
        if self.description is not None:
            data["description"] = self.description
        if self.label is not None:
            data["label"] = self.label
        return data


@dataclass(frozen=True)
class SearchEvent:
    """One submitted query, kept for frequency analysis."""

    term: str
    timestamp: datetime


@dataclass(frozen=True)
class TermFrequency:
    """Grouped search count for a single term."""

    term: str
    count: int


# ============================================================
# Resolution outcomes
# ============================================================


@dataclass(frozen=True)
class Resolved:
    """A single canonical entry was found (first-match mode)."""

    lemma: str
    body: str
    originating_source: str
    degraded: bool = False

    outcome: str = field(default="resolved", init=False)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "outcome": self.outcome,
            "lemma": self.lemma,
            "body": self.body,
            "originatingSource": self.originating_source,
        }
        if self.degraded:
            data["degraded"] = True
        return data


@dataclass(frozen=True)
class Choose:
    """Nothing was resolved; the caller should pick or refine a spelling."""

    candidates: tuple[str, ...] = ()
    degraded: bool = False

    outcome: str = field(default="choose", init=False)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"outcome": self.outcome, "candidates": list(self.candidates)}
        if self.degraded:
            data["degraded"] = True
        return data


@dataclass(frozen=True)
class Aggregate:
    """Every usable source result, in presentation order (aggregate mode)."""

    lemma: str
    results: tuple[SourceResult, ...] = ()
    degraded: bool = False

    outcome: str = field(default="aggregate", init=False)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "outcome": self.outcome,
            "lemma": self.lemma,
            "results": [r.to_dict() for r in self.results],
        }
        if self.degraded:
            data["degraded"] = True
        return data


@dataclass(frozen=True)
class ResolutionFailed:
    """No source at all could be consulted for the query."""

    lemma: str
    reason: str

    outcome: str = field(default="error", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"outcome": self.outcome, "lemma": self.lemma, "reason": self.reason}


Outcome = Resolved | Choose | Aggregate | ResolutionFailed
