"""Word resolution: script gate, telemetry, source waterfall and cache-fill."""

import logging
from datetime import UTC, datetime

from sollagarathi.cache import CacheWriter, render_cached_body
from sollagarathi.data import (
    Aggregate,
    Choose,
    LexiconEntry,
    Outcome,
    Resolved,
    ResolutionFailed,
    ResultKind,
    TermFrequency,
)
from sollagarathi.finalize import EntryFinalizer
from sollagarathi.policy import PolicyEvaluation, ResolutionMode, ResolutionPolicy
from sollagarathi.script import is_tamil
from sollagarathi.store.base import LexiconStore
from sollagarathi.suggest.base import Suggester
from sollagarathi.telemetry import TelemetryRecorder
from sollagarathi.trace_logger import ResolutionLogger

logger = logging.getLogger(__name__)


class WordResolver:
    """Resolves a user query into a lexicon entry or a set of suggestions.

    Flow for a query:
    1. Latin-script (non-Tamil) queries go straight to the suggester and
       come back as a ``choose`` outcome; nothing else runs.
    2. The query is recorded for search telemetry.
    3. The resolution policy walks the source adapters.
    4. If any external source matched, the query is cached into the local
       store once.
    5. The outcome is built according to the policy mode.

    All collaborators are created once at startup and shared by every
    resolution.

    Args:
        store: The shared lexicon store.
        policy: Adapter ordering and stop rules.
        suggester: Spelling suggester for non-Tamil queries.
        resolution_logger: Optional trace logger.
    """

    def __init__(
        self,
        store: LexiconStore,
        policy: ResolutionPolicy,
        suggester: Suggester,
        *,
        resolution_logger: ResolutionLogger | None = None,
    ) -> None:
        self._store = store
        self._policy = policy
        self._suggester = suggester
        self._telemetry = TelemetryRecorder(store)
        self._cache_writer = CacheWriter(store)
        self._finalizer = EntryFinalizer(store)
        self._resolution_logger = resolution_logger

    @property
    def policy(self) -> ResolutionPolicy:
        return self._policy

    async def resolve(
        self, raw_query: str, *, mode: ResolutionMode | str | None = None
    ) -> Outcome:
        """Resolve a query.

        Args:
            raw_query: The query as typed by the user.
            mode: Override the policy's configured mode for this call.

        Returns:
            A ``resolved``, ``choose``, ``aggregate`` or ``error`` outcome.
        """
        query = raw_query.strip()
        if not query:
            return Choose()

        if not is_tamil(query):
            return await self._suggest(query)

        logger.info("Searching for: %s", query)
        started_at = datetime.now(tz=UTC)
        await self._telemetry.record(query)

        evaluation = await self._policy.evaluate(query, mode=mode)
        if evaluation.local_failed:
            logger.warning(
                "Local lexicon unavailable for %r; answering from external sources", query
            )

        cache_filled = False
        external_hits = evaluation.external_hits
        if external_hits:
            cache_filled = await self._cache_writer.persist(query, external_hits)

        outcome = _build_outcome(query, evaluation)
        if isinstance(outcome, Choose):
            logger.info("No results found for query: %s", query)

        if self._resolution_logger:
            try:
                self._resolution_logger.write(
                    query,
                    evaluation,
                    outcome,
                    started_at=started_at,
                    cache_filled=cache_filled,
                )
            except OSError as exc:
                logger.warning("Could not write resolution trace for %r: %s", query, exc)
        return outcome

    async def finalize(self, lemma: str, body: str | None = None) -> LexiconEntry:
        """Create or overwrite the entry for ``lemma`` (see ``EntryFinalizer``)."""
        return await self._finalizer.finalize(lemma, body)

    async def word_of_the_day(self) -> TermFrequency | None:
        """Return the most searched term, or None when nothing was searched yet."""
        return await self._telemetry.word_of_the_day()

    async def close(self) -> None:
        await self._store.close()

    async def _suggest(self, query: str) -> Choose:
        try:
            candidates = await self._suggester.suggest(query)
        except Exception as exc:
            logger.warning("Suggester failed for %r: %s", query, exc)
            candidates = []
        return Choose(candidates=tuple(candidates) or (query,))


def _build_outcome(query: str, evaluation: PolicyEvaluation) -> Outcome:
    if evaluation.all_failed:
        reasons = "; ".join(f"{r.source}: {r.reason}" for r in evaluation.results)
        logger.error("No source could be consulted for %r (%s)", query, reasons)
        return ResolutionFailed(lemma=query, reason=reasons)

    degraded = evaluation.local_failed
    usable = evaluation.usable

    if evaluation.mode is ResolutionMode.AGGREGATE:
        return Aggregate(lemma=query, results=tuple(usable), degraded=degraded)

    if not usable:
        return Choose(candidates=(query,), degraded=degraded)

    hit = usable[0]
    if hit.kind is ResultKind.INLINE_TEXT:
        body = hit.payload or ""
    else:
        body = render_cached_body([hit])
    return Resolved(lemma=query, body=body, originating_source=hit.source, degraded=degraded)
