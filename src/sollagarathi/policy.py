"""Source ordering and stop/continue rules for word resolution."""

import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from sollagarathi.data import SourceResult, SourceStatus
from sollagarathi.sources.base import SourceAdapter

DEFAULT_ADAPTER_TIMEOUT = 4.0

logger = logging.getLogger(__name__)


class ResolutionMode(StrEnum):
    """How the adapter list is walked."""

    FIRST_MATCH = "first_match"
    AGGREGATE = "aggregate"


@dataclass(frozen=True)
class AdapterCall:
    """One adapter invocation and how long it took."""

    result: SourceResult
    is_local: bool
    duration_seconds: float = 0.0


@dataclass(frozen=True)
class PolicyEvaluation:
    """Everything observed while evaluating the adapters for one query."""

    mode: ResolutionMode
    calls: tuple[AdapterCall, ...] = field(default_factory=tuple)

    @property
    def results(self) -> list[SourceResult]:
        return [call.result for call in self.calls]

    @property
    def usable(self) -> list[SourceResult]:
        return [call.result for call in self.calls if call.result.usable]

    @property
    def external_hits(self) -> list[SourceResult]:
        return [call.result for call in self.calls if call.result.usable and not call.is_local]

    @property
    def local_failed(self) -> bool:
        return any(call.is_local and call.result.failed for call in self.calls)

    @property
    def all_failed(self) -> bool:
        """True when adapters ran and not one of them could be consulted."""
        return bool(self.calls) and all(call.result.failed for call in self.calls)


class ResolutionPolicy:
    """Orders adapters and decides when resolution stops.

    Local adapters always run (and are presented) before external ones, so
    curated entries are never shadowed by external results. In first-match
    mode adapters run one after another and the first usable result ends
    the walk; in aggregate mode they all run concurrently and every usable
    result is kept, in policy order.

    Args:
        adapters: Source adapters in priority order.
        mode: First-match or aggregate.
        timeout: Upper bound in seconds for any single adapter call.
    """

    def __init__(
        self,
        adapters: Sequence[SourceAdapter],
        *,
        mode: ResolutionMode | str = ResolutionMode.FIRST_MATCH,
        timeout: float = DEFAULT_ADAPTER_TIMEOUT,
    ) -> None:
        # sorted() is stable: externals keep their configured order
        self._adapters = sorted(adapters, key=lambda a: not a.is_local)
        self._mode = ResolutionMode(mode)
        self._timeout = timeout

    @property
    def mode(self) -> ResolutionMode:
        return self._mode

    @property
    def adapters(self) -> list[SourceAdapter]:
        return list(self._adapters)

    async def evaluate(
        self, query: str, *, mode: ResolutionMode | str | None = None
    ) -> PolicyEvaluation:
        """Run the adapters for ``query`` according to the policy.

        Args:
            query: The trimmed Tamil-script query.
            mode: Override the configured mode for this call.

        Returns:
            The evaluation, with calls in policy order.
        """
        mode = ResolutionMode(mode or self._mode)
        if mode is ResolutionMode.AGGREGATE:
            calls = await asyncio.gather(*(self._call(a, query) for a in self._adapters))
            return PolicyEvaluation(mode=mode, calls=tuple(calls))

        observed: list[AdapterCall] = []
        for adapter in self._adapters:
            call = await self._call(adapter, query)
            observed.append(call)
            if call.result.usable:
                break
        return PolicyEvaluation(mode=mode, calls=tuple(observed))

    async def _call(self, adapter: SourceAdapter, query: str) -> AdapterCall:
        """Invoke one adapter with a timeout, never letting it raise."""
        t0 = time.monotonic()
        try:
            result = await asyncio.wait_for(adapter.resolve(query), timeout=self._timeout)
        except TimeoutError:
            logger.warning("%s timed out after %.1fs for %r", adapter.name, self._timeout, query)
            result = SourceResult.failed_with(
                adapter.name, f"timed out after {self._timeout}s", label=adapter.label
            )
        except Exception as exc:
            logger.warning("%s raised for %r: %s", adapter.name, query, exc)
            result = SourceResult.failed_with(adapter.name, repr(exc), label=adapter.label)
        duration = time.monotonic() - t0

        if result.status is SourceStatus.USABLE:
            logger.info("Match found: %s (%s)", adapter.name, query)
        return AdapterCall(result=result, is_local=adapter.is_local, duration_seconds=duration)
