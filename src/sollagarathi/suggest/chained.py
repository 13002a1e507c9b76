"""Combine several suggesters into one ordered candidate list."""

import asyncio
import logging
from collections.abc import Sequence

from sollagarathi.suggest.base import Suggester

logger = logging.getLogger(__name__)


class ChainedSuggester:
    """Query every suggester and merge their candidates.

    Suggesters run concurrently; candidates keep the order of the
    suggesters and duplicates are dropped. A suggester that raises is
    skipped.

    Args:
        suggesters: Suggesters in priority order.
    """

    def __init__(self, suggesters: Sequence[Suggester]) -> None:
        self._suggesters = list(suggesters)

    async def suggest(self, text: str) -> list[str]:
        results = await asyncio.gather(
            *(s.suggest(text) for s in self._suggesters), return_exceptions=True
        )

        seen: set[str] = set()
        merged: list[str] = []
        for i, result in enumerate(results):
            if isinstance(result, BaseException):
                name = type(self._suggesters[i]).__name__
                logger.warning(f"Error in suggester {name}: {str(result)}")
                continue
            for candidate in result:
                if candidate not in seen:
                    seen.add(candidate)
                    merged.append(candidate)
        return merged
