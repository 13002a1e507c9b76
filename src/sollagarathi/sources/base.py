from typing import Protocol

from sollagarathi.data import SourceResult


class SourceAdapter(Protocol):
    """Interface for a single dictionary source (local store or external site).

    Implementations must not raise: transport errors, timeouts and
    unexpected response shapes are reported as a ``failed`` result, and a
    clean miss as an ``absent`` one.
    """

    name: str
    label: str
    is_local: bool

    async def resolve(self, query: str) -> SourceResult:
        """Look up the query in this source.

        Args:
            query: The trimmed user query.

        Returns:
            A normalized result tagged usable, absent or failed.
        """
        ...
