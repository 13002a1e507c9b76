from typing import Protocol


class Suggester(Protocol):
    """Interface for proposing Tamil spellings for a Latin-script query."""

    async def suggest(self, text: str) -> list[str]:
        """Suggest candidate Tamil spellings.

        Args:
            text: The trimmed, non-Tamil query.

        Returns:
            Candidates, best first. Empty when there is nothing to offer or
            the underlying service failed.
        """
        ...
