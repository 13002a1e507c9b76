"""Web dictionary pages confirmed by size rather than parsed."""

import logging
from urllib.parse import quote

import httpx

from sollagarathi.data import SourceResult

logger = logging.getLogger(__name__)


class ScrapedPageAdapter:
    """Confirm a word exists on a web dictionary by fetching its page.

    Page bodies are not parsed. A page longer than ``min_length`` bytes is
    taken to hold a real entry (error and "no results" pages are smaller
    than the site's normal skeleton), and the result is a link to it.

    Args:
        name: Source identifier reported in results.
        url_template: Page URL with a ``{query}`` placeholder; the query is
            percent-encoded before substitution.
        min_length: Minimum body size in bytes for the page to count.
        label: Localised display label.
        description: Localised text shown next to the link.
        timeout: Per-request timeout in seconds.
    """

    is_local = False

    def __init__(
        self,
        *,
        name: str,
        url_template: str,
        min_length: int = 500,
        label: str | None = None,
        description: str | None = None,
        timeout: float = 4.0,
    ) -> None:
        if "{query}" not in url_template:
            raise ValueError(f"url_template for {name} must contain a {{query}} placeholder")
        self.name = name
        self.label = label or name
        self._url_template = url_template
        self._min_length = min_length
        self._description = description
        self._timeout = timeout

    def page_url(self, query: str) -> str:
        return self._url_template.format(query=quote(query, safe=""))

    async def resolve(self, query: str) -> SourceResult:
        url = self.page_url(query)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                response = await client.get(url)
                response.raise_for_status()
                size = len(response.content)
        except httpx.HTTPError as exc:
            reason = str(exc) or type(exc).__name__
            logger.warning("%s fetch failed for %r: %s", self.name, query, reason)
            return SourceResult.failed_with(self.name, reason, label=self.label)

        if size <= self._min_length:
            logger.debug("%s page for %r too small (%d bytes)", self.name, query, size)
            return SourceResult.absent(self.name, label=self.label)
        return SourceResult.link(
            self.name, url, description=self._description, label=self.label
        )
