"""Tamil Wiktionary lookup via the MediaWiki extracts API."""

import logging
from typing import Any

import httpx

from sollagarathi.data import SourceResult

WIKTIONARY_API_URL = "https://ta.wiktionary.org/w/api.php"

logger = logging.getLogger(__name__)


class MalformedResponseError(ValueError):
    """The API answered with a payload we could not interpret."""


class WiktionaryAdapter:
    """Fetch plain-text page extracts from a MediaWiki dictionary.

    A result is usable when the page for the requested title carries a
    non-empty ``extract``. The query is passed as a request parameter, so
    httpx takes care of URL-encoding Tamil text.

    Args:
        api_url: MediaWiki ``api.php`` endpoint.
        timeout: Per-request timeout in seconds.
        name: Source identifier reported in results.
        label: Localised display label.
    """

    is_local = False

    def __init__(
        self,
        *,
        api_url: str = WIKTIONARY_API_URL,
        timeout: float = 4.0,
        name: str = "Wiktionary",
        label: str = "விக்சனரி (Wiktionary)",
    ) -> None:
        self._api_url = api_url
        self._timeout = timeout
        self.name = name
        self.label = label

    async def resolve(self, query: str) -> SourceResult:
        params = {
            "action": "query",
            "format": "json",
            "prop": "extracts",
            "explaintext": "1",
            "titles": query,
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._api_url, params=params)
                response.raise_for_status()
                data = response.json()
            extract = _find_extract(data, query)
        except (httpx.HTTPError, ValueError) as exc:
            reason = str(exc) or type(exc).__name__
            logger.warning("Wiktionary lookup failed for %r: %s", query, reason)
            return SourceResult.failed_with(self.name, reason, label=self.label)

        if not extract:
            return SourceResult.absent(self.name, label=self.label)
        return SourceResult.inline(self.name, extract, label=self.label)


def _find_extract(data: Any, title: str) -> str | None:
    """Pick the extract for ``title`` out of an ``action=query`` response.

    MediaWiki may rewrite the title (``query.normalized``) before keying
    pages by id, so the normalized form is matched first; a single-page
    response is accepted as-is.

    Raises:
        MalformedResponseError: If the response lacks ``query.pages``.
    """
    try:
        query_block = data["query"]
        pages = query_block["pages"]
    except (KeyError, TypeError) as exc:
        raise MalformedResponseError(f"unexpected Wiktionary response: missing {exc}") from exc
    if not isinstance(pages, dict):
        raise MalformedResponseError("unexpected Wiktionary response: pages is not a mapping")

    wanted = title
    for mapping in query_block.get("normalized", []):
        if mapping.get("from") == title:
            wanted = mapping.get("to", title)

    candidates = [page for page in pages.values() if isinstance(page, dict)]
    page = next((p for p in candidates if p.get("title") == wanted), None)
    if page is None and len(candidates) == 1:
        page = candidates[0]
    if page is None or "missing" in page:
        return None

    extract = page.get("extract")
    if not isinstance(extract, str) or not extract.strip():
        return None
    return extract.strip()
