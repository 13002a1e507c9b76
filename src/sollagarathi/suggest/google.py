"""Latin-to-Tamil transliteration using Google Input Tools."""

import logging
from typing import Any

import httpx

GOOGLE_INPUT_TOOLS_URL = "https://inputtools.google.com/request"

logger = logging.getLogger(__name__)


class GoogleTransliterator:
    """Transliterate romanised Tamil with the Google Input Tools endpoint.

    Any transport error or unexpected response yields no suggestions.

    Args:
        num_candidates: Maximum candidates to request.
        input_tool: Input tool code (``ta-t-i0-und`` is Tamil phonetic).
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        num_candidates: int = 5,
        input_tool: str = "ta-t-i0-und",
        timeout: float = 4.0,
        api_url: str = GOOGLE_INPUT_TOOLS_URL,
    ) -> None:
        self._num = num_candidates
        self._itc = input_tool
        self._timeout = timeout
        self._api_url = api_url

    async def suggest(self, text: str) -> list[str]:
        params: dict[str, str | int] = {
            "text": text,
            "itc": self._itc,
            "num": self._num,
            "cp": 0,
            "cs": 1,
            "ie": "utf-8",
            "oe": "utf-8",
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._api_url, params=params)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Transliteration failed for %r: %s", text, exc)
            return []

        return _parse_candidates(data)[: self._num]


def _parse_candidates(data: Any) -> list[str]:
    """Pull candidate spellings out of ``["SUCCESS", [[input, [c1, c2, ...], ...]]]``."""
    if not isinstance(data, list) or len(data) < 2 or data[0] != "SUCCESS":
        logger.warning("Unexpected transliteration response: %.200r", data)
        return []

    candidates: list[str] = []
    for segment in data[1]:
        if isinstance(segment, list) and len(segment) > 1 and isinstance(segment[1], list):
            candidates.extend(c for c in segment[1] if isinstance(c, str) and c)
    return candidates
