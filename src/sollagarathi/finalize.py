"""Explicit creation of lexicon entries by editors."""

import html
import logging

from sollagarathi.data import LexiconEntry
from sollagarathi.store.base import LexiconStore

logger = logging.getLogger(__name__)

STUB_TEMPLATE = """\
<article class="entry" data-lemma="{lemma}">
  <h1 class="lemma">{lemma}</h1>
  <section class="meaning"><h2>பொருள்</h2><p></p></section>
  <section class="grammar"><h2>இலக்கணக் குறிப்பு</h2><p></p></section>
  <section class="etymology"><h2>சொற்பிறப்பு</h2><p></p></section>
  <section class="usage"><h2>எடுத்துக்காட்டு</h2><p></p></section>
</article>"""


def render_stub(lemma: str) -> str:
    """Render an entry body for ``lemma`` with every field left empty."""
    return STUB_TEMPLATE.format(lemma=html.escape(lemma, quote=True))


class EntryFinalizer:
    """Writes authoritative entries, replacing any existing body.

    This is the only path that overwrites a stored entry; cache-fill never
    does.

    Args:
        store: The shared lexicon store.
    """

    def __init__(self, store: LexiconStore) -> None:
        self._store = store

    async def finalize(self, lemma: str, body: str | None = None) -> LexiconEntry:
        """Upsert ``lemma`` with ``body``, or with a blank stub if none is given.

        Raises:
            ValueError: If the lemma is blank.
            StoreWriteError: If the upsert fails.
        """
        lemma = lemma.strip()
        if not lemma:
            raise ValueError("lemma must not be empty")
        entry = await self._store.upsert(lemma, body if body is not None else render_stub(lemma))
        logger.info("Finalized entry for %r", lemma)
        return entry
