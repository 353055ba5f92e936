"""
External lexicon gateway.

Recovers canonical casing for a bare lowercase word ('africa' -> 'Africa')
from a lexical database. WordNet stores proper nouns capitalized, so the
first synset's lemma names carry the casing we want.

The gateway never raises: timeouts, unknown words, a missing corpus and
malformed responses all degrade to the word unchanged.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import List, Optional, Protocol, Sequence

import nltk

from .rules import LOOKUP_TIMEOUT_SECONDS, NLTK_DATA

logger = logging.getLogger(__name__)


class Lexicon(Protocol):
    def lookup(self, word: str) -> Sequence[str]:
        ...


class WordNetLexicon:
    """
    Blocking WordNet lookup through NLTK.

    The corpus is not shipped with the package; install it once with
    ``python -m nltk.downloader wordnet``. It is loaded here, before any
    lookup goes out: NLTK's lazy corpus loader is not safe to trigger from
    several worker threads at once, and loading it inside a lookup would
    eat that word's timeout.
    """

    _load_lock = threading.Lock()

    def __init__(self, data_path: Optional[str] = NLTK_DATA):
        if data_path and data_path not in nltk.data.path:
            nltk.data.path.append(data_path)

        self.corpus = None
        with self._load_lock:
            if self.corpus_available():
                self.corpus = self.load_corpus()
            else:
                logger.warning(
                    "WordNet corpus not found (searched: %s); proper nouns will not be recovered. "
                    "Install it with: python -m nltk.downloader wordnet",
                    nltk.data.path[:3],
                )

    @property
    def available(self) -> bool:
        return self.corpus is not None

    def corpus_available(self) -> bool:
        try:
            nltk.data.find("corpora/wordnet")
        except LookupError:
            return False
        return True

    def load_corpus(self):
        from nltk.corpus import wordnet

        wordnet.ensure_loaded()
        return wordnet

    def lookup(self, word: str) -> List[str]:
        if self.corpus is None:
            raise LookupError("WordNet corpus not installed")

        synsets = self.corpus.synsets(word)
        if not synsets:
            raise LookupError(f"{word!r} not found in WordNet")
        # multiword lemmas are stored with underscores
        return [name.replace("_", " ") for name in synsets[0].lemma_names()]


class LexiconGateway:
    def __init__(self, lexicon: Optional[Lexicon] = None, timeout: float = LOOKUP_TIMEOUT_SECONDS):
        self.lexicon = lexicon if lexicon is not None else WordNetLexicon()
        self.timeout = timeout

    async def resolve_canonical_casing(self, word: str, punctuation: str = "") -> str:
        """
        Canonical casing of ``word`` with ``punctuation`` appended.

        Only a candidate whose lowercase form equals ``word`` is accepted;
        the database may answer 'john' with 'toilet'.
        """
        try:
            candidates = await asyncio.wait_for(
                asyncio.to_thread(self.lexicon.lookup, word),
                timeout=self.timeout,
            )
            for candidate in candidates:
                if isinstance(candidate, str) and candidate.lower() == word:
                    return f"{candidate}{punctuation}"
        except Exception as e:
            logger.debug("lexicon lookup failed for %r: %r", word, e)
        return f"{word}{punctuation}"
