import asyncio
import time

import pytest

from casefix.lexicon import LexiconGateway
from casefix.overrides import OverrideTable, load_overrides


class FakeLexicon:
    """In-memory stand-in for WordNet. Unknown words raise, like a miss."""

    def __init__(self, entries=None, delays=None):
        self.entries = entries or {}
        self.delays = delays or {}
        self.calls = []

    def lookup(self, word):
        self.calls.append(word)
        if word in self.delays:
            time.sleep(self.delays[word])
        if word not in self.entries:
            raise LookupError(word)
        return self.entries[word]


PLACES = {
    "africa": ["Africa"],
    "europe": ["Europe"],
    "manhattan": ["Manhattan", "Manhattan Island"],
    "dog": ["dog", "domestic dog", "Canis familiaris"],
    "john": ["toilet", "can", "commode"],
}


def settle(word_results):
    """Await a list of word results and return the words."""
    async def _gather():
        return list(await asyncio.gather(*word_results))

    return asyncio.run(_gather())


@pytest.fixture
def lexicon():
    return FakeLexicon(PLACES)


@pytest.fixture
def gateway(lexicon):
    return LexiconGateway(lexicon, timeout=1.0)


@pytest.fixture
def overrides():
    return load_overrides()


@pytest.fixture
def empty_overrides():
    return OverrideTable()
