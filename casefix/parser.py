from __future__ import annotations

from typing import List

from .lexicon import LexiconGateway
from .overrides import OverrideTable
from .resolver import WordResult, ends_sentence, resolve_word

PendingDescription = List[WordResult]


def parse_description(
    description: str,
    overrides: OverrideTable,
    gateway: LexiconGateway,
) -> PendingDescription:
    """
    Lowercase ``description`` and resolve the casing of each space-separated word.

    Returns one awaitable per word, in order. Nothing is joined or awaited
    here; the sentence-start flag carries from each word to the next.
    """
    sentence_start = True
    parsed: PendingDescription = []

    for word in description.lower().split(" "):
        parsed.append(resolve_word(word, sentence_start, overrides, gateway))
        sentence_start = ends_sentence(word)

    return parsed
