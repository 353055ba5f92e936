"""
Word casing resolver.

Decides the casing of one lowercased word. The rules are tried in order and
the first match wins:

  1. At a sentence start, a word whose override entry is the word fully
     uppercased (an acronym, e.g. er -> ER) is fully uppercased.
  2. Otherwise at a sentence start, only the first letter is capitalized.
     An acronym missing from the override table therefore comes out as
     'Hiv' at a sentence start; extend the table rather than reorder.
  3. Single letters other than 'a' are uppercased (i -> I).
  4. A word in the override table takes the table's form.
  5. Everything else is looked up in the external lexicon.

Every result is an awaitable. Rules 1-4 settle immediately; rule 5 settles
when the lookup returns.
"""

from __future__ import annotations

from typing import Awaitable

from .lexicon import LexiconGateway
from .overrides import OverrideTable
from .punctuation import capitalize_first_letter, extract_punctuation, strip_punctuation
from .rules import INDEFINITE_ARTICLE, SENTENCE_TERMINATORS

WordResult = Awaitable[str]


async def settled(value: str) -> str:
    return value


def ends_sentence(word: str) -> bool:
    return word[-1:] in SENTENCE_TERMINATORS


def resolve_word(
    word: str,
    is_sentence_start: bool,
    overrides: OverrideTable,
    gateway: LexiconGateway,
) -> WordResult:
    core = strip_punctuation(word)
    punctuation = extract_punctuation(word)

    if is_sentence_start and overrides.is_acronym(word):
        return settled(word.upper())

    if is_sentence_start:
        return settled(capitalize_first_letter(word))

    if len(core) == 1 and core.isalpha() and core != INDEFINITE_ARTICLE:
        return settled(word.upper())

    canonical = overrides.canonical_for(word)
    if canonical is not None:
        return settled(f"{canonical}{punctuation}")

    return gateway.resolve_canonical_casing(core, punctuation)
