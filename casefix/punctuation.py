from __future__ import annotations

import re

_ALNUM = re.compile(r"[A-Za-z0-9]")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def strip_punctuation(token: str) -> str:
    """Return only the ASCII letters and digits of ``token``, in order.

    'r!e,a/d,m.,e' -> 'readme'
    """
    return "".join(_ALNUM.findall(token))


def extract_punctuation(token: str) -> str:
    """Return everything in ``token`` that is not an ASCII letter or digit, in order.

    Punctuation is assumed to trail the word, so callers rebuild a token as
    core + punctuation. Hyphenated words do not survive that ('life-saving'
    would come back as 'lifesaving-').
    """
    return "".join(_NON_ALNUM.findall(token))


def capitalize_first_letter(word: str) -> str:
    """cat -> Cat. The rest of the word is left as-is."""
    return word[:1].upper() + word[1:]
