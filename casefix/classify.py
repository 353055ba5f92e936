from __future__ import annotations

import string


def is_fully_capitalized(description: str) -> bool:
    """
    True when every space-separated word starts with an uppercase ASCII letter.

    "The Dog Fetched The Stick" -> True
    "The dog fetched the stick" -> False

    Consecutive spaces yield empty words, which never pass.
    """
    return all(
        word and word[0] in string.ascii_uppercase
        for word in description.split(" ")
    )
