"""
Override table: lowercase word -> canonical surface form.

Covers abbreviations and proper nouns that the lexicon either lacks or
resolves to the wrong word. Loaded once and read-only afterwards, so it is
safe to share across concurrent word resolutions.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union

from .exceptions import OverrideTableError
from .punctuation import strip_punctuation

DEFAULT_OVERRIDES: Dict[str, str] = {
    "a": "a",
    "aarp": "AARP",
    "aides": "aides",
    "allegan": "Allegan",
    "an": "an",
    "barry": "Barry",
    "berrien": "Berrien",
    "calhoun": "Calhoun",
    "cass": "Cass",
    "dekalb": "Dekalb",
    "eaton": "Eaton",
    "er": "ER",
    "ged": "GED",
    "john": "John",
    "led": "led",
    "st": "St",
    "who": "who",
    "working": "working",
}


class OverrideTable(Mapping[str, str]):
    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._entries = MappingProxyType(dict(entries or {}))

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def canonical_for(self, token: str) -> Optional[str]:
        """Look up a raw token: punctuation stripped, lowercased."""
        return self._entries.get(strip_punctuation(token).lower())

    def is_acronym(self, token: str) -> bool:
        """True when the entry for ``token`` is the word fully uppercased (er -> ER)."""
        canonical = self.canonical_for(token)
        return canonical is not None and canonical == strip_punctuation(token).upper()


def _validated(raw: object, source: str) -> Dict[str, str]:
    if not isinstance(raw, dict):
        raise OverrideTableError(f"{source}: expected a JSON object")

    entries: Dict[str, str] = {}
    for key, value in raw.items():
        word = str(key).lower()
        if not word or strip_punctuation(word) != word:
            raise OverrideTableError(f"{source}: key {key!r} is not an alphanumeric word")
        if not isinstance(value, str):
            raise OverrideTableError(f"{source}: value for {key!r} must be a string")
        entries[word] = value
    return entries


def load_overrides(path: Optional[Union[str, Path]] = None) -> OverrideTable:
    """Built-in table, extended (and overridden) by the JSON object at ``path``."""
    entries = dict(DEFAULT_OVERRIDES)
    if path:
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise OverrideTableError(f"{path}: {e}") from e
        entries.update(_validated(raw, str(path)))
    return OverrideTable(entries)
