"""
Deterministic correction rules.

Record format, sentence punctuation and lookup bounds live here so the
splitter, resolver and assembler agree on them.
"""

import os

RECORD_DELIMITER = "\r"  # records are CR-delimited, not LF
FIELD_DELIMITER = ","
QUOTE_CHAR = '"'

SENTENCE_TERMINATORS = frozenset(".?!")
INDEFINITE_ARTICLE = "a"

OUTPUT_ENCODING = "utf-8"

# Per-word bound on a lexicon query; a slow word degrades to "unchanged".
LOOKUP_TIMEOUT_SECONDS = float(os.getenv("CASEFIX_LOOKUP_TIMEOUT", "5.0"))

# Optional JSON file extending the built-in override table.
OVERRIDES_PATH = os.getenv("CASEFIX_OVERRIDES_PATH")

# Extra directory searched for NLTK data (the WordNet corpus).
NLTK_DATA = os.getenv("NLTK_DATA")
