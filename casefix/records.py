"""
Record splitting.

Each CR-delimited line is `identifier,description`. The description may be
wrapped in double quotes and may contain commas of its own, so only the
first comma separates the fields. Quotes are structural and are dropped.
"""

from __future__ import annotations

from typing import List, Tuple, Union

from .classify import is_fully_capitalized
from .exceptions import MalformedRecordError
from .lexicon import LexiconGateway
from .overrides import OverrideTable
from .parser import PendingDescription, parse_description
from .rules import FIELD_DELIMITER, QUOTE_CHAR, RECORD_DELIMITER

Description = Union[str, PendingDescription]


def split_record(line: str, line_number: int) -> Tuple[str, str]:
    identifier, sep, description = line.partition(FIELD_DELIMITER)
    if not sep:
        raise MalformedRecordError(line_number, line)
    return identifier, description.replace(QUOTE_CHAR, "")


def split_ids_and_descriptions(
    data: str,
    overrides: OverrideTable,
    gateway: LexiconGateway,
) -> Tuple[List[str], List[Description]]:
    """
    Split ``data`` into parallel lists of identifiers and descriptions.

    Fully capitalized descriptions are replaced by their pending correction;
    all others are kept verbatim. Every line is validated before any
    correction starts, so a malformed line aborts the batch with no lookups
    in flight.
    """
    records = [
        split_record(line, line_number)
        for line_number, line in enumerate(data.split(RECORD_DELIMITER), start=1)
    ]

    ids: List[str] = []
    descriptions: List[Description] = []
    for identifier, description in records:
        ids.append(identifier)
        if is_fully_capitalized(description):
            descriptions.append(parse_description(description, overrides, gateway))
        else:
            descriptions.append(description)

    return ids, descriptions
