"""
Correction driver.

Responsibilities:
- encoding detection + decoding of the uploaded bytes
- record splitting
- waiting on every pending word, joining each description in order
- CR-delimited `identifier,"description"` serialization
- reporting
"""

from __future__ import annotations

import asyncio
import base64
import hashlib
import logging
import time
from typing import Any, Dict, List, Tuple

from charset_normalizer import from_bytes

from .lexicon import LexiconGateway
from .overrides import OverrideTable
from .records import Description, split_ids_and_descriptions
from .rules import FIELD_DELIMITER, OUTPUT_ENCODING, QUOTE_CHAR, RECORD_DELIMITER

logger = logging.getLogger(__name__)


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def decode_input(raw: bytes) -> Tuple[str, Dict[str, Any]]:
    """
    Decode input bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is consumed rather than leaking into the first identifier.
    - If decode fails, fall back to UTF-8, then UTF-8 with replacement characters.
    - Carriage returns are left alone; they delimit records.
    """
    detected = None

    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    decode_fallback = False

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8")
            decode_used = "utf-8"
        except UnicodeDecodeError:
            # Last resort: decode with replacement so the batch can continue
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"
        decode_fallback = True

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
        "output": OUTPUT_ENCODING,
    }
    return text, report


async def settle_description(description: Description) -> str:
    if isinstance(description, str):
        return description
    words = await asyncio.gather(*description)
    return " ".join(words).strip()


def render_record(identifier: str, description: str) -> str:
    return f"{identifier}{FIELD_DELIMITER}{QUOTE_CHAR}{description}{QUOTE_CHAR}"


async def correct_text(
    text: str,
    overrides: OverrideTable,
    gateway: LexiconGateway,
) -> Tuple[str, Dict[str, int]]:
    ids, descriptions = split_ids_and_descriptions(text, overrides, gateway)

    corrected = [d for d in descriptions if not isinstance(d, str)]
    stats = {
        "records": len(ids),
        "corrected": len(corrected),
        "passthrough": len(ids) - len(corrected),
        "words_resolved": sum(len(d) for d in corrected),
    }

    # Descriptions settle concurrently; each one is joined only once all of its words are in.
    settled: List[str] = await asyncio.gather(*(settle_description(d) for d in descriptions))

    output = RECORD_DELIMITER.join(render_record(i, d) for i, d in zip(ids, settled))
    return output, stats


async def correct_csv_bytes(
    raw: bytes,
    overrides: OverrideTable,
    gateway: LexiconGateway,
) -> Dict[str, Any]:
    """
    Decode, correct and re-encode a record file.
    Returns a dict matching the API's response envelope.
    """
    started = time.perf_counter()

    text, enc_report = decode_input(raw)
    output, stats = await correct_text(text, overrides, gateway)
    corrected_bytes = output.encode(OUTPUT_ENCODING)

    elapsed = time.perf_counter() - started
    logger.info(
        "corrected %d of %d descriptions in %.3f seconds",
        stats["corrected"], stats["records"], elapsed,
    )

    return {
        "corrected_csv": {
            "sha256": _sha256_hex(corrected_bytes),
            "encoding": OUTPUT_ENCODING,
            "content_b64": base64.b64encode(corrected_bytes).decode("ascii"),
        },
        "report": {
            "summary": {**stats, "elapsed_seconds": elapsed},
            "encoding": enc_report,
        },
    }
