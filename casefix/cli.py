"""Correct a record file on disk: data.csv -> newdata.csv."""

import argparse
import asyncio
import logging
import os
import time
from pathlib import Path

from .correct import correct_text, decode_input
from .exceptions import MalformedRecordError, OverrideTableError
from .lexicon import LexiconGateway
from .overrides import load_overrides
from .rules import LOOKUP_TIMEOUT_SECONDS, OUTPUT_ENCODING, OVERRIDES_PATH

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="casefix",
        description="Rewrite fully capitalized descriptions in sentence case.",
    )
    parser.add_argument("input", nargs="?", default="data.csv", help="CR-delimited record file (default: data.csv)")
    parser.add_argument("output", nargs="?", default="newdata.csv", help="where to write the result (default: newdata.csv)")
    parser.add_argument("--overrides", default=OVERRIDES_PATH, help="JSON object extending the built-in override table")
    parser.add_argument("--timeout", type=float, default=LOOKUP_TIMEOUT_SECONDS, help="seconds allowed per lexicon lookup")
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "INFO").upper())
    return parser


def run(input_path: Path, output_path: Path, overrides_path=None, timeout: float = LOOKUP_TIMEOUT_SECONDS) -> dict:
    overrides = load_overrides(overrides_path)
    gateway = LexiconGateway(timeout=timeout)

    text, enc_report = decode_input(input_path.read_bytes())
    logger.debug("decoded %s as %s", input_path, enc_report["decode_used"])

    output, stats = asyncio.run(correct_text(text, overrides, gateway))
    output_path.write_bytes(output.encode(OUTPUT_ENCODING))
    return stats


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info("starting correction of %s", args.input)
    started = time.perf_counter()
    try:
        stats = run(Path(args.input), Path(args.output), args.overrides, args.timeout)
    except (MalformedRecordError, OverrideTableError, OSError) as e:
        logger.error("%s", e)
        return 1

    logger.info(
        "file written to %s (%d records, %d corrected), time elapsed: %.3f seconds",
        args.output, stats["records"], stats["corrected"], time.perf_counter() - started,
    )
    return 0
