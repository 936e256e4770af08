"""Command-line interface for the Phone Number Encoder.

WHY: The encoder is a batch tool: read a word list and a numbers file,
print every accepted encoding, report how many candidates were accepted
and rejected. The CLI wires the dictionary, the encoder and stdout
together behind a single command.

HOW: argparse accepts two optional positional paths, defaulting to the
values in config. The dictionary is loaded in full before the first
number is read. Encoded lines go to stdout's binary buffer; status and
errors go to stderr.

RULES:
- Positional arguments: words file, numbers file (both optional)
- No flags beyond --help; other defaults come from config / .env
- Output lines go to stdout, the final counts line to stderr
- Any OSError (missing file, read or write failure) or undecodable
  input prints "Error: ..." to stderr and exits 1
- An unknown acceptance policy or log level in config is reported the
  same way
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from phone_encoder.config import (
    DEFAULT_ACCEPTANCE,
    DEFAULT_NUMBERS_FILE,
    DEFAULT_WORDS_FILE,
    LOG_FORMAT,
    LOG_LEVEL,
)
from phone_encoder.core.acceptance import AcceptancePolicy, get_policy
from phone_encoder.core.dictionary import load_dictionary
from phone_encoder.core.encoder import PhoneNumberEncoder
from phone_encoder.core.ir import SearchStats
from phone_encoder.core.lines import read_lines

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the encodings can be
    piped or diffed.
    """
    print(msg, file=sys.stderr, flush=True)


def _resolve_log_level(name: str) -> int:
    """Map a logging level name to its number.

    Raises:
        ValueError: If name is not a standard logging level.
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError("Unknown log level '{}'".format(name))
    return level


def _run(args: argparse.Namespace, policy: AcceptancePolicy) -> SearchStats:
    """Load the dictionary and encode every number, writing to stdout.

    RULES:
    - The dictionary is fully resident before the numbers file is opened
    - stdout is flushed before returning so write errors surface here
    """
    dictionary = load_dictionary(args.words_file)

    sink = sys.stdout.buffer
    encoder = PhoneNumberEncoder(dictionary, sink, accepts=policy)
    for number in read_lines(args.numbers_file):
        encoder.encode(number)
    sink.flush()

    logger.debug(
        "Encoded %s with policy %s: %d candidates",
        args.numbers_file,
        DEFAULT_ACCEPTANCE,
        encoder.stats.total,
    )
    return encoder.stats


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running the encoder.
    """
    parser = argparse.ArgumentParser(
        prog="phone_encoder",
        description="Encode phone numbers as sequences of dictionary words "
                    "and leftover digits.",
    )

    parser.add_argument(
        "words_file",
        nargs="?",
        default=DEFAULT_WORDS_FILE,
        help="Dictionary file, one word per line (default: %(default)s).",
    )

    parser.add_argument(
        "numbers_file",
        nargs="?",
        default=DEFAULT_NUMBERS_FILE,
        help="Phone numbers file, one number per line (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(level=_resolve_log_level(LOG_LEVEL), format=LOG_FORMAT)
        policy = get_policy(DEFAULT_ACCEPTANCE)
    except ValueError as e:
        # Config errors (unknown log level or acceptance policy)
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    try:
        stats = _run(args, policy)
    except (OSError, UnicodeDecodeError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    _status("Found solutions: {}, rejected: {}".format(stats.accepted, stats.rejected))


if __name__ == "__main__":
    main()
