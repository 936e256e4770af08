"""Configuration defaults and .env loading.

WHY: Centralizes the few configurable values (default input paths, the
acceptance policy, the log level) so they are easy to find, update and
override without touching the CLI.

HOW: python-dotenv loads the .env file on import. Constants are defined
at module level from environment variables with hardcoded fallbacks.

RULES:
- Default input files are relative to the current working directory
- Positional CLI arguments always override DEFAULT_WORDS_FILE and
  DEFAULT_NUMBERS_FILE
- DEFAULT_ACCEPTANCE names an entry in core.acceptance.ACCEPTANCE_POLICIES;
  it is validated when the CLI starts, not here
- LOG_LEVEL is a standard logging level name
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory (where the encoder is run from)
load_dotenv()

DEFAULT_WORDS_FILE = os.getenv("PHONE_ENCODER_WORDS_FILE", "tests/words.txt")
DEFAULT_NUMBERS_FILE = os.getenv("PHONE_ENCODER_NUMBERS_FILE", "tests/numbers.txt")
DEFAULT_ACCEPTANCE = os.getenv("PHONE_ENCODER_ACCEPTANCE", "strict")
LOG_LEVEL = os.getenv("PHONE_ENCODER_LOG_LEVEL", "WARNING").upper()

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
