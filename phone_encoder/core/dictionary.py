"""Reverse index from digit key to dictionary words.

WHY: The search repeatedly asks "which words spell exactly these digits?"
for every prefix of the remaining digit string. Answering that by
scanning the word list would be hopeless; a dict keyed by digit string
answers it in one lookup.

HOW: build_dictionary() computes each word's digit key with
keypad.word_to_key() and appends the word to that key's bucket.
load_dictionary() feeds it the lines of a word-list file.

RULES:
- Buckets keep input order, duplicates included
- Words are stored verbatim (quotes, case and all)
- Words whose key is empty are stored under "" and never matched
- The returned dict is treated as read-only by every consumer
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Union

from phone_encoder.core.keypad import word_to_key
from phone_encoder.core.lines import read_lines

logger = logging.getLogger(__name__)

Dictionary = Dict[str, List[str]]


def build_dictionary(words: Iterable[str]) -> Dictionary:
    """Index words by their digit key.

    Args:
        words: Word list in input order. Errors raised while iterating
               (e.g. I/O errors from a file reader) propagate unchanged.

    Returns:
        Mapping from digit key to the words sharing it, in input order.
    """
    dictionary: Dictionary = {}
    for word in words:
        dictionary.setdefault(word_to_key(word), []).append(word)
    return dictionary


def load_dictionary(path: Union[str, Path]) -> Dictionary:
    """Read a one-word-per-line file and index it.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    dictionary = build_dictionary(read_lines(path))
    logger.debug(
        "Loaded %d words under %d keys from %s",
        sum(len(bucket) for bucket in dictionary.values()),
        len(dictionary),
        path,
    )
    return dictionary
