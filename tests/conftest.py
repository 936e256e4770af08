"""Shared test fixtures for the phone_encoder test suite.

WHY: Most test modules need the same sample dictionary and phone numbers:
the classic German word list from the phone-encoding puzzle. Centralizing
them here avoids duplication and keeps every expectation traceable to one
data set.

HOW: SAMPLE_WORDS and SAMPLE_NUMBERS mirror tests/words.txt and
tests/numbers.txt (which are also the CLI defaults). Fixtures provide the
built dictionary, a byte sink, and a recording formatter that captures
every rendered segmentation as a tuple.

RULES:
- SAMPLE_WORDS order matters: it fixes bucket order and output order
- Quotes in words stand in for umlauts and are ignored for digit keys
- RecordingFormatter copies the stack; the encoder mutates it afterwards
"""

import io
from typing import BinaryIO, List, Sequence, Tuple

import pytest

from phone_encoder.core.dictionary import build_dictionary
from phone_encoder.core.ir import Segment
from phone_encoder.formatters.base import BaseFormatter


SAMPLE_WORDS: List[str] = [
    "an", "blau", 'Bo"', "Boot", 'bo"s', "da", "Fee", "fern", "Fest", "fort",
    "je", "jemand", "mir", "Mix", "Mixer", "Name", "neu", 'o"d', "Ort", "so",
    "Tor", "Torf", "Wasser",
]

SAMPLE_NUMBERS: List[str] = [
    "112", "5624-82", "4824", "0721/608-4067", "10/783--5", "1078-913-5",
    "381482", "04824",
]

# Output of the sample run under the strict (default) acceptance policy.
STRICT_SAMPLE_OUTPUT = (
    "4824: Tor 4\n"
    "4824: fort\n"
    "4824: Torf\n"
    "04824: 0 Tor 4\n"
    "04824: 0 fort\n"
    "04824: 0 Torf\n"
)

# Output of the sample run under the classic policy (the puzzle's published answer).
CLASSIC_SAMPLE_OUTPUT = (
    "5624-82: mir Tor\n"
    "5624-82: Mix Tor\n"
    "4824: Tor 4\n"
    "4824: fort\n"
    "4824: Torf\n"
    '10/783--5: je Bo" da\n'
    '10/783--5: je bo"s 5\n'
    '10/783--5: neu o"d 5\n'
    "381482: so 1 Tor\n"
    "04824: 0 Tor 4\n"
    "04824: 0 fort\n"
    "04824: 0 Torf\n"
)


class RecordingFormatter(BaseFormatter):
    """Formatter that records (number, segments) instead of writing."""

    def __init__(self) -> None:
        self.rendered: List[Tuple[str, Tuple[Segment, ...]]] = []

    @property
    def name(self) -> str:
        return "Recording"

    def render(self, number: str, stack: Sequence[Segment], sink: BinaryIO) -> None:
        self.rendered.append((number, tuple(stack)))


@pytest.fixture
def sample_words():
    return list(SAMPLE_WORDS)


@pytest.fixture
def sample_numbers():
    return list(SAMPLE_NUMBERS)


@pytest.fixture
def strict_sample_output():
    return STRICT_SAMPLE_OUTPUT


@pytest.fixture
def classic_sample_output():
    return CLASSIC_SAMPLE_OUTPUT


@pytest.fixture
def sample_dictionary():
    return build_dictionary(SAMPLE_WORDS)


@pytest.fixture
def sink():
    return io.BytesIO()


@pytest.fixture
def recorder():
    return RecordingFormatter()


@pytest.fixture
def sample_files(tmp_path):
    """Write the sample word list and numbers to tmp files; return their paths."""
    words = tmp_path / "words.txt"
    words.write_text("\n".join(SAMPLE_WORDS) + "\n", encoding="utf-8")
    numbers = tmp_path / "numbers.txt"
    numbers.write_text("\n".join(SAMPLE_NUMBERS) + "\n", encoding="utf-8")
    return words, numbers
