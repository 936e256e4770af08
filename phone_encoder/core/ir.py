"""Segment dataclasses shared by the search, the filters and the formatters.

WHY: A candidate translation is a sequence of two kinds of things: whole
dictionary words and lone digits that could not be encoded. The search
builds these sequences, the acceptance filters inspect them, and the
formatters print them. One small set of types keeps all three in sync.

HOW: Two frozen dataclasses form a closed union:
  WordSegment: a dictionary word, rendered verbatim
  DigitSegment: a single leftover digit 0-9
Segment is the Union of the two; there is no common base class, callers
dispatch with isinstance(). SearchStats holds the run-wide counters.

RULES:
- WordSegment.length is the character count of the word as stored,
  punctuation included
- DigitSegment.length is always 1
- Segments never copy dictionary text; WordSegment holds the same str
  object that lives in the dictionary bucket
- DIGIT_SEGMENTS caches the ten possible digit segments
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class WordSegment:
    """One dictionary word in a candidate translation."""

    text: str

    @property
    def length(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class DigitSegment:
    """A single digit left unencoded because no word matched at its position."""

    digit: int

    @property
    def length(self) -> int:
        return 1

    def __str__(self) -> str:
        return str(self.digit)


Segment = Union[WordSegment, DigitSegment]

DIGIT_SEGMENTS: Tuple[DigitSegment, ...] = tuple(DigitSegment(d) for d in range(10))


@dataclass
class SearchStats:
    """Running totals of complete candidates seen by the search.

    RULES:
    - accepted: candidates that passed the filter and were rendered
    - rejected: candidates that reached the end of the digit string but
      failed the filter (including the empty candidate of a digitless line)
    - accepted + rejected == number of complete search paths
    """

    accepted: int = 0
    rejected: int = 0

    @property
    def total(self) -> int:
        return self.accepted + self.rejected
