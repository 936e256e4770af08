"""Recursive backtracking search over a phone number's digit string.

WHY: A phone number can be split into words in many ways, and a prefix
that matches a word says nothing about whether the rest of the number can
be encoded. The only reliable approach is to try every split depth-first,
undoing each choice on the way back up.

HOW: PhoneNumberEncoder.encode() strips a number line down to its digits
and starts _search() with an empty segment stack. At every position the
search tries each prefix, shortest first, and for every dictionary word
spelling that prefix pushes a WordSegment, recurses on the rest, and pops
it again. When no word matches at a position it falls back to a single
DigitSegment, unless the stack already ends in one. When the digits run
out, the acceptance policy decides whether the formatter renders the
stack.

RULES:
- Enumeration order: prefix length ascending, then dictionary bucket order
- A word match at a position suppresses the digit fallback at that
  position only; deeper positions decide for themselves
- Two digit segments are never adjacent on the stack
- A dead end (no word, digit not allowed) is not an error
- Every complete path increments exactly one counter in SearchStats
- A digitless number line yields one empty candidate: it is rendered as a
  bare "<number>:" and counted as rejected. No newline follows it, so the
  next line of output continues on the same physical line
- The recursion limit is raised to cover the digit string before searching
- Sink write errors propagate and abort the run
"""

from __future__ import annotations

import sys
from typing import BinaryIO, Dict, List, Optional

from phone_encoder.core.acceptance import AcceptancePolicy, accepts
from phone_encoder.core.dictionary import Dictionary
from phone_encoder.core.ir import DIGIT_SEGMENTS, DigitSegment, SearchStats, Segment, WordSegment
from phone_encoder.core.keypad import extract_digits
from phone_encoder.formatters.base import BaseFormatter
from phone_encoder.formatters.plain_text import PlainTextFormatter

# Frames above the search (caller, formatter, sink) on top of one per digit.
_RECURSION_HEADROOM = 1000


class PhoneNumberEncoder:
    """Encodes phone numbers against one dictionary, writing to one sink.

    WHY: The dictionary, the sink, the filter and the counters are the same
    for every number in a run. Binding them once keeps the recursive
    signature down to the state that actually changes per call.

    HOW: The constructor wraps every dictionary word in a WordSegment once,
    so the search pushes shared segment objects instead of allocating new
    ones per visit.

    RULES:
    - The dictionary is not modified
    - stats accumulates across every encode() call on this instance
    - The segment stack is empty again when encode() returns
    """

    def __init__(
        self,
        dictionary: Dictionary,
        sink: BinaryIO,
        formatter: Optional[BaseFormatter] = None,
        accepts: AcceptancePolicy = accepts,
        stats: Optional[SearchStats] = None,
    ) -> None:
        self.dictionary = dictionary
        self.sink = sink
        self.formatter = formatter if formatter is not None else PlainTextFormatter()
        self.accepts = accepts
        self.stats = stats if stats is not None else SearchStats()
        self._segments: Dict[str, List[WordSegment]] = {
            key: [WordSegment(word) for word in bucket]
            for key, bucket in dictionary.items()
        }

    def encode(self, number: str) -> None:
        """Print every accepted encoding of one phone number line.

        Args:
            number: The raw line; non-digit characters are ignored for the
                    search but echoed in the output.
        """
        digits = extract_digits(number)
        needed = len(digits) + _RECURSION_HEADROOM
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)
        self._search(number, digits, 0, [])

    def _search(self, number: str, digits: str, start: int, stack: List[Segment]) -> None:
        if start >= len(digits):
            self._finish(number, stack)
            return

        found_word = False
        for end in range(start + 1, len(digits) + 1):
            segments = self._segments.get(digits[start:end])
            if segments is None:
                continue
            for segment in segments:
                found_word = True
                stack.append(segment)
                self._search(number, digits, end, stack)
                stack.pop()

        if found_word:
            return
        if stack and isinstance(stack[-1], DigitSegment):
            return

        stack.append(DIGIT_SEGMENTS[int(digits[start])])
        self._search(number, digits, start + 1, stack)
        stack.pop()

    def _finish(self, number: str, stack: List[Segment]) -> None:
        if self.accepts(stack):
            self.formatter.render(number, stack, self.sink)
            self.stats.accepted += 1
            return
        if not stack:
            self.formatter.render(number, stack, self.sink)
        self.stats.rejected += 1
