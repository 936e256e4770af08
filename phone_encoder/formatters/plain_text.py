"""Streaming plain text formatter: ``<number>: seg seg ... seg``.

WHY: Every candidate line would otherwise need a freshly joined string
proportional to its length. The encoder can emit many lines per number,
so pieces are written straight to the buffered sink instead.

HOW: Writes the original number text and a colon. For a non-empty
segmentation it then writes a space, each segment but the last followed
by a space, the last segment, and a newline.

RULES:
- The number is echoed verbatim, including "-" and "/" separators
- Words render as stored; digits render as a single decimal character
- No trailing space; lines end with "\\n"
- Empty segmentation: only "<number>:" is written, with no newline, so
  whatever is rendered next lands on the same line (e.g. "--:4824: Tor 4")
- All text is UTF-8 encoded
"""

from __future__ import annotations

from typing import BinaryIO, Sequence

from phone_encoder.core.ir import DigitSegment, Segment
from phone_encoder.formatters.base import BaseFormatter

_DIGIT_BYTES = tuple(str(d).encode("ascii") for d in range(10))


def _segment_bytes(segment: Segment) -> bytes:
    if isinstance(segment, DigitSegment):
        return _DIGIT_BYTES[segment.digit]
    return segment.text.encode("utf-8")


class PlainTextFormatter(BaseFormatter):
    """Formatter that streams one space-separated line per segmentation."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def render(self, number: str, stack: Sequence[Segment], sink: BinaryIO) -> None:
        sink.write(number.encode("utf-8"))
        sink.write(b":")
        if not stack:
            return
        sink.write(b" ")
        last = len(stack) - 1
        for index, segment in enumerate(stack):
            sink.write(_segment_bytes(segment))
            if index != last:
                sink.write(b" ")
        sink.write(b"\n")
