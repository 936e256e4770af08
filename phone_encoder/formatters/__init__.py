"""Output formatters that stream accepted segmentations to a byte sink.

WHY: The encoder decides *what* to print; formatters decide *how*. Keeping
rendering behind one interface lets tests and alternative front ends
capture output without touching the search.

HOW: BaseFormatter defines the interface; PlainTextFormatter writes the
``<number>: word word`` line format expected on stdout.

RULES:
- Formatters write bytes to a binary sink, one piece at a time
- Formatters never decide acceptance; they render what they are given
"""

from phone_encoder.formatters.base import BaseFormatter
from phone_encoder.formatters.plain_text import PlainTextFormatter

__all__ = ["BaseFormatter", "PlainTextFormatter"]
