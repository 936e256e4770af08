"""Abstract base formatter for rendering segmentations.

WHY: The encoder should work with any rendering strategy: the streaming
line format on stdout, or something a test or another tool supplies. This
base class enforces a consistent interface so the encoder can use any
formatter generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``render()`` method that writes directly to a binary sink.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``render()``
- ``render()`` writes to the sink and returns nothing
- Sink I/O errors propagate; formatters never swallow them
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO, Sequence

from phone_encoder.core.ir import Segment


class BaseFormatter(ABC):
    """Abstract base for all segmentation formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement render() and name
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Plain Text'."""

    @abstractmethod
    def render(self, number: str, stack: Sequence[Segment], sink: BinaryIO) -> None:
        """Write one segmentation of a phone number to the sink.

        Args:
            number: The phone number line exactly as read, separators included.
            stack: The segmentation to render, first segment first. May be
                   empty for a line that contained no digits.
            sink: Binary, append-only output stream.

        Raises:
            OSError: If writing to the sink fails.
        """
