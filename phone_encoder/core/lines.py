"""Line-oriented file reader used for both the word list and the numbers file.

WHY: The dictionary and the phone numbers are plain text, one entry per
line. Both must fail loudly and immediately when the file is missing, but
neither needs to be held in memory as raw text.

HOW: read_lines() opens the file right away (so FileNotFoundError and
PermissionError surface at call time, not on first iteration) and returns
a generator that yields each line without its line terminator, closing
the file once exhausted.

RULES:
- Files are read as UTF-8
- Lines split on "\\n" only; a lone "\\r" stays inside the line
- Trailing "\\n" and "\\r\\n" are removed; all other whitespace is kept
- Empty lines are yielded as "" (they are meaningful input)
- OSError propagates to the caller; nothing is retried
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Iterator, Union


def read_lines(path: Union[str, Path]) -> Iterator[str]:
    """Open a text file and return a lazy iterator over its lines.

    Args:
        path: Path to a UTF-8 text file.

    Returns:
        Iterator of lines with line terminators stripped.

    Raises:
        OSError: If the file cannot be opened.
    """
    handle = open(path, "r", encoding="utf-8", newline="\n")
    return _iter_lines(handle)


def _iter_lines(handle: IO[str]) -> Iterator[str]:
    with handle:
        for line in handle:
            if line.endswith("\r\n"):
                yield line[:-2]
            elif line.endswith("\n"):
                yield line[:-1]
            else:
                yield line
