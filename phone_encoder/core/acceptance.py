"""Acceptance filters deciding which complete segmentations get printed.

WHY: The search enumerates every segmentation that covers the digit
string. Not all of them are wanted: this encoder only prints translations
whose segments alternate between words and digits and whose words all
have the same length. That rule is stricter than the classic version of
the puzzle, which only forbids two digits in a row, so the classic rule
is kept alongside it as an opt-in policy.

HOW: Each policy is a plain predicate over a sequence of segments.
ACCEPTANCE_POLICIES maps configuration names to predicates;
get_policy() resolves a name.

RULES:
- An empty segmentation is never accepted by any policy
- strict (accepts):
    * a single segment is always accepted
    * consecutive segments must differ in kind (word/digit)
    * every word must have the length of the first word in the sequence,
      even when a digit precedes that first word
- classic (accepts_any): every non-empty segmentation is accepted; the
  search itself already guarantees no two adjacent digits
"""

from __future__ import annotations

from itertools import islice
from typing import Callable, Dict, Sequence

from phone_encoder.core.ir import DigitSegment, Segment

AcceptancePolicy = Callable[[Sequence[Segment]], bool]


def accepts(stack: Sequence[Segment]) -> bool:
    """Strict filter: alternating kinds, one common word length.

    Args:
        stack: A complete segmentation, first segment first.

    Returns:
        True if the segmentation should be printed.
    """
    if not stack:
        return False
    if len(stack) == 1:
        return True

    first = stack[0]
    was_digit = isinstance(first, DigitSegment)
    fixed_length = 0 if was_digit else first.length

    for segment in islice(stack, 1, None):
        # Only reachable right after a leading digit: the first word fixes it.
        if fixed_length == 0:
            fixed_length = segment.length
        is_digit = isinstance(segment, DigitSegment)
        if is_digit == was_digit:
            return False
        if not is_digit and segment.length != fixed_length:
            return False
        was_digit = is_digit
    return True


def accepts_any(stack: Sequence[Segment]) -> bool:
    """Classic filter: print every non-empty segmentation."""
    return bool(stack)


ACCEPTANCE_POLICIES: Dict[str, AcceptancePolicy] = {
    "strict": accepts,
    "classic": accepts_any,
}


def get_policy(name: str) -> AcceptancePolicy:
    """Look up an acceptance policy by its configuration name.

    Raises:
        ValueError: If no policy is registered under name.
    """
    key = name.strip().lower()
    if key not in ACCEPTANCE_POLICIES:
        available = ", ".join(sorted(ACCEPTANCE_POLICIES))
        raise ValueError(
            "Unknown acceptance policy '{}'. Available: {}".format(name, available)
        )
    return ACCEPTANCE_POLICIES[key]
