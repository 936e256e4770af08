"""Phone Number Encoder: dictionary-driven phone number transcoder.

WHY: Phone numbers are hard to remember; words are easy. Given a word list
and a list of phone numbers, this package enumerates every way to spell
each number as a sequence of dictionary words and single leftover digits
under a fixed letter-to-digit table.

HOW: Four-stage pipeline: index (dictionary keyed by digit string),
search (recursive backtracking over the digit string), accept (a filter
deciding which complete segmentations are printed), render (a streaming
formatter writing each accepted line straight to the output sink).

RULES:
- The dictionary is built once and never mutated afterwards
- The segment stack is a plain list, pushed before and popped after
  every recursive descent
- Output order is deterministic: shortest prefix first, then bucket order
- Accepted and rejected candidates are counted across the whole run
"""

__version__ = "0.1.0"
