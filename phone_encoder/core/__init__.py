"""Core encoding modules: keypad table, segment IR, dictionary, search.

WHY: The core package contains the algorithmic heart of the encoder,
everything between "a list of words" and "a stream of accepted
segmentations". Formatters and the CLI only consume what lives here.

HOW: keypad.py maps letters to digits, ir.py defines the segment types,
lines.py reads input files, dictionary.py builds the reverse index,
acceptance.py holds the output filters, encoder.py runs the search.

RULES:
- Segment types are the contract between search, filter and formatter
- The search never raises on its own; only I/O on the sink can fail
- Nothing in core writes to stdout/stderr directly
"""
