"""Letter-to-digit keypad table and digit-key helpers.

WHY: Every word in the dictionary and every phone number must be reduced
to the same alphabet, a string of ASCII digits, before they can be
compared. The letter table is fixed by the puzzle and deliberately differs
from a real phone keypad.

HOW: KEYPAD_GROUPS lists the letters for each digit; LETTER_DIGITS is the
flattened lowercase lookup built from it. word_to_key() maps the letters of
a word and skips everything else; extract_digits() keeps only ASCII digits
of a phone number line.

RULES:
- Mapping is case-insensitive
- Only ASCII a-z / A-Z are mappable; anything else passed to
  char_to_digit() is a caller bug and raises InvalidCharacterError
- word_to_key() never raises: it filters before mapping
- extract_digits() keeps "0"-"9" only (no Unicode digits)
"""

from __future__ import annotations

from typing import Dict

KEYPAD_GROUPS: Dict[int, str] = {
    0: "e",
    1: "jnq",
    2: "rwx",
    3: "dsy",
    4: "ft",
    5: "am",
    6: "civ",
    7: "bku",
    8: "lop",
    9: "ghz",
}

LETTER_DIGITS: Dict[str, int] = {
    letter: digit
    for digit, letters in KEYPAD_GROUPS.items()
    for letter in letters
}

_ASCII_DIGITS = frozenset("0123456789")


class InvalidCharacterError(ValueError):
    """Raised when a non-letter is handed to char_to_digit().

    WHY: The keypad table only covers the 26 ASCII letters. Callers are
    expected to filter their input first, so reaching this error means a
    programming defect, not bad user data.

    RULES:
    - Never caught inside the package
    - Message includes the offending character
    """

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__("invalid input: not a letter: {!r}".format(char))


def is_mappable(char: str) -> bool:
    """True for ASCII letters, the only characters the keypad table covers."""
    return char.isascii() and char.isalpha()


def char_to_digit(char: str) -> int:
    """Map a single ASCII letter to its keypad digit.

    Args:
        char: One character, upper or lower case.

    Returns:
        The digit 0-9 assigned to the letter.

    Raises:
        InvalidCharacterError: If char is not an ASCII letter.
    """
    digit = LETTER_DIGITS.get(char.lower()) if is_mappable(char) else None
    if digit is None:
        raise InvalidCharacterError(char)
    return digit


def word_to_key(word: str) -> str:
    """Compute the digit key of a dictionary word.

    Non-letters (quotes standing in for umlauts, apostrophes, hyphens) are
    ignored, so ``bo"s`` and ``bos`` share the key ``"783"``.
    """
    return "".join(str(char_to_digit(ch)) for ch in word if is_mappable(ch))


def extract_digits(number: str) -> str:
    """Strip every character except ASCII digits from a phone number line."""
    return "".join(ch for ch in number if ch in _ASCII_DIGITS)
