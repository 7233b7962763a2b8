"""
Letter codes used by OSCAR.

OSCAR abbreviates two things with single letters:

- meeting days:   "mwf"  -> monday, wednesday, friday
- grading bases:  "lp"   -> letter grade, pass/fail

Both are handled by one small codec class keyed by a fixed mapping.
The codecs accept either a compact string ("mwf") or an explicit
sequence (["m", "w", "f"]); `normalize` turns both into the same iteration.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Dict, List, Mapping

from oscarsched.errors import InvalidCodeError, NotIterableError


# ---------------------------------------------------------------------------
# Code tables
# ---------------------------------------------------------------------------

DAY_LETTERS: Dict[str, str] = {
    "m": "monday",
    "t": "tuesday",
    "w": "wednesday",
    "r": "thursday",
    "f": "friday",
}

GRADING_LETTERS: Dict[str, str] = {
    "a": "audit",
    "l": "letter grade",
    "p": "pass/fail",
}


# ---------------------------------------------------------------------------
# Sequence normalizer
# ---------------------------------------------------------------------------


def normalize(value: Any) -> Iterable:
    """
    Return an element-by-element iteration over `value`.

    - text        -> its characters
    - None        -> nothing
    - collections -> returned unchanged

    Anything else (numbers, bytes, plain objects) raises NotIterableError.
    """
    if value is None:
        return ()

    if isinstance(value, str):
        return iter(value)

    # bytes iterate as ints, which is never what a caller means here
    if isinstance(value, (bytes, bytearray)) or not isinstance(value, Iterable):
        raise NotIterableError(f"'{type(value).__name__}' is not iterable.")

    return value


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------


class LetterCodec:
    """
    Decodes single-letter codes into names using a fixed mapping.

    Lookups are case-insensitive. Instances hold no state beyond the mapping
    and can be shared freely.
    """

    def __init__(self, kind: str, mapping: Mapping[str, str]) -> None:
        self.kind = kind
        self._mapping = {k.lower(): v for k, v in mapping.items()}

    def __repr__(self) -> str:
        return f"LetterCodec({self.kind!r}, letters={''.join(self._mapping)!r})"

    @property
    def letters(self) -> List[str]:
        return list(self._mapping)

    def letter_to_name(self, letter: Any) -> str:
        if not self.is_valid_letter(letter):
            raise InvalidCodeError(f"{letter!r} is not a valid {self.kind} letter.")
        return self._mapping[letter.lower()]

    def letters_to_names(self, letters: Any) -> List[str]:
        """
        Decode every letter, keeping input order and duplicates.

            DAYS.letters_to_names("mwf") -> ["monday", "wednesday", "friday"]
        """
        return [self.letter_to_name(letter) for letter in normalize(letters)]

    def is_valid_letter(self, letter: Any) -> bool:
        if not isinstance(letter, str) or not letter:
            return False
        return letter.lower() in self._mapping

    def is_valid_letters(self, letters: Any) -> bool:
        """
        True if there is at least one letter and all of them are valid.

        An empty string or sequence is NOT valid: "no days" is not a schedule.
        """
        try:
            elements = list(normalize(letters))
        except NotIterableError:
            return False

        if not elements:
            return False

        return all(self.is_valid_letter(letter) for letter in elements)


DAYS = LetterCodec("day", DAY_LETTERS)
GRADING_BASES = LetterCodec("grading basis", GRADING_LETTERS)
