"""Result type for letter statistics."""

from typing import NamedTuple


class LetterCount(NamedTuple):
    """Number of occurrences of a single letter."""

    letter: str
    occurrences: int
