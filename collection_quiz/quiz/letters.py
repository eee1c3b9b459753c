"""Letter occurrence statistics for a text."""

import logging
import string
from collections import Counter

from collection_quiz.errors import MissingArgumentError
from collection_quiz.schemas import LetterCount

logger = logging.getLogger(__name__)

ASCII_LETTERS = frozenset(string.ascii_letters)


def get_letter_statistic(text: str | None) -> list[LetterCount]:
    """Return the number of occurrences of each letter in a text.

    Casing is ignored ('a' is counted as 'A'). Only the letters A to Z are
    counted; digits, whitespace, punctuation and non-ASCII characters are
    skipped. Letters that do not occur are left out of the result.

    Args:
        text: Text to analyze

    Returns:
        LetterCount entries ordered from A to Z

    Raises:
        MissingArgumentError: If text is None
    """
    if text is None:
        raise MissingArgumentError("text must not be None", param="text")

    # Filter before upper() so characters like 'ß' never fold into ASCII
    counts = Counter(char.upper() for char in text if char in ASCII_LETTERS)

    statistic = [LetterCount(letter, counts[letter]) for letter in sorted(counts)]
    logger.debug("Counted %d distinct letters in %d characters", len(statistic), len(text))
    return statistic
