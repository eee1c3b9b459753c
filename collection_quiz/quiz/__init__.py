"""Quiz functions over number ranges, families and text."""

from collection_quiz.quiz.families import get_family_statistic
from collection_quiz.quiz.letters import get_letter_statistic
from collection_quiz.quiz.numbers import get_even_numbers, get_squares

__all__ = [
    "get_even_numbers",
    "get_squares",
    "get_family_statistic",
    "get_letter_statistic",
]
