"""
Collection Quiz - Small statistics over number ranges, families and text.

This package provides pure helper functions that generate number sequences,
summarize family records and count letters in a text.
"""

from collection_quiz.quiz import (
    get_even_numbers,
    get_family_statistic,
    get_letter_statistic,
    get_squares,
)

__version__ = "0.1.0"
__author__ = "Collection Quiz Contributors"

__all__ = [
    "get_even_numbers",
    "get_squares",
    "get_family_statistic",
    "get_letter_statistic",
]
