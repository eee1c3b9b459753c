"""Number sequences generated from an exclusive upper limit."""

import logging

from collection_quiz.config import settings
from collection_quiz.errors import IntegerOverflowError, OutOfRangeError

logger = logging.getLogger(__name__)

SQUARE_DIVISOR = 7


def get_even_numbers(exclusive_upper_limit: int) -> list[int]:
    """Return all even numbers between 1 and the upper limit.

    Args:
        exclusive_upper_limit: Upper limit (exclusive)

    Returns:
        Even numbers in ascending order

    Raises:
        OutOfRangeError: If exclusive_upper_limit is lower than 1
    """
    if exclusive_upper_limit < 1:
        raise OutOfRangeError(
            f"exclusive_upper_limit must be at least 1, got {exclusive_upper_limit}",
            param="exclusive_upper_limit",
        )

    numbers = list(range(2, exclusive_upper_limit, 2))
    logger.debug("Generated %d even numbers below %d", len(numbers), exclusive_upper_limit)
    return numbers


def get_squares(exclusive_upper_limit: int, *, integer_bits: int | None = None) -> list[int]:
    """Return the squares of the multiples of 7 between 1 and the upper limit.

    The result is empty if exclusive_upper_limit is lower than 1 and is
    ordered descending otherwise.

    Args:
        exclusive_upper_limit: Upper limit (exclusive)
        integer_bits: Width of the signed integer type the squares must fit
            into (default: settings.integer_bits)

    Returns:
        Squares in descending order

    Raises:
        IntegerOverflowError: If a square does not fit into the integer type
        OutOfRangeError: If integer_bits is lower than 2
    """
    bits = settings.integer_bits if integer_bits is None else integer_bits
    if bits < 2:
        raise OutOfRangeError(f"integer_bits must be at least 2, got {bits}", param="integer_bits")

    if exclusive_upper_limit < 1:
        return []

    max_value = 2 ** (bits - 1) - 1
    largest = (exclusive_upper_limit - 1) // SQUARE_DIVISOR * SQUARE_DIVISOR

    # Squares grow with n, so checking the largest one covers the whole sequence
    if largest * largest > max_value:
        raise IntegerOverflowError(
            f"{largest}^2 = {largest * largest} exceeds the {bits}-bit limit {max_value}",
            value=largest * largest,
            max_value=max_value,
            param="exclusive_upper_limit",
        )

    squares = [n * n for n in range(largest, 0, -SQUARE_DIVISOR)]
    logger.debug("Generated %d squares below %d", len(squares), exclusive_upper_limit)
    return squares
