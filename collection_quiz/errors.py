"""Exceptions raised by the quiz functions.

Each error also derives from the matching builtin exception so callers can
catch either the package error or the builtin one.
"""


class QuizError(Exception):
    """Base class for all Collection Quiz errors."""

    def __init__(self, message: str, param: str | None = None):
        super().__init__(message)
        self.param = param


class OutOfRangeError(QuizError, ValueError):
    """An argument is outside the range of accepted values."""


class MissingArgumentError(QuizError, TypeError):
    """A required argument was None."""


class IntegerOverflowError(QuizError, OverflowError):
    """A result does not fit into the target integer type."""

    def __init__(self, message: str, value: int, max_value: int, param: str | None = None):
        super().__init__(message, param=param)
        self.value = value
        self.max_value = max_value
