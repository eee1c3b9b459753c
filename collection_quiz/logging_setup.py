"""Logging configuration for Collection Quiz."""

import logging

from rich.logging import RichHandler

from collection_quiz.config import settings

LOGGER_NAME = "collection_quiz"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a rich console handler to the package logger.

    Subsequent calls only update the level of the already-configured logger.

    Args:
        level: Log level name (default: settings.log_level)

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level or settings.log_level)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
