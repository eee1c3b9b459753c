"""Tests for settings and logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from collection_quiz.config import Settings
from collection_quiz.logging_setup import LOGGER_NAME, configure_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("QUIZ_INTEGER_BITS", raising=False)
    monkeypatch.delenv("QUIZ_LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.integer_bits == 32
    assert settings.max_integer == 2**31 - 1
    assert settings.log_level == "WARNING"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUIZ_INTEGER_BITS", "64")
    monkeypatch.setenv("quiz_log_level", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.integer_bits == 64
    assert settings.max_integer == 2**63 - 1
    assert settings.log_level == "DEBUG"


def test_rejects_too_narrow_integers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUIZ_INTEGER_BITS", "1")

    with pytest.raises(ValueError):
        Settings(_env_file=None)


def test_configure_logging_installs_handler_once() -> None:
    logger = configure_logging("INFO")
    configure_logging("DEBUG")

    handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert logger.name == LOGGER_NAME
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG
