"""Tests for logging configuration."""

import logging

from wild_oasis.app_logging import configure_logging


def test_configure_logging_adds_one_handler() -> None:
    logger = logging.getLogger("wild_oasis")
    logger.handlers.clear()

    configure_logging()
    configure_logging("debug")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_configure_logging_quiets_http_client() -> None:
    configure_logging()

    assert logging.getLogger("httpx").level == logging.WARNING
