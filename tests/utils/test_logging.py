"""Tests for setup_logging."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from whatlocks.utils.logging import setup_logging


@pytest.fixture
def whatlocks_logger():
    logger = logging.getLogger("whatlocks")
    handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers[len(handlers):]:
        handler.close()
    logger.handlers = handlers


class TestSetupLogging:
    def test_file_handler_in_logging_path(self, test_config, whatlocks_logger):
        setup_logging(test_config)

        file_handlers = [
            h for h in whatlocks_logger.handlers if isinstance(h, RotatingFileHandler)
        ]
        assert file_handlers
        assert test_config.logging_path.is_dir()

        logging.getLogger("whatlocks.test").info("hello")
        file_handlers[-1].flush()
        assert "hello" in (test_config.logging_path / "whatlocks.log").read_text()

    def test_console_output(self, test_config, whatlocks_logger):
        before = len(whatlocks_logger.handlers)
        setup_logging(test_config, console_output=True)
        assert len(whatlocks_logger.handlers) == before + 2

    def test_repeated_setup_does_not_duplicate_handlers(self, test_config, whatlocks_logger):
        setup_logging(test_config, console_output=True)
        count = len(whatlocks_logger.handlers)

        setup_logging(test_config, console_output=True)
        setup_logging(test_config)

        assert len(whatlocks_logger.handlers) == count

    def test_new_log_file_gets_its_own_handler(self, test_config, tmp_path, whatlocks_logger):
        setup_logging(test_config)
        count = len(whatlocks_logger.handlers)

        other = test_config.model_copy(update={"logging_path": tmp_path / "other"})
        setup_logging(other)

        assert len(whatlocks_logger.handlers) == count + 1
