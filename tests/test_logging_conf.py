# tests/test_logging_conf.py
"""
Logging Configuration Tests

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- gcurrency.shared.logging_conf (setup_logging)
"""
import logging  # Logger inspection
from logging.handlers import RotatingFileHandler  # Expected file handler type

import pytest  # Testing framework for writing and running tests

from gcurrency.shared.logging_conf import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("gcurrency")
    saved_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(saved_level)


class TestSetupLogging:
    def test_stdout_only(self, package_logger):
        handlers = setup_logging(level=logging.DEBUG, log_stdout=True)

        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert package_logger.handlers == handlers
        assert package_logger.level == logging.DEBUG

    def test_log_dir(self, package_logger, tmp_path):
        handlers = setup_logging(log_dir=tmp_path / "logs", log_stdout=False)

        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)
        assert (tmp_path / "logs" / "gcurrency.log").exists()

    def test_messages_reach_file(self, package_logger, tmp_path):
        log_file = tmp_path / "bank.log"
        handlers = setup_logging(log_file=log_file, log_stdout=False, backup_count=1)

        logging.getLogger("gcurrency.application.bank").info("rate cached")
        for handler in handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "INFO gcurrency.application.bank :: rate cached" in content

    def test_falls_back_to_stdout(self, package_logger):
        handlers = setup_logging(log_stdout=False)

        assert len(handlers) == 1
        assert not isinstance(handlers[0], RotatingFileHandler)

    def test_replaces_previous_handlers(self, package_logger):
        setup_logging(log_stdout=True)
        handlers = setup_logging(log_stdout=True)

        assert package_logger.handlers == handlers
