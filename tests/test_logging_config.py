"""
Tests for the logging setup.

Run with: pytest tests/test_logging_config.py -v
"""
import logging

import pytest

from pocketcalc.logging_config import resolve_level, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("pocketcalc")
    old_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(old_level)


class TestResolveLevel:
    def test_accepts_constants_and_names(self):
        assert resolve_level(logging.DEBUG) == logging.DEBUG
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" WARNING ") == logging.WARNING

    def test_rejects_unknown_names(self):
        with pytest.raises(ValueError):
            resolve_level("chatty")


class TestSetupLogging:
    def test_configures_package_logger(self, package_logger):
        logger = setup_logging(level="DEBUG")
        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeated_setup_does_not_duplicate_handlers(self, package_logger):
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_log_file(self, package_logger, tmp_path):
        log_file = tmp_path / "calc.log"
        setup_logging(level=logging.INFO, log_file=str(log_file))
        assert len(package_logger.handlers) == 2
        logging.getLogger("pocketcalc.model.engine").info("hello from engine")
        for handler in package_logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "hello from engine" in text
