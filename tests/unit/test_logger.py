"""
Unit tests for logging setup and the SwaLogger facade.
"""

import logging
import os
import tempfile

import pytest

from swacli.logger import SwaLogger, setup_logging


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way it was after the test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_log_file_receives_records(self, restore_root_logging, monkeypatch):
        monkeypatch.delenv('SWA_CLI_DEBUG', raising=False)
        with tempfile.TemporaryDirectory() as directory:
            log_file = os.path.join(directory, 'swacli.log')
            setup_logging(log_file_path=log_file)

            SwaLogger().info("Running startup script: npm run dev --if-present")
            SwaLogger().silly("hidden at INFO level")
            for handler in logging.getLogger().handlers:
                handler.flush()

            with open(log_file) as f:
                content = f.read()

            for handler in logging.getLogger().handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    logging.getLogger().removeHandler(handler)
                    handler.close()

        assert 'INFO' in content
        assert 'Running startup script: npm run dev --if-present' in content
        assert 'hidden at INFO level' not in content

    def test_verbose_enables_debug(self, restore_root_logging):
        setup_logging(verbose=True)

        assert logging.getLogger().level == logging.DEBUG

    def test_no_file_handler_by_default(self, restore_root_logging):
        setup_logging()

        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)


class TestSwaLogger:
    """Test cases for SwaLogger."""

    def test_non_fatal_error_returns(self, caplog):
        with caplog.at_level(logging.ERROR, logger='swacli'):
            SwaLogger().error("something went wrong")

        assert "something went wrong" in caplog.text

    def test_fatal_error_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            SwaLogger().error("cannot continue", fatal=True)

        assert exc_info.value.code == 1
