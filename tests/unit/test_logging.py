"""
Unit Tests for logging setup
"""
import logging

import pytest

from vitaguard.utils.logging import NOISY_LOGGERS, StructuredFormatter, setup_logging


def _record(message: str, level: int = logging.WARNING, **extra) -> logging.LogRecord:
    record = logging.LogRecord("vitaguard.core.orchestrator", level, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    quiet_levels = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, saved in quiet_levels.items():
        logging.getLogger(name).setLevel(saved)


class TestStructuredFormatter:
    """Tests for the console line format."""

    def test_plain_line(self):
        line = StructuredFormatter().format(_record("Using local engine"))

        assert "WARNING" in line
        assert "[vitaguard.core.orchestrator] Using local engine" in line
        assert "\033[" not in line

    def test_error_code_appended(self):
        line = StructuredFormatter().format(_record("Gemini analysis failed", error_code="TRANSPORT_ERROR"))
        assert line.endswith("Gemini analysis failed code=TRANSPORT_ERROR")

    def test_color(self):
        line = StructuredFormatter(use_color=True).format(_record("x", level=logging.ERROR))

        assert line.startswith("\033[31m")
        assert line.endswith(StructuredFormatter.RESET)


class TestSetupLogging:
    """Tests for root logger configuration."""

    def test_level_and_single_console_handler(self, restore_root_logger):
        setup_logging("debug")
        setup_logging("warning")

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, StructuredFormatter)

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        setup_logging("chatty")
        assert restore_root_logger.level == logging.INFO

    def test_http_loggers_quietened(self, restore_root_logger):
        setup_logging("DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_file_handler(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "vitaguard.log"
        setup_logging("INFO", log_file=str(log_file))

        logging.getLogger("vitaguard.test").info("analysis complete")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert "| INFO | vitaguard.test | analysis complete" in log_file.read_text()
