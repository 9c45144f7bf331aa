"""
Logging Setup

One line per record: UTC time, level, logger, message. Records carrying an
``error_code`` extra (the Gemini failure paths attach one) get it appended as
``code=...`` so fallbacks can be grepped by cause.
"""
import logging
import sys
from typing import Iterable, Optional
from datetime import datetime, timezone

# HTTP / SDK loggers that flood INFO with one line per Gemini request
NOISY_LOGGERS = ("httpx", "httpcore", "urllib3", "google_genai", "google.auth")

FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class StructuredFormatter(logging.Formatter):
    """Console formatter; ANSI colour is applied only when ``use_color`` is set."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = False):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        line = f"[{stamp}] {record.levelname:8} [{record.name}] {record.getMessage()}"

        code = getattr(record, "error_code", None)
        if code:
            line += f" code={code}"

        if self.use_color:
            line = f"{self.LEVEL_COLORS.get(record.levelno, '')}{line}{self.RESET}"

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Configure the root logger for the API process.

    Replaces any existing root handlers. Called once from ``main.py``;
    library code only ever calls :func:`get_logger`.

    Args:
        level: Root level name; unknown names fall back to INFO
        log_file: Also write plain-text records to this file
        quiet: Loggers capped at WARNING
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter(use_color=sys.stdout.isatty()))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root_logger.addHandler(file_handler)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
