"""Logging setup for scan diagnostics."""

import logging
import sys
import time
from pathlib import Path
from typing import Optional, TextIO
from logging.handlers import RotatingFileHandler

# Per-match "found" lines go through this logger so they can be styled
# and filtered apart from operational messages.
FINDINGS_LOGGER = "leakscan.findings"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    GRAY = "\033[90m"


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors level names and highlights findings."""

    COLORS = {
        "DEBUG": Colors.GRAY,
        "INFO": Colors.BLUE,
        "WARNING": Colors.YELLOW,
        "ERROR": Colors.RED,
        "CRITICAL": Colors.RED,
    }

    def __init__(self, fmt=None, datefmt=None, use_color: bool = True):
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def format(self, record):
        if not self.use_color:
            return super().format(record)

        # Other handlers share the record, so only a copy is colored.
        colored = logging.makeLogRecord(record.__dict__)
        levelname = record.levelname
        if record.name == FINDINGS_LOGGER:
            colored.levelname = f"{Colors.MAGENTA}FOUND{Colors.RESET}"
            colored.msg = f"{Colors.GREEN}{record.getMessage()}{Colors.RESET}"
            colored.args = None
        elif levelname in self.COLORS:
            colored.levelname = f"{self.COLORS[levelname]}{levelname}{Colors.RESET}"

        return super().format(colored)


class PerformanceLogger:
    """Time a scan phase and log its duration."""

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.start_time = None
        self.duration = 0.0

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug(f"Started: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.start_time

        if exc_type is None:
            self.logger.info(f"Completed: {self.operation} ({self.duration:.2f}s)")
        else:
            self.logger.error(f"Failed: {self.operation} ({self.duration:.2f}s)")


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    verbose: bool = False,
    show_findings: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Setup application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path; always receives DEBUG and findings
        verbose: Include logger names in console output
        show_findings: Print a line on the console for every match
        stream: Console stream, stdout by default
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    stream = stream or sys.stdout

    root_logger = logging.getLogger("leakscan")
    root_logger.setLevel(logging.DEBUG if log_file else numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(numeric_level)
    if not show_findings:
        console_handler.addFilter(lambda record: record.name != FINDINGS_LOGGER)

    if verbose:
        console_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        console_format = "%(asctime)s - %(levelname)s - %(message)s"

    console_handler.setFormatter(
        ColoredFormatter(console_format, datefmt=DATE_FORMAT, use_color=_is_terminal(stream))
    )
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
        file_handler.setFormatter(logging.Formatter(file_format, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module."""
    return logging.getLogger(f"leakscan.{name}")


def get_findings_logger() -> logging.Logger:
    """Logger for the per-match diagnostic lines."""
    return logging.getLogger(FINDINGS_LOGGER)
