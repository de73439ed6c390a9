"""
Structured logging configuration for the pension-roster project.

This module provides a centralized way to configure logging across the application
with different log levels and output files for different concerns.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

# Define logger names for different concerns
REPORT_LOGGER = "pension_roster.report"
ERROR_LOGGER = "pension_roster.errors"
DEBUG_LOGGER = "pension_roster"

# Standard log format with module name and line number
LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILES = (
    "report_events.log",
    "warnings_errors.log",
    "debug_detail.log",
    "combined.log",
)

# Track if logging is already configured
_LOGGING_CONFIGURED = False


def clear_logs(log_dir: Path) -> None:
    """
    Clear all log files in the specified directory.

    Args:
        log_dir: Directory containing log files to clear
    """
    for name in LOG_FILES:
        log_file = log_dir / name
        if log_file.exists():
            try:
                log_file.unlink()
            except OSError as e:
                logging.getLogger(__name__).warning(f"Could not delete {log_file}: {e}")


def _rotating_handler(filename: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=filename,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8',
        mode='a'
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(log_dir: Optional[Path] = None, debug: bool = False, clear_existing: bool = True) -> None:
    """
    Configure structured logging for the application.

    Without ``log_dir`` only a console handler on stderr is installed. With
    ``log_dir``, separate log files are created for different concerns:
    - report_events.log: Report workflow events (INFO+)
    - warnings_errors.log: Warnings and errors (WARNING+)
    - debug_detail.log: Detailed debug information (DEBUG, only if debug=True)
    - combined.log: Combined log of all messages (INFO+)

    Args:
        log_dir: Directory where log files will be stored; no files when None
        debug: If True, enables debug logging (console, or debug_detail.log with log_dir)
        clear_existing: If True, clears existing log files before starting

    Raises:
        OSError: If ``log_dir`` cannot be created or a log file cannot be opened.
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        return

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        if clear_existing:
            clear_logs(log_dir)

    # Remove all handlers from the root logger before setup
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    file_formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    console_formatter = logging.Formatter("%(levelname)-8s %(message)s")

    # Console handler; stdout stays reserved for the JSON report
    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if debug and log_dir is None else logging.WARNING)
    console.setFormatter(console_formatter)
    root_logger.addHandler(console)

    if log_dir is None:
        _LOGGING_CONFIGURED = True
        return

    root_logger.addHandler(_rotating_handler(log_dir / "combined.log", logging.INFO, file_formatter))
    root_logger.addHandler(
        _rotating_handler(log_dir / "warnings_errors.log", logging.WARNING, file_formatter)
    )

    report_logger = logging.getLogger(REPORT_LOGGER)
    for h in report_logger.handlers[:]:
        report_logger.removeHandler(h)
    report_logger.setLevel(logging.INFO)
    report_logger.addHandler(
        _rotating_handler(log_dir / "report_events.log", logging.INFO, file_formatter)
    )
    report_logger.propagate = True  # Allow to bubble up to root

    if debug:
        debug_logger = logging.getLogger(DEBUG_LOGGER)
        for h in debug_logger.handlers[:]:
            debug_logger.removeHandler(h)
        debug_logger.setLevel(logging.DEBUG)
        debug_logger.addHandler(
            _rotating_handler(log_dir / "debug_detail.log", logging.DEBUG, file_formatter)
        )
        debug_logger.propagate = True

    _LOGGING_CONFIGURED = True


def reset_logging() -> None:
    """Detach handlers installed by setup_logging so it can run again."""
    global _LOGGING_CONFIGURED
    for name in (None, REPORT_LOGGER, DEBUG_LOGGER):
        lg = logging.getLogger(name)
        for h in lg.handlers[:]:
            lg.removeHandler(h)
            h.close()
    _LOGGING_CONFIGURED = False
