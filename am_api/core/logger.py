"""
Logging configuration for am-api.

The library logs through module-level loggers under the "am_api"
namespace and never configures logging on import. Applications that want
output call setup_logging() once:

    - Console: colored, tqdm-compatible so it does not break progress bars
      rendered while draining a paginated sequence
    - log_full.log: Complete log of all events (DEBUG and above)
    - log_errors.log: Only ERROR and CRITICAL level messages
    - failed_requests.log: One entry per request Apple Music rejected

Usage:
    from am_api.core.logger import setup_logging, get_logger

    setup_logging("DEBUG", log_dir=Path("logs"))  # Call once at startup
    logger = get_logger(__name__)
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

from tqdm import tqdm


# Root of the library's logger hierarchy
PACKAGE_LOGGER_NAME = "am_api"

# Log file names (created in the log directory)
LOG_FULL_FILENAME = "log_full"
LOG_ERRORS_FILENAME = "log_errors"
FAILED_REQUESTS_FILENAME = "failed_requests"

# Log format for file output (detailed with timestamp)
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    WHITE = "\033[37m"
    BOLD = "\033[1m"


class ColoredConsoleFormatter(logging.Formatter):
    """
    Formatter that prefixes each message with its colored level name.

    Colors:
        - DEBUG: Blue
        - INFO: Green
        - WARNING: Yellow
        - ERROR: Red
        - CRITICAL: Bold Red
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.BLUE,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        return f"{color}{record.levelname}{Colors.RESET}: {record.getMessage()}"


class TqdmLoggingHandler(logging.Handler):
    """
    Console handler that writes through tqdm.write().

    Progress bars wrapped around Album.get().all(...) and similar lazy
    sequences redraw in place on stderr; plain stream writes would tear them.
    """

    def __init__(self, stream: TextIO = sys.stderr) -> None:
        super().__init__()
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            tqdm.write(msg, file=self.stream)
        except Exception:
            self.handleError(record)


class FailedRequestHandler(logging.Handler):
    """
    Handler that captures rejected requests for the failed_requests report.

    Writes a compact, human-readable entry for every record carrying the
    'failed_request_*' extra fields (see log_request_failure()):

        404 GET /v1/catalog/us/songs/0
        Resource Not Found: Resource with requested id was not found

    Records without these fields are ignored.

    Attributes:
        report_path: Path to the report file.
        report_file: Open file handle, set by open().
    """

    def __init__(self, report_path: Path) -> None:
        super().__init__()
        self.report_path = report_path
        self.report_file: TextIO | None = None

    def open(self) -> None:
        """Open the report file for writing (overwrites existing content)."""
        self.report_file = open(self.report_path, "w", encoding="utf-8")

    def emit(self, record: logging.LogRecord) -> None:
        if not hasattr(record, "failed_request_endpoint"):
            return

        if self.report_file is None:
            return

        try:
            method = getattr(record, "failed_request_method", "GET")
            endpoint = getattr(record, "failed_request_endpoint", "")
            status = getattr(record, "failed_request_status", None)
            reason = getattr(record, "failed_request_reason", "")

            status_text = str(status) if status is not None else "---"
            self.report_file.write(f"{status_text} {method} {endpoint}\n")
            self.report_file.write(f"{reason}\n\n")
            self.report_file.flush()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        """Close the report file handle. Safe to call multiple times."""
        if self.report_file is not None:
            try:
                self.report_file.close()
            except OSError:
                pass
            self.report_file = None
        super().close()


class ErrorOnlyFilter(logging.Filter):
    """Filter that only allows ERROR and CRITICAL level records."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def setup_logging(level: str = "INFO", log_dir: Path | None = None) -> None:
    """
    Configure the am_api logger hierarchy.

    Only the package logger is touched; the application's root logger is
    left alone. Calling this again replaces the handlers installed by the
    previous call.

    Args:
        level: Console level name ("DEBUG", "INFO", ...).
        log_dir: Optional directory for log files. Created if missing.
                 Each call creates new files with a timestamp suffix.

    Behavior:
        1. Set the package logger to DEBUG and stop propagation to root
        2. Remove handlers from a previous setup_logging() call
        3. Add the tqdm-compatible colored console handler at `level`
        4. If log_dir is given, add:
           - log_full_{timestamp}.log (DEBUG)
           - log_errors_{timestamp}.log (ERROR+ via ErrorOnlyFilter)
           - failed_requests_{timestamp}.log (FailedRequestHandler)
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)
    package_logger.propagate = False

    _close_handlers(package_logger)

    console_handler = TqdmLoggingHandler()
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(ColoredConsoleFormatter())
    package_logger.addHandler(console_handler)

    if log_dir is None:
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")

    # Full log file handler
    full_handler = logging.FileHandler(
        log_dir / f"{LOG_FULL_FILENAME}_{timestamp}.log", mode="w", encoding="utf-8"
    )
    full_handler.setLevel(logging.DEBUG)
    full_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
    package_logger.addHandler(full_handler)

    # Error-only log file handler
    error_handler = logging.FileHandler(
        log_dir / f"{LOG_ERRORS_FILENAME}_{timestamp}.log", mode="w", encoding="utf-8"
    )
    error_handler.setLevel(logging.DEBUG)  # Filter handles the level restriction
    error_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
    error_handler.addFilter(ErrorOnlyFilter())
    package_logger.addHandler(error_handler)

    # Failed requests report
    failed_handler = FailedRequestHandler(log_dir / f"{FAILED_REQUESTS_FILENAME}_{timestamp}.log")
    failed_handler.open()
    package_logger.addHandler(failed_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The logger name, typically __name__ of the calling module.
              This creates a hierarchy like 'am_api.request.paginated'.

    Note:
        Without setup_logging() the library's records follow the standard
        logging configuration of the host application.
    """
    return logging.getLogger(name)


def log_request_failure(
    logger: logging.Logger,
    method: str,
    endpoint: str,
    status_code: int | None,
    reason: str
) -> None:
    """
    Log a request that Apple Music rejected or that never completed.

    Logs a WARNING and attaches the extra fields FailedRequestHandler
    uses to write failed_requests.log.

    Args:
        logger: The logger to use for the message.
        method: HTTP method ("GET", "POST", ...).
        endpoint: API path without host, e.g. "/v1/catalog/us/songs/0".
        status_code: HTTP status, or None for transport failures.
        reason: Short description (error title/detail or exception text).
    """
    logger.warning(
        f"{method} {endpoint} failed ({status_code}): {reason}",
        extra={
            "failed_request_method": method,
            "failed_request_endpoint": endpoint,
            "failed_request_status": status_code,
            "failed_request_reason": reason,
        }
    )


def shutdown_logging() -> None:
    """
    Flush and close every handler installed by setup_logging().

    Typically called in a finally block or atexit handler.
    """
    _close_handlers(logging.getLogger(PACKAGE_LOGGER_NAME))


def _close_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        try:
            handler.flush()
            handler.close()
        except OSError:
            pass
        logger.removeHandler(handler)
