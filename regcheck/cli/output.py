"""Error output and logging setup for CLI operations.

This module provides:
- configure_logging: Route regcheck log records to stderr or a log file
- handle_error: Formatted error messages with context and optional stack traces

Verdict lines go to stdout; logging and errors always go to stderr (or the
log file) so the two never mix.
"""

import logging
import sys
import traceback
from pathlib import Path

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_level: str = "warning", log_file: Path | None = None) -> logging.Logger:
    """Configure the ``regcheck`` logger for a CLI run.

    Replaces any handler installed by a previous call, so repeated
    invocations in one process do not duplicate log lines.

    Args:
        log_level: One of debug, info, warning, error (case-insensitive)
        log_file: Write log records to this file instead of stderr

    Returns:
        The configured ``regcheck`` logger

    Raises:
        ValueError: If log_level is not a known level name
    """
    level = LOG_LEVELS.get(log_level.lower())
    if level is None:
        available = ", ".join(LOG_LEVELS)
        raise ValueError(f"Unknown log level '{log_level}'. Available: {available}")

    logger = logging.getLogger("regcheck")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger


def handle_error(error: Exception, verbose: bool = False) -> None:
    """Format and display error message with context.

    Displays error messages to stderr with optional context fields from
    RegcheckError exceptions. When verbose mode is enabled, also displays
    the full stack trace.

    Args:
        error: Exception to display
        verbose: Whether to show stack trace (default False)

    Example:
        try:
            # ... operation ...
        except RegcheckError as e:
            handle_error(e, verbose=True)
    """
    print(f"Error: {error}", file=sys.stderr)

    if hasattr(error, "context") and error.context:
        print("Context:", file=sys.stderr)
        for key, value in error.context.items():
            print(f"  {key}: {value}", file=sys.stderr)

    if verbose:
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
