"""Helper utility functions for lineecho.

This module provides the logging and debugging helpers used throughout the
lineecho codebase. Both respect environment configuration so that a plain
invocation writes nothing beyond the prompt and the echoed line.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from lineecho._constants import load_config

# Load configuration once at module level for efficiency
_config = load_config()

# Set up module logger
logger = logging.getLogger(__name__)


def send_log(
    message: str,
    level: int = logging.INFO,
    logger_name: str | None = None,
    **kwargs: Any,
) -> None:
    """Send a log message if logging is enabled.

    This function checks the LINEECHO_LOGGING_ENABLED configuration and only
    logs if it's enabled.

    Args:
        message: The message to log
        level: The logging level (default: logging.INFO)
        logger_name: Optional logger name. If None, uses the module logger
        **kwargs: Additional keyword arguments to pass to the logging function
                 (e.g., exc_info, stack_info, stacklevel)

    Example:
        >>> send_log("Prompt written", level=logging.DEBUG)
        >>> send_log("Read failed", level=logging.ERROR, exc_info=True)
        >>> send_log("Custom logger message", logger_name="lineecho.core")
    """
    if not _config["LINEECHO_LOGGING_ENABLED"]:
        return

    if logger_name:
        log = logging.getLogger(logger_name)
    else:
        log = logger

    log.log(level, message, **kwargs)


def debug_print(
    *args: Any,
    sep: str = " ",
    end: str = "\n",
    file: Any = None,
    flush: bool = False,
) -> None:
    """Print debug output if debugging is enabled.

    Same signature as the built-in print(), but output goes to stderr by
    default and only when LINEECHO_DEBUG is set.
    """
    if not _config["LINEECHO_DEBUG"]:
        return

    # Default to stderr so stdout stays reserved for the echo cycle
    if file is None:
        file = sys.stderr

    print(*args, sep=sep, end=end, file=file, flush=flush)


def log_debug(message: str, **kwargs: Any) -> None:
    """Equivalent to send_log(message, level=logging.DEBUG, **kwargs)"""
    send_log(message, level=logging.DEBUG, **kwargs)


def log_info(message: str, **kwargs: Any) -> None:
    """Equivalent to send_log(message, level=logging.INFO, **kwargs)"""
    send_log(message, level=logging.INFO, **kwargs)


def log_warning(message: str, **kwargs: Any) -> None:
    """Equivalent to send_log(message, level=logging.WARNING, **kwargs)"""
    send_log(message, level=logging.WARNING, **kwargs)


def log_error(message: str, **kwargs: Any) -> None:
    """Equivalent to send_log(message, level=logging.ERROR, **kwargs)"""
    send_log(message, level=logging.ERROR, **kwargs)


def log_exception(message: str, **kwargs: Any) -> None:
    """Log an error message with exception information.

    Args:
        message: The error message to log
        **kwargs: Additional keyword arguments for logging
    """
    send_log(message, level=logging.ERROR, exc_info=True, **kwargs)


def reload_config() -> None:
    """Reload configuration from environment variables.

    This function is primarily useful for testing or when environment
    variables might have changed during runtime.
    """
    global _config
    _config = load_config()
