"""Constants and configuration for lineecho.

This module centralizes all constants and environment variable configuration
for lineecho. Constants are immutable values that control the prompt, the
output labels and the read-failure behaviour of the echo cycle.

Environment Variables:
    See the load_environment() function for a complete list of supported
    environment variables and their default values.

Usage:
    from lineecho._constants import LINEECHO_DEBUG, load_config

    # Load configuration once at module level
    _config = load_config()
    policy = _config["LINEECHO_ERROR_POLICY"]

"""

import os
from enum import Enum
from typing import Any, Final

# ==============================================================================
# VERSION INFORMATION
# ==============================================================================

__version__: Final[str] = "0.1.0"
"""Current version of lineecho."""

# ==============================================================================
# PROGRAM IDENTIFICATION
# ==============================================================================

PROG_NAME: Final[str] = "lineecho"
"""Program name used in CLI help and error messages."""

# ==============================================================================
# EXIT CODES
# ==============================================================================

EXIT_SUCCESS: Final[int] = 0
"""Exit code for successful operations."""

EXIT_ERROR: Final[int] = 1
"""Exit code for general errors (fatal read failures)."""

# ==============================================================================
# ECHO CYCLE
# ==============================================================================

PROMPT: Final[str] = "Enter something: "
"""Prompt written before reading. No trailing newline; the cursor stays on the line."""

RESULT_LABEL: Final[str] = "You entered: "
"""Prefix for the echoed, trimmed line."""

ERROR_LABEL: Final[str] = "Failed to input: "
"""Prefix for the read-failure line written under the report policy."""

FATAL_MESSAGE: Final[str] = "Failed to read line"
"""Diagnostic written to stderr under the fatal policy."""


class ErrorPolicy(str, Enum):
    """What to do when standard input cannot be read."""

    REPORT = "report"
    FATAL = "fatal"


DEFAULT_ERROR_POLICY: Final[ErrorPolicy] = ErrorPolicy.REPORT
"""Report read failures on stdout and exit normally."""

DEFAULT_FLUSH_PROMPT: Final[bool] = True
"""Flush stdout after the prompt so it is visible before blocking."""


def _parse_bool(value: str | None) -> bool:
    """Parse a boolean value from environment variable string.

    Args:
        value: String value from environment variable

    Returns:
        False if value is None, null, empty, "0", "f", "F", "false", "False", "FALSE"
        True otherwise (for any non-empty string not in the false list)
    """
    if not value:
        return False

    # Values that should be considered False
    false_values = {"0", "F", "NONE", "NULL", "FALSE"}
    return value.upper() not in false_values


def parse_error_policy(value: str | None) -> ErrorPolicy:
    """Map a policy name onto :class:`ErrorPolicy`.

    Unknown or empty values fall back to :data:`DEFAULT_ERROR_POLICY`.
    """
    if not value:
        return DEFAULT_ERROR_POLICY
    try:
        return ErrorPolicy(value.strip().lower())
    except ValueError:
        return DEFAULT_ERROR_POLICY


def _load_lineecho_env_vars() -> dict[str, Any]:
    """Load lineecho configuration from environment variables.

    Returns:
        Dict with LINEECHO_* configuration values
    """
    flush_value = os.environ.get("LINEECHO_FLUSH_PROMPT")
    if flush_value is None:
        flush_prompt = DEFAULT_FLUSH_PROMPT
    else:
        flush_prompt = _parse_bool(flush_value)

    return {
        # Debug - uses flexible boolean parsing
        "LINEECHO_DEBUG": _parse_bool(os.environ.get("LINEECHO_DEBUG")),
        # Logging - strict "1" check
        "LINEECHO_LOGGING_ENABLED": os.environ.get("LINEECHO_LOGGING_ENABLED", "0")
        == "1",
        "LINEECHO_ERROR_POLICY": parse_error_policy(
            os.environ.get("LINEECHO_ERROR_POLICY")
        ),
        "LINEECHO_FLUSH_PROMPT": flush_prompt,
    }


def load_environment() -> dict[str, Any]:
    """Load configuration from environment variables.

    This function reads all lineecho environment variables and returns
    a configuration dictionary with validated values.

    Returns:
        dict: Configuration dictionary with the following keys:

            LINEECHO_DEBUG (bool): Enable debug output.
                Default: False
                False for: empty, "0", "f", "F", "false", "False", "FALSE"
                True for: any other non-empty value (e.g., "1", "true", "yes")

            LINEECHO_LOGGING_ENABLED (bool): Enable logging output.
                Default: False (disabled)
                Set to "1" to enable logging throughout lineecho.

            LINEECHO_ERROR_POLICY (ErrorPolicy): Read-failure behaviour.
                Default: ErrorPolicy.REPORT
                "report" prints the failure and exits 0, "fatal" writes a
                diagnostic to stderr and exits 1. Unknown values use the default.

            LINEECHO_FLUSH_PROMPT (bool): Flush stdout after the prompt.
                Default: True
    """
    return _load_lineecho_env_vars()


def load_config() -> dict[str, Any]:
    """Public entry point for retrieving the current configuration.

    Returns:
        A fresh configuration dictionary containing the LINEECHO_* keys.

    Notes:
        The returned dictionary is not cached; callers should cache it themselves
        if repeated lookups are required.
    """
    return load_environment()


def reload_environment(config: dict[str, Any]) -> dict[str, Any]:
    """Reload the environment variables and update the configuration.

    Args:
        config: The current configuration dictionary.

    Returns:
        The updated configuration dictionary with reloaded environment variables.
    """
    new_env_vars = load_environment()
    config.update(new_env_vars)
    return config
