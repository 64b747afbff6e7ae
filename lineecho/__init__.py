"""lineecho: prompt for a line of text and echo it back.

A small command-line utility around a single prompt/read/echo cycle.
"""

from ._constants import PROG_NAME, __version__
from .helpers import (
    debug_print,
    log_debug,
    log_error,
    log_info,
    log_warning,
    send_log,
)

__all__ = [
    "__version__",
    "PROG_NAME",
    "debug_print",
    "send_log",
    "log_debug",
    "log_info",
    "log_warning",
    "log_error",
]
