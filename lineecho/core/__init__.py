"""Core components for lineecho."""

from .echo import (
    InputReadError,
    decode_strictly,
    format_failure,
    format_result,
    read_line,
    run,
    trim,
)

__all__ = [
    "InputReadError",
    "decode_strictly",
    "format_failure",
    "format_result",
    "read_line",
    "run",
    "trim",
]
