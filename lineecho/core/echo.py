"""The prompt/read/echo cycle.

One invocation writes a prompt, blocks on a single ``readline()`` from
standard input, and echoes the trimmed line back with a fixed label.  When
the read itself fails the selected :class:`~lineecho._constants.ErrorPolicy`
decides the outcome: ``report`` prints the failure on stdout and returns
success, ``fatal`` writes a diagnostic to stderr and returns a non-zero
exit code.

End-of-stream is not a failure.  ``readline()`` returns ``""`` on a closed
pipe, which trims to the empty string and produces ``"You entered: "``.
"""

from __future__ import annotations

import io
import sys
from typing import IO

from lineecho._constants import (
    ERROR_LABEL,
    EXIT_ERROR,
    EXIT_SUCCESS,
    FATAL_MESSAGE,
    PROG_NAME,
    PROMPT,
    RESULT_LABEL,
    ErrorPolicy,
    load_config,
    parse_error_policy,
)
from lineecho.helpers import (
    debug_print,
    log_debug,
    log_error,
    log_exception,
    log_info,
    log_warning,
)


class InputReadError(OSError):
    """Raised when standard input cannot be read.

    The underlying exception, if any, is chained as ``__cause__``.
    """


def trim(text: str) -> str:
    """Strip surrounding whitespace, including the line terminator."""
    return text.strip()


def read_line(stream: IO[str] | None) -> str:
    """Read one line from *stream*, terminator included.

    Returns ``""`` at end-of-stream.

    Raises:
        InputReadError: If the stream is missing, closed, or reports a
            decoding or I/O error.
    """
    if stream is None:
        raise InputReadError("standard input is not available")
    try:
        return stream.readline()
    except (OSError, ValueError) as exc:
        # UnicodeDecodeError is a ValueError; so is reading a closed file
        raise InputReadError(str(exc)) from exc


def decode_strictly(stream: IO[str]) -> None:
    """Make *stream* raise on undecodable bytes instead of escaping them.

    UTF-8 mode gives ``sys.stdin`` the ``surrogateescape`` handler, which
    would let invalid input through as an ordinary line.  Streams without
    ``reconfigure`` (``StringIO`` and friends) hold text already and are
    left alone.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is None or getattr(stream, "errors", "strict") == "strict":
        return
    try:
        reconfigure(errors="strict")
    except io.UnsupportedOperation:
        log_warning(f"Could not switch {stream!r} to strict decoding")


def format_result(text: str) -> str:
    """Return the success line for the captured *text*."""
    return f"{RESULT_LABEL}{trim(text)}"


def format_failure(error: BaseException) -> str:
    """Return the report-policy line for a read *error*."""
    return f"{ERROR_LABEL}{error}"


def run(
    *,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
    prompt: str = PROMPT,
    flush: bool | None = None,
    policy: ErrorPolicy | str | None = None,
) -> int:
    """Run one prompt/read/echo cycle and return the process exit code.

    Args:
        stdin: Stream to read from. Defaults to ``sys.stdin`` at call time.
        stdout: Stream for the prompt and result. Defaults to ``sys.stdout``.
        stderr: Stream for the fatal diagnostic. Defaults to ``sys.stderr``.
        prompt: Text written before blocking on the read.
        flush: Flush *stdout* after the prompt. ``None`` uses
            ``LINEECHO_FLUSH_PROMPT``.
        policy: Read-failure policy. ``None`` uses ``LINEECHO_ERROR_POLICY``.

    Returns:
        ``EXIT_SUCCESS`` on success or a reported failure, ``EXIT_ERROR`` on
        a fatal failure.
    """
    if stdin is None:
        stdin = sys.stdin
        if stdin is not None:
            decode_strictly(stdin)
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr

    if flush is None or policy is None:
        config = load_config()
        if flush is None:
            flush = config["LINEECHO_FLUSH_PROMPT"]
        if policy is None:
            policy = config["LINEECHO_ERROR_POLICY"]
    if not isinstance(policy, ErrorPolicy):
        policy = parse_error_policy(policy)

    debug_print(f"{PROG_NAME}: policy={policy.value} flush={flush}")

    stdout.write(prompt)
    if flush:
        stdout.flush()
    log_debug("Prompt written")

    try:
        line = read_line(stdin)
    except InputReadError as exc:
        log_exception(f"Failed to read from stdin (policy={policy.value})")
        if policy is ErrorPolicy.FATAL:
            log_error(f"Exiting with code {EXIT_ERROR}: {exc}")
            stderr.write(f"{PROG_NAME}: {FATAL_MESSAGE}: {exc}\n")
            stderr.flush()
            return EXIT_ERROR
        stdout.write(format_failure(exc) + "\n")
        stdout.flush()
        return EXIT_SUCCESS

    log_info(f"Read {len(line)} characters from stdin")
    stdout.write(format_result(line) + "\n")
    stdout.flush()
    return EXIT_SUCCESS


__all__ = [
    "InputReadError",
    "decode_strictly",
    "format_failure",
    "format_result",
    "read_line",
    "run",
    "trim",
]
