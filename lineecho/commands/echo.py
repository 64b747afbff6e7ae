"""Echo command handler."""

from __future__ import annotations

from lineecho._constants import ErrorPolicy
from lineecho.core.echo import run


def cmd_echo(
    *,
    policy: ErrorPolicy | None = None,
    flush: bool | None = None,
) -> int:
    """Run one prompt/read/echo cycle against the process streams.

    ``None`` leaves the choice to the environment configuration, so CLI
    flags only override what the user actually passed.
    """
    return run(policy=policy, flush=flush)


__all__ = ["cmd_echo"]
