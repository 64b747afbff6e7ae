"""CLI entry point for lineecho."""

from typing import Annotated

import typer

from ._constants import PROG_NAME, ErrorPolicy, __version__
from .commands import cmd_echo

app = typer.Typer(
    name=PROG_NAME,
    help="lineecho: prompt for a line of text and echo it back",
    add_completion=False,
    pretty_exceptions_enable=False,
    rich_markup_mode=None,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


@app.command()
def main(
    on_error: Annotated[
        ErrorPolicy | None,
        typer.Option(
            "--on-error",
            case_sensitive=False,
            help="What to do when stdin cannot be read: report it and exit 0, "
            "or exit 1 with a diagnostic on stderr",
        ),
    ] = None,
    flush: Annotated[
        bool | None,
        typer.Option(
            "--flush/--no-flush",
            help="Flush the prompt before waiting for input",
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Prompt for one line on stdin and print it back trimmed.
    """
    exit_code = cmd_echo(policy=on_error, flush=flush)
    raise typer.Exit(code=exit_code)


if __name__ == "__main__":
    app()
