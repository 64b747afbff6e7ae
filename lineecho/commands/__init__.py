"""Command handlers exposed via the `lineecho.commands` package."""

from .echo import cmd_echo

__all__ = ["cmd_echo"]
