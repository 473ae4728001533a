"""Subcommand handlers for the langdef CLI."""

from .check import cmd_check
from .context import cmd_context

__all__ = ["cmd_check", "cmd_context"]
