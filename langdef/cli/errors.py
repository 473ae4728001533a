"""
Error handling for the langdef CLI.

Parse failures are reported per file by the commands themselves; the types
here cover problems with the invocation: missing files, bad options and
invalid configuration.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from langdef.errors import LangdefError

# Exit code for usage and configuration problems, matching argparse
USAGE_EXIT_CODE = 2


class CLIError(Exception):
    """
    Base exception for CLI invocation problems.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code
        hint: Optional suggestion for resolving the error
    """

    def __init__(self, message: str, *, code: str = "CLI_ERROR", hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint

    def __str__(self) -> str:
        return self.message


class CLIFileNotFoundError(CLIError):
    """A path given on the command line does not exist."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("code", "CLI_FILE_NOT_FOUND")
        super().__init__(message, **kwargs)


class CLIValidationError(CLIError):
    """Invalid command arguments or options."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("code", "CLI_VALIDATION_ERROR")
        super().__init__(message, **kwargs)


def format_cli_error(exc: BaseException) -> str:
    """Format an exception for display, including any hint."""
    if isinstance(exc, LangdefError):
        return str(exc)
    lines = [f"Error: {exc}"]
    hint = getattr(exc, "hint", None)
    if hint:
        lines.append(f"Hint: {hint}")
    return "\n".join(lines)


def handle_cli_exception(exc: BaseException, *, exit_code: int = USAGE_EXIT_CODE) -> int:
    """Print ``exc`` to stderr and return the exit code to use."""
    console = Console(stderr=True)
    console.print(f"[bold red]{escape(format_cli_error(exc))}[/bold red]", soft_wrap=True)
    return exit_code


__all__ = [
    "CLIError",
    "CLIFileNotFoundError",
    "CLIValidationError",
    "USAGE_EXIT_CODE",
    "format_cli_error",
    "handle_cli_exception",
]
