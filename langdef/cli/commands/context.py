"""
Context command implementation.

Prints the chain of syntax nodes enclosing a line/column in a file, the
query an editor runs to learn what sits under the cursor.
"""

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from langdef.editor_api import node_path_at
from langdef.errors import LangdefError
from langdef.loader import load_file

from ..errors import CLIFileNotFoundError, CLIValidationError


def cmd_context(args: argparse.Namespace) -> int:
    """
    Handle the 'context' subcommand.

    Returns:
        0 if a node path was printed, 1 if the file fails to parse or the
        position lies outside it

    Examples:
        >>> cmd_context(args)  # doctest: +SKIP
        source_file (1:1)-(7:1)
        language (2:1)-(6:2)
        pair (3:5)-(3:21)
        string_literal (3:16)-(3:20)
    """
    console = Console()
    err_console = Console(stderr=True)

    path = Path(args.file)
    if not path.is_file():
        raise CLIFileNotFoundError(f"File not found: {args.file}")
    if args.line < 1 or args.column < 1:
        raise CLIValidationError(
            f"Invalid position {args.line}:{args.column}",
            hint="Lines and columns are numbered from 1",
        )

    try:
        source_file = load_file(path, args.parser_config)
    except LangdefError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        return 1

    entries = node_path_at(source_file, args.line, args.column)
    if not entries:
        err_console.print(f"[yellow]No syntax node at {args.line}:{args.column}[/yellow]", soft_wrap=True)
        return 1

    if args.json:
        console.print_json(data=[{"kind": entry.kind, "span": entry.span.to_dict()} for entry in entries])
        return 0

    for entry in entries:
        console.print(escape(str(entry)), soft_wrap=True, highlight=False)
    return 0
