"""
langdef CLI entry point.

Dispatches subcommands to the focused command modules in
``langdef.cli.commands``:

* ``check`` – parse files and report the first error in each
* ``context`` – print the syntax nodes enclosing a line/column
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from langdef import __version__
from langdef.config import load_parser_config
from langdef.errors import ConfigError

from .commands import cmd_check, cmd_context
from .errors import CLIError, handle_cli_exception


def _configure_logging(args: argparse.Namespace) -> None:
    """Configure the ``langdef`` logger from the CLI flag or environment."""
    log_level = (
        getattr(args, "log_level", None) or
        os.getenv("LANGDEF_LOG_LEVEL", "warning")
    ).lower()

    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warn": logging.WARNING,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    numeric_level = level_map.get(log_level, logging.WARNING)

    package_logger = logging.getLogger("langdef")
    package_logger.setLevel(numeric_level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="langdef",
        description="Validate and inspect langdef language configuration files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a langdef.toml or .langdefrc configuration file",
    )
    parser.add_argument(
        "--workspace",
        default=".",
        help="Directory searched for langdef.toml / .langdefrc (default: current directory)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warn", "warning", "error"],
        default=None,
        help="Set logging level (or set LANGDEF_LOG_LEVEL)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Parse files and report syntax errors")
    check_parser.add_argument("paths", nargs="+", help="Files or directories to check")
    check_parser.add_argument("--json", action="store_true", help="Emit results as JSON")
    check_parser.add_argument(
        "--print-ast", action="store_true", help="Include the parsed AST of each file in the output"
    )
    check_parser.add_argument(
        "--max-nesting-depth",
        type=int,
        default=None,
        help="Override the maximum list nesting depth",
    )
    check_parser.set_defaults(func=cmd_check)

    context_parser = subparsers.add_parser("context", help="Show the syntax nodes at a position")
    context_parser.add_argument("file", help="Source file")
    context_parser.add_argument("line", type=int, help="Line number (from 1)")
    context_parser.add_argument("column", type=int, help="Column number (from 1)")
    context_parser.add_argument("--json", action="store_true", help="Emit the node path as JSON")
    context_parser.set_defaults(func=cmd_context)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entrypoint.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])

    Returns:
        Process exit code: 0 on success, 1 when a file fails to parse,
        2 on usage or configuration errors

    Examples:
        >>> main(["check", "languages/"])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    _configure_logging(args)

    try:
        args.parser_config = load_parser_config(
            Path(args.workspace),
            Path(args.config) if args.config else None,
        )
        return args.func(args)
    except (CLIError, ConfigError) as exc:
        return handle_cli_exception(exc)


__all__ = ["main", "build_parser"]
