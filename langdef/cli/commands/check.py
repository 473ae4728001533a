"""
Check command implementation.

This module handles the 'check' subcommand, which parses each given file
(or every .langdef file under a given directory) and reports the first
error found in each.
"""

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from langdef.ast import SourceFile
from langdef.config import ParserConfig
from langdef.errors import LangdefError
from langdef.loader import VALID_EXTENSIONS, discover_source_files, load_file

from ..errors import CLIFileNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Outcome of parsing one file."""

    path: Path
    source_file: Optional[SourceFile] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def summary(self) -> str:
        names = [block.name.name for block in self.source_file.blocks]
        noun = "block" if len(names) == 1 else "blocks"
        return f"{len(names)} {noun}" + (f": {', '.join(names)}" if names else "")

    def to_dict(self, include_ast: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {"path": str(self.path), "ok": self.ok}
        if isinstance(self.error, LangdefError):
            data["error"] = self.error.to_dict()
        elif self.error is not None:
            data["error"] = {"code": "READ_ERROR", "message": str(self.error), "path": str(self.path)}
        else:
            data["blocks"] = [block.name.name for block in self.source_file.blocks]
            if include_ast:
                data["ast"] = self.source_file.to_dict()
        return data


def collect_paths(raw_paths: List[str]) -> List[Path]:
    """Expand directories to the source files they contain, keeping argument order."""
    collected: List[Path] = []
    for raw in raw_paths:
        path = Path(raw)
        if not path.exists():
            raise CLIFileNotFoundError(
                f"Path not found: {raw}",
                hint="Pass a .langdef file or a directory containing them",
            )
        if path.is_dir():
            collected.extend(discover_source_files(path))
        else:
            collected.append(path)
    return collected


def check_file(path: Path, config: ParserConfig) -> CheckResult:
    try:
        return CheckResult(path=path, source_file=load_file(path, config))
    except LangdefError as exc:
        logger.debug("Check failed for %s: %s", path, exc.code)
        return CheckResult(path=path, error=exc)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Could not read %s: %s", path, exc)
        return CheckResult(path=path, error=exc)


def cmd_check(args: argparse.Namespace) -> int:
    """
    Handle the 'check' subcommand.

    Args:
        args: Parsed command-line arguments with ``paths``, ``json``,
            ``print_ast`` and ``max_nesting_depth``

    Returns:
        0 if every file parsed, 1 otherwise

    Examples:
        >>> cmd_check(args)  # doctest: +SKIP
        ✓ rust.langdef (1 block: Rust)
    """
    console = Console()
    err_console = Console(stderr=True)

    config: ParserConfig = args.parser_config.with_overrides(max_nesting_depth=args.max_nesting_depth)
    paths = collect_paths(args.paths)

    if not paths:
        err_console.print(
            f"[yellow]No {'/'.join(sorted(VALID_EXTENSIONS))} files found.[/yellow]",
            soft_wrap=True,
        )
        return 1

    results = [check_file(path, config) for path in paths]
    failures = [result for result in results if not result.ok]

    if args.json:
        console.print_json(data={
            "files": [result.to_dict(include_ast=args.print_ast) for result in results],
            "failures": len(failures),
        })
        return 1 if failures else 0

    for result in results:
        if result.ok:
            console.print(f"[green]✓[/green] {escape(str(result.path))} ({escape(result.summary())})", soft_wrap=True)
            if args.print_ast:
                console.print_json(data=result.source_file.to_dict())
        else:
            err_console.print(f"[red]✗[/red] {escape(str(result.path))}", soft_wrap=True)
            err_console.print(f"  {escape(str(result.error))}", soft_wrap=True)

    if failures:
        err_console.print(f"[bold red]{len(failures)} of {len(results)} file(s) failed[/bold red]", soft_wrap=True)
        return 1
    return 0
