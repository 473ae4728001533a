"""
Editor integration helpers for langdef.

Answers "what is under the cursor?" for a parsed file: the chain of AST
nodes, outermost first, whose spans contain a 1-based line/column.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from langdef.ast import (
    Identifier,
    LanguageBlock,
    ListLiteral,
    Literal,
    Pair,
    SourceFile,
    Span,
)
from langdef.config import ParserConfig
from langdef.parser import parse


@dataclass(frozen=True)
class ContextEntry:
    """One node on the path from the root to a position."""

    kind: str  # "source_file", "language", "pair", "identifier", "<variant>_literal"
    node: Any
    span: Span

    def __str__(self) -> str:
        start, end = self.span.start, self.span.end
        return f"{self.kind} ({start.line}:{start.column})-({end.line}:{end.column})"


def _covers(node: Any, line: int, column: int) -> bool:
    span: Optional[Span] = getattr(node, "span", None)
    return span is not None and span.contains(line, column)


def _descend_identifier(identifier: Identifier, line: int, column: int, path: List[ContextEntry]) -> bool:
    if _covers(identifier, line, column):
        path.append(ContextEntry("identifier", identifier, identifier.span))
        return True
    return False


def _descend_literal(literal: Literal, line: int, column: int, path: List[ContextEntry]) -> None:
    while _covers(literal, line, column):
        path.append(ContextEntry(f"{literal.kind}_literal", literal, literal.span))
        if not isinstance(literal, ListLiteral):
            return
        inner = next((item for item in literal.items if _covers(item, line, column)), None)
        if inner is None:
            return
        literal = inner


def _descend_pair(pair: Pair, line: int, column: int, path: List[ContextEntry]) -> None:
    path.append(ContextEntry("pair", pair, pair.span))
    if not _descend_identifier(pair.key, line, column, path):
        _descend_literal(pair.value, line, column, path)


def _descend_block(block: LanguageBlock, line: int, column: int, path: List[ContextEntry]) -> None:
    path.append(ContextEntry("language", block, block.span))
    if _descend_identifier(block.name, line, column, path):
        return
    for pair in block.pairs:
        if _covers(pair, line, column):
            _descend_pair(pair, line, column, path)
            return


def node_path_at(source_file: SourceFile, line: int, column: int) -> List[ContextEntry]:
    """
    Return the nodes enclosing a position, outermost first.

    Args:
        source_file: Parsed file (as returned by ``parse``)
        line: 1-based line number
        column: 1-based column

    Returns:
        List of context entries; empty if the position is outside the file
    """
    path: List[ContextEntry] = []
    if not _covers(source_file, line, column):
        return path

    path.append(ContextEntry("source_file", source_file, source_file.span))
    for block in source_file.blocks:
        if _covers(block, line, column):
            _descend_block(block, line, column, path)
            break
    return path


def find_context_at(
    source: str,
    line: int,
    column: int,
    *,
    path: str = "",
    config: Optional[ParserConfig] = None,
) -> List[ContextEntry]:
    """
    Parse ``source`` and return the node path at a position.

    Example:
        ```python
        entries = find_context_at(source, line=3, column=15)
        print([entry.kind for entry in entries])
        # ['source_file', 'language', 'pair', 'string_literal']
        ```
    """
    return node_path_at(parse(source, path=path, config=config), line, column)


def format_context(entries: List[ContextEntry]) -> str:
    """Render a node path one entry per line."""
    return "".join(f"{entry}\n" for entry in entries)


__all__ = ["ContextEntry", "node_path_at", "find_context_at", "format_context"]
