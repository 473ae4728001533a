"""Immutable AST produced by the langdef parser."""

from .literals import (
    BooleanLiteral,
    IntegerLiteral,
    ListLiteral,
    Literal,
    StringLiteral,
)
from .program import Identifier, LanguageBlock, Pair, SourceFile
from .source_location import Position, Span

__all__ = [
    "SourceFile",
    "LanguageBlock",
    "Pair",
    "Identifier",
    "Literal",
    "StringLiteral",
    "IntegerLiteral",
    "BooleanLiteral",
    "ListLiteral",
    "Position",
    "Span",
]
