"""Literal value nodes.

A literal is one of four variants. ``ListLiteral`` holds further literals,
so the family is recursive; each node owns its children outright.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .source_location import Span


@dataclass(frozen=True)
class Literal:
    """Base class for all literal values."""

    kind = "literal"

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class StringLiteral(Literal):
    """
    A double-quoted string.

    ``content`` is the text between the quotes exactly as written; an escaped
    quote stays as the two characters ``\\"``.
    """

    content: str
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    kind = "string"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "content": self.content}


@dataclass(frozen=True)
class IntegerLiteral(Literal):
    """Unsigned run of ASCII digits, kept as raw text."""

    digits: str
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    kind = "integer"

    def as_int(self) -> int:
        return int(self.digits)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "digits": self.digits}


@dataclass(frozen=True)
class BooleanLiteral(Literal):
    value: bool
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    kind = "boolean"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "value": self.value}


@dataclass(frozen=True)
class ListLiteral(Literal):
    """Bracketed sequence of literals written side by side, without separators."""

    items: Tuple[Literal, ...] = ()
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    kind = "list"

    def __len__(self) -> int:
        return len(self.items)

    def depth(self) -> int:
        """Number of nested list levels, counting this one."""
        inner = [item.depth() for item in self.items if isinstance(item, ListLiteral)]
        return 1 + max(inner, default=0)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "items": [item.to_dict() for item in self.items]}


__all__ = [
    "Literal",
    "StringLiteral",
    "IntegerLiteral",
    "BooleanLiteral",
    "ListLiteral",
]
