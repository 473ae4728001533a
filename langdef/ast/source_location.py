"""Source positions and spans for tokens and AST nodes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """
    A point in source text.

    ``offset`` is a 0-based code point index into the source string.
    ``line`` and ``column`` are 1-based; a tab counts as one column.
    """

    offset: int
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Span:
    """Half-open region of source text; ``end`` is just past the last character."""

    start: Position
    end: Position

    def contains(self, line: int, column: int) -> bool:
        """Check whether a 1-based line/column falls inside this span."""
        point = (line, column)
        return (self.start.line, self.start.column) <= point < (self.end.line, self.end.column)

    def to_dict(self) -> dict:
        return {
            "start": {"offset": self.start.offset, "line": self.start.line, "column": self.start.column},
            "end": {"offset": self.end.offset, "line": self.end.line, "column": self.end.column},
        }

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


__all__ = ["Position", "Span"]
