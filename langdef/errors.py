"""Error types raised by the langdef lexer, parser and configuration layer.

Every error carries:
- the source path (when known) and the position of the offending input
- a stable error code for programmatic handling
- the structured details of its kind (character, found/expected tokens, limit)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from langdef.ast.source_location import Position


@dataclass
class LangdefError(Exception):
    """Base class for all langdef errors."""

    message: str
    path: Optional[str] = None
    position: Optional[Position] = None
    code: str = "LANGDEF_ERROR"

    @property
    def line(self) -> Optional[int]:
        return self.position.line if self.position else None

    @property
    def column(self) -> Optional[int]:
        return self.position.column if self.position else None

    @property
    def offset(self) -> Optional[int]:
        return self.position.offset if self.position else None

    def details(self) -> List[str]:
        return []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "path": self.path or None,
            "line": self.line,
            "column": self.column,
            "offset": self.offset,
        }

    def __str__(self) -> str:
        parts = []

        if self.path:
            parts.append(f"File: {self.path}")

        if self.position is not None:
            parts.append(f"Line {self.position.line}:{self.position.column}")

        parts.append(f"[{self.code}] {self.message}")
        base = " | ".join(parts)

        details = self.details()
        if details:
            return base + "\n  " + "\n  ".join(details)
        return base


@dataclass
class LexicalError(LangdefError):
    """An unrecognized character, or a string literal left open at end of input."""

    char: Optional[str] = None
    code: str = "LEXICAL_ERROR"

    def details(self) -> List[str]:
        if self.char is None:
            return []
        return [f"Character: {self.char!r}"]

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["char"] = self.char
        return data


@dataclass
class LangdefSyntaxError(LangdefError):
    """Syntax error with expected vs. found information."""

    expected: List[str] = field(default_factory=list)
    found: Optional[str] = None
    suggestion: Optional[str] = None
    code: str = "SYNTAX_ERROR"

    def details(self) -> List[str]:
        details = []

        if self.expected:
            if len(self.expected) == 1:
                details.append(f"Expected: {self.expected[0]}")
            else:
                details.append(f"Expected one of: {', '.join(self.expected)}")

        if self.found:
            details.append(f"Found: {self.found}")

        if self.suggestion:
            details.append(f"Suggestion: {self.suggestion}")

        return details

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["expected"] = list(self.expected)
        data["found"] = self.found
        return data


@dataclass
class UnexpectedToken(LangdefSyntaxError):
    """The lookahead token fits none of the alternatives at this point."""

    code: str = "UNEXPECTED_TOKEN"


@dataclass
class UnexpectedEndOfInput(LangdefSyntaxError):
    """Input ended while a block, pair or list was still open."""

    found: Optional[str] = "end of input"
    code: str = "UNEXPECTED_EOF"


@dataclass
class NestingLimitExceeded(LangdefError):
    """List literals nested deeper than the configured limit."""

    limit: int = 0
    code: str = "NESTING_LIMIT_EXCEEDED"

    def details(self) -> List[str]:
        return [f"Maximum nesting depth: {self.limit}"]

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["limit"] = self.limit
        return data


@dataclass
class ConfigError(LangdefError):
    """Invalid parser configuration value."""

    key: Optional[str] = None
    code: str = "CONFIG_ERROR"

    def details(self) -> List[str]:
        return [f"Setting: {self.key}"] if self.key else []


__all__ = [
    "LangdefError",
    "LexicalError",
    "LangdefSyntaxError",
    "UnexpectedToken",
    "UnexpectedEndOfInput",
    "NestingLimitExceeded",
    "ConfigError",
]
