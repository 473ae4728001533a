"""
langdef: parser for ``language`` block configuration files.

A langdef file is a sequence of named ``language`` blocks, each holding
ordered ``key: value;`` pairs whose values are strings, integers, booleans
or whitespace-separated lists of those::

    // editor settings for Rust
    language Rust {
        extension: "rs";
        casing: "snake";
        raw: false;
        indent: 4;
        keywords: ["fn" "let" "match"];
    }

The package is organised into:

* ``ast`` – immutable dataclasses for the parsed tree.
* ``parser`` – the lexer and recursive descent parser behind ``parse()``.
* ``errors`` – the structured error types raised on invalid input.
* ``config`` – parser limits and workspace config file loading.
* ``loader`` and ``editor_api`` – helpers for callers working with files
  and cursor positions.
* ``cli`` – the ``langdef`` command line tool.
"""

from langdef.ast import (
    BooleanLiteral,
    Identifier,
    IntegerLiteral,
    LanguageBlock,
    ListLiteral,
    Literal,
    Pair,
    Position,
    SourceFile,
    Span,
    StringLiteral,
)
from langdef.config import ParserConfig
from langdef.errors import (
    ConfigError,
    LangdefError,
    LangdefSyntaxError,
    LexicalError,
    NestingLimitExceeded,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from langdef.parser import Parser, parse

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "parse",
    "Parser",
    "ParserConfig",
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
    "LangdefError",
    "LangdefSyntaxError",
    "LexicalError",
    "UnexpectedToken",
    "UnexpectedEndOfInput",
    "NestingLimitExceeded",
    "ConfigError",
]
