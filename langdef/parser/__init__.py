"""langdef parser package.

Public API:
    parse(source, path, config) -> SourceFile
    Parser - the recursive descent parser class

Error types:
    LangdefError, LexicalError, UnexpectedToken, UnexpectedEndOfInput,
    NestingLimitExceeded
"""

from typing import Optional

from langdef.ast import SourceFile
from langdef.config import ParserConfig
from langdef.errors import (
    LangdefError,
    LangdefSyntaxError,
    LexicalError,
    NestingLimitExceeded,
    UnexpectedEndOfInput,
    UnexpectedToken,
)

from .parse import Parser


def parse(source: str, path: str = "", config: Optional[ParserConfig] = None) -> SourceFile:
    """
    Parse langdef source text into a SourceFile AST.

    Each call builds its own lexer and parser, so concurrent calls on
    independent inputs need no locking.

    Args:
        source: langdef source code to parse
        path: Optional file path for error reporting
        config: Optional parser limits; defaults to ``ParserConfig()``

    Returns:
        SourceFile AST node

    Raises:
        LexicalError: On an unrecognized character or unterminated string
        UnexpectedToken: When a token fits no grammar alternative
        UnexpectedEndOfInput: When input ends inside a block, pair or list
        NestingLimitExceeded: When lists nest deeper than the configured limit

    Example:
        ```python
        source_file = parse('language Rust { extension: "rs"; }')
        print(source_file.blocks[0].name.name)  # "Rust"
        ```
    """
    parser = Parser(source, path=path, config=config)
    return parser.parse()


__all__ = [
    "parse",
    "Parser",
    "LangdefError",
    "LangdefSyntaxError",
    "LexicalError",
    "UnexpectedToken",
    "UnexpectedEndOfInput",
    "NestingLimitExceeded",
]
