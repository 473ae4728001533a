"""Recursive descent parser for langdef.

Consumes the lexer's token stream with one token of lookahead and builds the
immutable tree from ``langdef.ast``. There is no error recovery: the first
lexical or syntax error is raised to the caller.
"""

from __future__ import annotations
from typing import Iterator, List, Optional
import logging

from langdef.ast import LanguageBlock, Position, SourceFile, Span
from langdef.config import ParserConfig
from langdef.errors import UnexpectedEndOfInput, UnexpectedToken

from .grammar.lexer import Lexer, Token, TokenType
from .declarations import DeclarationParsingMixin
from .literals import LITERAL_START, LiteralParsingMixin

logger = logging.getLogger(__name__)


class Parser(DeclarationParsingMixin, LiteralParsingMixin):
    """
    Recursive descent parser for langdef source files.

    Grammar:
        source_file := language* ;
        language    := "language" IDENT "{" pair* "}" ;
        pair        := IDENT ":" literal ";" ;
        literal     := STRING | INT | "true" | "false" | list ;
        list        := "[" literal* "]" ;

    A parser instance handles a single source text; ``parse()`` may only be
    called once per instance.
    """

    def __init__(self, source: str, *, path: str = "", config: Optional[ParserConfig] = None):
        self.source = source
        self.path = path
        self.config = config or ParserConfig()

        # Tokens are pulled lazily; ``_current`` is the single lookahead token
        self._tokens: Iterator[Token] = Lexer(source, path).iter_tokens()
        self._current: Optional[Token] = None
        self._previous: Optional[Token] = None

    # ====================================================================
    # Token Management
    # ====================================================================

    def current(self) -> Token:
        """Get the lookahead token."""
        if self._current is None:
            self._current = next(self._tokens)
        return self._current

    def advance(self) -> Token:
        """Consume and return the lookahead token."""
        token = self.current()
        if token.type is not TokenType.EOF:
            self._current = None
        self._previous = token
        return token

    def match(self, *types: TokenType) -> bool:
        """Check if the lookahead token matches any of the given types."""
        return self.current().type in types

    def expect(self, *types: TokenType, expected: Optional[List[str]] = None) -> Token:
        """Consume the lookahead token if it has one of the given types, or raise."""
        if self.match(*types):
            return self.advance()
        raise self.unexpected(expected or [t.describe() for t in types])

    def unexpected(self, expected: List[str], suggestion: Optional[str] = None):
        """Build the error for a lookahead token that fits none of ``expected``."""
        token = self.current()
        if token.type is TokenType.EOF:
            return UnexpectedEndOfInput(
                message="Unexpected end of input",
                path=self.path,
                position=token.start,
                expected=expected,
                suggestion=suggestion,
            )
        return UnexpectedToken(
            message=f"Unexpected {token.describe()}",
            path=self.path,
            position=token.start,
            expected=expected,
            found=token.describe(),
            suggestion=suggestion or self._suggest_token_fix(token, expected),
        )

    def span_from(self, start: Token) -> Span:
        """Span from the start of ``start`` to the end of the last consumed token."""
        end = self._previous.end if self._previous is not None else start.end
        return Span(start.start, end)

    def _suggest_token_fix(self, token: Token, expected: List[str]) -> Optional[str]:
        """Suggest a fix for common mistakes."""
        if "';'" in expected and token.type in LITERAL_START:
            return "Wrap multiple values in [ ... ] to make a list"
        if "';'" in expected and token.type in (TokenType.IDENTIFIER, TokenType.RBRACE):
            return "Terminate each pair with ';'"
        if token.type is TokenType.IDENTIFIER and "string" in expected:
            return f'Did you mean "{token.value}"?'
        return None

    # ====================================================================
    # High-Level Parsing
    # ====================================================================

    def parse(self) -> SourceFile:
        """
        Parse the entire source file.

        Grammar:
            source_file := language* ;
        """
        blocks: List[LanguageBlock] = []

        while not self.match(TokenType.EOF):
            if not self.match(TokenType.LANGUAGE):
                raise self.unexpected(
                    [TokenType.LANGUAGE.describe(), TokenType.EOF.describe()],
                    suggestion="Top-level content must be 'language <name> { ... }' blocks",
                )
            blocks.append(self.parse_language_block())

        eof = self.current()
        span = Span(Position(0, 1, 1), eof.end)
        logger.debug("Parsed %d language block(s) from %s", len(blocks), self.path or "<string>")
        return SourceFile(blocks=tuple(blocks), path=self.path, span=span)


__all__ = ["Parser"]
